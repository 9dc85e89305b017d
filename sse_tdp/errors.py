"""
Errors raised by the trapdoor permutation package.

All errors derive from TdpError. Each also derives from the builtin the
caller would otherwise expect (ValueError for bad input, RuntimeError for
failures of the instance or the key generator), so generic handlers keep
working.
"""


class TdpError(Exception):
    """Base trapdoor permutation error."""


class KeyFormatError(TdpError, ValueError):
    """Malformed or incomplete key encoding, or a key of the wrong width."""


class KeyGenerationError(TdpError, RuntimeError):
    """Modulus/exponent generation failed after the allowed attempts."""


class InvalidInputSize(TdpError, ValueError):
    """Message byte length differs from the configured message size."""


class InvalidArgument(TdpError, ValueError):
    """Out-of-range parameter: pool size, pool order, repetition count, message value."""


class InvalidOperation(TdpError, RuntimeError):
    """Operation needs a capability the instance does not have."""
