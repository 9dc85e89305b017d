"""
Utility functions for trapdoor permutation messages.
"""

from Crypto.Random import random

from .errors import InvalidArgument, InvalidInputSize
from .protocols import ForwardPermutation


def message_to_int(message: bytes, message_size: int, modulus: int) -> int:
    """
    Decode a fixed-width big-endian message.

    Args:
        message: Exactly message_size bytes
        message_size: Configured message width in bytes
        modulus: RSA modulus the value must stay below

    Returns:
        Integer value of the message

    Raises:
        InvalidInputSize: If len(message) != message_size
        InvalidArgument: If the value is not below the modulus
    """
    if len(message) != message_size:
        raise InvalidInputSize(
            f"Invalid TDP input size: got {len(message)} bytes, "
            f"expected {message_size}"
        )
    value = int.from_bytes(message, "big")
    if value >= modulus:
        raise InvalidArgument("Message value must be below the modulus")
    return value


def int_to_message(value: int, message_size: int) -> bytes:
    """Encode an integer as message_size big-endian bytes, left-padded with zeros."""
    return value.to_bytes(message_size, "big")


def sample_below(modulus: int, message_size: int) -> bytes:
    """Uniformly random message in [0, modulus)."""
    return int_to_message(random.randrange(modulus), message_size)


def iterate(permutation: ForwardPermutation, message: bytes, times: int) -> bytes:
    """
    Apply permutation.eval sequentially.

    Args:
        permutation: Any forward-capable permutation
        message: Starting message
        times: Number of applications (0 returns the message unchanged)
    """
    if times < 0:
        raise InvalidArgument("times must be non-negative")
    for _ in range(times):
        message = permutation.eval(message)
    return message
