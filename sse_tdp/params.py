"""
Deployment parameters for the trapdoor permutation.

Key parameters:
- message_size: Width of a message in bytes (kMessageSize). The RSA modulus
  is generated with exactly 8 * message_size bits, so every message is a
  big-endian integer of that width, below the modulus.
- keygen_attempts: How many times key generation is retried before giving up.

The public exponent is a deployment-wide constant, not a per-instance
setting: every generated key uses it. Pool derivation multiplies by the
base key's own exponent, which equals it for generated keys.
"""

from dataclasses import dataclass

from .errors import InvalidArgument

PUBLIC_EXPONENT = 3          # RSA_3, smallest valid public exponent
DEFAULT_MESSAGE_SIZE = 256   # 2048-bit modulus
MIN_MESSAGE_SIZE = 128       # pycryptodome refuses moduli under 1024 bits


@dataclass(frozen=True)
class TdpParams:
    """
    Parameters shared by every permutation, inverse and pool that interoperate.

    Frozen: instances hold a reference, so the message width cannot change
    after they are built.
    """

    message_size: int = DEFAULT_MESSAGE_SIZE
    keygen_attempts: int = 3

    def __post_init__(self):
        if self.message_size < MIN_MESSAGE_SIZE:
            raise InvalidArgument(
                f"message_size must be at least {MIN_MESSAGE_SIZE} bytes"
            )
        if self.keygen_attempts < 1:
            raise InvalidArgument("keygen_attempts must be at least 1")

    @property
    def modulus_bits(self) -> int:
        """Bit length of the RSA modulus (8 * message_size)."""
        return 8 * self.message_size

    @property
    def public_exponent(self) -> int:
        """The deployment public exponent."""
        return PUBLIC_EXPONENT

    def __repr__(self) -> str:
        return (
            f"TdpParams(message_size={self.message_size}, "
            f"modulus_bits={self.modulus_bits}, "
            f"public_exponent={self.public_exponent}, "
            f"keygen_attempts={self.keygen_attempts})"
        )
