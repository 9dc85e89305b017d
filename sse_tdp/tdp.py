"""
RSA trapdoor permutation over fixed-width messages.

Based on the textbook RSA function without padding:

    eval(x)   = x^e mod n        (anyone holding the public key)
    invert(y) = y^d mod n        (trapdoor holder only)

Messages are big-endian integers of exactly message_size bytes, below n.

The trapdoor holder can also undo k forward steps at once. Applying invert
k times computes x^(d^k) mod n, and since n is square-free the exponent may
be reduced modulo lambda(n) = lcm(p - 1, q - 1):

    invert_mult(x, k) = x^(d^k mod lambda(n)) mod n

so the cost is one exponent exponentiation plus one modular exponentiation
of the message, whatever k is. Public parties do not know lambda(n); see
pool.py for the public-side analogue.
"""

import logging
from typing import Optional

from .errors import InvalidArgument
from .keys import (
    KeyMaterial,
    check_message_size,
    generate_key_material,
    import_private,
    import_public,
)
from .params import TdpParams
from .utils import int_to_message, message_to_int, sample_below

logger = logging.getLogger(__name__)


class TrapdoorPermutation:
    """
    Public-only trapdoor permutation.

    Wraps a public key; can sample messages and evaluate forward.
    """

    def __init__(self, public_key: bytes, params: Optional[TdpParams] = None):
        """
        Args:
            public_key: PEM public key, e.g. TrapdoorPermutationInverse.public_key()
            params: Deployment parameters (default: TdpParams())

        Raises:
            KeyFormatError: If the key is malformed or of the wrong width
        """
        self._params = params if params is not None else TdpParams()
        self._key = check_message_size(import_public(public_key), self._params)

    @property
    def message_size(self) -> int:
        return self._params.message_size

    @property
    def key_material(self) -> KeyMaterial:
        return self._key

    def public_key(self) -> bytes:
        return self._key.export_public()

    def sample(self) -> bytes:
        """Uniformly random message in [0, n), message_size bytes long."""
        return sample_below(self._key.modulus, self.message_size)

    def eval(self, message: bytes) -> bytes:
        """
        Forward evaluation: message^e mod n.

        Raises:
            InvalidInputSize: If len(message) != message_size
            InvalidArgument: If the message value is not below n
        """
        x = message_to_int(message, self.message_size, self._key.modulus)
        return int_to_message(pow(x, self._key.public_exponent, self._key.modulus),
                              self.message_size)

    def __repr__(self) -> str:
        return (f"TrapdoorPermutation(modulus_bits={self._key.modulus.bit_length()}, "
                f"e={self._key.public_exponent})")


class TrapdoorPermutationInverse:
    """
    Trapdoor permutation with its trapdoor.

    Holds the full private key. Evaluates forward like TrapdoorPermutation,
    and additionally inverts, once (invert) or many times (invert_mult).
    """

    def __init__(self, private_key: Optional[bytes] = None,
                 params: Optional[TdpParams] = None):
        """
        Initialize from a private key, or generate a new key pair.

        Args:
            private_key: PEM private key. If None, generates a fresh key.
            params: Deployment parameters (default: TdpParams())

        Raises:
            KeyFormatError: If the key is malformed or of the wrong width
            KeyGenerationError: If key generation fails
        """
        self._params = params if params is not None else TdpParams()
        if private_key is None:
            self._key = generate_key_material(self._params)
        else:
            self._key = check_message_size(import_private(private_key), self._params)

    @classmethod
    def generate(cls, params: Optional[TdpParams] = None) -> "TrapdoorPermutationInverse":
        """Generate a fresh key pair."""
        return cls(None, params)

    def copy(self) -> "TrapdoorPermutationInverse":
        """Independent instance holding an equivalent private key."""
        return TrapdoorPermutationInverse(self.private_key(), self._params)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def message_size(self) -> int:
        return self._params.message_size

    @property
    def key_material(self) -> KeyMaterial:
        return self._key

    def public_key(self) -> bytes:
        return self._key.export_public()

    def private_key(self) -> bytes:
        return self._key.export_private()

    def sample(self) -> bytes:
        """Uniformly random message in [0, n), message_size bytes long."""
        return sample_below(self._key.modulus, self.message_size)

    def eval(self, message: bytes) -> bytes:
        """Forward evaluation: message^e mod n."""
        x = message_to_int(message, self.message_size, self._key.modulus)
        return int_to_message(pow(x, self._key.public_exponent, self._key.modulus),
                              self.message_size)

    def invert(self, message: bytes) -> bytes:
        """
        Inverse evaluation: message^d mod n.

        Raises:
            InvalidInputSize: If len(message) != message_size
            InvalidArgument: If the message value is not below n
        """
        y = message_to_int(message, self.message_size, self._key.modulus)
        return int_to_message(pow(y, self._key.private_exponent, self._key.modulus),
                              self.message_size)

    def invert_mult(self, message: bytes, order: int) -> bytes:
        """
        Invert order times in a single exponentiation.

        Args:
            message: Exactly message_size bytes
            order: Number of inversions (0 returns the message unchanged)

        Raises:
            InvalidInputSize: If len(message) != message_size
            InvalidArgument: If order is negative or not an integer
        """
        if not isinstance(order, int) or isinstance(order, bool):
            raise InvalidArgument(f"Inversion order must be an integer, got {order!r}")
        if order < 0:
            raise InvalidArgument("Inversion order must be non-negative")

        y = message_to_int(message, self.message_size, self._key.modulus)
        if order == 0:
            return int_to_message(y, self.message_size)

        # d^order reduced mod lambda(n); never 0 since d is invertible mod lambda(n)
        exponent = pow(self._key.private_exponent, order, self._key.carmichael())
        logger.debug("Inverting %d times with a %d-bit exponent",
                     order, exponent.bit_length())
        return int_to_message(pow(y, exponent, self._key.modulus), self.message_size)

    def __repr__(self) -> str:
        return (f"TrapdoorPermutationInverse(modulus_bits={self._key.modulus.bit_length()}, "
                f"e={self._key.public_exponent})")
