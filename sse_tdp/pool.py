"""
Multiplicative key pool: k forward compositions in one public exponentiation.

Applying the RSA function k times gives

    eval^k(x) = (...((x^e)^e)...)^e = x^(e^k) mod n

A public party does not know lambda(n), so it cannot reduce e^k, but it can
still use the unreduced integer e^k as an exponent. The pool precomputes the
"virtual" public keys (n, e^2), (n, e^3), ..., (n, e^size), each derived
from the previous one by one integer multiplication:

    order 1:    base key (n, e)
    order i:    derived[i - 2] = (n, e^i)

Evaluating at order k costs one exponentiation with a (k * log2(e))-bit
exponent, instead of k exponentiations with a log2(e)-bit one.
"""

import logging
from typing import Optional

from .errors import InvalidArgument
from .keys import KeyMaterial, check_message_size, import_public
from .params import TdpParams
from .utils import int_to_message, message_to_int, sample_below

logger = logging.getLogger(__name__)


class MultiplicativeKeyPool:
    """
    Public-only permutation evaluable at orders 1..size.

    Invariant: eval(x, k) == TrapdoorPermutation.eval applied k times to x,
    for every 1 <= k <= maximum_order().
    """

    def __init__(self, public_key: bytes, size: int,
                 params: Optional[TdpParams] = None):
        """
        Initialize the pool and derive size - 1 virtual keys.

        Args:
            public_key: PEM public key of the base permutation
            size: Maximum composition order (>= 1)
            params: Deployment parameters (default: TdpParams())

        Raises:
            InvalidArgument: If size < 1
            KeyFormatError: If the key is malformed or of the wrong width
        """
        if not isinstance(size, int) or isinstance(size, bool):
            raise InvalidArgument(f"Pool size must be an integer, got {size!r}")
        if size < 1:
            raise InvalidArgument("Invalid TDP pool size: pool size should be > 0")

        self._params = params if params is not None else TdpParams()
        self._key = check_message_size(import_public(public_key), self._params)
        self._keys = self._derive_keys(self._key, size)

        logger.debug("Derived %d pool keys (largest exponent: %d bits)",
                     len(self._keys), self.key_material(size).public_exponent.bit_length())

    @staticmethod
    def _derive_keys(base: KeyMaterial, size: int) -> tuple[KeyMaterial, ...]:
        """Keys for orders 2..size; no reduction of the exponent."""
        e0 = base.public_exponent
        exponent = e0
        keys = []
        for _ in range(size - 1):
            exponent *= e0
            keys.append(base.with_public_exponent(exponent))
        return tuple(keys)

    @property
    def message_size(self) -> int:
        return self._params.message_size

    def maximum_order(self) -> int:
        """Largest order eval accepts (the pool size)."""
        return len(self._keys) + 1

    def pool_size(self) -> int:
        return len(self._keys) + 1

    def key_material(self, order: int = 1) -> KeyMaterial:
        """
        Public key evaluating order compositions.

        Raises:
            InvalidArgument: If order is not in [1, maximum_order()]
        """
        if not isinstance(order, int) or isinstance(order, bool):
            raise InvalidArgument(f"Order must be an integer, got {order!r}")
        if order < 1 or order > self.maximum_order():
            raise InvalidArgument(
                f"Invalid order {order} for this TDP pool: it must be strictly "
                f"positive and at most {self.maximum_order()}"
            )
        if order == 1:
            return self._key
        return self._keys[order - 2]

    def public_key(self) -> bytes:
        """Encoding of the base public key."""
        return self._key.export_public()

    def sample(self) -> bytes:
        """Uniformly random message in [0, n), message_size bytes long."""
        return sample_below(self._key.modulus, self.message_size)

    def eval(self, message: bytes, order: int) -> bytes:
        """
        Evaluate the forward map order times in one exponentiation.

        Args:
            message: Exactly message_size bytes
            order: Composition order in [1, maximum_order()]

        Raises:
            InvalidArgument: If order is out of range
            InvalidInputSize: If len(message) != message_size
        """
        key = self.key_material(order)
        x = message_to_int(message, self.message_size, key.modulus)
        return int_to_message(pow(x, key.public_exponent, key.modulus), self.message_size)

    def __repr__(self) -> str:
        return (f"MultiplicativeKeyPool(modulus_bits={self._key.modulus.bit_length()}, "
                f"e={self._key.public_exponent}, size={self.pool_size()})")
