"""
Structural interfaces for trapdoor permutations.

- ForwardPermutation: holds a public key, can sample and evaluate forward
- InvertiblePermutation: additionally holds the trapdoor and can invert
- ComposablePermutation: evaluates k forward compositions in one step

Concrete implementations are in tdp.py and pool.py.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ForwardPermutation(Protocol):
    """
    Public capability of an RSA-style trapdoor permutation.

    Properties:
    - Bijective on [0, n)
    - Deterministic: eval depends only on the key and the input
    """

    @property
    def message_size(self) -> int:
        """Width of a message in bytes."""
        ...

    def public_key(self) -> bytes:
        """Canonical encoding of the public key."""
        ...

    def sample(self) -> bytes:
        """Uniformly random message below the modulus."""
        ...

    def eval(self, message: bytes) -> bytes:
        """
        Forward evaluation: x^e mod n.

        Args:
            message: Exactly message_size bytes

        Returns:
            message_size bytes
        """
        ...


@runtime_checkable
class InvertiblePermutation(ForwardPermutation, Protocol):
    """Private capability: the trapdoor holder can invert, once or k times."""

    def private_key(self) -> bytes:
        """Canonical encoding of the private key."""
        ...

    def invert(self, message: bytes) -> bytes:
        """Inverse evaluation: x^d mod n, so that eval(invert(x)) == x."""
        ...

    def invert_mult(self, message: bytes, order: int) -> bytes:
        """Same result as calling invert() order times."""
        ...


@runtime_checkable
class ComposablePermutation(Protocol):
    """Public capability to evaluate bounded compositions of the forward map."""

    def maximum_order(self) -> int:
        """Largest supported composition order."""
        ...

    def public_key(self) -> bytes:
        ...

    def sample(self) -> bytes:
        ...

    def eval(self, message: bytes, order: int) -> bytes:
        """Same result as applying the base forward map order times."""
        ...
