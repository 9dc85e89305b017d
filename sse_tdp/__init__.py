"""
sse_tdp: RSA trapdoor permutations for forward-private searchable encryption.

A public party advances a token through k forward evaluations in one
exponentiation (MultiplicativeKeyPool), and the trapdoor holder rewinds any
number of evaluations in one exponentiation (TrapdoorPermutationInverse.invert_mult).

Modules:
- params: Deployment parameters (message size, public exponent)
- keys: RSA key material, generation and PEM import/export
- tdp: Public permutation and its trapdoor-holding inverse
- pool: Multiplicative key pool for composed public evaluation
- protocols: Structural interfaces (ForwardPermutation, InvertiblePermutation,
  ComposablePermutation) satisfied by the classes above
"""

from .errors import (
    TdpError,
    KeyFormatError,
    KeyGenerationError,
    InvalidInputSize,
    InvalidArgument,
    InvalidOperation,
)
from .params import TdpParams, PUBLIC_EXPONENT, DEFAULT_MESSAGE_SIZE
from .keys import KeyMaterial, import_public, import_private, generate_key_material
from .tdp import TrapdoorPermutation, TrapdoorPermutationInverse
from .pool import MultiplicativeKeyPool
from .utils import iterate
from . import protocols
from .protocols import ForwardPermutation, InvertiblePermutation, ComposablePermutation

__version__ = "0.1.0"
__all__ = [
    "TdpError",
    "KeyFormatError",
    "KeyGenerationError",
    "InvalidInputSize",
    "InvalidArgument",
    "InvalidOperation",
    "TdpParams",
    "PUBLIC_EXPONENT",
    "DEFAULT_MESSAGE_SIZE",
    "KeyMaterial",
    "import_public",
    "import_private",
    "generate_key_material",
    "TrapdoorPermutation",
    "TrapdoorPermutationInverse",
    "MultiplicativeKeyPool",
    "iterate",
    "protocols",
    "ForwardPermutation",
    "InvertiblePermutation",
    "ComposablePermutation",
]
