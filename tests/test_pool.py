"""Tests for the multiplicative key pool."""

import pytest
from Crypto.PublicKey import RSA

from sse_tdp.errors import InvalidArgument, InvalidInputSize, KeyFormatError
from sse_tdp.params import PUBLIC_EXPONENT, TdpParams
from sse_tdp.pool import MultiplicativeKeyPool
from sse_tdp.protocols import (
    ComposablePermutation,
    ForwardPermutation,
    InvertiblePermutation,
)
from sse_tdp.tdp import TrapdoorPermutation, TrapdoorPermutationInverse
from sse_tdp.utils import iterate

PARAMS = TdpParams(message_size=128)
TEST_COUNT = 5
POOL_COUNT = 20


@pytest.fixture(scope="module")
def tdp_inv():
    return TrapdoorPermutationInverse.generate(PARAMS)


@pytest.fixture(scope="module")
def pool(tdp_inv):
    return MultiplicativeKeyPool(tdp_inv.public_key(), POOL_COUNT, PARAMS)


class TestPoolConstruction:
    """Test pool sizing and derived keys."""

    def test_sizes(self, pool):
        assert pool.pool_size() == POOL_COUNT
        assert pool.maximum_order() == POOL_COUNT
        assert pool.message_size == PARAMS.message_size

    def test_derived_exponents(self, pool, tdp_inv):
        modulus = tdp_inv.key_material.modulus
        for order in range(1, POOL_COUNT + 1):
            key = pool.key_material(order)
            assert key.public_exponent == PUBLIC_EXPONENT ** order
            assert key.modulus == modulus
            assert not key.has_private

    def test_base_key_is_reexported(self, pool, tdp_inv):
        assert pool.public_key() == tdp_inv.public_key()

    def test_size_one(self, tdp_inv):
        single = MultiplicativeKeyPool(tdp_inv.public_key(), 1, PARAMS)
        assert single.maximum_order() == 1
        sample = single.sample()
        assert single.eval(sample, 1) == tdp_inv.eval(sample)
        with pytest.raises(InvalidArgument):
            single.eval(sample, 2)

    def test_invalid_sizes(self, tdp_inv):
        for size in (0, -3, 2.5, True):
            with pytest.raises(InvalidArgument):
                MultiplicativeKeyPool(tdp_inv.public_key(), size, PARAMS)

    def test_bad_keys(self, tdp_inv):
        with pytest.raises(KeyFormatError):
            MultiplicativeKeyPool(b"garbage", POOL_COUNT, PARAMS)
        with pytest.raises(KeyFormatError):
            MultiplicativeKeyPool(tdp_inv.private_key(), POOL_COUNT, PARAMS)
        with pytest.raises(KeyFormatError):
            MultiplicativeKeyPool(tdp_inv.public_key(), POOL_COUNT, TdpParams(message_size=256))


class TestPoolEval:
    """Order-k evaluation equals k sequential evaluations."""

    def test_mult_eval(self, pool, tdp_inv):
        for _ in range(TEST_COUNT):
            sample = pool.sample()
            v = sample
            for order in range(1, pool.maximum_order() + 1):
                v = tdp_inv.eval(v)
                assert pool.eval(sample, order) == v

    def test_imported_key_with_other_exponent(self):
        """Derivation uses the key's own exponent, not the deployment constant."""
        public_key = RSA.generate(1024, e=65537).publickey().export_key(format="PEM")
        tdp = TrapdoorPermutation(public_key, PARAMS)
        pool = MultiplicativeKeyPool(public_key, 6, PARAMS)

        assert pool.key_material(6).public_exponent == 65537 ** 6
        for _ in range(TEST_COUNT):
            sample = pool.sample()
            for order in range(1, pool.maximum_order() + 1):
                assert pool.eval(sample, order) == iterate(tdp, sample, order)

    def test_order_one_is_base_eval(self, pool, tdp_inv):
        tdp = TrapdoorPermutation(pool.public_key(), PARAMS)
        sample = pool.sample()
        assert pool.eval(sample, 1) == tdp.eval(sample)

    def test_inverted_by_invert_mult(self, pool, tdp_inv):
        for order in (1, 2, 11, POOL_COUNT):
            sample = pool.sample()
            assert tdp_inv.invert_mult(pool.eval(sample, order), order) == sample

    def test_order_out_of_range(self, pool):
        sample = pool.sample()
        for order in (0, -1, pool.pool_size() + 1):
            with pytest.raises(InvalidArgument):
                pool.eval(sample, order)
            with pytest.raises(InvalidArgument):
                pool.key_material(order)

    @pytest.mark.parametrize("length", [PARAMS.message_size - 1, PARAMS.message_size + 1])
    def test_wrong_sizes(self, pool, length):
        with pytest.raises(InvalidInputSize):
            pool.eval(bytes(length), 2)

    def test_sample(self, pool, tdp_inv):
        modulus = tdp_inv.key_material.modulus
        for _ in range(TEST_COUNT):
            sample = pool.sample()
            assert len(sample) == PARAMS.message_size
            assert int.from_bytes(sample, "big") < modulus


class TestScenario:
    """Owner publishes a key; a public party advances a token; owner rewinds it."""

    def test_forward_private_token_chain(self):
        owner = TrapdoorPermutationInverse.generate(PARAMS)
        public_key = owner.public_key()

        tdp = TrapdoorPermutation(public_key, PARAMS)
        pool = MultiplicativeKeyPool(public_key, 20, PARAMS)

        token = pool.sample()
        advanced = pool.eval(token, 5)
        assert advanced == iterate(tdp, token, 5)
        assert owner.invert_mult(advanced, 5) == token


class TestProtocols:
    """Concrete classes satisfy the structural interfaces."""

    def test_forward(self, tdp_inv):
        tdp = TrapdoorPermutation(tdp_inv.public_key(), PARAMS)
        assert isinstance(tdp, ForwardPermutation)
        assert isinstance(tdp_inv, ForwardPermutation)

    def test_invertible(self, tdp_inv):
        assert isinstance(tdp_inv, InvertiblePermutation)
        tdp = TrapdoorPermutation(tdp_inv.public_key(), PARAMS)
        assert not isinstance(tdp, InvertiblePermutation)

    def test_composable(self, pool, tdp_inv):
        assert isinstance(pool, ComposablePermutation)
        tdp = TrapdoorPermutation(tdp_inv.public_key(), PARAMS)
        assert not isinstance(tdp, ComposablePermutation)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
