#!/usr/bin/env python3
"""
Demo of the trapdoor permutation and its multiplicative key pool.

This walks through a forward-private search token chain:
1. The token owner generates a key pair and publishes the public key
2. A public party advances a token several steps in one exponentiation
3. The owner rewinds all steps in one private exponentiation
"""

import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sse_tdp import (
    MultiplicativeKeyPool,
    TdpParams,
    TrapdoorPermutation,
    TrapdoorPermutationInverse,
    iterate,
)


def main():
    print("=" * 60)
    print("Trapdoor Permutation Pool Demo")
    print("=" * 60)

    params = TdpParams()
    pool_size = 20
    steps = 5
    print(f"\nParameters: {params}")

    print("\n[1] Generating key pair...")
    start = time.time()
    owner = TrapdoorPermutationInverse.generate(params)
    print(f"    Key generated in {time.time() - start:.3f}s")
    public_key = owner.public_key()

    print("\n[2] Building public permutation and pool...")
    tdp = TrapdoorPermutation(public_key, params)
    start = time.time()
    pool = MultiplicativeKeyPool(public_key, pool_size, params)
    print(f"    Pool of size {pool.pool_size()} derived in {(time.time() - start)*1000:.2f}ms")

    token = pool.sample()
    print(f"\n[3] Advancing token {steps} steps...")
    start = time.time()
    sequential = iterate(tdp, token, steps)
    sequential_time = time.time() - start

    start = time.time()
    pooled = pool.eval(token, steps)
    pooled_time = time.time() - start
    print(f"    Sequential: {sequential_time*1000:.2f}ms, pooled: {pooled_time*1000:.2f}ms, "
          f"match={pooled == sequential}")

    print(f"\n[4] Rewinding {steps} steps with the trapdoor...")
    start = time.time()
    recovered = owner.invert_mult(pooled, steps)
    print(f"    Recovered original token: {recovered == token} "
          f"({(time.time() - start)*1000:.2f}ms)")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
