#!/usr/bin/env python3
"""
Verify the optimized functions produce identical results to the baselines.

Compares:
1. sieve(N) against the plain even+odd sieve, element for element
2. is_prime(n) against naive trial division for every n <= check_N
3. prime_count(n) against the length of sieve(n) at the cache limit

Exit status is 1 if anything disagrees.
"""

import argparse
import sys
import time
import numpy as np
import yaml

from primekit import sieve, is_prime, prime_count, CACHE_LIMIT
from primekit.baseline import baseline_sieve, baseline_is_prime


def verify_sieve(N: int, verbose: bool = True) -> bool:
    """Verify sieve(N) matches baseline_sieve(N)."""
    if verbose:
        print(f"\n=== Verifying sieve for N={N:,} ===")

    t0 = time.time()
    ps = sieve(N)
    t_opt = time.time() - t0

    t0 = time.time()
    qs = baseline_sieve(N)
    t_base = time.time() - t0

    if verbose:
        print(f"  Optimized: {t_opt:.2f}s, {len(ps):,} primes")
        print(f"  Baseline: {t_base:.2f}s, {len(qs):,} primes")

    if len(ps) != len(qs):
        print(f"  ✗ Length mismatch: {len(ps):,} vs {len(qs):,}")
        return False

    mismatches = np.flatnonzero(ps != qs)
    for i in mismatches[:10]:
        print(f"  MISMATCH at [{i}]: sieve={ps[i]}, baseline={qs[i]}")

    if verbose:
        if len(mismatches) == 0:
            print(f"  ✓ All {len(ps):,} primes match!")
        else:
            print(f"  ✗ {len(mismatches):,} mismatches found")

    return len(mismatches) == 0


def verify_is_prime(check_N: int, verbose: bool = True) -> bool:
    """Verify is_prime(n) matches baseline_is_prime(n) for -1 <= n <= check_N."""
    if verbose:
        print(f"\n=== Verifying is_prime for n in [-1, {check_N:,}] ===")

    errors = 0
    for n in range(-1, check_N + 1):
        if is_prime(n) != baseline_is_prime(n):
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH is_prime({n}): got {is_prime(n)}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {check_N + 2:,} values match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_prime_count(verbose: bool = True) -> bool:
    """Verify the exact branch of prime_count against the sieve."""
    if verbose:
        print(f"\n=== Verifying prime_count up to {CACHE_LIMIT:,} ===")

    expected = np.searchsorted(sieve(CACHE_LIMIT), np.arange(CACHE_LIMIT + 1), side='right')
    errors = 0
    for n in range(CACHE_LIMIT + 1):
        count, exact = prime_count(n)
        if not exact or count != expected[n]:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH prime_count({n}): got ({count}, {exact}), want {expected[n]}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {CACHE_LIMIT + 1:,} counts match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Verify primekit against baselines')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--N', type=float, default=None,
                        help='Sieve bound (overrides verify_N from config)')
    parser.add_argument('--check-N', type=int, default=100000,
                        help='Largest n checked against trial division')
    args = parser.parse_args()

    with open(args.config) as f:
        config = yaml.safe_load(f)
    N = int(args.N) if args.N is not None else config['verify_N']

    ok = verify_sieve(N)
    ok = verify_is_prime(args.check_N) and ok
    ok = verify_prime_count() and ok

    print()
    print("=" * 60)
    print("ALL CHECKS PASSED" if ok else "VERIFICATION FAILED")
    print("=" * 60)
    sys.exit(0 if ok else 1)
