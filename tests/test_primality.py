"""
Tests for the trial-division primality test.

is_prime must agree with naive trial division everywhere, whichever of
its three paths (cache lookup, cached divisors, 6k±1 candidates) decides.
"""

import numpy as np
import pytest

from primekit.primality import (
    is_prime, first_wheel_candidate, has_wheel_divisor, INT64_MAX
)
from primekit.cache import PrimeCache
from primekit.baseline import baseline_is_prime

# Contiguous runs of primes: everything strictly between neighbours is composite
CONTIGUOUS_PRIMES = [
    [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47],
    [127, 131, 137, 139, 149, 151, 157, 163, 167, 173, 179, 181],
    [877, 881, 883, 887, 907, 911, 919, 929, 937, 941, 947, 953],
    [2089, 2099, 2111, 2113, 2129, 2131, 2137, 2141, 2143, 2153],
    [9857, 9859, 9871, 9883, 9887, 9901, 9907, 9923, 9929, 9931],
    [1000003, 1000033, 1000037],
]

FACTORS = [2, 3, 41, 157, 953, 2141, 9929]


class TestLiteralCases:

    @pytest.mark.parametrize("n,expected", [
        (-1, False),
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (6, False),
        (49, False),
        (98765, False),
        (1000003, True),
        (1000037, True),
        (10007 * 10009, False),
        (2147483647, True),
    ])
    def test_is_prime(self, n, expected):
        assert is_prime(n) is expected

    def test_large_negative(self):
        assert is_prime(-(2**80)) is False

    def test_accepts_numpy_integers(self):
        assert is_prime(np.int64(1000003)) is True
        assert is_prime(np.int32(97)) is True

    def test_rejects_floats(self):
        with pytest.raises(TypeError):
            is_prime(7.0)

    def test_beyond_int64(self):
        with pytest.raises(OverflowError):
            is_prime(INT64_MAX + 1)

    def test_largest_int64_is_composite(self):
        """2^63 - 1 = 7^2 * 73 * 127 * 337 * 92737 * 649657."""
        assert is_prime(INT64_MAX) is False


class TestContiguousRuns:

    @pytest.mark.parametrize("run", CONTIGUOUS_PRIMES)
    def test_run_members_are_prime(self, run):
        for p in run:
            assert is_prime(p), f"is_prime({p}) should be True"

    @pytest.mark.parametrize("run", CONTIGUOUS_PRIMES)
    def test_gaps_are_composite(self, run):
        for lo, hi in zip(run, run[1:]):
            for n in range(lo + 1, hi):
                assert not is_prime(n), f"is_prime({n}) should be False"


class TestProducts:

    def test_products_of_two_factors(self):
        """p * q is never prime, including p == q."""
        for i, p in enumerate(FACTORS):
            for q in FACTORS[:i + 1]:
                assert not is_prime(p * q), f"is_prime({p * q}) should be False"

    def test_square_of_prime_beyond_cache(self):
        """Smallest divisor lies past the cache, found by the 6k±1 scan."""
        assert not is_prime(10007 ** 2)
        assert not is_prime(46337 * 46337)
        assert not is_prime(65537 * 65539)


class TestAgainstBaseline:

    def test_small_range(self):
        for n in range(-1, 1000):
            assert is_prime(n) == baseline_is_prime(n), f"mismatch at {n}"

    def test_around_cache_limit(self):
        for n in range(9900, 10200):
            assert is_prime(n) == baseline_is_prime(n), f"mismatch at {n}"

    def test_random_samples(self):
        rng = np.random.default_rng(123)
        for n in rng.integers(10**4, 2**31, size=200):
            n = int(n)
            assert is_prime(n) == baseline_is_prime(n), f"mismatch at {n}"


class TestWheelCandidates:

    @pytest.mark.parametrize("after,expected", [
        (9973, 9977),   # 9973 ≡ 1 (mod 6)
        (9971, 9971),   # 9971 ≡ 5 (mod 6): its partner 9973 is still untested
        (97, 101),
        (3, 5),
    ])
    def test_first_wheel_candidate(self, after, expected):
        got = first_wheel_candidate(after)
        assert got == expected
        assert got % 6 == 5

    def test_has_wheel_divisor(self):
        assert has_wheel_divisor(10007 * 10009, 9977, 10008)
        assert not has_wheel_divisor(2147483647, 9977, 46340)

    def test_spans_several_blocks(self):
        """A divisor far past the first block of candidates is still found."""
        p = 1000003
        assert has_wheel_divisor(p * p, 5, p)


class TestCustomCache:

    def test_small_cache_falls_back_to_wheel(self):
        cache = PrimeCache.build(100)
        assert is_prime(101, cache=cache)
        assert not is_prime(101 * 103, cache=cache)
        assert is_prime(10007, cache=cache)

    def test_small_cache_agrees_with_baseline(self):
        cache = PrimeCache.build(3)
        for n in range(-1, 3000):
            assert is_prime(n, cache=cache) == baseline_is_prime(n), f"mismatch at {n}"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
