#!/usr/bin/env python3
"""
Benchmark the optimized functions against their baselines.

sieve() should be about twice as fast as the plain sieve since it only
stores odd candidates. is_prime() should win by a wide margin on large n.

Usage:
    python run_benchmark.py
    python run_benchmark.py --config config/custom.yaml
"""

import argparse
import time
import numpy as np
import pandas as pd
import yaml
from pathlib import Path
from typing import Callable, Dict, Any, List

from primekit import sieve, is_prime, prime_count, CACHE_LIMIT
from primekit.baseline import baseline_sieve, baseline_is_prime


def time_call(fn: Callable, *args) -> float:
    """Wall-clock seconds for one call."""
    t0 = time.time()
    fn(*args)
    return time.time() - t0


def benchmark_sieve(sizes: List[int]) -> List[Dict[str, Any]]:
    """Time sieve vs baseline_sieve for each bound."""
    rows = []
    for N in sizes:
        print(f"  sieve N={N:,}...", end=" ", flush=True)
        t_opt = time_call(sieve, N)
        t_base = time_call(baseline_sieve, N)
        count, exact = prime_count(N)
        print(f"{t_opt:.3f}s vs {t_base:.3f}s")
        rows.append({
            'benchmark': 'sieve',
            'N': N,
            'pi_N': count,
            'pi_exact': exact,
            'optimized_s': t_opt,
            'baseline_s': t_base,
            'speedup': t_base / t_opt if t_opt > 0 else np.nan,
        })
    return rows


def _count_primes(test: Callable[[int], bool], numbers) -> int:
    return sum(1 for n in numbers if test(int(n)))


def benchmark_is_prime(count: int, samples: int, n_max: int,
                       seed: int) -> List[Dict[str, Any]]:
    """Time is_prime vs baseline_is_prime on small and large inputs."""
    rng = np.random.default_rng(seed)
    workloads = {
        'is_prime_small': np.arange(count),
        'is_prime_large': rng.integers(CACHE_LIMIT, n_max, size=samples),
    }

    rows = []
    for name, numbers in workloads.items():
        print(f"  {name} ({len(numbers):,} values)...", end=" ", flush=True)
        t0 = time.time()
        found_opt = _count_primes(is_prime, numbers)
        t_opt = time.time() - t0

        t0 = time.time()
        found_base = _count_primes(baseline_is_prime, numbers)
        t_base = time.time() - t0
        print(f"{t_opt:.3f}s vs {t_base:.3f}s")

        if found_opt != found_base:
            print(f"  WARNING: {name} found {found_opt} primes, baseline {found_base}")

        rows.append({
            'benchmark': name,
            'N': len(numbers),
            'pi_N': found_opt,
            'pi_exact': found_opt == found_base,
            'optimized_s': t_opt,
            'baseline_s': t_base,
            'speedup': t_base / t_opt if t_opt > 0 else np.nan,
        })
    return rows


def run_benchmarks(config: Dict[str, Any], output_dir: Path) -> pd.DataFrame:
    """
    Run every benchmark described by config.

    Parameters
    ----------
    config : dict
        Parsed YAML config (see config/default.yaml).
    output_dir : Path
        Directory for benchmark_results.csv.

    Returns
    -------
    pd.DataFrame
        One row per benchmark.
    """
    rows = benchmark_sieve(config['sieve_sizes'])
    rows += benchmark_is_prime(
        config['is_prime_count'],
        config['is_prime_samples'],
        config['is_prime_max'],
        config['seed']
    )
    df = pd.DataFrame(rows)

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'benchmark_results.csv', index=False)
    return df


def main():
    parser = argparse.ArgumentParser(description='Benchmark primekit against baselines')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--output', type=str, default='data/results',
                        help='Output directory')
    args = parser.parse_args()

    with open(args.config) as f:
        config = yaml.safe_load(f)

    print("=" * 60)
    print("primekit benchmarks")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  sieve_sizes = {config['sieve_sizes']}")
    print(f"  is_prime_count = {config['is_prime_count']:,}")
    print(f"  is_prime_samples = {config['is_prime_samples']:,}")
    print(f"  seed = {config['seed']}")
    print()

    total_start = time.time()
    output_dir = Path(args.output)
    df = run_benchmarks(config, output_dir)

    print()
    print("=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(df.to_string(index=False))
    print(f"\nTotal runtime: {time.time() - total_start:.1f}s")
    print(f"Saved to: {(output_dir / 'benchmark_results.csv').absolute()}")


if __name__ == '__main__':
    main()
