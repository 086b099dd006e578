"""Benchmark Newton-Cotes rules.

Compares vectorized evaluation (one integrand call on all nodes) against
pointwise evaluation (one Python call per node) across subdivision counts.
"""

import math
import time

import torch

from newtoncotes.quadrature import RULES


def benchmark_rule(
    rule: str, n: int, n_iterations: int = 10, vectorized: bool = True
) -> float:
    """Benchmark one rule at a given subdivision count.

    Parameters
    ----------
    rule : str
        Key of ``RULES``.
    n : int
        Number of subintervals.
    n_iterations : int
        Number of iterations for timing.
    vectorized : bool
        Evaluate the integrand on the whole node tensor at once.

    Returns
    -------
    float
        Average time per integration in milliseconds.
    """
    method = RULES[rule]
    f = torch.sin if vectorized else math.sin

    # Warmup
    for _ in range(3):
        _ = method(f, n, 0.0, math.pi, vectorized=vectorized)

    # Benchmark
    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = method(f, n, 0.0, math.pi, vectorized=vectorized)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run benchmarks for every rule."""
    # multiples of 12 fill whole panels of every rule
    subdivisions = [12, 120, 1200, 12000, 120000]

    print("Newton-Cotes Quadrature Benchmark")
    print("=" * 70)
    print(
        f"{'Rule':>22} {'n':>8} {'Vectorized (ms)':>18} {'Pointwise (ms)':>18}"
    )
    print("-" * 70)

    for rule in RULES:
        for n in subdivisions:
            t_vec = benchmark_rule(rule, n)
            t_pt = benchmark_rule(rule, n, n_iterations=3, vectorized=False)
            print(f"{rule:>22} {n:>8} {t_vec:>18.3f} {t_pt:>18.3f}")

    print("=" * 70)


if __name__ == "__main__":
    main()
