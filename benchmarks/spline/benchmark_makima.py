"""Benchmark Makima fitting and evaluation.

Fitting is a single vectorised pass over the secants (O(n)); evaluation
locates segments with a binary search (O(log n) per query).
"""

import time

import torch

from torchmakima.spline import makima_evaluate, makima_fit


def benchmark_fit(n_knots: int, n_iterations: int = 20) -> float:
    """Benchmark fitting at given size.

    Parameters
    ----------
    n_knots : int
        Number of data points.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    float
        Average time per fit in milliseconds.
    """
    x = torch.cumsum(torch.rand(n_knots, dtype=torch.float64) + 0.1, dim=0)
    y = torch.randn(n_knots, dtype=torch.float64)

    # Warmup
    for _ in range(3):
        _ = makima_fit(x, y)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = makima_fit(x, y)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_evaluate(
    n_knots: int, n_queries: int = 100_000, n_iterations: int = 20
) -> float:
    """Benchmark evaluation of a fixed number of queries at given size.

    Returns
    -------
    float
        Average time per batch of queries in milliseconds.
    """
    x = torch.cumsum(torch.rand(n_knots, dtype=torch.float64) + 0.1, dim=0)
    y = torch.randn(n_knots, dtype=torch.float64)
    spline = makima_fit(x, y)

    t = x[0] + (x[-1] - x[0]) * torch.rand(n_queries, dtype=torch.float64)

    for _ in range(3):
        _ = makima_evaluate(spline, t)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = makima_evaluate(spline, t)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run Makima benchmarks across knot counts."""
    sizes = [8, 64, 512, 4096, 32768, 262144]

    print("Makima Benchmark")
    print("=" * 50)
    print(f"{'Knots':>10} {'Fit (ms)':>16} {'Evaluate (ms)':>16}")
    print("-" * 50)

    for n_knots in sizes:
        ms_fit = benchmark_fit(n_knots)
        ms_evaluate = benchmark_evaluate(n_knots)

        print(f"{n_knots:>10} {ms_fit:>16.4f} {ms_evaluate:>16.4f}")

    print()
    print("Notes:")
    print("- Fit: O(n) secants and weights")
    print("- Evaluate: 100k queries, O(log n) segment search each")


if __name__ == "__main__":
    main()
