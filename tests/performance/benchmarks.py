"""
Performance benchmarks for medscan.
"""

import time
import statistics
from typing import Tuple

from medscan import classify, parse_gs1


def benchmark(func, iterations: int = 1000) -> Tuple[float, float, float]:
    """
    Run a benchmark and return timing statistics.

    Returns:
        (mean_ms, min_ms, max_ms)
    """
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = time.perf_counter() - start
        times.append(elapsed * 1000)  # Convert to ms

    return (
        statistics.mean(times),
        min(times),
        max(times)
    )


def run_benchmarks():
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("medscan Benchmarks")
    print("=" * 60)
    print()

    test_cases = [
        ("GTIN only", "0103400934012308"),
        ("GTIN + Expiry + Batch", "01034009340123081723063010ABC123"),
        ("Bare GTIN (no AI 01)", "034009340123081723063110LOT"),
        ("With GS separators", "]d201034009340123081723063110BATCH\x1d2112345"),
        ("Plain CIP13", "3400930000001"),
        ("Unrecognized", "hello world"),
    ]

    print("classify():")
    print("-" * 60)

    for name, input_str in test_cases:
        mean, min_t, max_t = benchmark(
            lambda s=input_str: classify(s),
            iterations=1000
        )
        print(f"  {name:30} {mean:8.4f}ms avg ({min_t:.4f}-{max_t:.4f})")

    print()
    print("Throughput test (10000 iterations):")
    print("-" * 60)

    complex_input = "]d201034009340123081723063110BATCH456\x1d21SERIAL123"

    start = time.perf_counter()
    for _ in range(10000):
        parse_gs1(complex_input)
    total = time.perf_counter() - start

    throughput = 10000 / total
    print(f"  Throughput: {throughput:.0f} parses/second")
    print(f"  Total time: {total:.3f}s for 10000 parses")

    print()
    print("=" * 60)


if __name__ == "__main__":
    run_benchmarks()
