"""Benchmark polynomial multiplication, exponentiation and division.

Times the operations an editing session triggers, across degrees up to the
999 exponent ceiling.
"""

import time

import torch

from torchpoly.polynomial import (
    MAX_EXPONENT,
    polynomial,
    polynomial_divmod,
    polynomial_multiply,
    polynomial_pow,
)


def _random_polynomial(degree: int):
    coeffs = torch.randn(degree + 1, dtype=torch.float64)
    coeffs[-1] = coeffs[-1].abs() + 1.0
    return polynomial(coeffs, capacity=MAX_EXPONENT + 1)


def benchmark(fn, *args, n_iterations: int = 10) -> float:
    """Return the average time per call of ``fn(*args)`` in milliseconds."""
    # Warmup
    fn(*args)

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn(*args)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256, 498]

    print("Polynomial Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Multiply (ms)':>16} {'Pow 2 (ms)':>14} "
        f"{'Divmod (ms)':>14}"
    )
    print("-" * 70)

    for degree in degrees:
        p = _random_polynomial(degree)
        q = _random_polynomial(degree // 2)

        ms_multiply = benchmark(polynomial_multiply, p, q)
        ms_pow = benchmark(polynomial_pow, p, 2)
        ms_divmod = benchmark(polynomial_divmod, p, q)

        print(
            f"{degree:>8} {ms_multiply:>16.4f} {ms_pow:>14.4f} "
            f"{ms_divmod:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Multiply is O(deg(p) * deg(q)) direct convolution")
    print("- Pow multiplies the accumulator by p once per unit of power")
    print("- Divmod performs one elimination step per quotient coefficient")


if __name__ == "__main__":
    main()
