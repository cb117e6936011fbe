"""Benchmark: Integer add, multiply and divide throughput.

Measures how many operations per second the digit-level cores complete
on fixed-size operands using the public ``Integer`` operators.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from decint import Integer

_ADD_ITERATIONS: int = 5_000
_MUL_ITERATIONS: int = 500
_DIV_ITERATIONS: int = 100

_LEFT = Integer("9" * 60)
_RIGHT = Integer("-" + "31415926535897932384626433832795028841971693993751")
_DIVISOR = Integer("12345678901234567890")


def _result(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_add_throughput() -> dict[str, object]:
    """Benchmark mixed-sign addition of ~60-digit operands.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_ADD_ITERATIONS):
        _LEFT + _RIGHT
    return _result("integer_add_throughput", _ADD_ITERATIONS, time.perf_counter() - start)


def bench_multiply_throughput() -> dict[str, object]:
    """Benchmark schoolbook multiplication of ~60 x 50 digit operands."""
    start = time.perf_counter()
    for _ in range(_MUL_ITERATIONS):
        _LEFT * _RIGHT
    return _result("integer_multiply_throughput", _MUL_ITERATIONS, time.perf_counter() - start)


def bench_divide_throughput() -> dict[str, object]:
    """Benchmark long division of a 60-digit dividend by a 20-digit divisor."""
    start = time.perf_counter()
    for _ in range(_DIV_ITERATIONS):
        _LEFT // _DIVISOR
    return _result("integer_divide_throughput", _DIV_ITERATIONS, time.perf_counter() - start)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_add_throughput, "add_throughput_baseline.json"),
        (bench_multiply_throughput, "multiply_throughput_baseline.json"),
        (bench_divide_throughput, "divide_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
