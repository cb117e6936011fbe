"""Benchmark: factorial latency (p50/p95/mean).

Measures per-call latency of ``factorial`` on a mid-sized input, which
exercises multiplication and decrement on growing operands.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from decint import factorial

_WARMUP: int = 5
_ITERATIONS: int = 50
_INPUT: int = 60


def bench_factorial_latency() -> dict[str, object]:
    """Benchmark ``factorial(60)`` latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    for _ in range(_WARMUP):
        factorial(_INPUT)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        factorial(_INPUT)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    latencies_ms.sort()
    total_seconds = sum(latencies_ms) / 1000
    p50 = latencies_ms[len(latencies_ms) // 2]
    p95 = latencies_ms[int(len(latencies_ms) * 0.95)]

    result: dict[str, object] = {
        "operation": "factorial_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total_seconds, 4),
        "ops_per_second": round(_ITERATIONS / total_seconds, 1),
        "avg_latency_ms": round(sum(latencies_ms) / _ITERATIONS, 4),
        "p50_ms": round(p50, 4),
        "p95_ms": round(p95, 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    result = bench_factorial_latency()
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
