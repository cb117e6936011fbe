"""Summary of saved decint benchmark results.

Reads the JSON files written by the ``bench_*`` scripts and prints two
tables: arithmetic timings (throughput plus factorial percentiles) and
the memory held per digit storage backend.
"""
from __future__ import annotations

import json
from pathlib import Path

_TIMING_FILES: tuple[str, ...] = (
    "add_throughput_baseline.json",
    "multiply_throughput_baseline.json",
    "divide_throughput_baseline.json",
    "latency_baseline.json",
)
_MEMORY_FILE: str = "memory_baseline.json"
_WIDTH: int = 84


def _load(path: Path) -> dict[str, object] | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)  # type: ignore[return-value]


def _ms(data: dict[str, object], key: str) -> str:
    value = data.get(key)
    return f"{float(value):.3f}ms" if value is not None else "-"  # type: ignore[arg-type]


def _timing_rows(results_dir: Path) -> list[str]:
    rows = []
    for fname in _TIMING_FILES:
        data = _load(results_dir / fname)
        if data is None:
            rows.append(f"  (no results for {fname})")
            continue
        ops = f"{float(data['ops_per_second']):,.0f}"  # type: ignore[arg-type]
        rows.append(
            f"{str(data['operation']):<32} {ops:>12} {_ms(data, 'avg_latency_ms'):>12} "
            f"{_ms(data, 'p50_ms'):>12} {_ms(data, 'p95_ms'):>12}"
        )
    return rows


def _memory_rows(results_dir: Path) -> list[str]:
    data = _load(results_dir / _MEMORY_FILE)
    if data is None:
        return [f"  (no results for {_MEMORY_FILE})"]
    list_kb = float(data["list_memory_kb"])  # type: ignore[arg-type]
    bytearray_kb = float(data["bytearray_memory_kb"])  # type: ignore[arg-type]
    ratio = f"{bytearray_kb / list_kb:.2f}x" if list_kb > 0 else "-"
    return [
        f"{'list':<32} {list_kb:>12,.1f}KB {'1.00x':>12}",
        f"{'bytearray':<32} {bytearray_kb:>12,.1f}KB {ratio:>12}",
        f"  ({data['iterations']} integers per backend)",
    ]


def main(results_dir: Path | None = None) -> None:
    results_dir = results_dir or Path(__file__).parent / "results"

    print(f"\n{'=' * _WIDTH}")
    print("  decint Benchmark Results")
    print(f"{'=' * _WIDTH}")
    print(f"{'Operation':<32} {'Ops/sec':>12} {'Avg':>12} {'p50':>12} {'p95':>12}")
    print("-" * _WIDTH)
    for row in _timing_rows(results_dir):
        print(row)

    print("-" * _WIDTH)
    print(f"{'Storage backend':<32} {'Held':>14} {'vs list':>12}")
    print("-" * _WIDTH)
    for row in _memory_rows(results_dir):
        print(row)

    print(f"{'=' * _WIDTH}")
    print("  Produce results with:")
    print("    python benchmarks/bench_throughput.py")
    print("    python benchmarks/bench_latency.py")
    print("    python benchmarks/bench_memory.py")
    print(f"{'=' * _WIDTH}")


if __name__ == "__main__":
    main()
