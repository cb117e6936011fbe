"""Benchmark: memory usage of list and bytearray digit storage."""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from decint import Integer

_COUNT: int = 200
_TEXT: str = "7" * 500


def _measure(storage: str) -> float:
    tracemalloc.start()
    snapshot_before = tracemalloc.take_snapshot()

    kept = [Integer(_TEXT, storage=storage) for _ in range(_COUNT)]

    snapshot_after = tracemalloc.take_snapshot()
    tracemalloc.stop()
    del kept

    stats = snapshot_after.compare_to(snapshot_before, "lineno")
    total_bytes = sum(stat.size_diff for stat in stats if stat.size_diff > 0)
    return round(total_bytes / 1024, 2)


def bench_storage_memory() -> dict[str, object]:
    """Benchmark memory held by 500-digit integers per storage backend.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb,
    list_memory_kb, bytearray_memory_kb.
    """
    list_kb = _measure("list")
    bytearray_kb = _measure("bytearray")

    result: dict[str, object] = {
        "operation": "integer_storage_memory",
        "iterations": _COUNT,
        "peak_memory_kb": max(list_kb, bytearray_kb),
        "list_memory_kb": list_kb,
        "bytearray_memory_kb": bytearray_kb,
    }
    print(
        f"[bench_memory] {result['operation']}: list {list_kb:.2f} KB, "
        f"bytearray {bytearray_kb:.2f} KB over {_COUNT} integers"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    result = bench_storage_memory()
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
