"""Benchmark: memory growth across repeated include expansions."""
from __future__ import annotations

import json
import sys
import tempfile
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from mdinclude.resolver import Expander
from sample_tree import build_tree

_ITERATIONS: int = 300


def bench_expand_memory() -> dict[str, object]:
    """Benchmark memory retained by repeated expansions of the sample tree.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb.
    """
    with tempfile.TemporaryDirectory() as tmp:
        index = build_tree(Path(tmp))
        source = index.read_text(encoding="utf-8")
        expander = Expander()

        tracemalloc.start()
        snapshot_before = tracemalloc.take_snapshot()

        for _ in range(_ITERATIONS):
            expander.expand_with_report(source, str(index))

        snapshot_after = tracemalloc.take_snapshot()
        tracemalloc.stop()

    stats = snapshot_after.compare_to(snapshot_before, "lineno")
    total_bytes = sum(stat.size_diff for stat in stats if stat.size_diff > 0)
    peak_kb = round(total_bytes / 1024, 2)

    result: dict[str, object] = {
        "operation": "mdinclude_expand_memory",
        "iterations": _ITERATIONS,
        "peak_memory_kb": peak_kb,
        "current_memory_kb": peak_kb,
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(f"[bench_memory] {result['operation']}: peak {peak_kb:.2f} KB over {_ITERATIONS} iterations")
    return result


if __name__ == "__main__":
    result = bench_expand_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
