"""Benchmark: include expansion and range selection throughput.

Measures how many expansions of the sample documentation tree, and how
many range selections over a large file, complete per second using the
public ``Expander`` and ``select_range`` APIs.
"""
from __future__ import annotations

import json
import sys
import tempfile
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from mdinclude.ranges import select_range
from mdinclude.resolver import Expander
from sample_tree import build_tree

_ITERATIONS: int = 1_000
_SELECT_ITERATIONS: int = 5_000

_LARGE_TEXT = "\n".join(f"line {n} alpha beta gamma delta" for n in range(1, 2_001))


def _report(operation: str, iterations: int, total: float) -> dict[str, object]:
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


def bench_expand_throughput() -> dict[str, object]:
    """Benchmark full expansion of the sample tree, file reads included.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    with tempfile.TemporaryDirectory() as tmp:
        index = build_tree(Path(tmp))
        source = index.read_text(encoding="utf-8")
        expander = Expander()

        start = time.perf_counter()
        for _ in range(_ITERATIONS):
            expander.expand(source, str(index))
        total = time.perf_counter() - start

    return _report("mdinclude_expand_throughput", _ITERATIONS, total)


def bench_select_throughput() -> dict[str, object]:
    """Benchmark word-range selection over a 2,000 line file.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_SELECT_ITERATIONS):
        select_range(_LARGE_TEXT, "500.2", "1500.3")
    total = time.perf_counter() - start

    return _report("mdinclude_select_throughput", _SELECT_ITERATIONS, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_expand_throughput, "expand_throughput_baseline.json"),
        (bench_select_throughput, "select_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
