"""Benchmark: include expansion latency (p50/p95/mean).

Measures per-call latency of expanding the sample documentation tree.
"""
from __future__ import annotations

import json
import sys
import tempfile
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from mdinclude.resolver import Expander
from mdinclude.settings import IncludeSettings
from sample_tree import build_tree

_WARMUP: int = 50
_ITERATIONS: int = 1_000


def bench_expand_latency() -> dict[str, object]:
    """Benchmark expansion latency with quoting and omission markers on.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    settings = IncludeSettings(quote_formatting=True, omission_indicator=True)
    expander = Expander(settings)
    latencies_ms: list[float] = []

    with tempfile.TemporaryDirectory() as tmp:
        index = build_tree(Path(tmp))
        source = index.read_text(encoding="utf-8")
        path = str(index)

        # Warmup
        for _ in range(_WARMUP):
            expander.expand(source, path)

        for _ in range(_ITERATIONS):
            t0 = time.perf_counter()
            expander.expand(source, path)
            latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "mdinclude_expand_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_expand_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
