"""Show the saved mdinclude benchmark results side by side."""
from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

RESULT_FILES: tuple[str, ...] = (
    "expand_throughput_baseline.json",
    "select_throughput_baseline.json",
    "latency_baseline.json",
    "memory_baseline.json",
)


def _load(path: Path) -> dict[str, object] | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)  # type: ignore[no-any-return]


def _metric(data: dict[str, object], key: str, fmt: str) -> str:
    value = float(data.get(key, 0))  # type: ignore[arg-type]
    return fmt.format(value) if value > 0 else "n/a"


def build_table(results_dir: Path) -> Table:
    """Return a table with one row per result file in ``results_dir``."""
    table = Table(title="mdinclude benchmark results")
    table.add_column("Operation", style="bold")
    table.add_column("Ops/sec", justify="right")
    table.add_column("Avg latency", justify="right")
    table.add_column("p95", justify="right")
    table.add_column("Peak mem", justify="right")

    for fname in RESULT_FILES:
        data = _load(results_dir / fname)
        if data is None:
            table.add_row(f"[dim]{fname}[/dim]", "-", "-", "-", "[dim]not run[/dim]")
            continue
        table.add_row(
            str(data.get("operation", fname)),
            _metric(data, "ops_per_second", "{:,.0f}"),
            _metric(data, "avg_latency_ms", "{:.3f}ms"),
            _metric(data, "p95_ms", "{:.3f}ms"),
            _metric(data, "peak_memory_kb", "{:,.0f}KB"),
        )
    return table


def main() -> None:
    console = Console()
    console.print(build_table(Path(__file__).parent / "results"))
    console.print("Run the benchmarks with:")
    for script in ("bench_throughput.py", "bench_latency.py", "bench_memory.py"):
        console.print(f"    python benchmarks/{script}")


if __name__ == "__main__":
    main()
