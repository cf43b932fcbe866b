"""Console report of an audit result."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from nsaudit.config import AuditResult

PARTIAL_LOAD_WARNING = "Warning: some types couldn't be loaded; continuing with available types."
NOTHING_MISSING = "None 🎉 (every assembly leaf namespace under root is covered by the file)"


def make_console() -> Console:
    """Console that prints lines verbatim: no wrapping, markup or highlighting."""
    return Console(soft_wrap=True, highlight=False, markup=False, emoji=False)


def report_lines(result: AuditResult) -> list[str]:
    """Build the plain-text report, one entry per output line."""
    lines = []
    if result.scan.partial:
        lines.append(PARTIAL_LOAD_WARNING)
    if result.scan.error is not None:
        lines.append(f"Error loading assembly: {result.scan.error}")

    lines += [
        f"Assembly: {result.assembly_name}",
        f"Total assembly namespaces (all): {len(result.all_namespaces)}",
        f"Filtered under root '{result.root_namespace}': {len(result.filtered_namespaces)}",
        f"Leaf namespaces considered: {len(result.leaf_namespaces)}",
        f"Namespaces in file: {len(result.file_namespaces)}",
        "",
        "=== Assembly leaf namespaces NOT present in file ===",
    ]

    if not result.uncovered:
        lines.append(NOTHING_MISSING)
    else:
        lines.extend(result.uncovered)
    return lines


def render_report(result: AuditResult, console: Console, verbose: bool = False) -> None:
    """Print the report, plus a phase timing table when ``verbose``."""
    for line in report_lines(result):
        console.print(line)

    if verbose and result.timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in result.timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print()
        console.print(timing_table)
