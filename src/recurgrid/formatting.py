"""Pretty-print support for recurgrid output objects.

Uses rich library for formatted terminal output.
All functions accept their target object and print to a rich Console.

To avoid circular imports, this module does NOT import domain objects
at module level. Functions access object attributes dynamically.
"""
from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

_STAT_FIELDS = (
    ("cache_hits", "Cache hits"),
    ("cache_misses", "Cache misses"),
    ("cache_size", "Cache size"),
    ("max_stack_depth", "Max stack depth"),
    ("frames_executed", "Frames executed"),
    ("cells_filled", "Cells filled"),
)


def _make_console(file: Any = None) -> Console:
    """Create a Console, optionally writing to a file-like object."""
    if file is not None:
        return Console(file=file, force_terminal=True, width=100)
    return Console()


def _counter(count: int) -> str:
    """Render an untracked (zero) counter as a dash."""
    return str(count) if count else "-"


def pprint_evaluation(evaluation: Any, *, file: Any = None) -> None:
    """Pretty-print an Evaluation.

    Args:
        evaluation: An Evaluation instance.
        file: Optional file-like object for output (used in tests).
    """
    console = _make_console(file)

    body_parts = [f"[bold]Value:[/bold] {evaluation.value}"]
    # Only counters the engine actually tracks
    for attr, label in _STAT_FIELDS:
        count = getattr(evaluation.stats, attr)
        if count:
            body_parts.append(f"[bold]{label}:[/bold] {count}")

    console.print(Panel(
        "\n".join(body_parts),
        title=f"[bold]{evaluation.engine}[/bold] R({evaluation.x}, {evaluation.y})",
        expand=False,
    ), highlight=False)


def pprint_verification_report(report: Any, *, file: Any = None) -> None:
    """Pretty-print a VerificationReport as a per-engine table.

    Args:
        report: A VerificationReport instance.
        file: Optional file-like object for output (used in tests).
    """
    console = _make_console(file)

    table = Table(title=f"R({report.x}, {report.y})")
    table.add_column("Engine", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Cache hits", justify="right")
    table.add_column("Max depth", justify="right")
    table.add_column("Cells", justify="right")

    for ev in report.evaluations:
        table.add_row(
            ev.engine,
            str(ev.value),
            _counter(ev.stats.cache_hits),
            _counter(ev.stats.max_stack_depth),
            _counter(ev.stats.cells_filled),
        )
    console.print(table)

    if report.agreed:
        console.print(
            f"[green]All {len(report.evaluations)} engines agree: {report.value}[/green]",
            highlight=False,
        )
    else:
        console.print("[bold red]Engines disagree[/bold red]", highlight=False)
