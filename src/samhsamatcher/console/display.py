"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table


if TYPE_CHECKING:
    from rich.console import Console

    from samhsamatcher.console.logger import ClaimResult
    from samhsamatcher.core.types import CodingSystem


def print_check_results(console: Console, results: list[ClaimResult]) -> None:
    """Print one row per classified claim."""
    if not results:
        console.print("  [yellow]⚠[/yellow] No ExplanationOfBenefit resources found")
        return
    table = Table(title="SAMHSA Check", border_style="blue")
    table.add_column("Claim", style="dim")
    table.add_column("Type", width=11)
    table.add_column("Protected", justify="center", width=9)
    table.add_column("Matched Codes")
    for result in results:
        claim = result.claim
        status = "[red]yes[/red]" if result.protected else "[green]no[/green]"
        matched = ", ".join(
            f"{m.system.value}:{m.code} [dim]({m.location.value}[{m.index}])[/dim]"
            for m in result.matches
        )
        table.add_row(claim.id or "-", claim.claim_type.value, status, matched or "[dim]-[/dim]")
    console.print(table)


def print_check_summary(console: Console, results: list[ClaimResult]) -> None:
    console.print()
    table = Table(title="Summary", border_style="blue")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    protected = sum(1 for r in results if r.protected)
    table.add_row("Claims Checked", str(len(results)))
    table.add_row("Protected", str(protected))
    table.add_row("Safe to Serve", str(len(results) - protected))
    by_type: dict[str, int] = {}
    for result in results:
        key = result.claim.claim_type.value
        by_type[key] = by_type.get(key, 0) + 1
    for claim_type, count in sorted(by_type.items()):
        table.add_row(f"  {claim_type}", str(count))
    console.print(table)


def print_code_set_stats(console: Console, counts: dict[CodingSystem, int]) -> None:
    """Print protected code counts per coding system."""
    table = Table(title="Protected Codes", border_style="blue")
    table.add_column("Coding System", style="bold")
    table.add_column("Codes", justify="right")
    for system, count in counts.items():
        table.add_row(system.value, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{sum(counts.values())}[/bold]")
    console.print(table)
