"""Rich console logging and output for the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from samhsamatcher.console.display import (
    print_check_results,
    print_check_summary,
    print_code_set_stats,
)


if TYPE_CHECKING:
    from samhsamatcher.core.models import ClaimBase
    from samhsamatcher.core.types import CodingSystem
    from samhsamatcher.matching.extractors import CandidateCode


@dataclass(frozen=True)
class ClaimResult:
    """A classified claim and the protected codes found on it."""

    claim: ClaimBase
    protected: bool
    matches: list[CandidateCode]


class MatcherConsole:
    """Rich console interface for classification results."""

    def __init__(self, verbose: bool = False) -> None:
        self.console = Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level="DEBUG" if self.verbose else level,
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, source: str, code_count: int) -> None:
        header = Text()
        header.append("samhsamatcher", style="bold blue")
        header.append(" - SAMHSA Protected Code Check\n\n", style="dim")
        header.append("Source: ", style="bold")
        header.append(f"{source}\n", style="green")
        header.append("Protected codes: ", style="bold")
        header.append(str(code_count), style="dim")
        self.console.print(Panel(header, border_style="blue"))
        self.console.print()

    def print_check_results(self, results: list[ClaimResult]) -> None:
        print_check_results(self.console, results)

    def print_check_summary(self, results: list[ClaimResult]) -> None:
        print_check_summary(self.console, results)

    def print_code_set_stats(self, counts: dict[CodingSystem, int]) -> None:
        print_code_set_stats(self.console, counts)

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red")
        )
