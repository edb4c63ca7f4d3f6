"""Console module - Rich output for the CLI."""

from __future__ import annotations

from samhsamatcher.console.logger import ClaimResult, MatcherConsole


__all__ = ["ClaimResult", "MatcherConsole"]
