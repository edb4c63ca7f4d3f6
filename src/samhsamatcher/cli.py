"""Command-line interface for samhsamatcher."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from samhsamatcher.codes.reference import ProtectedCodeSet
from samhsamatcher.config.settings import Settings
from samhsamatcher.console.logger import ClaimResult, MatcherConsole
from samhsamatcher.core.errors import SamhsaMatcherError
from samhsamatcher.fhir.converters import bundle_to_claims
from samhsamatcher.matching.matcher import SamhsaMatcher


console = MatcherConsole()


def _load_code_set(settings: Settings, codes_dir: str | None) -> ProtectedCodeSet:
    if codes_dir:
        settings.codes.data_dir = Path(codes_dir)
    return ProtectedCodeSet.from_settings(settings)


def check_claims(
    path: str, codes_dir: str | None = None, verbose: bool = False
) -> list[ClaimResult]:
    """Classify every ExplanationOfBenefit in a JSON file."""
    settings = Settings()
    console.verbose = verbose
    console.setup_logging(settings.log_level)
    code_set = _load_code_set(settings, codes_dir)
    console.print_header(path, len(code_set))

    resource = json.loads(Path(path).read_text(encoding="utf-8"))
    matcher = SamhsaMatcher(code_set)
    results = []
    for claim in bundle_to_claims(resource):
        matches = matcher.find_matches(claim)
        results.append(ClaimResult(claim, bool(matches), matches))

    console.print_check_results(results)
    console.print_check_summary(results)
    return results


def show_codes(codes_dir: str | None = None) -> None:
    """Show protected code counts per coding system."""
    settings = Settings()
    console.setup_logging(settings.log_level)
    console.print_code_set_stats(_load_code_set(settings, codes_dir).counts())


def main() -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="samhsamatcher", description="SAMHSA protected code detection for claims"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check = subparsers.add_parser("check", help="Check EOB or Bundle JSON for protected codes")
    check.add_argument("path", help="Path to an ExplanationOfBenefit or Bundle JSON file")
    check.add_argument("--codes-dir", help="Directory with protected code CSV files")
    check.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    codes = subparsers.add_parser("codes", help="Show protected code statistics")
    codes.add_argument("--codes-dir", help="Directory with protected code CSV files")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "check":
            if not Path(args.path).exists():
                console.print_error(f"File not found: {args.path}")
                sys.exit(1)
            check_claims(args.path, args.codes_dir, args.verbose)
        elif args.command == "codes":
            show_codes(args.codes_dir)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except (SamhsaMatcherError, json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
