#!/usr/bin/env python3
"""
sqlite-validator command line

Checks every ``sql_query(...)`` / ``sql_query_unsafe(...)`` call in the given
Python files (directories are searched for ``*.py``).

Usage:
        sqlite-validator app/                   # report diagnostics
        sqlite-validator --fix app/queries.py   # apply unambiguous fix-its
        sqlite-validator --warnings-as-errors app/
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sqlite_validator.config import LOG_LEVELS, load_config
from sqlite_validator.errors import QueryNotLiteralError
from sqlite_validator.fixes import applicable_fixits, apply_fixits
from sqlite_validator.logger_config import get_logger, setup_logger
from sqlite_validator.result import Diagnostic
from sqlite_validator.source import check_source

console = Console(highlight=False, soft_wrap=True)
logger = get_logger("cli")

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_USAGE = 2


def collect_files(paths: Iterable[Path]) -> List[Path]:
    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.rglob("*.py")))
        else:
            files.append(path)
    return files


def display_diagnostic(path: Path, diagnostic: Diagnostic) -> None:
    color = "red" if diagnostic.is_error else "yellow"
    message_id = f" [dim]\\[{diagnostic.message_id}][/dim]" if diagnostic.message_id else ""
    console.print(
        f"{escape(str(path))}:{diagnostic.range}: "
        f"[bold {color}]{diagnostic.severity.value}[/bold {color}]: "
        f"{escape(diagnostic.message)}{message_id}"
    )
    for fixit in diagnostic.fixits:
        console.print(
            f"    [cyan]fix:[/cyan] {escape(fixit.description)} "
            f"[dim]→ {escape(fixit.replacement)}[/dim]"
        )


def display_summary(files: int, invocations: int, errors: int, warnings: int) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Check", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Files", str(files))
    table.add_row("Queries", str(invocations))
    table.add_row("Errors", f"[bold red]{errors}[/bold red]" if errors else "0")
    table.add_row("Warnings", f"[bold yellow]{warnings}[/bold yellow]" if warnings else "0")
    console.print(table)


def run(
    paths: Sequence[Path],
    fix: bool = False,
    warnings_as_errors: bool = False,
) -> int:
    """Check ``paths`` and return the process exit code."""
    files = collect_files(paths)
    usage_failed = False
    invocations = errors = warnings = 0

    for path in files:
        usage_errors: List[QueryNotLiteralError] = []
        try:
            source = path.read_text(encoding="utf-8")
            results = check_source(source, str(path), usage_errors)
        except (OSError, UnicodeDecodeError, SyntaxError) as e:
            console.print(f"[bold red]✗[/bold red] {escape(str(path))}: {escape(str(e))}")
            usage_failed = True
            continue

        for error in usage_errors:
            console.print(f"[bold red]✗[/bold red] {escape(str(error))}")
        usage_failed = usage_failed or bool(usage_errors)

        diagnostics = [d for _, outcome in results for d in outcome.diagnostics]
        invocations += len(results)
        errors += sum(1 for d in diagnostics if d.is_error)
        warnings += sum(1 for d in diagnostics if not d.is_error)
        for diagnostic in diagnostics:
            display_diagnostic(path, diagnostic)

        if fix:
            fixits = applicable_fixits(diagnostics)
            if fixits:
                path.write_text(apply_fixits(source, fixits), encoding="utf-8")
                console.print(
                    f"[bold green]✓[/bold green] Applied {len(fixits)} fix(es) to {escape(str(path))}"
                )

    display_summary(len(files), invocations, errors, warnings)

    if usage_failed:
        return EXIT_USAGE
    if errors or (warnings_as_errors and warnings):
        return EXIT_DIAGNOSTICS
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    try:
        config = load_config()
    except ValidationError as e:
        console.print(f"[bold red]✗[/bold red] Invalid configuration: {escape(str(e))}")
        return EXIT_USAGE

    parser = argparse.ArgumentParser(
        description="Check embedded SQLite queries in Python source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sqlite-validator app/                    # Report diagnostics
  sqlite-validator --fix app/queries.py    # Apply single-choice fix-its
""",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories to check")
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Apply fix-its that offer exactly one replacement",
    )
    parser.add_argument(
        "--warnings-as-errors",
        action="store_true",
        default=config.warnings_as_errors,
        help="Exit with status 1 when warnings are reported",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help=f"Console log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=config.log_file,
        help="Also write debug logs to this file",
    )
    args = parser.parse_args(argv)

    setup_logger(args.log_level, args.log_file)
    logger.debug("Checking %s", ", ".join(str(p) for p in args.paths))

    return run(args.paths, fix=args.fix, warnings_as_errors=args.warnings_as_errors)


if __name__ == "__main__":
    sys.exit(main())
