"""CLI interface for profanity."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from profanity.config import DEFAULT_RULES_FILE, RulesSettings, ScanSettings, set_settings
from profanity.errors import ProfanityError
from profanity.formatters import format_as_json, format_as_sarif
from profanity.models import ScanResult, Violation
from profanity.pipeline.globs import split_patterns
from profanity.pipeline.pipeline import build_rule_cache, run_scan
from profanity.pipeline.rules import Rule

console = Console()
err_console = Console(stderr=True)


def setup_logging(log_level: str) -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def _configure_settings(
    rules_file: str,
    include: str,
    exclude: str,
    skip_dirs: str,
    fail_fast: bool,
) -> ScanSettings:
    """Configure scan settings."""
    settings = ScanSettings(
        rules=RulesSettings(file_name=rules_file),
        include_patterns=split_patterns(include),
        exclude_patterns=split_patterns(exclude),
        skip_dir_patterns=split_patterns(skip_dirs),
        fail_fast=fail_fast,
    )
    set_settings(settings)
    return settings


def _write_output(text: str, output_path: Path | None) -> None:
    """Write output text to file or stdout."""
    if output_path:
        output_path.write_text(text)
    else:
        print(text)


def display_violation(violation: Violation) -> None:
    """Display a single violation with the rule that produced it."""
    console.print(
        f"\n  [bold white]{escape(violation.location)}[/bold white] "
        f"[red]failed[/red]: {escape(violation.reason)}"
    )
    console.print(f"    [bold white]message[/bold white]: {escape(violation.message)}")
    console.print(f"    [bold white]rules file[/bold white]: {escape(str(violation.rule_file))}")
    console.print(f"    [bold white]include[/bold white]: {escape(violation.include or '')}")
    console.print(f"    [bold white]exclude[/bold white]: {escape(violation.exclude or '')}")


def display_result(result: ScanResult, verbose: bool) -> None:
    """Display violations, and a summary line when verbose."""
    for violation in result.violations:
        display_violation(violation)

    if result.violations:
        console.print()
    if verbose or result.violations:
        status = "[green]ok![/green]" if result.passed else "[red]failed[/red]"
        console.print(
            f"{result.files_checked} file(s) checked, {result.files_skipped} skipped, "
            f"{result.violation_count} violation(s) ... {status}"
        )


def _handle_output(
    result: ScanResult,
    output_format: str,
    output_path: Path | None,
    verbose: bool,
) -> None:
    """Handle formatting and outputting results."""
    if output_format.lower() == "sarif":
        _write_output(format_as_sarif(result, pretty=True), output_path)
    elif output_format.lower() == "json":
        _write_output(format_as_json(result, pretty=True), output_path)
    else:  # console
        display_result(result, verbose)


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.pass_context
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Show per-file progress (raises the log level to INFO)",
)
def main(ctx: click.Context, log_level: str, verbose: bool) -> None:
    """Hierarchical content-policy linter."""
    level = log_level.upper()
    if verbose and logging.getLevelName(level) > logging.INFO:
        level = "INFO"
    setup_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path), default=Path("."))
@click.pass_context
@click.option(
    "--rules",
    "rules_file",
    type=str,
    default=DEFAULT_RULES_FILE,
    show_default=True,
    help="Name of the per-directory rules file",
)
@click.option(
    "--include",
    type=str,
    default="",
    help="Comma-separated glob patterns; only matching files are scanned",
)
@click.option(
    "--exclude",
    type=str,
    default="",
    help="Comma-separated glob patterns of files to leave out",
)
@click.option(
    "--skip-dirs",
    type=str,
    default="*.git,*_bin",
    show_default=True,
    help="Comma-separated glob patterns of directory names never entered",
)
@click.option(
    "--fail-fast/--collect-all",
    default=True,
    help="Stop at the first violation (default) or report every failing file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["console", "json", "sarif"], case_sensitive=False),
    default="console",
    help="Output format (default: console)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output file path (default: stdout)",
)
def scan(
    ctx: click.Context,
    path: Path,
    rules_file: str,
    include: str,
    exclude: str,
    skip_dirs: str,
    fail_fast: bool,
    output_format: str,
    output: Path | None,
) -> None:
    """Check every file under PATH against its inherited rules."""
    settings = _configure_settings(rules_file, include, exclude, skip_dirs, fail_fast)

    try:
        result = run_scan(path, settings)
    except (ProfanityError, OSError) as e:
        _fail(e)

    _handle_output(result, output_format, output, ctx.obj["verbose"])

    if not result.passed:
        sys.exit(1)


def _describe_check(rule: Rule) -> str:
    if rule.check is None:
        return "[red]no rule set[/red]"
    return escape(rule.check.describe())


@main.command()
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    help="Scan root that rule inheritance starts from (default: .)",
)
@click.option(
    "--rules",
    "rules_file",
    type=str,
    default=DEFAULT_RULES_FILE,
    show_default=True,
    help="Name of the per-directory rules file",
)
def rules(directory: Path, root: Path, rules_file: str) -> None:
    """Show the effective rules for files in DIRECTORY."""
    settings = _configure_settings(rules_file, "", "", "", True)
    cache = build_rule_cache(root.resolve(), settings)

    try:
        effective = cache.resolved(directory.resolve())
    except (ProfanityError, OSError) as e:
        _fail(e)

    console.print(f"\n[bold blue]Effective rules: {escape(str(directory))}[/bold blue]\n")
    if not effective:
        console.print("  [dim]No rules apply[/dim]\n")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Rules file", style="cyan")
    table.add_column("Check")
    table.add_column("Include")
    table.add_column("Exclude")
    table.add_column("Message")

    for position, rule in enumerate(effective, 1):
        table.add_row(
            str(position),
            escape(str(rule.file)),
            _describe_check(rule),
            escape(rule.include or ""),
            escape(rule.exclude or ""),
            escape(rule.message),
        )

    console.print(table)


if __name__ == "__main__":
    main()
