"""
CLI for dirscan.

Provides command-line access to pattern-driven directory scans.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dirscan.core.config import DirscanConfig, load_config
from dirscan.core.default_excludes import get_default_excludes
from dirscan.core.directory_scanner import DirectoryScanner, ScanResult
from dirscan.core.errors import PatternCompileError, ScanConfigurationError
from dirscan.core.file_listing import get_file_and_directory_names

# Initialize Rich Console
console = Console()

app = typer.Typer(
    name="dirscan",
    help="Ant-style include/exclude directory scanner",
    add_completion=False,
)


def _load_settings(config_file: Optional[Path]) -> DirscanConfig:
    """Load .env and configuration, then apply the logging settings."""
    load_dotenv()
    cfg = load_config(config_file)
    logging.basicConfig(
        level=getattr(logging, cfg.logging.level.upper(), logging.WARNING),
        format=cfg.logging.format,
    )
    return cfg


def _paths_table(title: str, paths: tuple[str, ...], style: str) -> Table:
    table = Table(title=title, show_header=False, title_style=style, expand=False)
    table.add_column("Path", overflow="fold")
    for path in paths:
        table.add_row(path if path else ".")
    return table


def _print_result(result: ScanResult, show_excluded: bool) -> None:
    console.print(_paths_table("Included files", result.included_files, "bold green"))
    console.print(
        _paths_table("Included directories", result.included_directories, "bold green")
    )

    if show_excluded:
        console.print(_paths_table("Excluded files", result.excluded_files, "bold yellow"))
        console.print(
            _paths_table("Excluded directories", result.excluded_directories, "bold yellow")
        )

    summary = Table.grid(padding=1)
    summary.add_column(style="bold")
    summary.add_column()
    summary.add_row("Included Files:", str(len(result.included_files)))
    summary.add_row("Included Directories:", str(len(result.included_directories)))
    summary.add_row("Excluded Files:", str(len(result.excluded_files)))
    summary.add_row("Excluded Directories:", str(len(result.excluded_directories)))
    if result.not_followed_symlinks:
        summary.add_row("Symlinks Not Followed:", str(len(result.not_followed_symlinks)))
    if result.warnings:
        summary.add_row("Warnings:", f"[yellow]{len(result.warnings)}[/yellow]")

    console.print(
        Panel(
            summary,
            title="[bold green]Scan Complete[/bold green]",
            border_style="green",
            expand=False,
        )
    )

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning.message}")


@app.command()
def scan(
    basedir: Path = typer.Argument(..., help="Directory to scan"),
    include: Optional[list[str]] = typer.Option(
        None, "--include", "-i", help="Include pattern. Can be specified multiple times."
    ),
    exclude: Optional[list[str]] = typer.Option(
        None, "--exclude", "-e", help="Exclude pattern. Can be specified multiple times."
    ),
    default_excludes: Optional[bool] = typer.Option(
        None, "--default-excludes/--no-default-excludes", help="Apply VCS/editor default excludes"
    ),
    case_sensitive: Optional[bool] = typer.Option(
        None, "--case-sensitive/--case-insensitive", help="Case sensitivity of patterns"
    ),
    follow_symlinks: Optional[bool] = typer.Option(
        None, "--follow-symlinks/--no-follow-symlinks", help="Descend into symlinked directories"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML or JSON configuration file"
    ),
    show_excluded: bool = typer.Option(
        False, "--show-excluded", help="Also list excluded files and directories"
    ),
):
    """Scan a directory and report included and excluded paths."""
    try:
        cfg = _load_settings(config_file)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    settings = cfg.scan

    try:
        scanner = DirectoryScanner(
            basedir=basedir,
            includes=include if include else settings.includes,
            excludes=exclude if exclude else settings.excludes,
            use_default_excludes=(
                settings.use_default_excludes if default_excludes is None else default_excludes
            ),
            case_sensitive=settings.case_sensitive if case_sensitive is None else case_sensitive,
            follow_symlinks=(
                settings.follow_symlinks if follow_symlinks is None else follow_symlinks
            ),
        )
        result = scanner.scan()
    except (PatternCompileError, ScanConfigurationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _print_result(result, show_excluded)


@app.command(name="list")
def list_paths(
    basedir: Path = typer.Argument(..., help="Directory to list"),
    includes: Optional[str] = typer.Option(
        None, "--includes", help="Comma-separated include patterns"
    ),
    excludes: Optional[str] = typer.Option(
        None, "--excludes", help="Comma-separated exclude patterns"
    ),
    directories: bool = typer.Option(
        False, "--directories", "-d", help="List directories instead of files"
    ),
    relative: bool = typer.Option(
        False, "--relative", "-r", help="Print paths relative to the base directory"
    ),
    case_sensitive: bool = typer.Option(
        True, "--case-sensitive/--case-insensitive", help="Case sensitivity of patterns"
    ),
):
    """Print matching paths, one per line."""
    try:
        names = get_file_and_directory_names(
            basedir,
            includes,
            excludes,
            include_basedir=not relative,
            case_sensitive=case_sensitive,
            get_files=not directories,
            get_directories=directories,
        )
    except (PatternCompileError, ScanConfigurationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    for name in names:
        typer.echo(name)


@app.command()
def defaults():
    """Show the default exclude patterns."""
    for pattern in get_default_excludes():
        typer.echo(pattern)


def main() -> None:
    """Entry point for the dirscan console script."""
    app()


if __name__ == "__main__":
    main()
