"""issuebridge CLI: Typer application with sarif, oss, and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from issuebridge import __version__

app = typer.Typer(
    name="issuebridge",
    help="Convert SARIF and SCA scan reports into normalized issues.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

logger = logging.getLogger("issuebridge")


def _setup_logging(level: str) -> None:
    handler = RichHandler(console=console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())


def _read_input(path: str) -> bytes:
    """Read the report, ``-`` meaning stdin. Exit 2 on failure."""
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {exc}")
        raise typer.Exit(code=2) from exc


def _load(config: Optional[str], fmt: Optional[str], include_ignores: Optional[bool], verbose: bool):
    from issuebridge.config.loader import ConfigError, load_config

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if fmt:
        if fmt not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {fmt}")
            raise typer.Exit(code=2)
        cfg.output.format = fmt  # type: ignore[assignment]
    if include_ignores is not None:
        cfg.convert.include_ignores = include_ignores
    if verbose:
        cfg.logging.level = "debug"  # type: ignore[assignment]

    _setup_logging(cfg.logging.level)
    return cfg


def _emit(result, cfg, output: Optional[str]) -> None:
    """Render a ConversionResult and exit with the matching code."""
    from issuebridge.issues.severity import classify
    from issuebridge.output import json_report, terminal

    error = result.error
    report_text = json_report.render(
        result.issues, success=error is None, error=error, indent=cfg.output.indent
    )

    if cfg.output.format == "terminal":
        terminal.render(
            result.issues,
            min_severity=classify(cfg.output.min_severity),
            show_summary=cfg.output.show_summary,
            error=error,
            console=console,
        )
    else:
        print(report_text)

    if output:
        try:
            Path(output).write_text(report_text, encoding="utf-8")
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] cannot write {output}: {exc}")
            raise typer.Exit(code=2) from exc
        logger.debug("Report written to %s", output)

    raise typer.Exit(code=1 if error is not None else 0)


# ── sarif ─────────────────────────────────────────────────────────────────────


@app.command()
def sarif(
    report: str = typer.Argument(..., help="SARIF file to convert ('-' for stdin)"),
    base_path: Optional[str] = typer.Option(None, "--base-path", "-b", help="Directory the scan ran in"),
    include_ignores: Optional[bool] = typer.Option(
        None, "--include-ignores/--exclude-ignores", help="Keep suppressed findings"
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json | terminal"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .issuebridge.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Convert a SARIF report into issues."""
    from issuebridge.errors import ParseError
    from issuebridge.sarif.mapper import convert_sarif_json_to_issues

    cfg = _load(config, format, include_ignores, verbose)
    data = _read_input(report)
    base = base_path or cfg.convert.base_path or str(Path.cwd())

    try:
        result = convert_sarif_json_to_issues(logger, data, base, cfg.convert.include_ignores)
    except ParseError as exc:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=2) from exc

    _emit(result, cfg, output)


# ── oss ───────────────────────────────────────────────────────────────────────


@app.command()
def oss(
    report: str = typer.Argument(..., help="SCA JSON file to convert ('-' for stdin)"),
    work_dir: Optional[str] = typer.Option(None, "--work-dir", "-w", help="Directory the scan ran in"),
    include_ignores: Optional[bool] = typer.Option(
        None, "--include-ignores/--exclude-ignores", help="Keep ignored findings"
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json | terminal"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .issuebridge.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Convert an SCA (open-source dependency) report into issues."""
    from issuebridge.errors import ParseError
    from issuebridge.oss.mapper import convert_oss_json_to_issues

    cfg = _load(config, format, include_ignores, verbose)
    data = _read_input(report)
    base = work_dir or cfg.convert.base_path or str(Path.cwd())

    try:
        result = convert_oss_json_to_issues(base, data, cfg.convert.include_ignores)
    except ParseError as exc:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=2) from exc

    _emit(result, cfg, output)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .issuebridge.toml in the current directory."""
    from issuebridge.config.defaults import DEFAULT_TOML
    from issuebridge.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"issuebridge {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """issuebridge: normalize SARIF and SCA scan reports."""
