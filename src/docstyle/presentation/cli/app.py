"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).

Exit codes of ``docstyle validate``:
  0 — no error-severity findings
  1 — one or more error-severity findings
  2 — configuration or I/O failure
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Optional

import typer
from rich.logging import RichHandler

from docstyle.domain.errors import ConfigurationError, CorpusError
from docstyle.domain.models.enums import OutputFormat
from docstyle.presentation.cli.formatters import (
    err_console,
    error_message,
    json_panel,
    report_json,
    report_text,
    rules_table,
    success_panel,
)

if TYPE_CHECKING:
    from docstyle.config.models import CheckerConfig

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_FATAL = 2

app = typer.Typer(
    name="docstyle",
    help="📝 Style conformance checker for Markdown topic documents",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the checker configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


def _setup_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )


def _load(config: Optional[str]) -> CheckerConfig:
    from docstyle.config import get_config, load_config

    return load_config(Path(config)) if config else get_config()


# ---------------------------------------------------------------------------
# docstyle validate
# ---------------------------------------------------------------------------


@app.command()
def validate(
    corpus: Annotated[Path, typer.Argument(help="Directory holding the topic documents")],
    max_line_width: Annotated[
        Optional[int],
        typer.Option("--max-line-width", help="Maximum explanation line width (default 80)"),
    ] = None,
    min_explanation_sentences: Annotated[
        Optional[int],
        typer.Option(
            "--min-explanation-sentences",
            help="Sentences required after a complex code block (default 2)",
        ),
    ] = None,
    rules: Annotated[
        Optional[str],
        typer.Option("--rules", help="Comma-separated rule ids to run (default all)"),
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    jobs: Annotated[
        int, typer.Option("--jobs", "-j", min=1, help="Documents validated in parallel")
    ] = 1,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Report output format")
    ] = OutputFormat.TEXT,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Validate every document of a corpus against the style rules."""
    from docstyle.bootstrap import Container
    from docstyle.config import apply_overrides
    from docstyle.rules import parse_rule_ids

    _setup_logging(verbose)

    try:
        cfg = apply_overrides(
            _load(config),
            formatting__max_line_width=max_line_width,
            explanations__min_sentences=min_explanation_sentences,
        )
        rule_ids = parse_rule_ids(rules) if rules is not None else None
        container = Container(cfg, rule_ids=rule_ids)
    except ConfigurationError as e:
        error_message(f"Configuration error: {e}")
        raise typer.Exit(code=EXIT_FATAL)

    try:
        report = container.validate_corpus().execute(corpus, cfg.parsing.file_glob, jobs=jobs)
    except CorpusError as e:
        error_message(str(e))
        raise typer.Exit(code=EXIT_FATAL)

    if output_format is OutputFormat.JSON:
        report_json(report)
    else:
        report_text(report)

    raise typer.Exit(code=EXIT_FINDINGS if report.has_errors else EXIT_OK)


# ---------------------------------------------------------------------------
# docstyle rules
# ---------------------------------------------------------------------------


@app.command()
def rules(
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """List the style rules and their severities."""
    from docstyle.rules import build_rule_set

    try:
        cfg = _load(config)
    except ConfigurationError as e:
        error_message(f"Configuration error: {e}")
        raise typer.Exit(code=EXIT_FATAL)
    rules_table(build_rule_set(cfg))


# ---------------------------------------------------------------------------
# docstyle config *
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Show the active configuration."""
    try:
        cfg = _load(config)
    except ConfigurationError as e:
        error_message(f"Configuration error: {e}")
        raise typer.Exit(code=EXIT_FATAL)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("path")
def config_path() -> None:
    """Print where the per-user configuration file is looked up."""
    from docstyle.config.loader import user_config_path

    path = user_config_path()
    state = "exists" if path.exists() else "not found"
    typer.echo(f"{path} ({state})")


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file")
    ] = "docstyle.json",
) -> None:
    """Copy the default configuration to a file for customisation."""
    from docstyle.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        err_console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit it and pass it with [bold]--config[/]:\n"
        f'  docstyle validate docs --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a JSON configuration file."""
    from docstyle.config import load_config

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=EXIT_FATAL)

    try:
        cfg = load_config(path)
    except ConfigurationError as e:
        error_message(f"Invalid configuration:\n\n{e}")
        raise typer.Exit(code=EXIT_FATAL)

    enabled = cfg.enabled_rules
    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Style guide: [cyan]{cfg.metadata.name} v{cfg.metadata.version}[/]\n"
        f"  Max line width: [cyan]{cfg.formatting.max_line_width}[/]\n"
        f"  Min sentences: [cyan]{cfg.explanations.min_sentences}[/]\n"
        f"  Rules: [cyan]{'all' if enabled is None else len(enabled)}[/]",
        title="✅ Validation",
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
