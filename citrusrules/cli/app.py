"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from citrusrules import __version__
from citrusrules.core.installer import TemplateInstaller
from citrusrules.core.resolver import known_identifiers
from citrusrules.exceptions import CitrusRulesError
from citrusrules.models.report import InstallReport
from citrusrules.remote.fetcher import TemplateFetcher, build_session
from citrusrules.storage.config_manager import ConfigManager, get_config_file
from citrusrules.storage.writer import TemplateWriter

from .formatters import (
    format_error_with_suggestions,
    print_banner,
    print_next_steps,
    print_outcomes,
    print_summary_panel,
    print_template_table,
)
from .progress_manager import ProgressManager

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("citrusrules")

app = typer.Typer(
    name="citrusrules",
    help="🍋 Fetch .mdc templates into .cursor/rules",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        console.print(f"[bold]citrusrules[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


def _list_callback(value: bool):
    if value:
        print_template_table()
        raise typer.Exit()


def _validate_names(names: list[str] | None) -> list[str]:
    """Rejects positional names that are neither a template nor an alias."""
    names = names or []
    known = set(known_identifiers())
    unknown = [name for name in names if name not in known]
    if unknown:
        raise typer.BadParameter(
            f"Unknown template(s): {', '.join(unknown)}. "
            "Run 'citrusrules --list' to see what is available."
        )
    return names


def _collect_identifiers(flags: dict[str, bool], names: list[str]) -> list[str]:
    """Selected flags in declaration order, followed by positional names."""
    return [name for name, selected in flags.items() if selected] + list(names)


async def _install_async(
    identifiers: list[str], config_options: dict, config_path: Path
) -> tuple[InstallReport, Path, float, dict]:
    config = ConfigManager(config_path).load_config(config_options)
    dest_dir = Path(config.dest_dir)
    log.debug(
        f"Installing {len(identifiers)} template(s) from {config.base_url} "
        f"into {dest_dir.resolve()}"
    )

    start_time = time.monotonic()
    async with (
        build_session(config) as session,
        ProgressManager(console=console, total=len(identifiers)) as progress_manager,
    ):
        installer = TemplateInstaller(
            TemplateFetcher(session, config.base_url),
            TemplateWriter(dest_dir),
            max_workers=config.max_workers,
            progress_manager=progress_manager,
        )
        report = await installer.install(identifiers)
    duration = time.monotonic() - start_time
    return report, dest_dir, duration, progress_manager.get_statistics()


@app.command()
def main_command(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="Template names or aliases to fetch, in addition to the flags.",
        callback=_validate_names,
        show_default=False,
    ),
    # --- Templates ---
    development_workflow: bool = typer.Option(
        False,
        "-d",
        "--development-workflow",
        help="Fetch development-workflow.mdc template",
    ),
    error_handling: bool = typer.Option(
        False, "-e", "--error-handling", help="Fetch error-handling.mdc template"
    ),
    playwright_testing: bool = typer.Option(
        False,
        "-p",
        "--playwright-testing",
        help="Fetch playwright-testing.mdc template",
    ),
    security: bool = typer.Option(
        False, "-s", "--security", help="Fetch security.mdc template"
    ),
    api_design: bool = typer.Option(
        False, "-a", "--api-design", help="Fetch api-design.mdc template"
    ),
    component_standards: bool = typer.Option(
        False,
        "-c",
        "--component-standards",
        help="Fetch component-standards.mdc template",
    ),
    db_best_practices: bool = typer.Option(
        False,
        "-b",
        "--db-best-practices",
        help="Fetch db-best-practices.mdc template",
    ),
    devops_ci_cd: bool = typer.Option(
        False, "-o", "--devops-ci-cd", help="Fetch devops-ci-cd.mdc template"
    ),
    mobile_standards: bool = typer.Option(
        False, "-m", "--mobile-standards", help="Fetch mobile-standards.mdc template"
    ),
    todo_tracking: bool = typer.Option(
        False, "-t", "--TODO-tracking", help="Fetch TODO-tracking.mdc template"
    ),
    testing_strategy: bool = typer.Option(
        False, "-r", "--testing-strategy", help="Fetch testing-strategy.mdc template"
    ),
    uv_python_projects: bool = typer.Option(
        False,
        "-u",
        "--uv-python-projects",
        help="Fetch uv-python-projects.mdc template",
    ),
    # --- Behavior ---
    dest: Path | None = typer.Option(
        None,
        "--dest",
        help="Directory to write templates into (default: .cursor/rules).",
    ),
    workers: int | None = typer.Option(
        None, "-w", "--workers", help="Number of simultaneous downloads."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds."
    ),
    config: Path = typer.Option(  # noqa: B008
        get_config_file(),
        "--config",
        help="Path to the INI configuration file.",
        show_default=False,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    list_templates: bool = typer.Option(
        False,
        "--list",
        help="Show all available templates and exit.",
        is_eager=True,
        callback=_list_callback,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        is_eager=True,
        callback=_version_callback,
    ),
):
    """🍋 Fetch .mdc templates into .cursor/rules"""
    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("citrusrules").setLevel(log_level)

    print_banner()

    names = names or []
    identifiers = _collect_identifiers(
        {
            "development-workflow": development_workflow,
            "error-handling": error_handling,
            "playwright-testing": playwright_testing,
            "security": security,
            "api-design": api_design,
            "component-standards": component_standards,
            "db-best-practices": db_best_practices,
            "devops-ci-cd": devops_ci_cd,
            "mobile-standards": mobile_standards,
            "TODO-tracking": todo_tracking,
            "testing-strategy": testing_strategy,
            "uv-python-projects": uv_python_projects,
        },
        names,
    )

    if not identifiers:
        console.print(
            "\n[yellow]🤔 No templates selected. Here are your options:[/yellow]\n"
        )
        typer.echo(ctx.get_help())
        raise typer.Exit()

    config_options = {
        key: value
        for key, value in {
            "dest_dir": str(dest) if dest is not None else None,
            "max_workers": workers,
            "timeout_seconds": timeout,
        }.items()
        if value is not None
    }

    try:
        report, dest_dir, duration, progress_stats = asyncio.run(
            _install_async(identifiers, config_options, config)
        )
    except CitrusRulesError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    print_outcomes(report)
    print_summary_panel(report, duration, progress_stats)
    print_next_steps(report, dest_dir)

    if not report.ok:
        raise typer.Exit(code=1)
