"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from citrusrules import __version__
from citrusrules.core.resolver import TEMPLATE_ALIASES, TEMPLATE_CATALOG
from citrusrules.models.report import InstallReport, OutcomeState
from citrusrules.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            "• Check the values in your config.ini.",
            "• `base_url` must start with http:// or https://.",
            "• Remove the file to fall back to the built-in defaults.",
        ],
        "ResolutionError": [
            "• Run `citrusrules --list` to see the available templates.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_banner():
    """Displays the application banner."""
    console = Console()
    console.print(
        Panel(
            Text.from_markup(
                f"[bold yellow]🍋 citrusrules[/bold yellow] [dim]v{__version__}[/dim]\n"
                "[yellow]Fresh .mdc rule templates for .cursor/rules[/yellow]"
            ),
            border_style="yellow",
            box=box.ROUNDED,
            expand=False,
        )
    )


def print_template_table():
    """Displays every available template with its flag and aliases."""
    console = Console()
    aliases: dict[str, list[str]] = {}
    for alias, name in TEMPLATE_ALIASES.items():
        aliases.setdefault(name, []).append(alias)

    table = Table(title="Available Templates", box=box.ROUNDED)
    table.add_column("Flag", style="bold magenta", no_wrap=True)
    table.add_column("Template", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Aliases", style="dim")
    for template in TEMPLATE_CATALOG:
        table.add_row(
            f"{template.short_flag}, --{template.name}",
            f"{template.name}.mdc",
            template.description,
            ", ".join(aliases.get(template.name, [])),
        )
    console.print(table)


def print_outcomes(report: InstallReport):
    """Prints one line per requested template."""
    console = Console()
    for outcome in report.outcomes:
        filename = escape(outcome.filename)
        if outcome.state is OutcomeState.WRITTEN:
            console.print(f"[green]✔ fetched {filename}[/green]")
        else:
            console.print(
                f"[red]✖ failed {filename}:[/red] "
                f"{escape(outcome.error or 'unknown error')}"
            )


def print_summary_panel(
    report: InstallReport, duration_s: float, progress_stats: dict | None = None
):
    """Displays the final summary of the install session."""
    console = Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row(
        "✔ Written:", f"[bold green]{len(report.succeeded)}[/bold green]"
    )
    if report.failed:
        stats_table.add_row("✖ Failed:", f"[bold red]{len(report.failed)}[/bold red]")
    stats_table.add_row(
        "Total Size:", f"[cyan]{format_size(report.total_bytes)}[/cyan]"
    )
    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(duration_s)}[/blue]")
    if progress_stats and progress_stats.get("peak_concurrent", 0) > 1:
        stats_table.add_row(
            "Peak Concurrent:", f"[green]{progress_stats['peak_concurrent']}[/green]"
        )

    if report.ok:
        title = "🎉 [bold]Templates successfully installed![/bold]"
        border_color = "green"
    elif report.succeeded:
        title = "⚠ [bold]Some templates failed[/bold]"
        border_color = "yellow"
    else:
        title = "❌ [bold]Failed to fetch templates[/bold]"
        border_color = "red"

    console.print()
    console.print(
        Panel(
            stats_table,
            title=title,
            border_style=border_color,
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )


def print_next_steps(report: InstallReport, dest_dir: Path):
    """Lists the installed files and how Cursor picks them up."""
    if not report.succeeded:
        return
    console = Console()
    installed = list(dict.fromkeys(o.filename for o in report.succeeded))
    lines = [f"  [cyan]•[/cyan] {escape(name)}" for name in installed]
    console.print(
        Panel(
            "[bold]Installed into[/bold] "
            f"[cyan]{escape(str(dest_dir))}[/cyan]:\n"
            + "\n".join(lines)
            + "\n\n[dim]Cursor loads rules from this folder automatically. "
            "Commit them to share with your team.[/dim]",
            title="[bold yellow]🍋 Next Steps[/bold yellow]",
            border_style="yellow",
            expand=False,
        )
    )
