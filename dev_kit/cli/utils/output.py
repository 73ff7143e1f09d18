# dev_kit/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, Dict, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ...constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS, EMOJI_WARNING
from ...core.reporter import Reporter
from ...models import CleanResult, DeployResult
from ...utils.file_utils import format_size

console = Console()


class ConsoleReporter(Reporter):
    """Reporter that prints progress events to the terminal"""

    def __init__(self, output: Console = None):
        self.console = output or console

    def _print(self, line: str, detail: Optional[str]) -> None:
        self.console.print(line)
        if detail:
            self.console.print(f"  [dim]{detail}[/dim]")

    def step(self, message: str) -> None:
        self.console.print(f"[blue]›[/blue] {message}")

    def info(self, message: str, detail: Optional[str] = None) -> None:
        self._print(f"[blue]{EMOJI_INFO}[/blue] {message}", detail)

    def success(self, message: str, detail: Optional[str] = None) -> None:
        self._print(f"[green]{EMOJI_SUCCESS}[/green] {message}", detail)

    def warning(self, message: str, detail: Optional[str] = None) -> None:
        self._print(f"[yellow]{EMOJI_WARNING} Warning:[/yellow] {message}", detail)

    def error(self, message: str, detail: Optional[str] = None) -> None:
        self._print(f"[red]{EMOJI_ERROR} Error:[/red] {message}", detail)


def format_deploy_result(result: DeployResult) -> None:
    """Format and display a successful deploy result"""
    lines = [
        f"[green]{EMOJI_SUCCESS}[/green] {result.message}",
        "",
        f"[bold]Environment:[/bold] {result.environment}",
    ]

    if result.version:
        lines.append(f"[bold]Version:[/bold] {result.version}")
    if result.environment == "prod":
        bumped = "yes" if result.version_incremented else "no (manual bump)"
        lines.append(f"[bold]Auto-incremented:[/bold] {bumped}")
        lines.append(f"[bold]Pull request:[/bold] {'created' if result.pr_created else 'not created'}")
    if result.timestamp:
        lines.append(f"[bold]Deployed at:[/bold] {result.timestamp}")

    if result.warnings:
        lines.append("")
        lines.append("[bold yellow]Warnings:[/bold yellow]")
        for warning in result.warnings:
            lines.append(f"  • {warning}")

    panel = Panel(
        "\n".join(lines),
        title="Deploy Result",
        border_style="green" if not result.warnings else "yellow"
    )
    console.print(panel)


def format_clean_result(result: CleanResult) -> None:
    """Format and display clean operation summary"""
    table = format_table(
        [
            {"key": "Directories cleaned", "value": result.dirs_removed},
            {"key": "Files removed", "value": result.files_removed},
            {"key": "Mode", "value": result.mode},
            {"key": "Dry run", "value": "yes" if result.dry_run else "no"},
            {"key": "Node modules wiped", "value": "yes" if result.node_modules_removed else "no"},
            {"key": "Approx. size freed", "value": format_size(result.bytes_freed)},
        ],
        [("key", "Item"), ("value", "Value")],
        title="Cleanup Summary"
    )
    console.print(table)


def format_table(data: List[Dict[str, Any]],
                 columns: List[Tuple[str, str]],
                 title: Optional[str] = None) -> Table:
    """Create a formatted table

    Args:
        data: List of dictionaries with data
        columns: List of (key, header) tuples
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.ROUNDED)

    for key, header in columns:
        table.add_column(header, style="cyan" if key in ("name", "key") else None)

    for item in data:
        row = []
        for key, _ in columns:
            value = item.get(key, "")
            row.append(str(value))
        table.add_row(*row)

    return table


def format_json(data: Any, title: Optional[str] = None) -> None:
    """Format and display JSON data with syntax highlighting"""
    json_str = json.dumps(data, indent=2, default=str)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)


def format_yaml(data: Any, title: Optional[str] = None) -> None:
    """Format and display YAML data with syntax highlighting"""
    import yaml

    yaml_str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    syntax = Syntax(yaml_str, "yaml", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")
