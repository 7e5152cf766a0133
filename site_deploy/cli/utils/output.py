"""Output formatting utilities"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from ...constants import (
    EMOJI_ERROR,
    EMOJI_ARROW,
    MSG_FILE_DEPLOYED,
    MSG_DEPLOY_FINISHED,
)
from ...models import DeployPlan, DeployProgress, DeployResult, OperationStatus
from ...utils.file_utils import display_path

console = Console()


def format_plan(plan: DeployPlan, show_policy: bool = False) -> None:
    """Display the ordered list of files a deploy would upload"""
    if not plan.has_changes:
        return

    table = Table(title=f"Changed files ({len(plan.files)} of {plan.total_files})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Local file", style="cyan")
    table.add_column("Target", style="green")
    if show_policy:
        table.add_column("Cache policy")

    for index, record in enumerate(plan.files, 1):
        row = [str(index), display_path(record.local_path), record.target_path]
        if show_policy:
            row.append(record.cache_policy)
        table.add_row(*row)

    console.print(table)


def format_progress(progress: DeployProgress, local_path: Path, location: str) -> None:
    """Print one finished upload step"""
    console.print(MSG_FILE_DEPLOYED.format(
        count=progress.completed,
        total=progress.total,
        source=display_path(local_path),
        arrow=EMOJI_ARROW,
        target=location
    ), highlight=False, soft_wrap=True)


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    if result.status == OperationStatus.SUCCESS:
        lines = [
            f"[green]{MSG_DEPLOY_FINISHED}[/green]",
            "",
            f"[bold]Target:[/bold] {result.target}",
            f"[bold]Uploaded:[/bold] {len(result.uploaded)} of {result.total_files} files",
        ]
        if result.duration is not None:
            lines.append(f"[bold]Duration:[/bold] {result.duration:.2f}s")

        console.print(Panel("\n".join(lines), title="Deploy Result", border_style="green"))

    elif result.status == OperationStatus.FAILED:
        lines = [f"[red]{EMOJI_ERROR} Deploy failed:[/red] {result.message}"]

        if result.uploaded:
            lines.append("")
            lines.append(f"[yellow]Uploaded before the failure: {len(result.uploaded)} files[/yellow]")
            lines.append("[yellow]The manifest was not published; the next run retries them[/yellow]")

        console.print(Panel("\n".join(lines), title="Deploy Error", border_style="red"))

    else:
        # skipped or cancelled
        console.print(result.message)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")
