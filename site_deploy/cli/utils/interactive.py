"""Interactive utilities for CLI commands"""

from rich.prompt import Confirm

from ...constants import PROMPT_CONFIRM_DEPLOY
from ...models import DeployPlan
from .output import console, format_plan


def confirm_deploy(plan: DeployPlan, assume_yes: bool = False, show_policy: bool = False) -> bool:
    """Show the changed files and ask whether to upload them

    Args:
        plan: Deploy plan to confirm
        assume_yes: Skip the prompt and accept
        show_policy: Include each file's cache policy in the listing

    Returns:
        True to go ahead with the deploy
    """
    console.print("[bold]Files to deploy:[/bold]")
    format_plan(plan, show_policy=show_policy)

    if assume_yes:
        return True

    try:
        return Confirm.ask(f"[cyan]{PROMPT_CONFIRM_DEPLOY}[/cyan]", console=console, default=False)
    except EOFError:
        # No input available, treat as a refusal
        console.print()
        return False
