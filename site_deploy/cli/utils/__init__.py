"""CLI utilities"""

from .output import (
    console,
    format_plan,
    format_progress,
    format_deploy_result,
    print_error,
    print_warning,
)
from .interactive import confirm_deploy

__all__ = [
    "console",
    "format_plan",
    "format_progress",
    "format_deploy_result",
    "print_error",
    "print_warning",
    "confirm_deploy",
]
