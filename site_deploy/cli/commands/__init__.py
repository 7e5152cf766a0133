"""CLI commands"""

from . import deploy
from . import plan

__all__ = [
    "deploy",
    "plan",
]
