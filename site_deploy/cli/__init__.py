"""Command line interface for site-deploy"""

from .main import cli, main

__all__ = ["cli", "main"]
