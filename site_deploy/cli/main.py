# site_deploy/cli/main.py
"""Command line entry point for site-deploy"""

import os
import sys
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL

from .commands import deploy, plan

console = Console()

# Libraries whose INFO/DEBUG chatter would drown the deploy progress
NOISY_LOGGERS = (
    "asyncio",
    "aiofiles",
    "httpx",
    "httpcore",
    "botocore",
    "boto3",
    "s3transfer",
    "baidubce",
)


def resolve_log_level(verbose: bool = False, debug: bool = False) -> int:
    """Pick the log level from flags, then SITE_DEPLOY_LOG_LEVEL"""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO

    name = os.environ.get(ENV_LOG_LEVEL, "").upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route log records through rich

    Args:
        verbose: INFO level, shows each uploaded file
        debug: DEBUG level with timestamps and source locations
    """
    logging.basicConfig(
        level=resolve_log_level(verbose, debug),
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class Context:
    """Flags shared with subcommands"""

    def __init__(self, verbose: bool = False, debug: bool = False):
        self.verbose = verbose
        self.debug = debug


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress log output')
@click.pass_context
def cli(ctx, verbose, debug, quiet):
    """Site Deploy - incremental static site deploys

    Uploads only the files of a built site that changed since the last
    deploy, tracked by a files.json manifest published next to the site.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(verbose=verbose, debug=debug)


cli.add_command(deploy.deploy)
cli.add_command(plan.plan)


def main():
    """Run the CLI, turning stray exceptions into exit codes"""
    try:
        cli(prog_name=APP_NAME)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
