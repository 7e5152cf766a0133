"""Deploy command implementation"""

import sys
from pathlib import Path

import click

from ..utils.interactive import confirm_deploy
from ..utils.output import (
    console,
    format_deploy_result,
    format_plan,
    format_progress,
    print_error,
    print_warning,
)
from ...api import Deployer
from ...api.exceptions import SiteDeployError
from ...constants import SUPPORTED_STORAGE_TYPES
from ...models import OperationStatus
from ...services import ConfigService


def load_deploy_config(config_path, source, base_url, target_type, bucket):
    """Build the deploy configuration from file, environment and options"""
    service = ConfigService(config_path=Path(config_path) if config_path else None)
    return service.load_config(
        base_url=base_url,
        source_dir=source,
        target_type=target_type,
        bucket=bucket
    )


def config_options(func):
    """Options shared by commands that need a deploy configuration"""
    options = [
        click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False),
                     help='Configuration file (default: .site-deploy.yaml)'),
        click.option('--source', help='Local directory with the built site'),
        click.option('--base-url', help='Public URL the site is served from'),
        click.option('--target-type', type=click.Choice(SUPPORTED_STORAGE_TYPES),
                     help='Storage backend of the target bucket'),
        click.option('--bucket', help='Target bucket name'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command()
@config_options
@click.option('-y', '--yes', is_flag=True, help='Skip confirmation prompt')
@click.option('--dry-run', is_flag=True, help='Show changed files without uploading')
@click.option('--show-policy', is_flag=True, help='Show the cache policy of each file')
@click.pass_context
def deploy(ctx, config_path, source, base_url, target_type, bucket, yes, dry_run, show_policy):
    """Deploy changed files of a static site

    Fetches the published files.json manifest, uploads every file whose
    content, target path or cache policy changed, and publishes the new
    manifest last. Scripts and styles go first, pages last.

    Examples:

        # Deploy using .site-deploy.yaml
        site-deploy deploy

        # Deploy to a GCS bucket without prompting
        site-deploy deploy --source public --base-url https://www.example.com \\
            --target-type gcs --bucket www.example.com --yes
    """
    try:
        config = load_deploy_config(config_path, source, base_url, target_type, bucket)

        def confirm(plan):
            return confirm_deploy(plan, assume_yes=yes, show_policy=show_policy)

        deployer = Deployer(config, confirm=confirm, callback=format_progress)

        console.print(f"[cyan]Deploying {config.source_dir} to {config.target.get_display_info()}...[/cyan]")

        if dry_run:
            plan = deployer.plan_sync()
            format_plan(plan, show_policy=show_policy)
            print_warning(f"Dry run: {len(plan.files)} files would be deployed")
            return

        result = deployer.deploy_sync()
        format_deploy_result(result)

        if result.status == OperationStatus.FAILED:
            sys.exit(1)

    except SiteDeployError as e:
        print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Deploy cancelled[/yellow]")
        sys.exit(130)
