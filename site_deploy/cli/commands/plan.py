"""Plan command implementation"""

import json
import sys

import click

from .deploy import config_options, load_deploy_config
from ..utils.output import console, format_plan, print_error
from ...api import Deployer
from ...api.exceptions import SiteDeployError
from ...constants import MSG_NO_CHANGES


@click.command()
@config_options
@click.option('--json', 'as_json', is_flag=True, help='Print the plan as JSON')
@click.option('--show-policy', is_flag=True, help='Show the cache policy of each file')
@click.pass_context
def plan(ctx, config_path, source, base_url, target_type, bucket, as_json, show_policy):
    """Show which files the next deploy would upload

    Nothing is uploaded. The listing is in upload order.

    Example:

        site-deploy plan --json
    """
    try:
        config = load_deploy_config(config_path, source, base_url, target_type, bucket)
        deploy_plan = Deployer(config).plan_sync()

        if as_json:
            console.print_json(json.dumps(deploy_plan.to_dict()))
            return

        if not deploy_plan.has_changes:
            console.print(MSG_NO_CHANGES)
            return

        format_plan(deploy_plan, show_policy=show_policy)

    except SiteDeployError as e:
        print_error(str(e))
        sys.exit(1)
