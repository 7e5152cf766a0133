"""Deployer API for site deploy runs"""

import logging
from typing import Callable, Optional

import httpx

from ..core import (
    ContentHasher,
    PathMapper,
    FileScanner,
    ManifestDiffer,
    DeployPlanner,
    ManifestStore,
    DeployExecutor,
    CachePolicy,
    build_cache_policy,
)
from ..core.deploy_executor import ProgressCallback
from ..models import (
    DeployConfig,
    DeployPlan,
    DeployProgress,
    DeployResult,
    OperationStatus,
)
from ..constants import MSG_NO_CHANGES
from ..storage import StorageBackend, StorageFactory
from ..utils.async_utils import run_async
from .exceptions import SiteDeployError, UploadError

logger = logging.getLogger(__name__)

# Confirmation gate: receives the plan, returns True to go ahead
ConfirmCallback = Callable[[DeployPlan], bool]


class Deployer:
    """Deployer class for site deploy runs

    One run fetches the published manifest, hashes the local tree, plans the
    changed files and uploads them, publishing the new manifest last.
    """

    def __init__(self,
                 config: DeployConfig,
                 storage: Optional[StorageBackend] = None,
                 cache_policy: Optional[CachePolicy] = None,
                 confirm: Optional[ConfirmCallback] = None,
                 callback: Optional[ProgressCallback] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize deployer

        Args:
            config: Deploy configuration
            storage: Storage backend (created from config.target if omitted)
            cache_policy: Cache policy overriding config.cache_control
            confirm: Confirmation gate; no confirmation is asked if omitted
            callback: Called after each upload step
            transport: Custom httpx transport for the manifest fetch
        """
        self.config = config
        self.confirm = confirm

        self.path_mapper = PathMapper(
            cache_policy or build_cache_policy(config.cache_control, config.source_path)
        )
        self.hasher = ContentHasher(algorithm=config.hash_algorithm)
        self.scanner = FileScanner(
            exclude_patterns=config.exclude,
            include_hidden=config.include_hidden
        )
        self.differ = ManifestDiffer(
            self.path_mapper,
            self.hasher,
            max_workers=config.hash_workers
        )
        self.planner = DeployPlanner()
        self.manifest_store = ManifestStore(
            config.base_url,
            timeout=config.manifest_timeout,
            transport=transport
        )

        self.storage = storage or StorageFactory.create_from_config(config.target)
        self.executor = DeployExecutor(self.storage, self.manifest_store, callback)

    async def plan(self) -> DeployPlan:
        """Compute the ordered plan for the current source tree

        Raises:
            SourceNotFoundError: If the source directory is missing
            HashError: If a local file cannot be read
        """
        source_root = self.config.source_path

        remote_manifest = await self.manifest_store.fetch()
        local_files = self.scanner.scan(source_root)

        diff = await self.differ.diff_async(remote_manifest, local_files, source_root)
        ordered = self.planner.plan(diff.changed_files)

        return DeployPlan(
            files=ordered,
            new_manifest=diff.new_manifest,
            remote_manifest=remote_manifest,
            total_files=len(local_files)
        )

    def plan_sync(self) -> DeployPlan:
        """Compute the deploy plan (sync)"""
        return run_async(self.plan())

    async def deploy(self, dry_run: bool = False) -> DeployResult:
        """Run a full deploy

        Args:
            dry_run: Plan only, upload nothing

        Returns:
            DeployResult; failures are reported in the result, not raised
        """
        result = DeployResult(
            status=OperationStatus.IN_PROGRESS,
            target=self.storage.location
        )

        try:
            plan = await self.plan()
            result.total_files = plan.total_files
            result.changed_files = len(plan.files)

            if not plan.has_changes:
                result.message = MSG_NO_CHANGES
                result.complete(OperationStatus.SKIPPED)
                return result

            if dry_run:
                result.message = f"Dry run: {len(plan.files)} files would be deployed"
                result.complete(OperationStatus.SKIPPED)
                return result

            if self.confirm is not None and not self.confirm(plan):
                logger.info("Deploy declined, nothing uploaded")
                result.message = "Deploy cancelled"
                result.complete(OperationStatus.CANCELLED)
                return result

            async with self.storage:
                executed = await self.executor.execute(
                    plan,
                    DeployProgress(total=plan.step_count)
                )

            executed.start_time = result.start_time
            return executed

        except UploadError as e:
            logger.error(str(e))
            result.uploaded = e.uploaded
            result.failed_target = e.remote_path
            result.message = str(e)
            result.add_error(e.error_code, str(e), local_path=e.local_path)
            result.complete(OperationStatus.FAILED)
            return result

        except SiteDeployError as e:
            logger.error(str(e))
            result.message = str(e)
            result.add_error(e.error_code, str(e))
            result.complete(OperationStatus.FAILED)
            return result

    def deploy_sync(self, dry_run: bool = False) -> DeployResult:
        """Run a full deploy (sync)"""
        return run_async(self.deploy(dry_run=dry_run))


def deploy(config: DeployConfig,
           cache_policy: Optional[CachePolicy] = None,
           confirm: Optional[ConfirmCallback] = None,
           dry_run: bool = False) -> DeployResult:
    """
    Deploy a site directory

    This is a convenience function that creates a Deployer instance
    and performs the deployment.

    Args:
        config: Deploy configuration
        cache_policy: Callable overriding the cache policy
        confirm: Confirmation gate
        dry_run: Plan only

    Returns:
        DeployResult: Deployment result
    """
    deployer = Deployer(config, cache_policy=cache_policy, confirm=confirm)
    return deployer.deploy_sync(dry_run=dry_run)
