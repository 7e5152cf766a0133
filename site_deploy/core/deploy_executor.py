"""Sequential upload of a deploy plan"""

import logging
from pathlib import Path
from typing import Callable, Optional

from ..api.exceptions import UploadError
from ..constants import (
    MARKUP_CONTENT_TYPE,
    MANIFEST_FILE_NAME,
    MSG_FILE_DEPLOYED,
    EMOJI_ARROW,
)
from ..models.plan import DeployPlan, DeployProgress
from ..models.result import DeployResult, OperationStatus
from ..storage.base import StorageBackend
from ..utils.file_utils import display_path
from .manifest_store import ManifestStore

logger = logging.getLogger(__name__)

# Called after each finished step with (progress, local path, remote location)
ProgressCallback = Callable[[DeployProgress, Path, str], None]


class DeployExecutor:
    """Uploads planned files in order, then publishes the manifest

    Uploads are strictly sequential: the plan order is what keeps assets
    ahead of the pages referencing them. The first failure stops the batch
    and the manifest stays unpublished, so the next run retries every file
    of this batch.
    """

    def __init__(self,
                 storage: StorageBackend,
                 manifest_store: ManifestStore,
                 callback: Optional[ProgressCallback] = None):
        self.storage = storage
        self.manifest_store = manifest_store
        self.callback = callback

    def _report(self, progress: DeployProgress, local_path: Path, location: str) -> None:
        count = progress.advance()
        logger.info(MSG_FILE_DEPLOYED.format(
            count=count,
            total=progress.total,
            source=display_path(local_path),
            arrow=EMOJI_ARROW,
            target=location
        ))
        if self.callback:
            self.callback(progress, local_path, location)

    async def execute(self,
                      plan: DeployPlan,
                      progress: Optional[DeployProgress] = None) -> DeployResult:
        """Upload every planned file, then publish the new manifest

        Args:
            plan: Ordered deploy plan
            progress: Step counter; a fresh one counting uploads plus the
                manifest is used when omitted

        Returns:
            DeployResult of the completed run

        Raises:
            UploadError: On the first failed upload
            ManifestPublishError: If the manifest upload fails
        """
        progress = progress or DeployProgress(total=plan.step_count)
        result = DeployResult(
            status=OperationStatus.IN_PROGRESS,
            target=self.storage.location,
            total_files=plan.total_files,
            changed_files=len(plan.files)
        )

        for record in plan.files:
            content_type = MARKUP_CONTENT_TYPE if record.is_markup else None

            success = await self.storage.upload(
                record.local_path,
                record.target_path,
                content_type=content_type,
                cache_control=record.cache_policy
            )
            location = self.storage.describe(record.target_path)

            if not success:
                raise UploadError(str(record.local_path), location, uploaded=result.uploaded)

            result.uploaded.append(record.target_path)
            self._report(progress, record.local_path, location)

        location = await self.manifest_store.publish(plan.new_manifest, self.storage)
        result.manifest_published = True
        self._report(progress, Path(MANIFEST_FILE_NAME), location)

        result.message = f"Deployed {len(result.uploaded)} files"
        result.complete(OperationStatus.SUCCESS)
        return result
