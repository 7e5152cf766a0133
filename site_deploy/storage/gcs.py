"""Google Cloud Storage backend driven by the gsutil command line"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import List, Optional, Dict, Any

from .base import StorageBackend
from ..api.exceptions import StorageError
from ..core.cache_policy import parse_header_line

logger = logging.getLogger(__name__)


class GCSStorage(StorageBackend):
    """Google Cloud Storage implementation using ``gsutil cp``

    Authentication is whatever the local gcloud/gsutil installation is
    configured with. Content type is left to gsutil's inference unless given.
    """

    scheme = "gs"

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize GCS storage

        Args:
            config: GCS configuration including:
                - bucket: Bucket name
                - gsutil: Path to the gsutil executable (optional)
        """
        super().__init__(config)
        self.bucket = self.config.get('bucket')
        if not self.bucket:
            raise StorageError("GCS storage requires 'bucket'")
        self.gsutil = self.config.get('gsutil', 'gsutil')

    async def _do_initialize(self) -> None:
        """Check that gsutil is available"""
        executable = shutil.which(self.gsutil)
        if executable is None:
            raise StorageError(
                "GCS storage backend requires the 'gsutil' command. "
                "Install the Google Cloud SDK and make sure gsutil is on PATH"
            )
        self.gsutil = executable

    def build_command(self,
                      local_path: Path,
                      remote_path: str,
                      content_type: Optional[str] = None,
                      cache_control: Optional[str] = None) -> List[str]:
        """Argument list for one copy"""
        command = [self.gsutil]

        if content_type:
            command += ["-h", f"Content-Type:{content_type}"]
        if cache_control:
            name, value = parse_header_line(cache_control)
            command += ["-h", f"{name}:{value}"]

        command += ["cp", str(local_path), self.describe(remote_path)]
        return command

    async def upload(self,
                     local_path: Path,
                     remote_path: str,
                     content_type: Optional[str] = None,
                     cache_control: Optional[str] = None) -> bool:
        """Upload file to GCS"""
        await self.initialize()

        command = self.build_command(local_path, remote_path, content_type, cache_control)
        logger.debug(f"Executing: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
            _, stderr = await process.communicate()
        except OSError as e:
            logger.error(f"GCS upload failed: {e}")
            return False

        if process.returncode != 0:
            logger.error(
                f"GCS upload failed ({process.returncode}): "
                f"{stderr.decode(errors='replace').strip()}"
            )
            return False

        return True
