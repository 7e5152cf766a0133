"""Fetching and publishing the deploy manifest"""

import logging
import tempfile
from pathlib import Path
from typing import Optional

import httpx

from ..api.exceptions import ManifestPublishError, ValidationError
from ..constants import (
    MANIFEST_FILE_NAME,
    MANIFEST_CACHE_CONTROL,
    DEFAULT_MANIFEST_TIMEOUT,
)
from ..models.manifest import Manifest
from ..storage.base import StorageBackend

logger = logging.getLogger(__name__)


class ManifestStore:
    """Reads the manifest from the live site and writes it to the bucket

    The manifest is read over plain HTTP(S) from the published site, so no
    bucket credentials are needed to compute a diff.
    """

    def __init__(self,
                 base_url: str,
                 timeout: float = DEFAULT_MANIFEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize manifest store

        Args:
            base_url: Public URL of the deployed site
            timeout: HTTP timeout in seconds
            transport: Custom httpx transport
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def manifest_url(self) -> str:
        return f"{self.base_url}/{MANIFEST_FILE_NAME}"

    async def fetch(self) -> Manifest:
        """Fetch the published manifest

        Any failure (non-200 status, network error, invalid payload) yields
        an empty manifest, which makes every local file count as changed.
        """
        url = self.manifest_url

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Could not fetch manifest from {url}: {e}")
            return Manifest.empty()

        if response.status_code != 200:
            logger.warning(f"No manifest at {url} (status {response.status_code})")
            return Manifest.empty()

        try:
            manifest = Manifest.from_json(response.text)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid manifest at {url}: {e}")
            return Manifest.empty()

        logger.info(f"Fetched manifest with {len(manifest)} entries from {url}")
        return manifest

    async def publish(self, manifest: Manifest, storage: StorageBackend) -> str:
        """Upload the manifest, replacing the previous one

        Returns:
            Remote location of the published manifest

        Raises:
            ManifestPublishError: If the upload fails
        """
        with tempfile.TemporaryDirectory(prefix="site-deploy-") as tmp_dir:
            manifest_path = Path(tmp_dir) / MANIFEST_FILE_NAME
            manifest_path.write_text(manifest.to_json(), encoding="utf-8")

            success = await storage.upload(
                manifest_path,
                MANIFEST_FILE_NAME,
                cache_control=MANIFEST_CACHE_CONTROL
            )

        location = storage.describe(MANIFEST_FILE_NAME)
        if not success:
            raise ManifestPublishError(f"Failed to publish manifest to {location}")

        logger.info(f"Published manifest with {len(manifest)} entries to {location}")
        return location
