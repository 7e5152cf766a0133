"""Filesystem storage backend implementation"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from .base import StorageBackend, guess_content_type
from ..api.exceptions import StorageError
from ..core.cache_policy import parse_header_line
from ..utils.file_utils import copy_file

logger = logging.getLogger(__name__)

HEADERS_FILE = ".site-deploy-headers.json"


class FilesystemStorage(StorageBackend):
    """Local directory standing in for a bucket

    Objects are plain files under ``path``. Response headers that an object
    store would keep with the object go to a JSON sidecar file at the root.
    """

    scheme = "file"

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize filesystem storage

        Args:
            config: Configuration including:
                - path: Base directory
        """
        super().__init__(config)
        base_path = self.config.get('path')
        if not base_path:
            raise StorageError("Filesystem storage requires 'path'")
        self.base_path = Path(base_path).expanduser()
        self.headers_path = self.base_path / HEADERS_FILE

    @property
    def location(self) -> str:
        return str(self.base_path.resolve())

    def describe(self, remote_path: str) -> str:
        return (self.base_path.resolve() / self.remote_key(remote_path)).as_uri()

    async def _do_initialize(self) -> None:
        """Ensure the base directory exists"""
        self.base_path.mkdir(parents=True, exist_ok=True)

    def load_headers(self) -> Dict[str, Dict[str, str]]:
        """Headers recorded for every stored object"""
        if not self.headers_path.exists():
            return {}
        with open(self.headers_path, 'r') as f:
            return json.load(f)

    def _record_headers(self, key: str, headers: Dict[str, str]) -> None:
        data = self.load_headers()
        data[key] = headers
        with open(self.headers_path, 'w') as f:
            json.dump(data, f, indent=2, sort_keys=True)

    async def upload(self,
                     local_path: Path,
                     remote_path: str,
                     content_type: Optional[str] = None,
                     cache_control: Optional[str] = None) -> bool:
        """Copy file into the base directory"""
        key = self.remote_key(remote_path)
        destination = self.base_path / key

        headers = {}
        content_type = content_type or guess_content_type(local_path)
        if content_type:
            headers['Content-Type'] = content_type
        if cache_control:
            name, value = parse_header_line(cache_control)
            headers[name] = value

        def _upload():
            copy_file(Path(local_path), destination)
            self._record_headers(key, headers)
            return True

        try:
            await self.initialize()
            return await asyncio.get_running_loop().run_in_executor(None, _upload)
        except OSError as e:
            logger.error(f"Filesystem upload failed for {local_path}: {e}")
            return False
