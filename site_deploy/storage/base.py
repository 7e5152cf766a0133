# site_deploy/storage/base.py
"""Storage backend abstract base class"""

import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Dict, Any


def guess_content_type(local_path: Path) -> Optional[str]:
    """Content type inferred from the file name"""
    content_type, _ = mimetypes.guess_type(str(local_path))
    return content_type


class StorageBackend(ABC):
    """Abstract base class for all storage backends"""

    #: URL scheme used when describing remote locations
    scheme = ""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize storage backend

        Args:
            config: Backend-specific configuration, including:
                - prefix: Key prefix prepended to every remote path
        """
        self.config = config or {}
        self.prefix = (self.config.get('prefix') or "").strip("/")
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize storage backend (e.g., establish connections)"""
        if not self._initialized:
            await self._do_initialize()
            self._initialized = True

    @abstractmethod
    async def _do_initialize(self) -> None:
        """Actual initialization logic to be implemented by subclasses"""
        pass

    def remote_key(self, remote_path: str) -> str:
        """Object key for a remote path, prefix included"""
        remote_path = remote_path.lstrip("/")
        if self.prefix:
            return f"{self.prefix}/{remote_path}"
        return remote_path

    @property
    def location(self) -> str:
        """Bucket or directory this backend writes to"""
        return self.config.get('bucket', '')

    def describe(self, remote_path: str) -> str:
        """Human readable full location of a remote path"""
        return f"{self.scheme}://{self.location}/{self.remote_key(remote_path)}"

    @abstractmethod
    async def upload(self,
                     local_path: Path,
                     remote_path: str,
                     content_type: Optional[str] = None,
                     cache_control: Optional[str] = None) -> bool:
        """
        Upload file to storage

        Args:
            local_path: Local file path
            remote_path: Remote path (relative to the prefix)
            content_type: Explicit content type; inferred when omitted
            cache_control: Cache-Control header line

        Returns:
            True if successful
        """
        pass

    async def close(self) -> None:
        """Close storage backend connections"""
        if self._initialized:
            await self._do_close()
            self._initialized = False

    async def _do_close(self) -> None:
        """Actual cleanup logic to be implemented by subclasses"""
        pass

    async def __aenter__(self):
        """Async context manager entry"""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
