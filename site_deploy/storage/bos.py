"""Baidu Object Storage (BOS) backend implementation"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from .base import StorageBackend, guess_content_type
from ..api.exceptions import StorageError
from ..core.cache_policy import parse_header_line

logger = logging.getLogger(__name__)


class BOSStorage(StorageBackend):
    """Baidu Object Storage implementation"""

    scheme = "bos"

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize BOS storage

        Args:
            config: BOS configuration including:
                - access_key: Access key
                - secret_key: Secret key
                - bucket: Bucket name
                - endpoint: BOS endpoint
        """
        super().__init__(config)
        self.client = None
        self.bucket = self.config.get('bucket')
        if not self.bucket:
            raise StorageError("BOS storage requires 'bucket'")
        self.endpoint = self.config.get('endpoint') or 'https://bj.bcebos.com'

    async def _do_initialize(self) -> None:
        """Initialize BOS connection"""
        try:
            from baidubce.services.bos.bos_client import BosClient
            from baidubce.bce_client_configuration import BceClientConfiguration
            from baidubce.auth.bce_credentials import BceCredentials
        except ImportError:
            raise StorageError(
                "BOS storage backend requires 'bce-python-sdk' package. "
                "Install with: pip install bce-python-sdk"
            )

        try:
            # Create BOS client configuration
            bos_config = BceClientConfiguration(
                credentials=BceCredentials(
                    self.config.get('access_key'),
                    self.config.get('secret_key')
                ),
                endpoint=self.endpoint
            )

            # Create BOS client
            self.client = BosClient(bos_config)

            # Test connection by checking if bucket exists
            self.client.head_bucket(self.bucket)

        except Exception as e:
            raise StorageError(f"Failed to initialize BOS storage: {e}")

    async def upload(self,
                     local_path: Path,
                     remote_path: str,
                     content_type: Optional[str] = None,
                     cache_control: Optional[str] = None) -> bool:
        """Upload file to BOS"""
        await self.initialize()

        key = self.remote_key(remote_path)
        content_type = content_type or guess_content_type(local_path)

        user_headers = None
        if cache_control:
            name, value = parse_header_line(cache_control)
            user_headers = {name: value}

        # BOS SDK is synchronous, run in executor
        def _upload():
            self.client.put_object_from_file(
                self.bucket,
                key,
                str(local_path),
                content_type=content_type,
                user_headers=user_headers
            )
            return True

        try:
            return await asyncio.get_running_loop().run_in_executor(None, _upload)
        except Exception as e:
            logger.error(f"BOS upload failed: {e}")
            return False

    async def _do_close(self) -> None:
        """Drop BOS client"""
        self.client = None
