"""AWS S3 storage backend implementation"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from .base import StorageBackend, guess_content_type
from ..api.exceptions import StorageError
from ..core.cache_policy import parse_header_line

logger = logging.getLogger(__name__)


class S3Storage(StorageBackend):
    """AWS S3 storage implementation"""

    scheme = "s3"

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize S3 storage

        Args:
            config: S3 configuration including:
                - access_key: AWS access key ID (optional, default chain otherwise)
                - secret_key: AWS secret access key
                - bucket: S3 bucket name
                - region: AWS region
                - endpoint: Custom endpoint (for S3-compatible services)
        """
        super().__init__(config)
        self.client = None
        self.bucket = self.config.get('bucket')
        if not self.bucket:
            raise StorageError("S3 storage requires 'bucket'")

    async def _do_initialize(self) -> None:
        """Initialize S3 client"""
        try:
            import boto3
        except ImportError:
            raise StorageError(
                "S3 storage backend requires 'boto3' package. "
                "Install with: pip install boto3"
            )

        try:
            session = boto3.session.Session(
                aws_access_key_id=self.config.get('access_key'),
                aws_secret_access_key=self.config.get('secret_key'),
                region_name=self.config.get('region')
            )
            self.client = session.client('s3', endpoint_url=self.config.get('endpoint'))
        except Exception as e:
            raise StorageError(f"Failed to initialize S3 storage: {e}")

    def build_extra_args(self,
                         local_path: Path,
                         content_type: Optional[str] = None,
                         cache_control: Optional[str] = None) -> Dict[str, str]:
        """ExtraArgs for upload_file"""
        extra_args = {}

        content_type = content_type or guess_content_type(local_path)
        if content_type:
            extra_args['ContentType'] = content_type
        if cache_control:
            _, value = parse_header_line(cache_control)
            extra_args['CacheControl'] = value

        return extra_args

    async def upload(self,
                     local_path: Path,
                     remote_path: str,
                     content_type: Optional[str] = None,
                     cache_control: Optional[str] = None) -> bool:
        """Upload file to S3"""
        await self.initialize()

        key = self.remote_key(remote_path)
        extra_args = self.build_extra_args(local_path, content_type, cache_control)

        # boto3 is synchronous, run in executor
        def _upload():
            self.client.upload_file(str(local_path), self.bucket, key, ExtraArgs=extra_args)
            return True

        try:
            return await asyncio.get_running_loop().run_in_executor(None, _upload)
        except Exception as e:
            logger.error(f"S3 upload failed: {e}")
            return False

    async def _do_close(self) -> None:
        """Drop S3 client"""
        self.client = None
