"""Storage backend factory"""

from typing import Dict, Type, List

from .base import StorageBackend
from .filesystem import FilesystemStorage
from .gcs import GCSStorage
from .s3 import S3Storage
from .bos import BOSStorage
from ..api.exceptions import StorageError
from ..constants import StorageType
from ..models.config import TargetConfig


class StorageFactory:
    """Factory for creating storage backend instances"""

    # Registry of storage backends
    _backends: Dict[StorageType, Type[StorageBackend]] = {
        StorageType.FILESYSTEM: FilesystemStorage,
        StorageType.GCS: GCSStorage,
        StorageType.S3: S3Storage,
        StorageType.BOS: BOSStorage,
    }

    @classmethod
    def create_from_config(cls, target: TargetConfig) -> StorageBackend:
        """Create storage backend from target configuration

        Args:
            target: Deploy target configuration

        Returns:
            Storage backend instance

        Raises:
            StorageError: If storage type is not supported
        """
        storage_type = target.storage_type

        if storage_type not in cls._backends:
            raise StorageError(f"Unsupported storage type: {storage_type.value}")

        config = {"prefix": target.prefix}

        # Prepare configuration based on storage type
        if storage_type == StorageType.FILESYSTEM:
            config["path"] = target.path
        else:
            config["bucket"] = target.bucket

        if storage_type == StorageType.S3:
            config.update({
                "region": target.region,
                "endpoint": target.endpoint,
                "access_key": target.access_key,
                "secret_key": target.secret_key
            })
        elif storage_type == StorageType.BOS:
            config.update({
                "endpoint": target.endpoint,
                "access_key": target.access_key,
                "secret_key": target.secret_key
            })

        # Add any additional options
        if target.options:
            config.update(target.options)

        backend_class = cls._backends[storage_type]
        return backend_class(config)

    @classmethod
    def get_supported_types(cls) -> List[str]:
        """Get list of supported storage type names"""
        return [st.value for st in cls._backends.keys()]
