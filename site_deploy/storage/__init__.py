# site_deploy/storage/__init__.py
"""Storage backends for site-deploy"""

from .base import StorageBackend
from .filesystem import FilesystemStorage
from .gcs import GCSStorage
from .s3 import S3Storage
from .bos import BOSStorage
from .factory import StorageFactory

__all__ = [
    'StorageBackend',
    'FilesystemStorage',
    'GCSStorage',
    'S3Storage',
    'BOSStorage',
    'StorageFactory',
]
