"""API layer for site-deploy"""

from .deployer import Deployer, deploy
from .exceptions import (
    SiteDeployError,
    ConfigError,
    SourceNotFoundError,
    HashError,
    UploadError,
    ManifestPublishError,
    StorageError,
    ValidationError,
)

__all__ = [
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",

    # Exceptions
    "SiteDeployError",
    "ConfigError",
    "SourceNotFoundError",
    "HashError",
    "UploadError",
    "ManifestPublishError",
    "StorageError",
    "ValidationError",
]
