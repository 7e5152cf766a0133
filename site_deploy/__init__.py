"""Site Deploy - Incremental deploys for static sites.

Compares a built site against the files.json manifest published with the
previous deploy and uploads only what changed, assets first and pages last.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api.deployer import Deployer, deploy

# Data models
from .models import (
    Manifest,
    ManifestEntry,
    FileRecord,
    DeployPlan,
    DeployResult,
    DeployConfig,
    TargetConfig,
    CacheControlConfig,
)

# Exceptions
from .api.exceptions import (
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
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Deployer",

    # Core API functions
    "deploy",

    # Data models
    "Manifest",
    "ManifestEntry",
    "FileRecord",
    "DeployPlan",
    "DeployResult",
    "DeployConfig",
    "TargetConfig",
    "CacheControlConfig",

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
