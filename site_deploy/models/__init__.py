# site_deploy/models/__init__.py
"""Data models for site-deploy"""

from .manifest import Manifest, ManifestEntry, MANIFEST_SCHEMA
from .file_record import FileRecord
from .plan import DiffResult, DeployPlan, DeployProgress
from .result import DeployResult, OperationStatus, ErrorDetail
from .config import DeployConfig, TargetConfig, CacheControlConfig, CacheRule

__all__ = [
    # Manifest models
    "Manifest",
    "ManifestEntry",
    "MANIFEST_SCHEMA",

    # Pipeline models
    "FileRecord",
    "DiffResult",
    "DeployPlan",
    "DeployProgress",

    # Result models
    "DeployResult",
    "OperationStatus",
    "ErrorDetail",

    # Config models
    "DeployConfig",
    "TargetConfig",
    "CacheControlConfig",
    "CacheRule",
]
