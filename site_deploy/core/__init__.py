"""Core functionality for site-deploy"""

from .content_hasher import ContentHasher
from .cache_policy import (
    CachePolicy,
    cache_header,
    default_cache_policy,
    make_default_policy,
    build_cache_policy,
)
from .path_mapper import PathMapper
from .file_scanner import FileScanner
from .manifest_differ import ManifestDiffer
from .deploy_planner import DeployPlanner, get_order_key
from .manifest_store import ManifestStore
from .deploy_executor import DeployExecutor

__all__ = [
    "ContentHasher",
    "CachePolicy",
    "cache_header",
    "default_cache_policy",
    "make_default_policy",
    "build_cache_policy",
    "PathMapper",
    "FileScanner",
    "ManifestDiffer",
    "DeployPlanner",
    "get_order_key",
    "ManifestStore",
    "DeployExecutor",
]
