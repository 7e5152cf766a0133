"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..api.exceptions import ConfigError
from ..constants import (
    StorageType,
    DEFAULT_SHORT_MAX_AGE,
    DEFAULT_LONG_MAX_AGE,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_HASH_WORKERS,
    DEFAULT_MANIFEST_TIMEOUT,
    DEFAULT_EXCLUDE_PATTERNS,
)


@dataclass
class TargetConfig:
    """Configuration for the deploy target bucket"""

    type: str  # filesystem, gcs, s3, bos
    bucket: Optional[str] = None
    prefix: str = ""

    # Filesystem specific
    path: Optional[str] = None

    # S3 / BOS specific
    region: Optional[str] = None
    endpoint: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None

    # Additional options
    options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate target configuration"""
        try:
            storage_type = StorageType(self.type)
        except ValueError:
            raise ConfigError(f"Invalid target type: {self.type}")

        if storage_type == StorageType.FILESYSTEM:
            if not self.path:
                raise ConfigError("Filesystem target requires 'path'")
        elif not self.bucket:
            raise ConfigError(f"{storage_type.value.upper()} target requires 'bucket'")

        self.prefix = self.prefix.strip("/")

    @property
    def storage_type(self) -> StorageType:
        """Get StorageType enum"""
        return StorageType(self.type)

    def get_display_info(self) -> str:
        """Get display information for the target"""
        if self.storage_type == StorageType.FILESYSTEM:
            return f"Filesystem: {self.path}"
        if self.storage_type == StorageType.S3 and self.region:
            return f"S3: {self.bucket} ({self.region})"
        if self.storage_type == StorageType.BOS and self.endpoint:
            return f"BOS: {self.bucket} ({self.endpoint})"
        return f"{self.type.upper()}: {self.bucket}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {"type": self.type}

        if self.bucket:
            data["bucket"] = self.bucket
        if self.prefix:
            data["prefix"] = self.prefix
        if self.path:
            data["path"] = self.path
        if self.region:
            data["region"] = self.region
        if self.endpoint:
            data["endpoint"] = self.endpoint
        if self.access_key:
            data["access_key"] = self.access_key
        if self.secret_key:
            data["secret_key"] = self.secret_key
        if self.options:
            data["options"] = self.options

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TargetConfig':
        """Create from dictionary"""
        if "type" not in data:
            raise ConfigError("Target requires 'type'")

        return cls(
            type=data["type"],
            bucket=data.get("bucket"),
            prefix=data.get("prefix") or "",
            path=data.get("path"),
            region=data.get("region"),
            endpoint=data.get("endpoint"),
            access_key=data.get("access_key"),
            secret_key=data.get("secret_key"),
            options=data.get("options", {})
        )


@dataclass
class CacheRule:
    """Glob pattern mapped to a Cache-Control header"""

    pattern: str
    header: str

    def to_dict(self) -> Dict[str, str]:
        return {"pattern": self.pattern, "header": self.header}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CacheRule':
        try:
            return cls(pattern=data["pattern"], header=data["header"])
        except KeyError as e:
            raise ConfigError(f"Cache rule missing field: {e.args[0]}")


@dataclass
class CacheControlConfig:
    """Cache policy configuration

    ``function`` is an import string (``package.module:function``) naming a
    callable that takes the file path and returns the header line. When set
    it overrides every other setting here.
    """

    short_max_age: int = DEFAULT_SHORT_MAX_AGE
    long_max_age: int = DEFAULT_LONG_MAX_AGE
    rules: List[CacheRule] = field(default_factory=list)
    function: Optional[str] = None

    def __post_init__(self):
        if self.short_max_age < 0 or self.long_max_age < 0:
            raise ConfigError("Cache max-age values must not be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "short_max_age": self.short_max_age,
            "long_max_age": self.long_max_age
        }
        if self.rules:
            data["rules"] = [r.to_dict() for r in self.rules]
        if self.function:
            data["function"] = self.function
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CacheControlConfig':
        """Create from dictionary"""
        return cls(
            short_max_age=int(data.get("short_max_age", DEFAULT_SHORT_MAX_AGE)),
            long_max_age=int(data.get("long_max_age", DEFAULT_LONG_MAX_AGE)),
            rules=[CacheRule.from_dict(r) for r in data.get("rules", [])],
            function=data.get("function")
        )


@dataclass
class DeployConfig:
    """Complete site deploy configuration"""

    base_url: str
    source_dir: str
    target: TargetConfig
    cache_control: CacheControlConfig = field(default_factory=CacheControlConfig)
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    include_hidden: bool = False
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    hash_workers: int = DEFAULT_HASH_WORKERS
    manifest_timeout: float = DEFAULT_MANIFEST_TIMEOUT

    def __post_init__(self):
        """Validate deploy configuration"""
        if not self.base_url:
            raise ConfigError("Configuration requires 'base_url'")
        if not self.source_dir:
            raise ConfigError("Configuration requires 'source_dir'")
        if self.hash_workers < 1:
            raise ConfigError("'hash_workers' must be at least 1")

        self.base_url = self.base_url.rstrip("/")

    @property
    def source_path(self) -> Path:
        """Resolved source directory"""
        return Path(self.source_dir).expanduser().resolve()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "base_url": self.base_url,
            "source_dir": self.source_dir,
            "target": self.target.to_dict(),
            "cache_control": self.cache_control.to_dict(),
            "exclude": self.exclude,
            "include_hidden": self.include_hidden,
            "hash_algorithm": self.hash_algorithm,
            "hash_workers": self.hash_workers,
            "manifest_timeout": self.manifest_timeout
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployConfig':
        """Create from dictionary"""
        if not isinstance(data.get("target"), dict):
            raise ConfigError("Configuration requires a 'target' section")

        return cls(
            base_url=data.get("base_url", ""),
            source_dir=data.get("source_dir", ""),
            target=TargetConfig.from_dict(data["target"]),
            cache_control=CacheControlConfig.from_dict(data.get("cache_control") or {}),
            exclude=data.get("exclude", list(DEFAULT_EXCLUDE_PATTERNS)),
            include_hidden=data.get("include_hidden", False),
            hash_algorithm=data.get("hash_algorithm", DEFAULT_HASH_ALGORITHM),
            hash_workers=int(data.get("hash_workers", DEFAULT_HASH_WORKERS)),
            manifest_timeout=float(data.get("manifest_timeout", DEFAULT_MANIFEST_TIMEOUT))
        )
