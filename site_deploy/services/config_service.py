"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from ..api.exceptions import ConfigError
from ..models.config import DeployConfig
from ..constants import (
    StorageType,
    PROJECT_CONFIG_FILE,
    DEFAULT_STORAGE_TYPE,
    ENV_CONFIG_PATH,
    ENV_BASE_URL,
    ENV_SOURCE_DIR,
    ENV_BUCKET,
    ENV_BOS_ACCESS_KEY,
    ENV_BOS_SECRET_KEY,
    ENV_BOS_ENDPOINT,
    ENV_S3_ACCESS_KEY,
    ENV_S3_SECRET_KEY,
    ENV_S3_REGION,
)

logger = logging.getLogger(__name__)

# Credential fields filled from the environment per target type
_CREDENTIAL_ENV = {
    StorageType.S3: {
        "access_key": ENV_S3_ACCESS_KEY,
        "secret_key": ENV_S3_SECRET_KEY,
        "region": ENV_S3_REGION,
    },
    StorageType.BOS: {
        "access_key": ENV_BOS_ACCESS_KEY,
        "secret_key": ENV_BOS_SECRET_KEY,
        "endpoint": ENV_BOS_ENDPOINT,
    },
}


class ConfigService:
    """Service for building the deploy configuration

    Sources are layered: the YAML file first, then environment variables,
    then explicit overrides (usually CLI options).
    """

    def __init__(self, project_root: Optional[Path] = None, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            project_root: Directory searched for the config file (cwd by default)
            config_path: Explicit config file path
        """
        self.project_root = project_root or Path.cwd()
        self.config_path = config_path

    def find_config_file(self) -> Optional[Path]:
        """Locate the configuration file

        Returns:
            Path to the config file, or None when there is none
        """
        if self.config_path:
            if not self.config_path.exists():
                raise ConfigError(f"Configuration file not found: {self.config_path}")
            return self.config_path

        env_path = os.environ.get(ENV_CONFIG_PATH)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise ConfigError(f"Configuration file not found: {path}")
            return path

        default_path = self.project_root / PROJECT_CONFIG_FILE
        if default_path.exists():
            return default_path

        return None

    def load_file(self) -> Dict[str, Any]:
        """Load the raw configuration mapping from file"""
        path = self.find_config_file()
        if path is None:
            logger.debug("No configuration file found")
            return {}

        with open(path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a mapping")

        logger.debug(f"Loaded configuration from {path}")
        return data

    @staticmethod
    def apply_overrides(data: Dict[str, Any],
                        base_url: Optional[str] = None,
                        source_dir: Optional[str] = None,
                        target_type: Optional[str] = None,
                        bucket: Optional[str] = None) -> Dict[str, Any]:
        """Layer override values onto a raw configuration mapping

        None values leave the existing setting untouched.
        """
        data = dict(data)
        target = dict(data.get("target") or {})

        if base_url:
            data["base_url"] = base_url
        if source_dir:
            data["source_dir"] = source_dir
        if target_type:
            target["type"] = target_type
        if bucket:
            target["bucket"] = bucket

        if target:
            target.setdefault("type", DEFAULT_STORAGE_TYPE)
            data["target"] = target

        return data

    def apply_env(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        data = self.apply_overrides(
            data,
            base_url=os.environ.get(ENV_BASE_URL),
            source_dir=os.environ.get(ENV_SOURCE_DIR),
            bucket=os.environ.get(ENV_BUCKET)
        )

        target = data.get("target")
        if not target:
            return data

        try:
            storage_type = StorageType(target.get("type"))
        except ValueError:
            # Reported by TargetConfig validation
            return data

        for key, env_name in _CREDENTIAL_ENV.get(storage_type, {}).items():
            value = os.environ.get(env_name)
            if value and not target.get(key):
                target[key] = value

        return data

    def load_config(self, **overrides) -> DeployConfig:
        """Build the deploy configuration

        Args:
            **overrides: base_url, source_dir, target_type, bucket

        Returns:
            Validated deploy configuration

        Raises:
            ConfigError: If the resulting configuration is incomplete or invalid
        """
        data = self.apply_env(self.load_file())
        data = self.apply_overrides(data, **overrides)

        return DeployConfig.from_dict(data)
