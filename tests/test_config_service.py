"""Tests for configuration loading."""

from pathlib import Path

import pytest

from site_deploy.api.exceptions import ConfigError
from site_deploy.constants import StorageType
from site_deploy.services import ConfigService

ENV_NAMES = [
    "SITE_DEPLOY_CONFIG",
    "SITE_DEPLOY_BASE_URL",
    "SITE_DEPLOY_SOURCE_DIR",
    "SITE_DEPLOY_BUCKET",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_DEFAULT_REGION",
    "BOS_AK",
    "BOS_SK",
    "BOS_ENDPOINT",
]

CONFIG_YAML = """\
base_url: https://www.example.com/
source_dir: ${SITE_ROOT}/public
target:
  type: gcs
  bucket: www.example.com
  prefix: /blog/
cache_control:
  short_max_age: 300
  rules:
    - pattern: "*.woff2"
      header: "Cache-Control: max-age=604800"
exclude:
  - "*.map"
hash_workers: 4
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of configuration tests."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("SITE_ROOT", "/srv/site")
    (tmp_path / ".site-deploy.yaml").write_text(CONFIG_YAML)
    return tmp_path


def test_load_from_project_file(project: Path) -> None:
    """Test the project file is found and environment variables expanded."""
    config = ConfigService(project).load_config()

    assert config.base_url == "https://www.example.com"
    assert config.source_dir == "/srv/site/public"
    assert config.target.storage_type == StorageType.GCS
    assert config.target.bucket == "www.example.com"
    assert config.target.prefix == "blog"
    assert config.cache_control.short_max_age == 300
    assert config.cache_control.rules[0].pattern == "*.woff2"
    assert config.exclude == ["*.map"]
    assert config.hash_workers == 4


def test_environment_overrides_file(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SITE_DEPLOY_BASE_URL", "https://staging.example.com")
    monkeypatch.setenv("SITE_DEPLOY_BUCKET", "staging.example.com")

    config = ConfigService(project).load_config()

    assert config.base_url == "https://staging.example.com"
    assert config.target.bucket == "staging.example.com"


def test_overrides_win_over_environment(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test explicit overrides take precedence over everything else."""
    monkeypatch.setenv("SITE_DEPLOY_SOURCE_DIR", "/from/env")

    config = ConfigService(project).load_config(source_dir="/from/cli", target_type="s3", bucket="cli-bucket")

    assert config.source_dir == "/from/cli"
    assert config.target.storage_type == StorageType.S3
    assert config.target.bucket == "cli-bucket"


def test_config_from_options_only(tmp_path: Path) -> None:
    """Test a complete configuration can come from overrides alone."""
    config = ConfigService(tmp_path).load_config(
        base_url="https://www.example.com",
        source_dir="public",
        bucket="www.example.com"
    )

    assert config.target.storage_type == StorageType.GCS


def test_s3_credentials_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIA")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
    (tmp_path / ".site-deploy.yaml").write_text(
        "base_url: https://a.example.com\nsource_dir: public\n"
        "target:\n  type: s3\n  bucket: a\n  region: us-east-1\n"
    )

    target = ConfigService(tmp_path).load_config().target

    assert target.access_key == "AKIA"
    assert target.secret_key == "secret"
    assert target.region == "us-east-1"


def test_explicit_config_path(tmp_path: Path) -> None:
    path = tmp_path / "deploy.yml"
    path.write_text("base_url: https://a.example.com\nsource_dir: out\ntarget:\n  type: filesystem\n  path: /tmp/out\n")

    config = ConfigService(config_path=path).load_config()

    assert config.target.path == "/tmp/out"


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SITE_DEPLOY_CONFIG", str(tmp_path / "missing.yaml"))

    with pytest.raises(ConfigError):
        ConfigService(tmp_path).load_config()


@pytest.mark.parametrize(
    "content",
    [
        "base_url: [unclosed",
        "- just\n- a list\n",
        "base_url: https://a.example.com\nsource_dir: public\n",
        "base_url: https://a.example.com\nsource_dir: public\ntarget:\n  type: ftp\n  bucket: a\n",
        "base_url: https://a.example.com\nsource_dir: public\ntarget:\n  type: filesystem\n",
        "source_dir: public\ntarget:\n  type: gcs\n  bucket: a\n",
    ],
)
def test_invalid_configuration(tmp_path: Path, content: str) -> None:
    """Test broken or incomplete files raise ConfigError."""
    (tmp_path / ".site-deploy.yaml").write_text(content)

    with pytest.raises(ConfigError):
        ConfigService(tmp_path).load_config()


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigService(config_path=tmp_path / "nope.yaml").load_config()
