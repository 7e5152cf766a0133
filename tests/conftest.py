"""Shared pytest fixtures for site-deploy tests."""

from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import httpx
import pytest

from site_deploy.models import DeployConfig, TargetConfig
from site_deploy.storage.base import StorageBackend


SITE_FILES = {
    "index.html": b"<html>home</html>",
    "404.html": b"<html>not found</html>",
    "about/team.html": b"<html>team</html>",
    "assets/app.abc123.js": b"console.log('app');",
    "assets/style.css": b"body { margin: 0; }",
    "img/logo.png": b"\x89PNG fake",
    "robots.txt": b"User-agent: *",
    ".well-known/secret": b"hidden",
}


def write_tree(root: Path, files: Dict[str, bytes]) -> Path:
    """Create files under root from a relative path -> content mapping."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    return root


@pytest.fixture
def site_tree(tmp_path: Path) -> Path:
    """Provide a small built site."""
    return write_tree(tmp_path / "public", SITE_FILES)


class FakeStorage(StorageBackend):
    """In-memory storage recording every upload."""

    scheme = "fake"

    def __init__(self, fail_on: Optional[Set[str]] = None, fail_manifest: bool = False):
        super().__init__({"bucket": "test-bucket"})
        self.fail_on = fail_on or set()
        self.fail_manifest = fail_manifest
        self.uploads: List[Tuple[str, Optional[str], Optional[str]]] = []
        self.objects: Dict[str, bytes] = {}
        self.initialize_calls = 0
        self.close_calls = 0

    async def _do_initialize(self) -> None:
        self.initialize_calls += 1

    async def _do_close(self) -> None:
        self.close_calls += 1

    async def upload(self, local_path, remote_path, content_type=None, cache_control=None) -> bool:
        if remote_path in self.fail_on:
            return False
        if remote_path == "files.json" and self.fail_manifest:
            return False
        self.uploads.append((remote_path, content_type, cache_control))
        self.objects[remote_path] = Path(local_path).read_bytes()
        return True

    @property
    def uploaded_paths(self) -> List[str]:
        return [path for path, _, _ in self.uploads]


@pytest.fixture
def fake_storage() -> FakeStorage:
    """Provide a storage backend that keeps uploads in memory."""
    return FakeStorage()


def manifest_transport(storage: FakeStorage) -> httpx.MockTransport:
    """Serve files.json from whatever the fake storage last received."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/files.json" and "files.json" in storage.objects:
            return httpx.Response(200, content=storage.objects["files.json"])
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def deploy_config(site_tree: Path, tmp_path: Path) -> DeployConfig:
    """Provide a configuration deploying site_tree to a local directory."""
    return DeployConfig(
        base_url="https://www.example.com/",
        source_dir=str(site_tree),
        target=TargetConfig(type="filesystem", path=str(tmp_path / "bucket"))
    )
