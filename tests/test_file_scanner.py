"""Tests for local file discovery."""

from pathlib import Path

import pytest

from site_deploy.api.exceptions import SourceNotFoundError
from site_deploy.core import FileScanner


def relative_names(files, root: Path):
    return [f.relative_to(root).as_posix() for f in files]


def test_scan_lists_regular_files_sorted(site_tree: Path) -> None:
    """Test every visible file is found in relative path order."""
    files = FileScanner().scan(site_tree)

    assert relative_names(files, site_tree) == [
        "404.html",
        "about/team.html",
        "assets/app.abc123.js",
        "assets/style.css",
        "img/logo.png",
        "index.html",
        "robots.txt",
    ]


def test_scan_can_include_hidden(site_tree: Path) -> None:
    files = FileScanner(include_hidden=True).scan(site_tree)

    assert ".well-known/secret" in relative_names(files, site_tree)


def test_scan_applies_exclude_patterns(site_tree: Path) -> None:
    """Test patterns match file names and full relative paths."""
    (site_tree / "notes.tmp").write_text("scratch")

    files = FileScanner(exclude_patterns=["*.tmp", "assets/*"]).scan(site_tree)
    names = relative_names(files, site_tree)

    assert "notes.tmp" not in names
    assert not any(name.startswith("assets/") for name in names)
    assert "index.html" in names


def test_scan_skips_stale_root_manifest(site_tree: Path) -> None:
    """Test a files.json at the root is never deployed as an asset."""
    (site_tree / "files.json").write_text("[]")
    (site_tree / "data").mkdir()
    (site_tree / "data" / "files.json").write_text("{}")

    names = relative_names(FileScanner().scan(site_tree), site_tree)

    assert "files.json" not in names
    assert "data/files.json" in names


def test_scan_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError):
        FileScanner().scan(tmp_path / "missing")
