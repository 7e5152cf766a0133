"""Tests for upload ordering."""

from pathlib import Path

import pytest

from site_deploy.core import DeployPlanner, ManifestDiffer, get_order_key

ROOT = Path("/srv/public")


def records(*names):
    differ = ManifestDiffer()
    return [differ.build_record(ROOT, ROOT / name, "hash") for name in names]


@pytest.mark.parametrize(
    "path, key",
    [
        ("app.js", 0),
        ("style.css", 0),
        ("logo.png", 1),
        ("robots.txt", 1),
        ("feed.xml", 1),
        ("page.html", 2),
    ],
)
def test_order_key(path: str, key: int) -> None:
    assert get_order_key(path) == key


def test_scripts_first_pages_last() -> None:
    """Test the plan order puts assets before the pages that use them."""
    plan = DeployPlanner().plan(records("page.html", "app.js", "logo.png"))

    assert [r.target_path for r in plan] == ["app.js", "logo.png", "page"]


def test_sort_is_stable() -> None:
    """Test files sharing an order key keep their discovery order."""
    plan = DeployPlanner().plan(records("b.html", "z.css", "a.html", "y.js", "m.png", "c.png"))

    assert [r.target_path for r in plan] == ["z.css", "y.js", "m.png", "c.png", "b", "a"]


def test_empty_plan() -> None:
    assert DeployPlanner().plan([]) == []
