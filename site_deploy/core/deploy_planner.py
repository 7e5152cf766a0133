"""Upload ordering"""

from pathlib import Path
from typing import List, Union

from ..constants import (
    MARKUP_EXTENSION,
    SCRIPT_STYLE_EXTENSIONS,
    ORDER_KEY_SCRIPT_STYLE,
    ORDER_KEY_ASSET,
    ORDER_KEY_MARKUP,
)
from ..models.file_record import FileRecord


def get_order_key(file_path: Union[str, Path]) -> int:
    """Scripts and styles first, other assets next, pages last"""
    path = str(file_path)

    if path.endswith(SCRIPT_STYLE_EXTENSIONS):
        return ORDER_KEY_SCRIPT_STYLE
    elif path.endswith(MARKUP_EXTENSION):
        return ORDER_KEY_MARKUP
    else:
        return ORDER_KEY_ASSET


class DeployPlanner:
    """Orders changed files into the upload sequence

    Assets referenced by pages go up before the pages that reference them.
    This narrows, but does not close, the window in which a live page points
    at a missing asset.
    """

    def plan(self, changed_files: List[FileRecord]) -> List[FileRecord]:
        """Stable sort by order key; ties keep discovery order"""
        return sorted(changed_files, key=lambda record: record.order_key)
