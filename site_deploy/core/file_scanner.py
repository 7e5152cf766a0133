"""Local file discovery"""

import logging
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import SourceNotFoundError
from ..constants import MANIFEST_FILE_NAME
from ..utils.file_utils import scan_directory

logger = logging.getLogger(__name__)


class FileScanner:
    """Discovers the files of a built site"""

    def __init__(self,
                 exclude_patterns: Optional[List[str]] = None,
                 include_hidden: bool = False):
        self.exclude_patterns = list(exclude_patterns or [])
        self.include_hidden = include_hidden

    def scan(self, source_dir: Path) -> List[Path]:
        """List regular files under source_dir in a stable order

        A files.json left at the root is never deployed as a page asset;
        the manifest is always published separately.

        Raises:
            SourceNotFoundError: If source_dir is missing or not a directory
        """
        source_dir = Path(source_dir)
        if not source_dir.is_dir():
            raise SourceNotFoundError(str(source_dir))

        files = scan_directory(
            source_dir,
            exclude_patterns=self.exclude_patterns,
            include_hidden=self.include_hidden
        )

        stale_manifest = source_dir / MANIFEST_FILE_NAME
        files = [f for f in files if f != stale_manifest]

        logger.debug(f"Found {len(files)} files in {source_dir}")
        return files
