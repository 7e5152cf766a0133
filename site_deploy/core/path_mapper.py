"""Remote target path and cache policy derivation"""

from pathlib import Path
from typing import Optional, Union

from ..constants import MARKUP_EXTENSION, SPECIAL_PAGES
from ..utils.file_utils import to_posix_relative
from .cache_policy import CachePolicy, default_cache_policy


def is_markup(file_path: Union[str, Path]) -> bool:
    """Check whether a file is served as an HTML page"""
    return str(file_path).endswith(MARKUP_EXTENSION)


class PathMapper:
    """Maps local files to remote keys and Cache-Control headers

    Pure: no filesystem access, no state beyond the injected policy.
    """

    def __init__(self, cache_policy: Optional[CachePolicy] = None):
        """Initialize path mapper

        Args:
            cache_policy: Callable overriding the default cache policy;
                its result is used verbatim
        """
        self.cache_policy = cache_policy or default_cache_policy

    @staticmethod
    def map_target_path(source_root: Path, file_path: Path) -> str:
        """Remote key for a file under source_root

        Pages become extension-less routes (``about/team.html`` ->
        ``about/team``), except the root index and not-found pages.
        """
        relative = to_posix_relative(Path(file_path), Path(source_root))

        if not is_markup(relative) or relative in SPECIAL_PAGES:
            return relative

        return relative[:-len(MARKUP_EXTENSION)]

    def map_cache_policy(self, file_path: Union[str, Path]) -> str:
        """Cache-Control header line for a file"""
        return self.cache_policy(str(file_path))
