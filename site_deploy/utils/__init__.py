"""Utility functions for site-deploy"""

from .file_utils import (
    scan_directory,
    to_posix_relative,
    display_path,
    copy_file,
)

from .hash_utils import (
    calculate_content_hash,
    calculate_file_hash,
    calculate_file_hash_async,
)

from .async_utils import (
    run_async,
    gather_bounded,
)

__all__ = [
    # File utilities
    "scan_directory",
    "to_posix_relative",
    "display_path",
    "copy_file",

    # Hash utilities
    "calculate_content_hash",
    "calculate_file_hash",
    "calculate_file_hash_async",

    # Async utilities
    "run_async",
    "gather_bounded",
]
