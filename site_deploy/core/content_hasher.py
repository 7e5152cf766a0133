"""Content digest calculation for local files"""

import hashlib
from pathlib import Path

from ..api.exceptions import ConfigError, HashError
from ..constants import DEFAULT_HASH_ALGORITHM, DEFAULT_CHUNK_SIZE
from ..utils.hash_utils import (
    calculate_content_hash,
    calculate_file_hash,
    calculate_file_hash_async,
)


class ContentHasher:
    """Computes a stable digest of file contents

    The digest depends on the bytes only; file name, location and metadata
    never enter it. Files are streamed in ``chunk_size`` pieces.
    """

    def __init__(self,
                 algorithm: str = DEFAULT_HASH_ALGORITHM,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        """Initialize content hasher

        Args:
            algorithm: Name of a hashlib algorithm
            chunk_size: Read chunk size in bytes

        Raises:
            ConfigError: If the algorithm is not available
        """
        try:
            hashlib.new(algorithm)
        except ValueError:
            raise ConfigError(f"Unsupported hash algorithm: {algorithm}")

        if chunk_size <= 0:
            raise ConfigError("Hash chunk size must be positive")

        self.algorithm = algorithm
        self.chunk_size = chunk_size

    def hash_bytes(self, data: bytes) -> str:
        """Digest of an in-memory buffer"""
        return calculate_content_hash(data, self.algorithm)

    def hash_file(self, file_path: Path) -> str:
        """Digest of a file's contents

        Raises:
            HashError: If the file cannot be read
        """
        try:
            return calculate_file_hash(file_path, self.algorithm, self.chunk_size)
        except OSError as e:
            raise HashError(str(file_path), e.strerror or str(e)) from e

    async def hash_file_async(self, file_path: Path) -> str:
        """Digest of a file's contents, read without blocking the loop

        Raises:
            HashError: If the file cannot be read
        """
        try:
            return await calculate_file_hash_async(file_path, self.algorithm, self.chunk_size)
        except OSError as e:
            raise HashError(str(file_path), e.strerror or str(e)) from e
