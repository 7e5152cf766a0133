"""Hash calculation utilities"""

import hashlib
from pathlib import Path

import aiofiles

from ..constants import DEFAULT_HASH_ALGORITHM, DEFAULT_CHUNK_SIZE


def calculate_content_hash(content: bytes, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """
    Calculate hash of content bytes

    Args:
        content: Content bytes
        algorithm: Hash algorithm

    Returns:
        Hex digest string
    """
    hash_func = hashlib.new(algorithm)
    hash_func.update(content)
    return hash_func.hexdigest()


def calculate_file_hash(file_path: Path,
                        algorithm: str = DEFAULT_HASH_ALGORITHM,
                        chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Calculate file hash, streaming the file in chunks

    Args:
        file_path: Path to file
        algorithm: Hash algorithm
        chunk_size: Read chunk size

    Returns:
        Hex digest string
    """
    hash_func = hashlib.new(algorithm)

    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hash_func.update(chunk)

    return hash_func.hexdigest()


async def calculate_file_hash_async(file_path: Path,
                                    algorithm: str = DEFAULT_HASH_ALGORITHM,
                                    chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Calculate file hash asynchronously

    Args:
        file_path: Path to file
        algorithm: Hash algorithm
        chunk_size: Read chunk size

    Returns:
        Hex digest string
    """
    hash_func = hashlib.new(algorithm)

    async with aiofiles.open(file_path, 'rb') as f:
        while True:
            chunk = await f.read(chunk_size)
            if not chunk:
                break
            hash_func.update(chunk)

    return hash_func.hexdigest()
