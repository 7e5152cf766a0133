"""File record model"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from .manifest import ManifestEntry


@dataclass(frozen=True)
class FileRecord:
    """A local file discovered for one deploy run"""
    local_path: Path
    content_hash: str
    target_path: str
    cache_policy: str
    is_markup: bool
    order_key: int

    def to_manifest_entry(self) -> ManifestEntry:
        """Minimal record persisted for the next run"""
        return ManifestEntry(
            target_path=self.target_path,
            content_hash=self.content_hash,
            cache_policy=self.cache_policy
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'local_path': str(self.local_path),
            'content_hash': self.content_hash,
            'target_path': self.target_path,
            'cache_policy': self.cache_policy,
            'is_markup': self.is_markup,
            'order_key': self.order_key
        }
