# site_deploy/models/manifest.py
"""Manifest models"""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Iterator

from ..api.exceptions import ValidationError

# JSON schema of the published files.json payload
MANIFEST_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "target": {"type": "string"},
            "hash": {"type": "string"},
            "cacheControlHeader": {"type": "string"},
        },
        "required": ["target", "hash", "cacheControlHeader"],
    },
}


@dataclass(frozen=True)
class ManifestEntry:
    """Record of one deployed artifact"""
    target_path: str  # Remote key (route for markup)
    content_hash: str  # Hex digest of file content
    cache_policy: str  # Full Cache-Control header line

    def key(self) -> tuple:
        """Triple used for change detection"""
        return (self.target_path, self.content_hash, self.cache_policy)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            'target': self.target_path,
            'hash': self.content_hash,
            'cacheControlHeader': self.cache_policy
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManifestEntry':
        """Create from dictionary"""
        return cls(
            target_path=data['target'],
            content_hash=data['hash'],
            cache_policy=data['cacheControlHeader']
        )


@dataclass
class Manifest:
    """Ordered collection of manifest entries, published as files.json"""
    entries: List[ManifestEntry] = field(default_factory=list)

    def __post_init__(self):
        entries = list(self.entries)
        self.entries = []
        self._targets = set()
        self._keys = set()
        for entry in entries:
            self.add(entry)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.entries)

    def add(self, entry: ManifestEntry) -> None:
        """Append an entry

        Raises:
            ValidationError: If the target path is already present
        """
        if entry.target_path in self._targets:
            raise ValidationError(f"Duplicate target path in manifest: {entry.target_path}")
        self.entries.append(entry)
        self._targets.add(entry.target_path)
        self._keys.add(entry.key())

    def contains(self, target_path: str, content_hash: str, cache_policy: str) -> bool:
        """Check for an entry equal on all three fields"""
        return (target_path, content_hash, cache_policy) in self._keys

    def find(self, target_path: str) -> Optional[ManifestEntry]:
        """Find entry by target path"""
        for entry in self.entries:
            if entry.target_path == target_path:
                return entry
        return None

    @property
    def target_paths(self) -> List[str]:
        """Target paths in manifest order"""
        return [e.target_path for e in self.entries]

    def to_list(self) -> List[Dict[str, str]]:
        """Convert to a JSON-serializable list"""
        return [e.to_dict() for e in self.entries]

    def to_json(self) -> str:
        """Serialize to the published JSON form"""
        return json.dumps(self.to_list())

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> 'Manifest':
        """Create from a decoded JSON array"""
        return cls(entries=[ManifestEntry.from_dict(item) for item in data])

    @classmethod
    def from_json(cls, text: str) -> 'Manifest':
        """Parse and validate the published JSON form

        Raises:
            ValidationError: If the payload is not a valid manifest
        """
        import jsonschema

        try:
            data = json.loads(text)
        except ValueError as e:
            raise ValidationError(f"Manifest is not valid JSON: {e}")

        try:
            jsonschema.validate(data, MANIFEST_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ValidationError(f"Manifest schema validation failed: {e.message}")

        return cls.from_list(data)

    @classmethod
    def empty(cls) -> 'Manifest':
        """Manifest with no entries"""
        return cls()
