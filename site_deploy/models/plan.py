"""Diff and deploy plan models"""

from dataclasses import dataclass, field
from typing import Dict, List, Any

from .file_record import FileRecord
from .manifest import Manifest


@dataclass
class DiffResult:
    """Outcome of comparing local files against the remote manifest"""
    new_manifest: Manifest
    changed_files: List[FileRecord] = field(default_factory=list)


@dataclass
class DeployPlan:
    """Ordered upload sequence for one run"""
    files: List[FileRecord]
    new_manifest: Manifest
    remote_manifest: Manifest = field(default_factory=Manifest)
    total_files: int = 0

    @property
    def has_changes(self) -> bool:
        return len(self.files) > 0

    @property
    def step_count(self) -> int:
        """Uploads plus the final manifest publication"""
        return len(self.files) + 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'total_files': self.total_files,
            'changed_files': [f.to_dict() for f in self.files],
            'remote_entries': len(self.remote_manifest),
            'new_entries': len(self.new_manifest)
        }


@dataclass
class DeployProgress:
    """Upload counter passed through execution"""
    total: int
    completed: int = 0

    def advance(self) -> int:
        """Count one finished step and return the new count"""
        self.completed += 1
        return self.completed
