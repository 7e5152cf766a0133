"""Change detection against the published manifest"""

import logging
from pathlib import Path
from typing import List, Optional

from ..constants import DEFAULT_HASH_WORKERS
from ..models.file_record import FileRecord
from ..models.manifest import Manifest
from ..models.plan import DiffResult
from ..utils.async_utils import gather_bounded, run_async
from .content_hasher import ContentHasher
from .deploy_planner import get_order_key
from .path_mapper import PathMapper, is_markup

logger = logging.getLogger(__name__)


class ManifestDiffer:
    """Computes which local files differ from the remote manifest

    A file is unchanged only when the remote manifest holds an entry with the
    same target path, content hash and cache policy. Remote entries with no
    local file are ignored: deploys add and overwrite, they never prune.
    """

    def __init__(self,
                 path_mapper: Optional[PathMapper] = None,
                 hasher: Optional[ContentHasher] = None,
                 max_workers: int = DEFAULT_HASH_WORKERS):
        """Initialize manifest differ

        Args:
            path_mapper: Target path and cache policy mapper
            hasher: Content hasher
            max_workers: Maximum number of files hashed concurrently
        """
        self.path_mapper = path_mapper or PathMapper()
        self.hasher = hasher or ContentHasher()
        self.max_workers = max_workers

    def build_record(self, source_root: Path, file_path: Path, content_hash: str) -> FileRecord:
        """Derive the record of one local file from its digest"""
        return FileRecord(
            local_path=file_path,
            content_hash=content_hash,
            target_path=self.path_mapper.map_target_path(source_root, file_path),
            cache_policy=self.path_mapper.map_cache_policy(file_path),
            is_markup=is_markup(file_path),
            order_key=get_order_key(file_path)
        )

    async def diff_async(self,
                         remote_manifest: Optional[Manifest],
                         local_files: List[Path],
                         source_root: Path) -> DiffResult:
        """Compare local files against the remote manifest

        Args:
            remote_manifest: Previously published manifest (None for none)
            local_files: Files in discovery order
            source_root: Directory the files were discovered under

        Returns:
            DiffResult with one manifest entry per local file and the
            changed files, both in discovery order

        Raises:
            HashError: If any file cannot be read
        """
        remote_manifest = remote_manifest or Manifest.empty()
        source_root = Path(source_root)

        digests = await gather_bounded(
            local_files,
            self.hasher.hash_file_async,
            max_workers=self.max_workers
        )

        new_manifest = Manifest()
        changed_files = []

        for file_path, content_hash in zip(local_files, digests):
            record = self.build_record(source_root, Path(file_path), content_hash)
            new_manifest.add(record.to_manifest_entry())

            if remote_manifest.contains(record.target_path,
                                        record.content_hash,
                                        record.cache_policy):
                logger.debug(f"Unchanged: {record.target_path}")
                continue

            logger.debug(f"Changed: {record.target_path}")
            changed_files.append(record)

        logger.info(
            f"{len(changed_files)} of {len(local_files)} files changed "
            f"against {len(remote_manifest)} remote entries"
        )
        return DiffResult(new_manifest=new_manifest, changed_files=changed_files)

    def diff(self,
             remote_manifest: Optional[Manifest],
             local_files: List[Path],
             source_root: Path) -> DiffResult:
        """Synchronous wrapper around diff_async"""
        return run_async(self.diff_async(remote_manifest, local_files, source_root))
