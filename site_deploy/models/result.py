"""Deploy run result model"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OperationStatus(Enum):
    """Outcome of a deploy run"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"  # nothing changed, or dry run
    CANCELLED = "cancelled"  # confirmation declined
    IN_PROGRESS = "in_progress"


@dataclass
class ErrorDetail:
    """Error code and message recorded on a failed run"""
    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": self.context}


@dataclass
class DeployResult:
    """Result of a deploy run

    ``uploaded`` lists the target paths written in this run, in upload order.
    On failure it holds what went up before the failing file.
    """

    status: OperationStatus
    message: str = ""
    target: Optional[str] = None
    total_files: int = 0
    changed_files: int = 0
    uploaded: List[str] = field(default_factory=list)
    failed_target: Optional[str] = None
    manifest_published: bool = False
    errors: List[ErrorDetail] = field(default_factory=list)
    start_time: datetime = field(default_factory=_utcnow)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        return self.status == OperationStatus.FAILED

    @property
    def is_cancelled(self) -> bool:
        return self.status == OperationStatus.CANCELLED

    @property
    def duration(self) -> Optional[float]:
        """Run time in seconds, once completed"""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def add_error(self, code: str, message: str, **context) -> None:
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def complete(self, status: OperationStatus) -> None:
        """Record the final status and end time"""
        self.status = status
        self.end_time = _utcnow()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "target": self.target,
            "total_files": self.total_files,
            "changed_files": self.changed_files,
            "uploaded": self.uploaded,
            "failed_target": self.failed_target,
            "manifest_published": self.manifest_published,
            "errors": [e.to_dict() for e in self.errors],
            "duration": self.duration
        }
