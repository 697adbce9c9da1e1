"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Any


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    CANCELED = "canceled"
    IN_PROGRESS = "in_progress"


class SyncOutcome(Enum):
    """Outcome of synchronizing a single file"""
    WRITTEN = "written"
    DELETED = "deleted"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass
class ErrorDetail:
    """An error scoped to a settings attribute"""

    attribute: str
    message: str
    repository: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "attribute": self.attribute,
            "message": self.message,
        }
        if self.repository:
            data["repository"] = self.repository
        return data

    def __str__(self) -> str:
        if self.repository:
            return f"[{self.repository}] {self.message}"
        return self.message


@dataclass
class ValidationResult:
    """Attribute-scoped validation errors"""

    errors: List[ErrorDetail] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if no errors were recorded"""
        return not self.errors

    def has_errors(self, attribute: Optional[str] = None) -> bool:
        """Check for errors, optionally for a single attribute"""
        if attribute is None:
            return bool(self.errors)
        return any(e.attribute == attribute for e in self.errors)

    def add_error(self, attribute: str, message: str, repository: Optional[str] = None) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(attribute=attribute, message=message, repository=repository))

    def errors_for(self, attribute: str) -> List[ErrorDetail]:
        """Get errors recorded for an attribute"""
        return [e for e in self.errors if e.attribute == attribute]

    def get_errors(self) -> Dict[str, List[str]]:
        """Get error messages grouped by attribute"""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.attribute, []).append(str(error))
        return grouped

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another result into this one"""
        self.errors.extend(other.errors)

    def clear(self) -> None:
        """Remove all errors"""
        self.errors.clear()


@dataclass
class SiteDeployResult:
    """Result of deploying a single site"""

    site_uid: str
    repository_path: str
    status: OperationStatus = OperationStatus.IN_PROGRESS
    files: Dict[SyncOutcome, int] = field(default_factory=lambda: {o: 0 for o in SyncOutcome})

    def record(self, outcome: SyncOutcome) -> None:
        """Count a file synchronization outcome"""
        self.files[outcome] += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "site_uid": self.site_uid,
            "repository_path": self.repository_path,
            "status": self.status.value,
            "files": {outcome.value: count for outcome, count in self.files.items()},
        }


@dataclass
class DeployResult:
    """Result of a deployment run"""

    sites: List[SiteDeployResult] = field(default_factory=list)
    skipped_site_ids: List[int] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def duration(self) -> Optional[float]:
        """Get run duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def count(self, outcome: SyncOutcome) -> int:
        """Count files with the given outcome across all sites"""
        return sum(site.files[outcome] for site in self.sites)

    def sites_with_status(self, status: OperationStatus) -> List[SiteDeployResult]:
        """Get site results with the given status"""
        return [site for site in self.sites if site.status == status]

    def complete(self) -> None:
        """Mark run as complete"""
        self.end_time = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "sites": [site.to_dict() for site in self.sites],
            "skipped_site_ids": self.skipped_site_ids,
            "duration": self.duration,
        }
