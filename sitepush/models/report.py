"""
Outcome of applying a change set.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SyncReport:
    """What a run did, and where it stopped if it failed.

    Attributes:
        added: Keys uploaded as new objects
        updated: Keys overwritten with new content
        removed: Keys deleted from the bucket
        failed_key: Key whose operation raised, if any
        error: The first error raised, if any
        not_attempted: Keys never issued because the run aborted
        last_completed: Last key whose operation finished
    """

    added: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    failed_key: Optional[str] = None
    error: Optional[BaseException] = None
    not_attempted: List[str] = field(default_factory=list)
    last_completed: Optional[str] = None
    dry_run: bool = False

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def completed(self) -> int:
        return len(self.added) + len(self.updated) + len(self.removed)

    def to_dict(self):
        """Serialize to dictionary"""
        return {
            "added": list(self.added),
            "updated": list(self.updated),
            "removed": list(self.removed),
            "failed_key": self.failed_key,
            "error": str(self.error) if self.error else None,
            "not_attempted": list(self.not_attempted),
            "last_completed": self.last_completed,
            "dry_run": self.dry_run,
        }
