"""
Manifest entries and the change set computed from them.
"""
from dataclasses import dataclass, field
from typing import List

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class LocalEntry:
    """A file in the upload directory.

    Attributes:
        relative_path: Path relative to the upload directory, ``/``-separated
        target_key: Object key the file is stored under
        content_hash: Quoted MD5 of the file bytes
    """

    relative_path: str
    target_key: str
    content_hash: str


@dataclass(frozen=True)
class RemoteEntry:
    """An object in the bucket listing; ``content_hash`` is the raw ETag."""

    key: str
    content_hash: str


@dataclass
class ChangeSet:
    """Objects to add, update and remove in one run."""

    add: List[LocalEntry] = field(default_factory=list)
    update: List[LocalEntry] = field(default_factory=list)
    remove: List[RemoteEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.add or self.update or self.remove)

    @property
    def total(self) -> int:
        return len(self.add) + len(self.update) + len(self.remove)

    def assert_exclusive(self):
        """Ensure no key is acted on in more than one category.

        Raises:
            ConfigurationError: If a key appears twice.
        """
        seen = set()
        keys = ([e.target_key for e in self.add]
                + [e.target_key for e in self.update]
                + [e.key for e in self.remove])
        for key in keys:
            if key in seen:
                raise ConfigurationError(f"Key '{key}' appears more than once in the change set")
            seen.add(key)

    def to_dict(self):
        """Serialize to dictionary"""
        return {
            "add": [{"path": e.relative_path, "key": e.target_key} for e in self.add],
            "update": [{"path": e.relative_path, "key": e.target_key} for e in self.update],
            "remove": [{"key": e.key} for e in self.remove],
        }
