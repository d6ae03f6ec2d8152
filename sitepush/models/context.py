"""
Read-only settings for one sync run.
"""
from dataclasses import dataclass, field

from ..utils.cache_control import CacheControlPolicy

PUBLIC_READ = "public-read"


@dataclass(frozen=True)
class SyncContext:
    """Settings shared by every operation of a run.

    Attributes:
        bucket: Target bucket name
        upload_directory: Local build output root
        cache_policy: Resolved cache-control policy
        trailing_slashes: Whether ``dir/index.html`` keeps its filename
        acl: Canned ACL applied to uploaded objects
        concurrency: Maximum simultaneous put/delete calls
    """

    bucket: str
    upload_directory: str
    cache_policy: CacheControlPolicy = field(default_factory=CacheControlPolicy)
    trailing_slashes: bool = False
    acl: str = PUBLIC_READ
    concurrency: int = 1

    def __post_init__(self):
        if self.concurrency < 1:
            raise ValueError("concurrency must be at least 1")
