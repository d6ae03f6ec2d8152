"""
AWS S3 website synchronization package.

- :mod:`operations`  — primitive S3 list/put/delete helpers
- :mod:`sync_engine` — plan and apply a website deploy
"""
from .sync_engine import WebsiteSyncService
from .operations import S3Operations

__all__ = [
    'WebsiteSyncService',
    'S3Operations',
]
