"""
Data models for sitepush
"""

from .entries import LocalEntry, RemoteEntry, ChangeSet
from .context import SyncContext, PUBLIC_READ
from .report import SyncReport

__all__ = ['LocalEntry', 'RemoteEntry', 'ChangeSet', 'SyncContext', 'PUBLIC_READ', 'SyncReport']
