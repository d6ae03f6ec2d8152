"""
Synchronization services: manifests, diffing, and change-set application.
"""
from .differ import diff
from .executor import SyncExecutor
from .manifest import build_local_manifest, build_remote_manifest

__all__ = [
    'diff',
    'SyncExecutor',
    'build_local_manifest',
    'build_remote_manifest',
]
