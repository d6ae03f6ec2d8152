"""
Error types raised by the synchronization engine.

Every error aborts the current run. Nothing here is retried or
swallowed; the CLI reports the error together with the key that was
in flight when it happened.
"""
from typing import Optional


class SitePushError(Exception):
    """Base class for all sitepush errors."""

    # Set to the run's SyncReport when raised from an apply
    report = None


class ConfigurationError(SitePushError):
    """Invalid configuration, including two local files mapping to one key."""


class LocalReadError(SitePushError):
    """A local file could not be read.

    Args:
        path: Path of the unreadable file or directory
        cause: Underlying ``OSError``
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot read local file '{path}'{detail}")


class RemoteError(SitePushError):
    """A call against the remote object store failed.

    Args:
        operation: ``list``, ``put`` or ``delete``
        key: Object key being processed, ``None`` for listing failures
        cause: Underlying botocore exception
    """

    def __init__(self, operation: str, key: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.operation = operation
        self.key = key
        self.cause = cause
        target = f" for key '{key}'" if key is not None else ""
        detail = f": {cause}" if cause else ""
        super().__init__(f"Remote {operation} failed{target}{detail}")
