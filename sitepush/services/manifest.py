"""
Local and remote manifest construction.

Both manifests are plain lists of entries keyed by object key, so the
differ can compare them without touching the filesystem or network.
"""
import os
from typing import List

from ..exceptions import ConfigurationError, LocalReadError
from ..models.entries import LocalEntry, RemoteEntry
from ..utils.fingerprint import fingerprint_file
from ..utils.key_mapper import map_key, normalize_path
from ..utils.logger import get_logger

log = get_logger(__name__)


def list_local_files(root_dir: str) -> List[str]:
    """List regular files under *root_dir* as ``/``-separated relative paths.

    Symlinks (to files or directories) are skipped, as are directories.

    Raises:
        LocalReadError: If *root_dir* is not a readable directory.
    """
    if not os.path.isdir(root_dir):
        raise LocalReadError(root_dir, FileNotFoundError(f"Not a directory: {root_dir}"))

    def _raise(error):
        raise LocalReadError(getattr(error, 'filename', None) or root_dir, error)

    paths = []
    for root, dirs, files in os.walk(root_dir, onerror=_raise, followlinks=False):
        for filename in files:
            full_path = os.path.join(root, filename)
            if os.path.islink(full_path) or not os.path.isfile(full_path):
                continue
            rel_path = os.path.relpath(full_path, root_dir)
            paths.append(normalize_path(rel_path))

    return sorted(paths)


def ensure_unique_keys(entries: List[LocalEntry]):
    """Reject manifests where two local files map to the same key.

    Raises:
        ConfigurationError: Naming both colliding paths.
    """
    owners = {}
    for entry in entries:
        other = owners.get(entry.target_key)
        if other is not None:
            raise ConfigurationError(
                f"'{other}' and '{entry.relative_path}' both map to key "
                f"'{entry.target_key}'"
            )
        owners[entry.target_key] = entry.relative_path


def build_local_manifest(root_dir: str, trailing_slashes: bool) -> List[LocalEntry]:
    """Fingerprint every file under *root_dir*.

    Args:
        root_dir: Upload directory
        trailing_slashes: Passed to :func:`~sitepush.utils.key_mapper.map_key`

    Returns:
        One :class:`LocalEntry` per regular file, sorted by relative path

    Raises:
        LocalReadError: If a file cannot be read.
        ConfigurationError: If two files map to the same key.
    """
    entries = []

    for rel_path in list_local_files(root_dir):
        full_path = os.path.join(root_dir, rel_path)
        try:
            content_hash = fingerprint_file(full_path)
        except OSError as e:
            raise LocalReadError(full_path, e) from e

        entries.append(LocalEntry(
            relative_path=rel_path,
            target_key=map_key(rel_path, trailing_slashes),
            content_hash=content_hash,
        ))

    ensure_unique_keys(entries)
    log.debug("Local manifest: %d file(s) under %s", len(entries), root_dir)
    return entries


def build_remote_manifest(operations) -> List[RemoteEntry]:
    """List the bucket behind *operations* as a manifest.

    Args:
        operations: :class:`~sitepush.services.aws.operations.S3Operations`

    Raises:
        RemoteError: If any listing page fails.
    """
    entries = [
        RemoteEntry(key=key, content_hash=etag)
        for key, etag in operations.list_objects()
    ]
    log.debug("Remote manifest: %d object(s) in %s", len(entries), operations.bucket_name)
    return entries
