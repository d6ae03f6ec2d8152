"""
Three-way classification of local and remote manifests.
"""
from typing import Dict, List

from ..exceptions import ConfigurationError
from ..models.entries import ChangeSet, LocalEntry, RemoteEntry


def diff(local: List[LocalEntry], remote: List[RemoteEntry]) -> ChangeSet:
    """Compare manifests by key and content hash.

    - local key missing remotely -> ``add``
    - same key, different hash   -> ``update``
    - same key, same hash        -> omitted
    - remote key missing locally -> ``remove``

    Hashes are compared for equality only; ETags are never parsed.

    Raises:
        ConfigurationError: If two local entries share a key.
    """
    local_map: Dict[str, LocalEntry] = {}
    for entry in local:
        if entry.target_key in local_map:
            raise ConfigurationError(
                f"'{local_map[entry.target_key].relative_path}' and "
                f"'{entry.relative_path}' both map to key '{entry.target_key}'"
            )
        local_map[entry.target_key] = entry

    remote_map = {entry.key: entry for entry in remote}

    changes = ChangeSet()

    for key in sorted(local_map):
        entry = local_map[key]
        existing = remote_map.get(key)
        if existing is None:
            changes.add.append(entry)
        elif existing.content_hash != entry.content_hash:
            changes.update.append(entry)

    for key in sorted(remote_map):
        if key not in local_map:
            changes.remove.append(remote_map[key])

    return changes
