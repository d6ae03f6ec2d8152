"""
Configuration loader for the site's JSON config file
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from colorama import Fore, Style

from ..exceptions import ConfigurationError
from ..models.context import SyncContext
from .cache_control import build_cache_policy
from .logger import get_logger

log = get_logger(__name__)

DEFAULT_CONFIG_FILENAME = "sitepush.json"

# Default configuration with placeholder values.
# index_key, error_key, build_command, redirects and routing_rules are
# accepted for compatibility but the deploy never acts on them.
DEFAULT_CONFIG: Dict[str, Any] = {
    "domain": "",
    "upload_directory": "build",
    "trailing_slashes": False,
    "cache": None,
    "cache_control": None,
    "cache_control_rules": {},
    "aws_profile": "",
    "aws_region": "",
    "concurrency": 1,
    "index_key": "index.html",
    "error_key": "404.html",
    "build_command": "",
    "redirects": [],
    "routing_rules": [],
}


class ConfigLoader:
    """Handles loading, validating and saving the config file."""

    @staticmethod
    def get_config_path(path: Optional[str] = None) -> str:
        """
        Resolve the config file path.

        Args:
            path: Explicit path, or None for ``sitepush.json`` in the
                working directory

        Returns:
            Absolute path to the config file
        """
        return str(Path(path or DEFAULT_CONFIG_FILENAME).resolve())

    @staticmethod
    def load(path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load the config file merged over :data:`DEFAULT_CONFIG`.

        Args:
            path: Config file path (see :meth:`get_config_path`)

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or not a JSON object.
        """
        config_path = ConfigLoader.get_config_path(path)

        if not os.path.exists(config_path):
            raise ConfigurationError(f"No configuration file at {config_path}")

        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_path} must contain a JSON object")

        unknown = sorted(set(data) - set(DEFAULT_CONFIG))
        if unknown:
            log.warning("Ignoring unknown configuration key(s): %s", ", ".join(unknown))

        config = dict(DEFAULT_CONFIG)
        config.update(data)
        return config

    @staticmethod
    def build_sync_context(config: Dict[str, Any], base_dir: Optional[str] = None,
                           concurrency: Optional[int] = None) -> SyncContext:
        """
        Validate *config* and produce the run's :class:`SyncContext`.

        Args:
            config: Loaded configuration
            base_dir: Directory a relative ``upload_directory`` is resolved
                against (the config file's directory)
            concurrency: Overrides the ``concurrency`` key when given

        Raises:
            ConfigurationError: On missing or invalid values.
        """
        bucket = config.get("domain") or ""
        if not isinstance(bucket, str):
            raise ConfigurationError(f"'domain' must be a bucket name string, got {bucket!r}")
        bucket = bucket.strip()
        if not bucket:
            raise ConfigurationError("'domain' (the bucket name) is not configured")

        upload_directory = config.get("upload_directory") or ""
        if not isinstance(upload_directory, str) or not upload_directory.strip():
            raise ConfigurationError("'upload_directory' is not configured")
        if base_dir and not os.path.isabs(upload_directory):
            upload_directory = os.path.join(base_dir, upload_directory)

        trailing_slashes = config.get("trailing_slashes", False)
        if not isinstance(trailing_slashes, bool):
            raise ConfigurationError("'trailing_slashes' must be true or false")

        workers = concurrency if concurrency is not None else config.get("concurrency", 1)
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ConfigurationError(f"'concurrency' must be a positive integer, got {workers!r}")

        cache_policy = build_cache_policy(
            cache=config.get("cache"),
            cache_control=config.get("cache_control"),
            rules=config.get("cache_control_rules"),
        )

        return SyncContext(
            bucket=bucket,
            upload_directory=upload_directory,
            cache_policy=cache_policy,
            trailing_slashes=trailing_slashes,
            concurrency=workers,
        )


def handle_config_update(config_json_string, path=None):
    """Handle config update command.

    Args:
        config_json_string: JSON string with config updates
        path: Config file path; created with defaults if missing

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config_updates = json.loads(config_json_string)
    except json.JSONDecodeError as e:
        print(f"{Fore.RED}[ERROR] Invalid JSON: {e}{Style.RESET_ALL}")
        return 1

    if not isinstance(config_updates, dict):
        print(f"{Fore.RED}[ERROR] Config update must be a JSON object (dictionary){Style.RESET_ALL}")
        return 1

    invalid_keys = [key for key in config_updates if key not in DEFAULT_CONFIG]
    if invalid_keys:
        print(f"{Fore.RED}[ERROR] Invalid configuration key(s): {', '.join(invalid_keys)}{Style.RESET_ALL}")
        print(f"\n{Fore.YELLOW}Valid keys:{Style.RESET_ALL}")
        for key in sorted(DEFAULT_CONFIG):
            print(f"  • {key}")
        return 1

    config_path = ConfigLoader.get_config_path(path)
    current_config = dict(DEFAULT_CONFIG)

    try:
        if os.path.exists(config_path):
            current_config = ConfigLoader.load(config_path)

        current_config.update(config_updates)

        with open(config_path, 'w') as f:
            json.dump(current_config, f, indent=2)
    except (ConfigurationError, OSError) as e:
        print(f"{Fore.RED}[ERROR] Failed to update configuration: {e}{Style.RESET_ALL}")
        return 1

    print(f"\n{Fore.GREEN}[SUCCESS] Configuration updated successfully{Style.RESET_ALL}")
    print(f"\n{Fore.CYAN}Updated values:{Style.RESET_ALL}")
    for key, value in config_updates.items():
        print(f"  {key}: {value}")

    print(f"\n{Fore.CYAN}Config file: {config_path}{Style.RESET_ALL}\n")
    return 0
