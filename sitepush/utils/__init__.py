"""Utility modules for sitepush.

Sub-packages:
- aws/ — boto3 session and S3 client creation
- display/ — console banners and change-set summaries
"""

from .logger import get_logger, setup_logging
from .fingerprint import fingerprint, fingerprint_file
from .key_mapper import map_key
from .cache_control import CacheControlPolicy, build_cache_policy

__all__ = [
    'get_logger',
    'setup_logging',
    'fingerprint',
    'fingerprint_file',
    'map_key',
    'CacheControlPolicy',
    'build_cache_policy',
]
