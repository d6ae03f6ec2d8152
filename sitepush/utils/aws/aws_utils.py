"""AWS utilities for session and client creation.

Credentials themselves come from the standard boto3 chain (profile,
environment, instance role); this module only decides which profile
and region to use and how the S3 client times out.
"""
from typing import Optional

from botocore.config import Config as BotoConfig

from ..logger import get_logger

log = get_logger(__name__)

CONNECT_TIMEOUT = 5
READ_TIMEOUT = 60
MAX_ATTEMPTS = 3


def _import_boto3():
    """Lazily import boto3, raising a helpful error if not installed."""
    try:
        import boto3
        return boto3
    except ImportError:
        log.error("boto3 is required to deploy but is not installed.")
        log.error("Install it with: pip install boto3")
        raise


def create_boto3_session(profile_name: Optional[str] = None,
                         region_name: Optional[str] = None):
    """Create a boto3 session for the given profile and region.

    Args:
        profile_name: AWS profile name, ``None`` for the default chain
        region_name: Optional AWS region

    Returns:
        boto3.Session object

    Example:
        >>> session = create_boto3_session('website', 'us-east-1')
        >>> s3 = session.client('s3')
    """
    boto3 = _import_boto3()
    kwargs = {}
    if profile_name:
        kwargs["profile_name"] = profile_name
    if region_name:
        kwargs["region_name"] = region_name
    return boto3.Session(**kwargs)


def create_s3_client(profile_name: Optional[str] = None,
                     region_name: Optional[str] = None):
    """Create an S3 client with bounded timeouts.

    Retries are left to botocore's standard retry mode; the sync
    engine itself never retries.
    """
    session = create_boto3_session(profile_name, region_name)
    config = BotoConfig(
        connect_timeout=CONNECT_TIMEOUT,
        read_timeout=READ_TIMEOUT,
        retries={"max_attempts": MAX_ATTEMPTS, "mode": "standard"},
    )
    log.debug("Creating S3 client (profile=%s, region=%s)",
              profile_name or "default", session.region_name or "default")
    return session.client('s3', config=config)
