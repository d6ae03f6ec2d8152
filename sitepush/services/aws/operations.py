"""
Low-level S3 primitive operations.

Provides the thin wrapper every sync step goes through: paginated
listing, object upload and object deletion. botocore failures are
converted to :class:`~sitepush.exceptions.RemoteError` carrying the
key that was being processed.
"""
from typing import Dict, Iterator, List, Optional, Tuple

from botocore.exceptions import BotoCoreError, ClientError

from ...exceptions import RemoteError
from ...models.context import PUBLIC_READ
from ...utils.aws.aws_utils import create_s3_client
from ...utils.logger import get_logger

log = get_logger(__name__)

LIST_PAGE_SIZE = 1000

_REMOTE_ERRORS = (BotoCoreError, ClientError)


class S3Operations:
    """Primitive S3 operations against a single bucket.

    All higher-level sync functionality builds on top of these
    primitives. Nothing here retries; retry policy belongs to the
    botocore client configuration.

    Args:
        bucket_name: S3 bucket name
        s3_client: boto3 S3 client (or an object with the same methods)
    """

    def __init__(self, bucket_name, s3_client):
        self.bucket_name = bucket_name
        self.s3_client = s3_client

    @classmethod
    def from_profile(cls, bucket_name, profile_name=None, region=None):
        """Build operations backed by a client from a named AWS profile.

        Args:
            bucket_name: S3 bucket name
            profile_name: AWS CLI profile name, ``None`` for the default chain
            region: AWS region
        """
        return cls(bucket_name, create_s3_client(profile_name, region))

    def iter_pages(self) -> Iterator[Dict]:
        """Yield every ``list_objects_v2`` page for the bucket.

        Raises:
            RemoteError: If any page fails.
        """
        try:
            paginator = self.s3_client.get_paginator('list_objects_v2')
            pages = paginator.paginate(
                Bucket=self.bucket_name,
                PaginationConfig={"PageSize": LIST_PAGE_SIZE},
            )
            for page in pages:
                yield page
        except _REMOTE_ERRORS as e:
            raise RemoteError("list", cause=e) from e

    def list_objects(self) -> List[Tuple[str, str]]:
        """List ``(key, etag)`` for every object in the bucket.

        Returns:
            Flattened list across all pages
        """
        objects = []
        page_count = 0

        for page in self.iter_pages():
            page_count += 1
            for obj in page.get('Contents', []) or []:
                objects.append((obj['Key'], obj.get('ETag', '')))

        log.debug("Listed %d object(s) in %d page(s) from %s",
                  len(objects), page_count, self.bucket_name)
        return objects

    def put_object(self, key: str, body: bytes, content_type: str,
                   cache_control: Optional[str] = None, acl: str = PUBLIC_READ):
        """Upload *body* under *key*.

        Args:
            key: Object key
            body: Object bytes
            content_type: MIME type sent as ``Content-Type``
            cache_control: ``Cache-Control`` value, omitted when ``None``
            acl: Canned ACL

        Raises:
            RemoteError: If the upload fails.
        """
        params = {
            "Bucket": self.bucket_name,
            "Key": key,
            "Body": body,
            "ACL": acl,
            "ContentType": content_type,
        }
        if cache_control:
            params["CacheControl"] = cache_control

        try:
            self.s3_client.put_object(**params)
        except _REMOTE_ERRORS as e:
            raise RemoteError("put", key=key, cause=e) from e

    def delete_object(self, key: str):
        """Delete *key* from the bucket.

        Raises:
            RemoteError: If the deletion fails.
        """
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)
        except _REMOTE_ERRORS as e:
            raise RemoteError("delete", key=key, cause=e) from e
