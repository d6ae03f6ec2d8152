"""Shared fixtures: an in-memory S3 client and local site trees."""
import threading

import pytest
from botocore.exceptions import ClientError

from sitepush.models.context import SyncContext
from sitepush.services.aws.operations import S3Operations
from sitepush.utils.cache_control import CacheControlPolicy
from sitepush.utils.fingerprint import fingerprint

BUCKET = "example.com"


def client_error(code="AccessDenied", operation="PutObject"):
    """Build a botocore ClientError like the ones S3 raises."""
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakePaginator:
    """Mimics the list_objects_v2 paginator of a boto3 S3 client."""

    def __init__(self, client):
        self.client = client

    def paginate(self, Bucket, PaginationConfig=None):
        client = self.client
        keys = sorted(client.objects)
        size = client.page_size
        starts = range(0, len(keys), size) if keys else [0]

        for page_number, start in enumerate(starts, 1):
            if client.fail_list_on_page == page_number:
                raise client_error("InternalError", "ListObjectsV2")
            chunk = keys[start:start + size]
            page = {"KeyCount": len(chunk)}
            if chunk:
                page["Contents"] = [
                    {"Key": key, "ETag": client.objects[key]["ETag"]} for key in chunk
                ]
            yield page


class FakeS3Client:
    """In-memory stand-in for a boto3 S3 client.

    Records every put/delete call in order and can be told to fail or
    block on specific keys.
    """

    def __init__(self, page_size=1000):
        self.objects = {}
        self.calls = []
        self.page_size = page_size
        self.fail_list_on_page = None
        self.fail_keys = set()
        self.slow_keys = {}
        self._lock = threading.Lock()

    def seed(self, key, body=b"", etag=None):
        self.objects[key] = {
            "Body": body,
            "ETag": etag if etag is not None else fingerprint(body),
        }

    def get_paginator(self, name):
        assert name == "list_objects_v2"
        return FakePaginator(self)

    def _before(self, operation, key):
        with self._lock:
            self.calls.append((operation, key))
        if key in self.slow_keys:
            self.slow_keys[key].wait(timeout=1.0)
        if key in self.fail_keys:
            raise client_error("AccessDenied", operation)

    def put_object(self, Bucket, Key, Body, ACL=None, ContentType=None, CacheControl=None):
        self._before("put", Key)
        with self._lock:
            self.objects[Key] = {
                "Body": Body,
                "ETag": fingerprint(Body),
                "ACL": ACL,
                "ContentType": ContentType,
                "CacheControl": CacheControl,
            }

    def delete_object(self, Bucket, Key):
        self._before("delete", Key)
        with self._lock:
            self.objects.pop(Key, None)


@pytest.fixture
def s3_client():
    return FakeS3Client()


@pytest.fixture
def operations(s3_client):
    return S3Operations(BUCKET, s3_client)


@pytest.fixture
def make_site(tmp_path):
    """Write ``{relative_path: bytes}`` under a fresh upload directory."""

    def _make(files):
        root = tmp_path / "build"
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        return str(root)

    return _make


@pytest.fixture
def make_context():
    def _make(upload_directory, **kwargs):
        kwargs.setdefault("cache_policy", CacheControlPolicy())
        return SyncContext(bucket=BUCKET, upload_directory=upload_directory, **kwargs)

    return _make
