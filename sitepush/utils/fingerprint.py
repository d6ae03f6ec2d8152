"""
Content fingerprints comparable with S3 ETags.

S3 reports the ETag of a single-part upload as the hex MD5 of the
body wrapped in double quotes, so fingerprints use the same format
and can be compared with the listing directly.
"""
import hashlib

CHUNK_SIZE = 8 * 1024 * 1024


def fingerprint(data: bytes) -> str:
    """Return the quoted MD5 hex digest of *data*.

    Example:
        >>> fingerprint(b"")
        '"d41d8cd98f00b204e9800998ecf8427e"'
    """
    return f'"{hashlib.md5(data).hexdigest()}"'


def fingerprint_file(path: str, chunk_size: int = CHUNK_SIZE) -> str:
    """Fingerprint a file without loading it into memory at once.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    md5 = hashlib.md5()
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            md5.update(chunk)
    return f'"{md5.hexdigest()}"'
