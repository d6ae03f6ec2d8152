"""
Local path to S3 key mapping.
"""

INDEX_DOCUMENT = "index.html"
_INDEX_SUFFIX = "/" + INDEX_DOCUMENT


def normalize_path(relative_path: str) -> str:
    """Convert a relative path to forward slashes without a leading slash."""
    return relative_path.replace('\\', '/').lstrip('/')


def map_key(relative_path: str, trailing_slashes: bool) -> str:
    """Map a path relative to the upload directory to its object key.

    With trailing slashes disabled, ``<dir>/index.html`` is stored under
    ``<dir>`` so the page is served at ``/<dir>`` without a trailing
    slash. The root ``index.html`` is never collapsed.

    Args:
        relative_path: Path relative to the upload directory
        trailing_slashes: Whether the site uses trailing-slash URLs

    Returns:
        Object key

    Example:
        >>> map_key("blog/index.html", False)
        'blog'
        >>> map_key("blog/index.html", True)
        'blog/index.html'
    """
    path = normalize_path(relative_path)

    if trailing_slashes or path == INDEX_DOCUMENT:
        return path

    if path.endswith(_INDEX_SUFFIX):
        return path[:-len(_INDEX_SUFFIX)]

    return path
