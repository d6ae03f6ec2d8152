"""
Cache-Control header resolution.

A :class:`CacheControlPolicy` holds a default header value and an
ordered table of override rules. Rule patterns are shell-style globs
(see :mod:`fnmatch`) tested against a file's relative path, its
object key and its content type. A pattern starting with ``.`` is an
extension rule, so ``.html`` behaves like ``*.html``.

Example config::

    {
        "cache": 3600,
        "cache_control_rules": {
            ".html": "no-cache",
            "assets/*": "public, max-age=31536000, immutable",
            "image/*": "public, max-age=86400"
        }
    }
"""
from fnmatch import fnmatchcase
from typing import Any, Dict, Optional, Tuple

from ..exceptions import ConfigurationError

NO_CACHE = "no-cache, no-store, must-revalidate"

_WILDCARDS = "*?[]"


def _specificity(pattern: str) -> int:
    """Number of literal characters in *pattern*."""
    return sum(1 for c in pattern if c not in _WILDCARDS)


def _as_glob(pattern: str) -> str:
    if pattern.startswith('.') and not any(c in _WILDCARDS for c in pattern):
        return '*' + pattern
    return pattern


class CacheControlPolicy:
    """Declarative cache-control policy.

    Args:
        default: Header value used when no rule matches, or ``None`` to
            send no Cache-Control header
        rules: Mapping of pattern to header value, in priority order for
            equally specific patterns
    """

    def __init__(self, default: Optional[str] = None,
                 rules: Optional[Dict[str, str]] = None):
        self.default = default
        self.rules = dict(rules or {})

    def __repr__(self):
        return f"CacheControlPolicy(default={self.default!r}, rules={self.rules!r})"

    def __eq__(self, other):
        if not isinstance(other, CacheControlPolicy):
            return NotImplemented
        return self.default == other.default and self.rules == other.rules

    def resolve(self, relative_path: str, target_key: Optional[str] = None,
                content_type: Optional[str] = None) -> Optional[str]:
        """Return the header value for one file.

        The matching rule with the most literal characters wins; ties go
        to the rule declared first. Falls back to :attr:`default`.
        """
        subjects = [s for s in (relative_path, target_key, content_type) if s]
        best: Optional[Tuple[int, int, str]] = None

        for index, (pattern, value) in enumerate(self.rules.items()):
            glob = _as_glob(pattern)
            if not any(fnmatchcase(subject, glob) for subject in subjects):
                continue
            rank = (_specificity(pattern), -index, value)
            if best is None or rank[:2] > best[:2]:
                best = rank

        if best is not None:
            return best[2]
        return self.default


def _default_from_cache(cache: Any) -> Optional[str]:
    if cache is None:
        return None
    if isinstance(cache, bool) or not isinstance(cache, int):
        raise ConfigurationError(f"'cache' must be a whole number of seconds, got {cache!r}")
    if cache < 0:
        raise ConfigurationError(f"'cache' must not be negative, got {cache}")
    if cache == 0:
        return NO_CACHE
    return f"public, max-age={cache}"


def build_cache_policy(cache: Any = None, cache_control: Optional[str] = None,
                       rules: Optional[Dict[str, Any]] = None) -> CacheControlPolicy:
    """Build a policy from the ``cache``/``cache_control`` config keys.

    ``cache_control`` is used verbatim when set; otherwise ``cache``
    seconds become ``public, max-age=<n>`` (``0`` disables caching).

    Raises:
        ConfigurationError: On invalid values.
    """
    if cache_control is not None and not isinstance(cache_control, str):
        raise ConfigurationError(f"'cache_control' must be a string, got {cache_control!r}")

    default = cache_control if cache_control else _default_from_cache(cache)

    if rules is None:
        rules = {}
    if not isinstance(rules, dict):
        raise ConfigurationError("'cache_control_rules' must be an object of pattern to value")

    for pattern, value in rules.items():
        if not isinstance(pattern, str) or not pattern:
            raise ConfigurationError(f"Invalid cache-control rule pattern: {pattern!r}")
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"Cache-control rule '{pattern}' must map to a non-empty string")

    return CacheControlPolicy(default=default, rules=rules)
