"""Tests for cache-control policy resolution and configuration."""
import pytest

from sitepush.exceptions import ConfigurationError
from sitepush.utils.cache_control import NO_CACHE, CacheControlPolicy, build_cache_policy


def test_default_applies_when_no_rule_matches():
    policy = CacheControlPolicy(default="public, max-age=60", rules={".css": "immutable"})
    assert policy.resolve("index.html", "index.html", "text/html") == "public, max-age=60"


def test_no_default_means_no_header():
    assert CacheControlPolicy().resolve("index.html") is None


def test_extension_rule_matches_relative_path():
    policy = CacheControlPolicy(default="d", rules={".html": "no-cache"})
    # The collapsed key has no extension; the local path still does
    assert policy.resolve("blog/index.html", "blog", "text/html") == "no-cache"


def test_content_type_rule():
    policy = CacheControlPolicy(default="d", rules={"image/*": "public, max-age=86400"})
    assert policy.resolve("img/logo.png", "img/logo.png", "image/png") == "public, max-age=86400"
    assert policy.resolve("app.js", "app.js", "application/javascript") == "d"


def test_most_specific_rule_wins():
    policy = CacheControlPolicy(
        default="d",
        rules={
            "*": "everything",
            ".js": "scripts",
            "assets/*": "assets",
            "assets/vendor/*.js": "vendor scripts",
        },
    )
    assert policy.resolve("assets/vendor/lib.js") == "vendor scripts"
    assert policy.resolve("assets/app.css") == "assets"
    assert policy.resolve("main.js") == "scripts"
    assert policy.resolve("robots.txt") == "everything"


def test_equally_specific_rules_prefer_first_declared():
    policy = CacheControlPolicy(rules={"*.css": "first", "a/x.*": "second"})
    assert policy.resolve("a/x.css") == "first"


@pytest.mark.parametrize("cache,cache_control,expected", [
    (None, None, None),
    (3600, None, "public, max-age=3600"),
    (0, None, NO_CACHE),
    (3600, "private, max-age=10", "private, max-age=10"),
    (None, "no-store", "no-store"),
])
def test_build_cache_policy_default(cache, cache_control, expected):
    assert build_cache_policy(cache, cache_control).default == expected


@pytest.mark.parametrize("cache", [-1, "3600", 1.5, True])
def test_build_cache_policy_rejects_bad_cache(cache):
    with pytest.raises(ConfigurationError):
        build_cache_policy(cache=cache)


def test_build_cache_policy_rejects_bad_rules():
    with pytest.raises(ConfigurationError):
        build_cache_policy(rules={".html": 60})
    with pytest.raises(ConfigurationError):
        build_cache_policy(rules=["no-cache"])


def test_build_cache_policy_keeps_rules():
    policy = build_cache_policy(cache=60, rules={".html": "no-cache"})
    assert policy == CacheControlPolicy("public, max-age=60", {".html": "no-cache"})
