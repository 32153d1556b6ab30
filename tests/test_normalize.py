import pytest

from wurllib.url import URL
from wurllib.url.normalize import (
    capitalize_percent_encodings,
    decode_encoded_unreserved_chars,
    normalize_buffer,
    remove_dot_segments,
)
from wurllib.url.parse import parse


def test_capitalize_percent_encodings():
    assert capitalize_percent_encodings("example%2ecom") == "example%2Ecom"
    assert capitalize_percent_encodings("%af%Af%aF%AF") == "%AF%AF%AF%AF"
    assert capitalize_percent_encodings("abc%zz%") == "abc%zz%"


def test_decode_encoded_unreserved_chars():
    assert decode_encoded_unreserved_chars("%7Euser%2F") == "~user%2F"
    assert decode_encoded_unreserved_chars("%41%2d%5F%2E%30") == "A-_.0"
    assert decode_encoded_unreserved_chars("%20%3F%25") == "%20%3F%25"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/a/b/../c", "/a/c"),
        ("/../a", "/a"),
        ("/a/./b", "/a/b"),
        ("/a/b/c/./../../g", "/a/g"),
        ("mid/content=5/../6", "mid/6"),
        ("/a/b/..", "/a/"),
        ("/a/b/.", "/a/b/"),
        ("../a", "a"),
        (".", ""),
        ("..", ""),
        ("", ""),
        ("/", "/"),
        ("//x", "//x"),
    ],
)
def test_remove_dot_segments(path, expected):
    assert remove_dot_segments(path) == expected


def _normalize(text: str) -> str:
    return normalize_buffer(text, parse(text)[0])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("HTTP://User@Example.COM/%7euser/a/./b/../c?Q=%2f#F", "http://User@example.com/~user/a/c?Q=%2F#F"),
        ("http://%41.com/", "http://a.com/"),
        ("http://%c3%a9.COM/", "http://%C3%A9.com/"),
        ("http://%C3%A9.com/", "http://%C3%A9.com/"),
        ("http://%c3%a9.com/%c3", "http://%C3%A9.com/%C3"),
        ("http://User%3a%3b@%2F.Org/", "http://User%3A%3B@%2F.org/"),
        ("http://host#", "http://host#"),
        ("http://host", "http://host"),
        ("http://host/%2e%2E/a", "http://host/a"),
        ("a:/..//x", "a:/.//x"),
        ("./a:b", "./a:b"),
        ("HTTP://[::AB]/", "http://[::ab]/"),
        ("http://Ῥόδος.GR/", "http://Ῥόδος.gr/"),
        ("http://exa mple.com/%7e", "http://exa mple.com/~"),
    ],
)
def test_normalize_buffer(text, expected):
    assert _normalize(text) == expected


def test_normalize_does_not_touch_the_original():
    url = URL("HTTP://EXAMPLE.com/a/../b")
    assert url.normalize().string() == "http://example.com/b"
    assert url.string() == "HTTP://EXAMPLE.com/a/../b"


@pytest.mark.parametrize(
    "text",
    [
        "HTTP://User@Example.COM/%7euser/a/./b/../c?Q=%2f#F",
        "http://%41.com/",
        "http://%c3%a9.COM/%2f",
        "a:/..//x",
        "mailto:a/..//x",
        "./a:b",
        "x/./y/../../..",
        "http://exa mple.com/%%34%31",
        "http://a/%%32%66",
        "",
        "   ",
        "//HOST/.././a?b#c",
    ],
)
def test_normalize_is_idempotent(text):
    once = URL(text).normalize()
    twice = once.normalize()
    assert twice.string() == once.string()


def test_case_invariance():
    assert URL("HTTP://EXAMPLE.COM/a").normalize().string() == URL("http://example.com/a").normalize().string()
    assert URL("http://h/%3f").normalize().string() == URL("http://h/%3F").normalize().string()
