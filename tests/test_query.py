import pytest

from wurllib.url import URL


@pytest.mark.parametrize(
    "text, pairs",
    [
        ("http://h?a=1&b&c=", [("a", "1"), ("b", ""), ("c", "")]),
        ("http://h?a=1;b=2", [("a", "1"), ("b", "2")]),
        ("http://h?a=b=c", [("a", "b=c")]),
        ("http://h?a=1&", [("a", "1")]),
        ("http://h?&a", [("", ""), ("a", "")]),
        ("http://h?=v", [("", "v")]),
        ("http://h/p?x=%20y#a=b", [("x", "%20y")]),
        ("?k=v", [("k", "v")]),
    ],
)
def test_query_pairs(text, pairs):
    assert list(URL(text).query_pairs()) == pairs


@pytest.mark.parametrize("text", ["http://h?", "http://h", "", "http://exa mple.com/?a=1"])
def test_no_pairs(text):
    it = URL(text).query_pairs()
    assert it.exhausted
    assert list(it) == []


def test_exhausted_after_last_pair():
    it = URL("http://h?a=1&b=2").query_pairs()
    assert not it.exhausted
    assert next(it) == ("a", "1")
    assert not it.exhausted
    assert next(it) == ("b", "2")
    assert it.exhausted
    with pytest.raises(StopIteration):
        next(it)


def test_a_new_iterator_starts_over():
    url = URL("http://h?a=1&b=2")
    assert list(url.query_pairs()) == list(url.query_pairs())


def test_equality_is_positional():
    url = URL("http://h?a=1&b=2")
    first = url.query_pairs()
    second = url.query_pairs()
    assert first == second
    next(first)
    assert first != second
    next(second)
    assert first == second


def test_iterators_over_equal_urls_are_not_equal():
    first = URL("http://h?a=1").query_pairs()
    second = URL("http://h?a=1").query_pairs()
    assert first != second


def test_exhausted_iterators_are_equal():
    first = URL("http://h?a=1").query_pairs()
    second = URL("http://other").query_pairs()
    list(first)
    assert first == second


def test_mutating_the_url_invalidates_iterators():
    url = URL("http://h?a=1&b=2")
    it = url.query_pairs()
    url.assign(URL("http://x?z=1"))
    with pytest.raises(RuntimeError):
        next(it)

    it = url.query_pairs()
    url.swap(URL("http://y?w=2"))
    with pytest.raises(RuntimeError):
        next(it)
