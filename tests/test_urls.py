"""Tests for URL helpers."""
import pytest

from curvekit import urls
from curvekit.types import CannotGetComponentsError, CannotGetURLError, URLQueryItemsError
from curvekit.urls import removing_query_items, replacing_query_items, url_from_optional


class TestUrlFromOptional:

    def test_none(self):
        assert url_from_optional(None) is None
        assert url_from_optional(None, relative_to="http://example.com/") is None

    def test_plain(self):
        assert url_from_optional("http://example.com/a") == "http://example.com/a"

    def test_relative(self):
        assert url_from_optional("b/c", relative_to="http://example.com/a/") == "http://example.com/a/b/c"

    def test_unparseable(self):
        assert url_from_optional("http://[::1") is None


class TestReplacingQueryItems:

    def test_replace_and_add(self):
        result = replacing_query_items(
            "http://example.com?foo=bar", {"foo": "replaced", "bar": "added"}
        )
        assert result == "http://example.com?foo=replaced&bar=added"

    def test_other_items_keep_order(self):
        result = replacing_query_items("http://example.com/p?a=1&b=2&c=3", {"b": "x"})
        assert result == "http://example.com/p?a=1&c=3&b=x"

    def test_repeated_keys_all_replaced(self):
        result = replacing_query_items("http://example.com?a=1&a=2&b=3", {"a": "9"})
        assert result == "http://example.com?b=3&a=9"

    def test_no_existing_query(self):
        assert replacing_query_items("http://example.com/", {"q": "a b"}) == "http://example.com/?q=a+b"

    def test_fragment_kept(self):
        result = replacing_query_items("http://example.com/?a=1#top", {"a": "2"})
        assert result == "http://example.com/?a=2#top"

    def test_untouched_items_keep_their_text(self):
        """Encoded values and bare flags on other items are not re-encoded."""
        url = "http://example.com/?d=e%3Af&s=a+b&flag&x=1"
        result = replacing_query_items(url, {"x": "2"})
        assert result == "http://example.com/?d=e%3Af&s=a+b&flag&x=2"

    def test_encoded_name_matches(self):
        result = replacing_query_items("http://example.com/?na%6De=1&b=2", {"name": "3"})
        assert result == "http://example.com/?b=2&name=3"


class TestRemovingQueryItems:

    def test_remove(self):
        result = removing_query_items("http://example.com?foo=bar&baz=quux", ["foo", "corge"])
        assert result == "http://example.com?baz=quux"

    def test_remove_all_drops_question_mark(self):
        assert removing_query_items("http://example.com/?foo=bar", ["foo"]) == "http://example.com/"

    def test_blank_values_kept(self):
        assert removing_query_items("http://example.com/?a=&b=1", ["b"]) == "http://example.com/?a="

    def test_valueless_item_kept(self):
        assert removing_query_items("http://example.com/?flag&x=1", ["x"]) == "http://example.com/?flag"

    def test_valueless_item_removed_by_name(self):
        assert removing_query_items("http://example.com/?flag&x=1", ["flag"]) == "http://example.com/?x=1"

    def test_nothing_removed_returns_url_unchanged(self):
        """Characters and escapes in the query are left as written."""
        url = "http://example.com/?a=b~c&d=e:f&g=h%2Fi"
        assert removing_query_items(url, []) == url


class TestErrors:

    def test_cannot_get_components(self):
        with pytest.raises(CannotGetComponentsError) as exc_info:
            removing_query_items("http://[::1/?a=1", ["a"])
        assert exc_info.value.url == "http://[::1/?a=1"
        assert isinstance(exc_info.value, URLQueryItemsError)

    def test_cannot_get_url(self, monkeypatch):
        def broken_urlencode(items):
            raise TypeError("not a valid non-string sequence")

        monkeypatch.setattr(urls, "urlencode", broken_urlencode)
        with pytest.raises(CannotGetURLError) as exc_info:
            replacing_query_items("http://example.com/?a=1", {"a": "2"})
        assert exc_info.value.components.netloc == "example.com"
