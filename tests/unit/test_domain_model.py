"""Unit tests for the URL value objects."""

from types import SimpleNamespace

import pytest

from storefront_urls.domain.model import Location, ParsedUrl
from storefront_urls.utils.query_string import VALUELESS


pytestmark = pytest.mark.unit


class TestParsedUrl:
    @pytest.mark.parametrize(
        ("url", "segments"),
        [
            ("/", ("",)),
            ("/a/b", ("a", "b")),
            ("/uk/it-IT/", ("uk", "it-IT", "")),
            ("", ()),
        ],
    )
    def test_segments(self, url, segments):
        assert ParsedUrl.parse(url).segments == segments

    @pytest.mark.parametrize(
        "url",
        [
            "/",
            "/uk/it-IT/",
            "/mens/clothing?server_only&offset=0",
            "/en/product/25501032M?color=black&size=M#reviews",
            "",
        ],
    )
    def test_round_trip(self, url):
        assert ParsedUrl.parse(url).to_string() == url

    def test_reparse_equals(self):
        parsed = ParsedUrl.parse("/a/b?x=1&flag#frag")
        assert ParsedUrl.parse(parsed.to_string()) == parsed

    def test_absolute_url_drops_origin(self):
        parsed = ParsedUrl.parse("http://localhost:3000/uk/it-IT/category/womens?limit=25")
        assert parsed.segments == ("uk", "it-IT", "category", "womens")
        assert parsed.query == {"limit": "25"}
        assert parsed.to_string() == "/uk/it-IT/category/womens?limit=25"

    def test_scheme_inside_query_is_not_an_origin(self):
        parsed = ParsedUrl.parse("/redirect?to=https://example.com/x")
        assert parsed.segments == ("redirect",)
        assert parsed.query == {"to": "https://example.com/x"}

    def test_no_trailing_question_mark_for_empty_query(self):
        assert ParsedUrl.parse("/a?").to_string() == "/a"

    def test_merge_query_returns_new_object(self):
        parsed = ParsedUrl.parse("/a?x=1")
        merged = parsed.merge_query({"y": "2"})
        assert merged.to_string() == "/a?x=1&y=2"
        assert parsed.to_string() == "/a?x=1"

    def test_to_string_without_fragment(self):
        assert ParsedUrl.parse("/a#b").to_string(include_fragment=False) == "/a"

    def test_str(self):
        assert str(ParsedUrl.parse("/a?flag")) == "/a?flag"


class TestLocation:
    def test_from_url(self):
        location = Location.from_url("http://localhost:3000/uk/it-IT/?limit=25")
        assert location == Location(pathname="/uk/it-IT/", search="?limit=25")

    def test_from_url_without_path(self):
        assert Location.from_url("http://localhost:3000") == Location(pathname="/", search="")

    def test_parsed_from_location_like_object(self):
        location = SimpleNamespace(pathname="/uk/en-GB/search", search="?q=dress&server_only", hash="#x")
        parsed = ParsedUrl.from_location(location)
        assert parsed.segments == ("uk", "en-GB", "search")
        assert parsed.query == {"q": "dress", "server_only": VALUELESS}
        assert parsed.fragment == ""
