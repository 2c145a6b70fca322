"""Unit tests for the leading site/locale segment composer."""

import pytest

from storefront_urls.url_config import UrlEncodingConfig
from storefront_urls.utils.path_segments import (
    extract_path_tokens,
    insert_path_tokens,
    path_token_names,
    strip_path_tokens,
)


pytestmark = pytest.mark.unit

BOTH_PATH = UrlEncodingConfig(locale="path", site="path")
LOCALE_PATH = UrlEncodingConfig(locale="path", site="query_param")
SITE_PATH = UrlEncodingConfig(locale="query_param", site="path")
NO_PATH = UrlEncodingConfig(locale="query_param", site="none")


@pytest.mark.parametrize(
    ("policy", "names"),
    [
        (BOTH_PATH, ("site", "locale")),
        (LOCALE_PATH, ("locale",)),
        (SITE_PATH, ("site",)),
        (NO_PATH, ()),
    ],
)
def test_path_token_names(policy, names):
    assert path_token_names(policy) == names


class TestStrip:
    def test_strips_two_segments(self):
        assert strip_path_tokens(("uk", "it-IT", "category", "womens"), BOTH_PATH) == ("category", "womens")

    def test_strips_one_segment(self):
        assert strip_path_tokens(("it-IT", "category", "womens"), LOCALE_PATH) == ("category", "womens")

    def test_no_path_tokens_keeps_everything(self):
        assert strip_path_tokens(("category", "womens"), NO_PATH) == ("category", "womens")

    def test_home_keeps_trailing_slash(self):
        assert strip_path_tokens(("uk", "it-IT", ""), BOTH_PATH) == ("",)

    def test_short_path_becomes_root(self):
        assert strip_path_tokens(("uk",), BOTH_PATH) == ("",)

    def test_count_is_not_inferred_from_content(self):
        # 'category' is stripped even though it is not a locale
        assert strip_path_tokens(("category", "womens"), LOCALE_PATH) == ("womens",)


class TestExtract:
    def test_both(self):
        assert extract_path_tokens(("uk", "it-IT", "category"), BOTH_PATH) == {"site": "uk", "locale": "it-IT"}

    def test_locale_only(self):
        assert extract_path_tokens(("fr-FR", "x"), LOCALE_PATH) == {"site": None, "locale": "fr-FR"}

    def test_missing_segments(self):
        assert extract_path_tokens(("",), BOTH_PATH) == {"site": None, "locale": None}

    def test_no_path_tokens(self):
        assert extract_path_tokens(("uk", "en-GB"), NO_PATH) == {"site": None, "locale": None}


class TestInsert:
    def test_site_precedes_locale(self):
        result = insert_path_tokens(("women", "dresses"), BOTH_PATH, site="uk", locale="en-GB")
        assert result == ("uk", "en-GB", "women", "dresses")

    def test_root(self):
        assert insert_path_tokens(("",), BOTH_PATH, site="us", locale="fr-FR") == ("us", "fr-FR", "")

    def test_query_encoded_tokens_are_not_inserted(self):
        assert insert_path_tokens(("women",), SITE_PATH, site="uk", locale="en-GB") == ("uk", "women")

    def test_empty_tokens_are_skipped(self):
        assert insert_path_tokens(("",), BOTH_PATH, site=None, locale="") == ("",)
        assert insert_path_tokens(("x",), BOTH_PATH, site=None, locale="it-IT") == ("it-IT", "x")

    def test_insert_then_strip(self):
        bare = ("category", "newarrivals")
        assert strip_path_tokens(insert_path_tokens(bare, BOTH_PATH, site="uk", locale="fr-FR"), BOTH_PATH) == bare
