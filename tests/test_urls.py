"""Tests for the generic URL syntax check."""

import pytest

from s3hygiene.urls import is_valid_url


class TestIsValidUrl:
    """Tests for is_valid_url()."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://s3.us-west-2.amazonaws.com/bucket/key?x=1",
            "https://user@host.example.com/",
            "ftp://files.example.org/pub",
        ],
    )
    def test_accepts_urls(self, url):
        assert is_valid_url(url)

    def test_empty(self):
        assert not is_valid_url("")

    def test_missing_scheme(self):
        assert not is_valid_url("example.com")

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com\n",
            "https://example.com/a\tb",
            "https://example.com/a b",
            "https://münchen.de",
            "https://example.com\\path",
            "https://example.com/\x00",
            "https://example.com/ ",
        ],
    )
    def test_rejects_characters_the_parser_would_rewrite(self, url):
        """Values the parser would silently normalise are not URLs as written."""
        assert not is_valid_url(url)
