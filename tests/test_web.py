"""
Tests for base URL providers.
"""

import pytest

from aliaspath import BaseUrlProvider, EnvironBaseUrl, StaticBaseUrl


class TestStaticBaseUrl:
    """Tests for StaticBaseUrl."""

    def test_trailing_slash_removed(self):
        assert StaticBaseUrl("https://cdn.example.com/").current_base_url() == "https://cdn.example.com"

    def test_empty(self):
        assert StaticBaseUrl("").current_base_url() == ""

    def test_satisfies_protocol(self):
        assert isinstance(StaticBaseUrl("http://x"), BaseUrlProvider)


class TestEnvironBaseUrl:
    """Tests for base URLs rebuilt from a request environment."""

    @pytest.mark.parametrize(
        "environ, expected",
        [
            ({"HTTP_HOST": "example.com"}, "http://example.com"),
            ({"HTTP_HOST": "example.com:8080"}, "http://example.com:8080"),
            ({"HTTP_HOST": "example.com", "HTTPS": "on"}, "https://example.com"),
            ({"HTTP_HOST": "example.com", "HTTPS": "off"}, "http://example.com"),
            ({"HTTP_HOST": "example.com", "wsgi.url_scheme": "https"}, "https://example.com"),
            ({"SERVER_NAME": "example.com", "SERVER_PORT": "80"}, "http://example.com"),
            ({"SERVER_NAME": "example.com", "SERVER_PORT": "8000"}, "http://example.com:8000"),
            (
                {"SERVER_NAME": "example.com", "SERVER_PORT": "443", "HTTPS": "1"},
                "https://example.com",
            ),
            (
                {"HTTP_HOST": "front.example.com", "SERVER_NAME": "back", "SERVER_PORT": "81"},
                "http://front.example.com",
            ),
            ({}, ""),
        ],
    )
    def test_from_environ(self, environ, expected):
        assert EnvironBaseUrl(environ).current_base_url() == expected

    def test_reads_process_environment_at_call_time(self, monkeypatch):
        provider = EnvironBaseUrl()
        monkeypatch.delenv("HTTPS", raising=False)
        monkeypatch.setenv("HTTP_HOST", "late.example.com")

        assert provider.current_base_url() == "http://late.example.com"
