"""Tests for domain normalization and matcher generation."""

import logging

import pytest

from chromium_cookies.domains import (
    build_matcher_set,
    generate_domain_matchers,
    is_domain_match,
    normalize_domain,
)


class TestNormalizeDomain:

    @pytest.mark.parametrize("raw, expected", [
        ("https://example.com", "example.com"),
        ("http://example.com", "example.com"),
        ("example.com/", "example.com"),
        ("www.example.com", "example.com"),
        ("https://www.example.com/", "example.com"),
        ("HTTPS://WWW.Example.com/", "example.com"),
        ("EXAMPLE.COM", "example.com"),
        ("  example.com  ", "example.com"),
        ("https://sub.example.com", "sub.example.com"),
        ("example.com:8080", "example.com:8080"),
    ])
    def test_normalizes(self, raw, expected):
        assert normalize_domain(raw) == expected

    @pytest.mark.parametrize("raw", ["localhost", "invalid", "https://localhost/", ""])
    def test_rejects_names_without_dot(self, raw):
        """Single-label names are not domains."""
        assert normalize_domain(raw) is None

    def test_only_one_trailing_slash_removed(self):
        assert normalize_domain("example.com//") == "example.com/"

    def test_only_leading_www_removed(self):
        assert normalize_domain("api.www.example.com") == "api.www.example.com"


class TestIsDomainMatch:

    def test_exact(self):
        assert is_domain_match("example.com", "example.com")

    def test_leading_dot(self):
        assert is_domain_match(".example.com", "example.com")

    def test_case_insensitive(self):
        assert is_domain_match(".EXAMPLE.com", "example.com")

    def test_subdomain_does_not_match(self):
        assert not is_domain_match("api.example.com", "example.com")

    def test_other_domain(self):
        assert not is_domain_match(".example.org", "example.com")


class TestGenerateDomainMatchers:

    def test_registrable_domain(self):
        assert generate_domain_matchers("github.com") == ["github.com", ".github.com"]

    def test_subdomain(self):
        assert generate_domain_matchers("sub.example.com") == [
            "sub.example.com", ".sub.example.com", ".example.com",
        ]

    def test_deep_subdomain(self):
        assert generate_domain_matchers("api.v2.service.example.com") == [
            "api.v2.service.example.com",
            ".api.v2.service.example.com",
            ".v2.service.example.com",
            ".service.example.com",
            ".example.com",
        ]

    def test_single_label(self):
        assert generate_domain_matchers("localhost") == ["localhost", ".localhost"]

    def test_country_code_tld(self):
        """No bare .uk is generated."""
        assert generate_domain_matchers("bbc.co.uk") == ["bbc.co.uk", ".bbc.co.uk", ".co.uk"]

    def test_no_bare_tld(self):
        result = generate_domain_matchers("example.com")
        assert ".com" not in result
        assert all(len(m) > 1 for m in result)

    def test_www_subdomain(self):
        assert generate_domain_matchers("www.example.com") == [
            "www.example.com", ".www.example.com", ".example.com",
        ]

    def test_hyphenated(self):
        assert generate_domain_matchers("my-subdomain.example-site.com") == [
            "my-subdomain.example-site.com",
            ".my-subdomain.example-site.com",
            ".example-site.com",
        ]


class TestBuildMatcherSet:

    def test_no_filter(self):
        assert build_matcher_set(None) is None
        assert build_matcher_set("") is None

    def test_invalid_filter_means_no_filter(self, caplog):
        caplog.set_level(logging.WARNING, logger="chromium_cookies")
        assert build_matcher_set("localhost") is None
        assert "Invalid domain filter" in caplog.text

    def test_valid_filter(self):
        assert build_matcher_set("https://www.github.com/") == {"github.com", ".github.com"}
