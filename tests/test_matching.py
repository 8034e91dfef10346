"""Tests for cookie path and domain matching rules."""

from __future__ import annotations

import pytest

from session_cookie import domain_matches, path_matches


class TestPathMatches:
    """Tests for path_matches()."""

    @pytest.mark.parametrize("request_path", ["/foo", "/foo/bar", "/foobar", "//foo"])
    def test_matching_paths(self, request_path: str) -> None:
        """Test exact, prefix and leading-slash variants match."""
        assert path_matches("/foo", request_path)

    @pytest.mark.parametrize("request_path", ["/bar", "/", "", "/fo"])
    def test_non_matching_paths(self, request_path: str) -> None:
        """Test unrelated paths do not match."""
        assert not path_matches("/foo", request_path)

    def test_leading_slash_stripped_once(self) -> None:
        """Test a single leading slash is ignored before the prefix check."""
        assert path_matches("foo", "/foo/bar")
        assert not path_matches("foo", "bar/foo")

    def test_empty_cookie_path_matches_all(self) -> None:
        """Test an unspecified path applies everywhere."""
        assert path_matches("", "/anything")
        assert path_matches("", "")


class TestDomainMatches:
    """Tests for domain_matches()."""

    @pytest.mark.parametrize(
        "host", ["example.com", "www.example.com", "www.corp.example.com", "WWW.Example.COM"]
    )
    def test_domain_and_subdomains_match(self, host: str) -> None:
        """Test the domain itself and its subdomains match."""
        assert domain_matches("example.com", host)

    @pytest.mark.parametrize("host", ["badexample.com", "example.org", "com"])
    def test_other_hosts_do_not_match(self, host: str) -> None:
        """Test hosts outside the domain do not match."""
        assert not domain_matches("example.com", host)

    def test_leading_dot_ignored(self) -> None:
        """Test a leading dot on the domain is ignored."""
        assert domain_matches(".example.com", "example.com")
        assert domain_matches(".example.com", "a.example.com")

    def test_host_only_matches_origin(self) -> None:
        """Test an empty domain only matches the origin server."""
        assert domain_matches("", "example.com", origin_host="example.com")
        assert not domain_matches("", "www.example.com", origin_host="example.com")

    def test_host_only_without_origin(self) -> None:
        """Test an empty domain matches when the origin is unknown."""
        assert domain_matches("", "example.com")
