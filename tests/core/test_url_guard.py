"""
Tests for target URL validation.

System role: Verification of the SSRF guard shared by sessions and screenshots
"""

from unittest.mock import patch

import pytest

from backend.core.exceptions import AccessRestrictedError, ValidationError
from backend.core.url_guard import (
    is_restricted_address,
    is_restricted_hostname,
    validate_target_url,
)


class TestValidateTargetUrl:
    """Test suite for validate_target_url()."""

    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://example.com:8080/path?q=1", "  https://example.com/  "],
    )
    def test_public_urls_are_accepted(self, url: str) -> None:
        assert validate_target_url(url) == url.strip()

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_missing_url_is_rejected(self, url) -> None:
        with pytest.raises(ValidationError, match="targetUrl is required"):
            validate_target_url(url)

    @pytest.mark.parametrize(
        "url",
        ["ftp://example.com", "javascript:alert(1)", "example.com", "https://", "http://example.com:99999"],
    )
    def test_malformed_url_is_rejected(self, url: str) -> None:
        with pytest.raises(ValidationError, match="Invalid URL format"):
            validate_target_url(url)

    @pytest.mark.parametrize(
        "url",
        [
            "http://localhost:3000",
            "http://127.0.0.1",
            "http://[::1]/",
            "http://10.0.0.5",
            "http://172.16.0.1",
            "http://172.31.255.255",
            "http://192.168.1.1",
            "http://169.254.169.254/latest/meta-data",
            "http://0.0.0.0",
            "http://app.localhost",
        ],
    )
    def test_local_network_is_restricted(self, url: str) -> None:
        with pytest.raises(AccessRestrictedError, match="Access to local network is restricted"):
            validate_target_url(url)

    def test_public_172_range_outside_private_block_is_allowed(self) -> None:
        assert validate_target_url("http://172.32.0.1") == "http://172.32.0.1"

    def test_dns_resolution_to_private_address_is_restricted(self) -> None:
        """Test a public-looking name resolving to a private address is rejected when enabled."""
        fake_info = [(2, 1, 6, "", ("10.1.2.3", 80))]
        with patch("backend.core.url_guard.socket.getaddrinfo", return_value=fake_info):
            with pytest.raises(AccessRestrictedError):
                validate_target_url("http://internal.example.com", resolve_dns=True)

    def test_dns_resolution_is_skipped_by_default(self) -> None:
        with patch("backend.core.url_guard.socket.getaddrinfo") as getaddrinfo:
            validate_target_url("http://internal.example.com")
        getaddrinfo.assert_not_called()


class TestRestrictedHelpers:
    def test_ipv4_mapped_ipv6_loopback_is_restricted(self) -> None:
        assert is_restricted_address("::ffff:127.0.0.1")

    def test_public_address_is_not_restricted(self) -> None:
        assert not is_restricted_address("93.184.216.34")

    def test_hostname_checks(self) -> None:
        assert is_restricted_hostname("LOCALHOST")
        assert not is_restricted_hostname("example.com")
