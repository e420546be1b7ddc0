"""
Target URL validation.

Rejects URLs that are not absolute http(s) URLs or that point at loopback,
private, link-local or otherwise non-public addresses, so that neither the
session store nor the screenshot service can be aimed at internal hosts.

Dependencies: ipaddress, socket (stdlib), backend.core.exceptions
System role: SSRF guard shared by session creation and screenshot capture
"""

import ipaddress
import logging
import socket
from urllib.parse import urlsplit

from backend.core.exceptions import AccessRestrictedError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")
_LOCAL_HOSTNAMES = {"localhost", "localhost.localdomain", "ip6-localhost", "ip6-loopback"}


def is_restricted_address(address: str) -> bool:
    """
    Check whether an IP literal belongs to a non-public network range.

    Args:
        address: IPv4 or IPv6 address string

    Returns:
        bool: True for loopback, private, link-local, reserved, multicast or
        unspecified addresses (IPv4-mapped IPv6 addresses are unwrapped first)
    """
    ip = ipaddress.ip_address(address)
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return (
        ip.is_loopback
        or ip.is_private
        or ip.is_link_local
        or ip.is_reserved
        or ip.is_multicast
        or ip.is_unspecified
    )


def is_restricted_hostname(hostname: str) -> bool:
    """
    Check a hostname without touching the network.

    Args:
        hostname: Hostname or IP literal taken from a URL

    Returns:
        bool: True when the name is a local alias or a restricted IP literal
    """
    host = hostname.strip("[]").rstrip(".").lower()
    if host in _LOCAL_HOSTNAMES or host.endswith(".localhost"):
        return True
    try:
        return is_restricted_address(host)
    except ValueError:
        return False


def _resolves_to_restricted(hostname: str) -> bool:
    try:
        infos = socket.getaddrinfo(hostname, None)
    except socket.gaierror:
        logger.warning("Could not resolve target hostname", extra={"hostname": hostname})
        return False
    return any(is_restricted_address(info[4][0].split("%")[0]) for info in infos)


def validate_target_url(target_url: str | None, resolve_dns: bool = False) -> str:
    """
    Validate a user supplied target URL.

    Args:
        target_url: URL to validate
        resolve_dns: Also resolve the hostname and reject it when any address
            it maps to is restricted

    Returns:
        str: The URL, stripped of surrounding whitespace

    Raises:
        ValidationError: Missing URL, unsupported scheme or malformed URL
        AccessRestrictedError: Host is loopback or on a private network
    """
    if not target_url or not target_url.strip():
        raise ValidationError("targetUrl is required", field="targetUrl")

    url = target_url.strip()
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        # Accessing .port validates the port component
        parts.port
    except ValueError:
        raise ValidationError("Invalid URL format", field="targetUrl")

    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise ValidationError("Invalid URL format", field="targetUrl", details={"scheme": parts.scheme})
    if not hostname:
        raise ValidationError("Invalid URL format", field="targetUrl")

    if is_restricted_hostname(hostname):
        raise AccessRestrictedError(hostname)
    if resolve_dns and _resolves_to_restricted(hostname):
        raise AccessRestrictedError(hostname, details={"resolved": True})

    return url
