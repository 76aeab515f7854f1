"""Public URL construction for the S3-compatible providers we know about.

The rule table is matched against the endpoint host in order; the first
marker found wins. Anything unrecognised falls back to path-style
``{endpoint}/{bucket}``, whatever addressing style the API client uses.
"""

from __future__ import annotations

from typing import Callable, NamedTuple
from urllib.parse import urlparse


class PublicUrlRule(NamedTuple):
    name: str
    marker: str
    build: Callable[[str, str, str], str]  # (endpoint, host, bucket) -> base URL


PUBLIC_URL_RULES: tuple[PublicUrlRule, ...] = (
    PublicUrlRule("aws", "amazonaws.com", lambda endpoint, host, bucket: f"https://{bucket}.s3.amazonaws.com"),
    PublicUrlRule(
        "digitalocean",
        "digitaloceanspaces.com",
        lambda endpoint, host, bucket: f"https://{bucket}.{host}",
    ),
)


def _endpoint_host(endpoint: str) -> str:
    parsed = urlparse(endpoint)
    if parsed.netloc:
        return parsed.netloc
    # Bare host names such as "nyc3.digitaloceanspaces.com"
    return endpoint.split("/", 1)[0]


def detect_provider(endpoint: str) -> str:
    """Name of the matching rule, or "generic"."""
    host = _endpoint_host(endpoint).lower()
    for rule in PUBLIC_URL_RULES:
        if rule.marker in host:
            return rule.name
    return "generic"


def public_base_url(endpoint: str, bucket: str) -> str:
    """Base URL under which public objects of ``bucket`` are served.

    Examples:
        >>> public_base_url("https://s3.amazonaws.com", "b")
        'https://b.s3.amazonaws.com'
        >>> public_base_url("https://nyc3.digitaloceanspaces.com", "b")
        'https://b.nyc3.digitaloceanspaces.com'
        >>> public_base_url("http://localhost:9000", "b")
        'http://localhost:9000/b'
    """
    host = _endpoint_host(endpoint)
    for rule in PUBLIC_URL_RULES:
        if rule.marker in host.lower():
            return rule.build(endpoint, host, bucket)
    return f"{endpoint.rstrip('/')}/{bucket}"
