"""Domain normalization utilities."""

from __future__ import annotations

import re
from urllib.parse import unquote, urlparse

import idna

from ..exceptions import InvalidDomain

# A leading http(s) scheme, with any run of slashes or backslashes after it.
_HTTP_SCHEME_RE = re.compile(r"^(https?):[/\\]*", re.IGNORECASE)

# Tab and newline are dropped from the input before parsing.
_STRIPPED_CHARS_RE = re.compile(r"[\t\n\r]")

# The authority ends at the first of these.
_AUTHORITY_END_RE = re.compile(r"[/\\?#]")

# Code points a browser URL parser refuses in a domain once it is decoded.
_FORBIDDEN_HOST_CHARS = frozenset(" #%/<>?@[\\]^|\x7f")


def _split_authority(raw: str) -> str:
    match = _HTTP_SCHEME_RE.match(raw)
    rest = raw[match.end():] if match else raw
    return _AUTHORITY_END_RE.split(rest, maxsplit=1)[0]


def _to_ascii(host: str, value: str) -> str:
    if host.isascii():
        return host
    try:
        return idna.encode(host, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError) as exc:
        raise InvalidDomain(value, f"Invalid internationalized domain ({exc})") from exc


def normalize_domain(value: str) -> str:
    """
    Reduce a bare hostname or a full URL to a lowercase hostname.

    - "example.com", "https://Example.com/path" -> "example.com"
    - Port, path, query and fragment are ignored
    - "\\" counts as "/" and "http:host" or "http:/host" is read as
      "http://host", the way a browser reads them
    - Percent-escapes in the host are decoded
    - Unicode hosts are returned in their punycode form

    Raises InvalidDomain when no hostname can be parsed.
    """
    raw = _STRIPPED_CHARS_RE.sub("", (value or "").strip())
    authority = _split_authority(raw)

    try:
        parsed = urlparse(f"https://{authority}")
        host = parsed.hostname
        parsed.port  # raises on a malformed port
    except ValueError as exc:
        raise InvalidDomain(value, str(exc)) from exc

    if not host:
        raise InvalidDomain(value)

    host = unquote(host)
    if any(ch in _FORBIDDEN_HOST_CHARS or ch < " " for ch in host):
        raise InvalidDomain(value, "Forbidden character in host")

    return _to_ascii(host.lower(), value)


def domain_labels(domain: str) -> list[str]:
    """Split a normalized hostname into labels, most specific first."""
    return domain.split(".")


def domain_suffixes(labels: list[str]) -> list[str]:
    """Every suffix of two or more labels, most specific first.

    "a.b.example.com" -> ["a.b.example.com", "b.example.com", "example.com"]
    """
    return [".".join(labels[i:]) for i in range(len(labels) - 1)]
