"""Brand table used to catch impersonation of known Sui dApps."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Iterable, Union

_LABEL_RE = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")

# Token -> canonical domain. Order matters: the lookalike pass stops at the
# first token it finds in the queried domain.
DEFAULT_BRAND_DOMAINS: tuple[tuple[str, str], ...] = (
    ("cetus", "cetus.zone"),
    ("scallop", "scallop.io"),
    ("navi", "naviprotocol.io"),
    ("navx", "naviprotocol.io"),
    ("suilend", "suilend.fi"),
    ("bucket", "bucketprotocol.io"),
    ("turbos", "turbos.finance"),
    ("flowx", "flowx.finance"),
    ("kriya", "kriya.finance"),
    ("typus", "typus.finance"),
    ("aftermath", "aftermath.finance"),
    ("bluefin", "bluefin.io"),
    ("haedal", "haedal.xyz"),
    ("volo", "volosui.com"),
    ("volo.fi", "volo.fi"),  # redirects to volosui.com
    ("alphafi", "alphafi.xyz"),
    ("deepbook", "deepbook.tech"),
    ("suins", "suins.io"),
    ("suilink", "suilink.io"),
    ("sui", "sui.io"),
)


def is_valid_brand_domain(domain: str) -> bool:
    """Check a canonical domain: ASCII labels, no scheme, no empty label."""
    if not domain or not domain.isascii() or "://" in domain:
        return False
    return all(_LABEL_RE.match(label) for label in domain.split("."))


def _clean_token(token: str) -> str:
    value = str(token or "").strip().lower()
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"Invalid brand token: {token!r}")
    return value


def _clean_domain(token: str, domain: str) -> str:
    value = str(domain or "").strip().lower()
    if not is_valid_brand_domain(value):
        raise ValueError(f"Invalid canonical domain for brand {token!r}: {domain!r}")
    return value


class BrandMap(Mapping):
    """Immutable, ordered brand token -> canonical domain mapping.

    Tokens and domains are lowercased on construction; invalid entries raise
    ValueError so a bad table can never reach the scanner.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Union[Mapping[str, str], Iterable[tuple[str, str]]] = ()):
        items = entries.items() if isinstance(entries, Mapping) else entries
        index: dict[str, str] = {}
        for token, domain in items:
            key = _clean_token(token)
            index[key] = _clean_domain(key, domain)
        self._index = index
        self._entries = tuple(index.items())

    def __getitem__(self, token: str) -> str:
        return self._index[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"BrandMap({dict(self._entries)!r})"

    def entries(self) -> tuple[tuple[str, str], ...]:
        """(token, domain) pairs in table order."""
        return self._entries

    def merged(self, overrides: Union[Mapping[str, str], Iterable[tuple[str, str]]]) -> "BrandMap":
        """Return a new map with `overrides` added (or replacing existing tokens)."""
        extra = overrides.items() if isinstance(overrides, Mapping) else overrides
        return BrandMap([*self._entries, *extra])


DEFAULT_BRANDS = BrandMap(DEFAULT_BRAND_DOMAINS)
