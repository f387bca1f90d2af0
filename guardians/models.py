"""List models and JSON payload parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import BlocklistPayloadError

# Package addresses and coin types have no hierarchy; a flat set is enough.
PackageBlocklist = frozenset
CoinBlocklist = frozenset


def _string_entries(raw: Any, *, name: str, url: str) -> list[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise BlocklistPayloadError(url, f"{name} must be a JSON array, got {type(raw).__name__}")
    entries: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            raise BlocklistPayloadError(url, f"{name} contains a non-string entry: {item!r}")
        entries.append(item)
    return entries


@dataclass(frozen=True)
class DomainBlocklist:
    """Allow/block snapshot for domain scanning.

    Entries are exact domains ("vercel.com", "app1.vercel.com"); matching is
    case-insensitive so they are lowercased here.
    """

    allowlist: frozenset[str] = field(default_factory=frozenset)
    blocklist: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowlist", frozenset(d.strip().lower() for d in self.allowlist))
        object.__setattr__(self, "blocklist", frozenset(d.strip().lower() for d in self.blocklist))

    @classmethod
    def from_payload(cls, data: Any, *, url: str = "") -> "DomainBlocklist":
        """Build from the published `{"allowlist": [...], "blocklist": [...]}` JSON."""
        if not isinstance(data, dict):
            raise BlocklistPayloadError(url, f"expected a JSON object, got {type(data).__name__}")
        return cls(
            allowlist=frozenset(_string_entries(data.get("allowlist"), name="allowlist", url=url)),
            blocklist=frozenset(_string_entries(data.get("blocklist"), name="blocklist", url=url)),
        )


@dataclass(frozen=True)
class ObjectBlocklist:
    """Allow/block snapshot for on-chain object IDs (compared verbatim)."""

    allowlist: frozenset[str] = field(default_factory=frozenset)
    blocklist: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowlist", frozenset(self.allowlist))
        object.__setattr__(self, "blocklist", frozenset(self.blocklist))

    @classmethod
    def from_payload(cls, data: Any, *, url: str = "") -> "ObjectBlocklist":
        if not isinstance(data, dict):
            raise BlocklistPayloadError(url, f"expected a JSON object, got {type(data).__name__}")
        return cls(
            allowlist=frozenset(_string_entries(data.get("allowlist"), name="allowlist", url=url)),
            blocklist=frozenset(_string_entries(data.get("blocklist"), name="blocklist", url=url)),
        )


def identifier_set_from_payload(data: Any, *, name: str = "list", url: str = "") -> frozenset[str]:
    """Parse a package or coin list (a bare JSON array of strings)."""
    if not isinstance(data, list):
        raise BlocklistPayloadError(url, f"{name} must be a JSON array, got {type(data).__name__}")
    return frozenset(_string_entries(data, name=name, url=url))

