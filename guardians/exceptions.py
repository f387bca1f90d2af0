"""Exceptions raised (or reported) by guardians."""

from __future__ import annotations

from typing import Optional


class GuardiansError(Exception):
    """Base exception for guardians errors."""

    pass


class InvalidDomain(GuardiansError, ValueError):
    """Scan input could not be parsed as a hostname or URL."""

    def __init__(self, value: str, message: str = "Not a valid domain or URL"):
        self.value = value
        self.message = message
        super().__init__(f"{message}: {value!r}")


class BlocklistFetchError(GuardiansError):
    """A published list could not be fetched or decoded.

    Never raised past the fetch boundary; handed to the caller's error
    callback instead.
    """

    def __init__(self, url: str, detail: str, status: Optional[int] = None):
        self.url = url
        self.detail = detail
        self.status = status
        prefix = f"HTTP {status}" if status is not None else "Fetch failed"
        super().__init__(f"{prefix} for {url}: {detail}")


class BlocklistPayloadError(BlocklistFetchError):
    """The response body was not JSON shaped like the expected list."""

    pass
