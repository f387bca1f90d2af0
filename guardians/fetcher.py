"""Fetch the published allow/block lists.

Every fetcher wraps failures in a None result so an outage never breaks the
caller's browsing flow. Failures are logged and, when an error callback is
supplied, handed to it as a BlocklistFetchError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

import aiohttp

from .constants import (
    DEFAULT_BLOCKLIST_URL,
    DEFAULT_COIN_URL,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_OBJECT_URL,
    DEFAULT_PACKAGE_URL,
    DEFAULT_RETRY_TIMES,
    JSON_HEADERS,
)
from .config import Config
from .exceptions import BlocklistFetchError, BlocklistPayloadError
from .models import (
    CoinBlocklist,
    DomainBlocklist,
    ObjectBlocklist,
    PackageBlocklist,
    identifier_set_from_payload,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorCallback = Callable[[BlocklistFetchError], None]


async def with_retry(
    action: Callable[[], Awaitable[T]],
    times: int = DEFAULT_RETRY_TIMES,
    *,
    give_up_on: tuple[type[BaseException], ...] = (),
) -> T:
    """Await `action()`, retrying up to `times` more times on failure.

    There is no backoff between attempts. The last error is re-raised once
    the retries are used up. Errors of a `give_up_on` type are re-raised
    straight away.
    """
    remaining = max(0, times)
    while True:
        try:
            return await action()
        except Exception as exc:
            if remaining <= 0 or isinstance(exc, give_up_on):
                raise
            remaining -= 1
            logger.info(f"Retrying after error ({remaining} retries left): {exc}")


async def _get_json(session: aiohttp.ClientSession, url: str, timeout: float) -> Any:
    try:
        async with session.get(
            url,
            headers=JSON_HEADERS,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as resp:
            if not 200 <= resp.status < 300:
                body = await resp.text()
                raise BlocklistFetchError(url, body.strip() or "empty response", status=resp.status)
            # raw.githubusercontent.com serves JSON as text/plain
            return await resp.json(content_type=None)
    except asyncio.TimeoutError as exc:
        raise BlocklistFetchError(url, f"timed out after {timeout}s") from exc
    except aiohttp.ClientError as exc:
        raise BlocklistFetchError(url, str(exc) or exc.__class__.__name__) from exc
    except ValueError as exc:
        raise BlocklistPayloadError(url, f"invalid JSON: {exc}") from exc


async def fetch_json(
    url: str,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> Any:
    """GET `url` and decode the JSON body.

    Raises BlocklistFetchError on a non-2xx status, network error, timeout or
    undecodable body.
    """
    if session is not None:
        return await _get_json(session, url, timeout)
    async with aiohttp.ClientSession() as own_session:
        return await _get_json(own_session, url, timeout)


def _report(on_error: Optional[ErrorCallback], error: BlocklistFetchError) -> None:
    if on_error is None:
        return
    try:
        on_error(error)
    except Exception:
        logger.exception(f"Error callback failed while reporting: {error}")


async def _fetch_list(
    url: str,
    parse: Callable[[Any, str], T],
    on_error: Optional[ErrorCallback],
    *,
    session: Optional[aiohttp.ClientSession],
    timeout: float,
    retries: int,
) -> Optional[T]:
    async def attempt() -> T:
        data = await fetch_json(url, session=session, timeout=timeout)
        return parse(data, url)

    try:
        return await with_retry(attempt, times=retries, give_up_on=(BlocklistPayloadError,))
    except BlocklistFetchError as e:
        logger.warning(f"Could not load list: {e}")
        _report(on_error, e)
    except Exception as e:
        logger.exception(f"Unexpected error loading {url}: {e}")
        _report(on_error, BlocklistFetchError(url, f"unexpected error: {e}"))
    return None


async def fetch_domain_blocklist(
    on_error: Optional[ErrorCallback] = None,
    *,
    url: str = DEFAULT_BLOCKLIST_URL,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    retries: int = 0,
) -> Optional[DomainBlocklist]:
    """Fetch the domain allow/block list, or None if it is unavailable."""
    return await _fetch_list(
        url,
        lambda data, src: DomainBlocklist.from_payload(data, url=src),
        on_error,
        session=session,
        timeout=timeout,
        retries=retries,
    )


async def fetch_package_blocklist(
    on_error: Optional[ErrorCallback] = None,
    *,
    url: str = DEFAULT_PACKAGE_URL,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    retries: int = 0,
) -> Optional[PackageBlocklist]:
    """Fetch the malicious package address list, or None if it is unavailable."""
    return await _fetch_list(
        url,
        lambda data, src: identifier_set_from_payload(data, name="package list", url=src),
        on_error,
        session=session,
        timeout=timeout,
        retries=retries,
    )


async def fetch_object_blocklist(
    on_error: Optional[ErrorCallback] = None,
    *,
    url: str = DEFAULT_OBJECT_URL,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    retries: int = 0,
) -> Optional[ObjectBlocklist]:
    """Fetch the object allow/block list, or None if it is unavailable."""
    return await _fetch_list(
        url,
        lambda data, src: ObjectBlocklist.from_payload(data, url=src),
        on_error,
        session=session,
        timeout=timeout,
        retries=retries,
    )


async def fetch_coin_blocklist(
    on_error: Optional[ErrorCallback] = None,
    *,
    url: str = DEFAULT_COIN_URL,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    retries: int = 0,
) -> Optional[CoinBlocklist]:
    """Fetch the scam coin list, or None if it is unavailable."""
    return await _fetch_list(
        url,
        lambda data, src: identifier_set_from_payload(data, name="coin list", url=src),
        on_error,
        session=session,
        timeout=timeout,
        retries=retries,
    )


class BlocklistFetcher:
    """
    Fetches all published lists using one Config.

    Usage:
        fetcher = BlocklistFetcher(load_config())
        domains = await fetcher.domains()
        if domains is not None:
            action = scan_domain(domains, url, brands=fetcher.config.brands)
    """

    def __init__(self, config: Config, on_error: Optional[ErrorCallback] = None):
        self.config = config
        self.on_error = on_error

    def _options(self) -> dict:
        return {
            "timeout": self.config.fetch_timeout,
            "retries": self.config.fetch_retries,
        }

    async def domains(self, session: Optional[aiohttp.ClientSession] = None) -> Optional[DomainBlocklist]:
        return await fetch_domain_blocklist(
            self.on_error, url=self.config.domain_blocklist_url, session=session, **self._options()
        )

    async def packages(self, session: Optional[aiohttp.ClientSession] = None) -> Optional[PackageBlocklist]:
        return await fetch_package_blocklist(
            self.on_error, url=self.config.package_blocklist_url, session=session, **self._options()
        )

    async def objects(self, session: Optional[aiohttp.ClientSession] = None) -> Optional[ObjectBlocklist]:
        return await fetch_object_blocklist(
            self.on_error, url=self.config.object_blocklist_url, session=session, **self._options()
        )

    async def coins(self, session: Optional[aiohttp.ClientSession] = None) -> Optional[CoinBlocklist]:
        return await fetch_coin_blocklist(
            self.on_error, url=self.config.coin_blocklist_url, session=session, **self._options()
        )
