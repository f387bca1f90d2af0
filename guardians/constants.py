"""Centralized constants for guardians.

Scan outcomes and the well-known locations of the published lists.
"""

from enum import Enum


class Action(str, Enum):
    """Outcome of a scan. There is no "unknown" action; scans fail open."""

    BLOCK = "BLOCK"
    NONE = "NONE"

    def __str__(self) -> str:
        return self.value


_LIST_BASE_URL = "https://raw.githubusercontent.com/suiet/guardians/main/dist"

DEFAULT_BLOCKLIST_URL = f"{_LIST_BASE_URL}/domain-list.json"
DEFAULT_COIN_URL = f"{_LIST_BASE_URL}/coin-list.json"
DEFAULT_PACKAGE_URL = f"{_LIST_BASE_URL}/package-list.json"
DEFAULT_OBJECT_URL = f"{_LIST_BASE_URL}/object-list.json"

DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_RETRY_TIMES = 3

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
