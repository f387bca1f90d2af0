"""Exact-match scanners for packages, objects and coins.

Identifiers are compared verbatim: no case folding, no hierarchy.
"""

from __future__ import annotations

from collections.abc import Collection

from ..constants import Action
from ..models import ObjectBlocklist


def scan_package(packages: Collection[str], address: str) -> Action:
    """BLOCK a package address that appears on the package list."""
    if address in packages:
        return Action.BLOCK
    return Action.NONE


def scan_object(objects: ObjectBlocklist, object_id: str) -> Action:
    """NONE for an allowlisted object ID, BLOCK for a blocklisted one, else NONE."""
    if object_id in objects.allowlist:
        return Action.NONE
    if object_id in objects.blocklist:
        return Action.BLOCK
    return Action.NONE


def scan_coin(coins: Collection[str], coin: str) -> Action:
    """BLOCK a coin type that appears on the coin list."""
    if coin in coins:
        return Action.BLOCK
    return Action.NONE
