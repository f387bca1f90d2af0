"""Domain scanning: normalize, then run the rule chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..constants import Action
from ..models import DomainBlocklist
from ..utils.domains import domain_labels, normalize_domain
from .brands import DEFAULT_BRANDS, BrandMap
from .rules import DEFAULT_RULES, ScanContext, ScanRule

logger = logging.getLogger(__name__)


@dataclass
class DomainVerdict:
    """Result of scanning a domain, with the rule that decided it."""

    domain: str
    action: Action
    rule: str = "default"
    matched: Optional[str] = None
    reasons: list[str] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return self.action is Action.BLOCK


def evaluate_domain(
    blocklist: DomainBlocklist,
    url: str,
    brands: BrandMap = DEFAULT_BRANDS,
    rules: Iterable[ScanRule] = DEFAULT_RULES,
) -> DomainVerdict:
    """Scan a hostname or URL and explain the decision.

    Raises InvalidDomain if `url` has no parseable hostname; malformed input is
    a caller bug, not a scan outcome.
    """
    domain = normalize_domain(url)
    context = ScanContext(
        domain=domain,
        labels=domain_labels(domain),
        blocklist=blocklist,
        brands=brands,
    )

    for rule in rules:
        result = rule.apply(context)
        if result.decided:
            logger.debug(f"{domain}: {result.action} by {result.name} ({result.matched})")
            return DomainVerdict(
                domain=domain,
                action=result.action,
                rule=result.name,
                matched=result.matched,
                reasons=result.reasons,
            )

    return DomainVerdict(domain=domain, action=Action.NONE, reasons=["No rule matched"])


def scan_domain(
    blocklist: DomainBlocklist,
    url: str,
    brands: BrandMap = DEFAULT_BRANDS,
) -> Action:
    """Return BLOCK or NONE for a hostname or URL."""
    return evaluate_domain(blocklist, url, brands=brands).action
