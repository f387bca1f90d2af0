"""Rule-based building blocks for domain scanning.

Each rule looks at the normalized domain and either decides (BLOCK/NONE) or
passes. Rules are evaluated in order and the first decision wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from ..constants import Action
from ..models import DomainBlocklist
from ..utils.domains import domain_suffixes
from .brands import BrandMap


@dataclass(frozen=True)
class ScanContext:
    """Shared context passed to each scan rule."""

    domain: str
    labels: list[str]
    blocklist: DomainBlocklist
    brands: BrandMap


@dataclass
class RuleResult:
    """Outcome of a single scan rule. `action` is None when the rule passes."""

    name: str
    action: Optional[Action] = None
    matched: Optional[str] = None
    reasons: list[str] = field(default_factory=list)

    @property
    def decided(self) -> bool:
        return self.action is not None


class ScanRule(Protocol):
    """Interface for scan rules."""

    name: str

    def apply(self, context: ScanContext) -> RuleResult:  # pragma: no cover - interface
        ...


class ListMembershipRule:
    """Check every suffix of two or more labels against the published lists.

    The most specific suffix is checked first and the allowlist wins at each
    level, so a listed entry covers itself and its subdomains but never its
    siblings or parent.
    """

    name = "list_membership"

    def apply(self, context: ScanContext) -> RuleResult:
        allowlist = context.blocklist.allowlist
        blocklist = context.blocklist.blocklist

        for candidate in domain_suffixes(context.labels):
            if candidate in allowlist:
                return RuleResult(
                    self.name,
                    action=Action.NONE,
                    matched=candidate,
                    reasons=[f"Allowlisted: {candidate}"],
                )
            if candidate in blocklist:
                return RuleResult(
                    self.name,
                    action=Action.BLOCK,
                    matched=candidate,
                    reasons=[f"Blocklisted: {candidate}"],
                )

        return RuleResult(self.name)


class BrandSubdomainRule:
    """Allow a brand's canonical domain and anything beneath it."""

    name = "brand_subdomain"

    def apply(self, context: ScanContext) -> RuleResult:
        for token, brand_domain in context.brands.entries():
            width = len(brand_domain.split("."))
            if ".".join(context.labels[-width:]) == brand_domain:
                return RuleResult(
                    self.name,
                    action=Action.NONE,
                    matched=token,
                    reasons=[f"Operated by {token} ({brand_domain})"],
                )
        return RuleResult(self.name)


class BrandLookalikeRule:
    """Block domains that carry a brand token without belonging to the brand.

    "scam-cetus.zone" and "app.scam-cetus.zone" both mention "cetus" but are
    not cetus.zone or one of its subdomains.
    """

    name = "brand_lookalike"

    def apply(self, context: ScanContext) -> RuleResult:
        domain = context.domain

        for token, brand_domain in context.brands.entries():
            if token not in domain:
                continue

            if len(context.labels) == len(brand_domain.split(".")):
                if domain == brand_domain:
                    return RuleResult(
                        self.name,
                        action=Action.NONE,
                        matched=token,
                        reasons=[f"Canonical {token} domain"],
                    )
                return RuleResult(
                    self.name,
                    action=Action.BLOCK,
                    matched=token,
                    reasons=[f"Looks like {brand_domain} but is {domain}"],
                )

            if not domain.endswith(f".{brand_domain}"):
                return RuleResult(
                    self.name,
                    action=Action.BLOCK,
                    matched=token,
                    reasons=[f"Mentions {token} outside {brand_domain}"],
                )

        return RuleResult(self.name)


DEFAULT_RULES: tuple[ScanRule, ...] = (
    ListMembershipRule(),
    BrandSubdomainRule(),
    BrandLookalikeRule(),
)
