"""Scanners for domains, packages, objects and coins."""

from .brands import DEFAULT_BRANDS, BrandMap
from .domain import DomainVerdict, evaluate_domain, scan_domain
from .identifiers import scan_coin, scan_object, scan_package
from .rules import (
    DEFAULT_RULES,
    BrandLookalikeRule,
    BrandSubdomainRule,
    ListMembershipRule,
    RuleResult,
    ScanContext,
    ScanRule,
)

__all__ = [
    "DEFAULT_BRANDS",
    "BrandMap",
    "DomainVerdict",
    "evaluate_domain",
    "scan_domain",
    "scan_package",
    "scan_object",
    "scan_coin",
    "DEFAULT_RULES",
    "ListMembershipRule",
    "BrandSubdomainRule",
    "BrandLookalikeRule",
    "RuleResult",
    "ScanContext",
    "ScanRule",
]
