"""Client-side screening of domains, packages, objects and coins for Sui wallets."""

from .config import Config, load_config, validate_config
from .constants import (
    DEFAULT_BLOCKLIST_URL,
    DEFAULT_COIN_URL,
    DEFAULT_OBJECT_URL,
    DEFAULT_PACKAGE_URL,
    Action,
)
from .exceptions import (
    BlocklistFetchError,
    BlocklistPayloadError,
    GuardiansError,
    InvalidDomain,
)
from .fetcher import (
    BlocklistFetcher,
    fetch_coin_blocklist,
    fetch_domain_blocklist,
    fetch_object_blocklist,
    fetch_package_blocklist,
    with_retry,
)
from .models import DomainBlocklist, ObjectBlocklist
from .scanner import (
    DEFAULT_BRANDS,
    BrandMap,
    DomainVerdict,
    evaluate_domain,
    scan_coin,
    scan_domain,
    scan_object,
    scan_package,
)

__all__ = [
    "Action",
    "BrandMap",
    "BlocklistFetcher",
    "BlocklistFetchError",
    "BlocklistPayloadError",
    "Config",
    "DEFAULT_BLOCKLIST_URL",
    "DEFAULT_BRANDS",
    "DEFAULT_COIN_URL",
    "DEFAULT_OBJECT_URL",
    "DEFAULT_PACKAGE_URL",
    "DomainBlocklist",
    "DomainVerdict",
    "GuardiansError",
    "InvalidDomain",
    "ObjectBlocklist",
    "evaluate_domain",
    "fetch_coin_blocklist",
    "fetch_domain_blocklist",
    "fetch_object_blocklist",
    "fetch_package_blocklist",
    "load_config",
    "scan_coin",
    "scan_domain",
    "scan_object",
    "scan_package",
    "validate_config",
    "with_retry",
]
