"""Configuration management for guardians."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_BLOCKLIST_URL,
    DEFAULT_COIN_URL,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_OBJECT_URL,
    DEFAULT_PACKAGE_URL,
    DEFAULT_RETRY_TIMES,
)
from .scanner.brands import DEFAULT_BRANDS, BrandMap

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Fetch endpoints and brand table, loaded from environment."""

    # Published list locations (override to self-host or pin a mirror)
    domain_blocklist_url: str = DEFAULT_BLOCKLIST_URL
    package_blocklist_url: str = DEFAULT_PACKAGE_URL
    object_blocklist_url: str = DEFAULT_OBJECT_URL
    coin_blocklist_url: str = DEFAULT_COIN_URL

    # Fetch behaviour
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    fetch_retries: int = DEFAULT_RETRY_TIMES

    config_dir: Path = field(default_factory=lambda: Path("./config"))

    # Brand impersonation table (override via config/brands.yaml)
    brands: BrandMap = field(default_factory=lambda: DEFAULT_BRANDS)

    def __post_init__(self):
        self.config_dir = Path(self.config_dir)


def load_brands(config_dir: Path, default: BrandMap = DEFAULT_BRANDS) -> BrandMap:
    """Load brand overrides from config/brands.yaml (optional).

    With `replace: true` the file's table is used on its own; otherwise its
    entries are merged over the defaults. Any problem falls back to `default`.
    """
    path = Path(config_dir or ".") / "brands.yaml"
    if not path.exists():
        return default

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except Exception as exc:
        logger.warning("Failed to parse brands.yaml: %s", exc)
        return default

    if not isinstance(data, dict):
        logger.warning("Ignoring brands.yaml: expected a mapping at the top level")
        return default

    raw = data.get("brands") or {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring brands.yaml: 'brands' must map token to domain")
        return default

    try:
        if data.get("replace"):
            return BrandMap(raw)
        return default.merged(raw)
    except ValueError as exc:
        logger.warning("Ignoring brands.yaml: %s", exc)
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid {name}={value!r}; using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name}={value!r}; using {default}")
        return default


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv(find_dotenv(usecwd=True))

    config_dir = Path(os.getenv("GUARDIANS_CONFIG_DIR", "./config"))

    return Config(
        domain_blocklist_url=os.getenv("GUARDIANS_DOMAIN_LIST_URL", DEFAULT_BLOCKLIST_URL),
        package_blocklist_url=os.getenv("GUARDIANS_PACKAGE_LIST_URL", DEFAULT_PACKAGE_URL),
        object_blocklist_url=os.getenv("GUARDIANS_OBJECT_LIST_URL", DEFAULT_OBJECT_URL),
        coin_blocklist_url=os.getenv("GUARDIANS_COIN_LIST_URL", DEFAULT_COIN_URL),
        fetch_timeout=_env_float("GUARDIANS_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
        fetch_retries=_env_int("GUARDIANS_FETCH_RETRIES", DEFAULT_RETRY_TIMES),
        config_dir=config_dir,
        brands=load_brands(config_dir),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages."""
    errors: list[str] = []
    urls = {
        "GUARDIANS_DOMAIN_LIST_URL": config.domain_blocklist_url,
        "GUARDIANS_PACKAGE_LIST_URL": config.package_blocklist_url,
        "GUARDIANS_OBJECT_LIST_URL": config.object_blocklist_url,
        "GUARDIANS_COIN_LIST_URL": config.coin_blocklist_url,
    }
    for name, url in urls.items():
        if not (url or "").lower().startswith(("http://", "https://")):
            errors.append(f"{name} must be an http(s) URL")

    if config.fetch_timeout <= 0:
        errors.append("GUARDIANS_FETCH_TIMEOUT must be positive")
    if config.fetch_retries < 0:
        errors.append("GUARDIANS_FETCH_RETRIES cannot be negative")

    return errors
