"""Runtime settings, read from ``STOREFRONT_*`` environment variables.

Every setting has a default suitable for local use, so an empty
environment yields a working configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import PricingConfig

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationError(Exception):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    tax_rate: Decimal = Decimal("0.08")
    free_shipping_threshold: Decimal = Decimal("50.00")
    flat_shipping_cost: Decimal = Decimal("5.99")
    log_level: str = "WARNING"
    log_json: bool = False
    store_name: str = "Bella Simply Goods"
    store_email: str = "hello@bellasimplygoods.com"

    def pricing(self) -> PricingConfig:
        try:
            return PricingConfig(
                tax_rate=self.tax_rate,
                free_shipping_threshold=Money(self.free_shipping_threshold),
                flat_shipping_cost=Money(self.flat_shipping_cost),
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid pricing configuration: {exc}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    defaults = Settings()

    log_level = env.get("STOREFRONT_LOG_LEVEL", defaults.log_level).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {log_level!r}")

    data_dir = env.get("STOREFRONT_DATA_DIR")

    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else defaults.data_dir,
        tax_rate=_decimal(env, "STOREFRONT_TAX_RATE", defaults.tax_rate),
        free_shipping_threshold=_decimal(
            env, "STOREFRONT_FREE_SHIPPING_THRESHOLD", defaults.free_shipping_threshold
        ),
        flat_shipping_cost=_decimal(
            env, "STOREFRONT_FLAT_SHIPPING_COST", defaults.flat_shipping_cost
        ),
        log_level=log_level,
        log_json=env.get("STOREFRONT_LOG_JSON", "").strip().lower() in _TRUTHY,
        store_name=env.get("STOREFRONT_STORE_NAME", defaults.store_name),
        store_email=env.get("STOREFRONT_STORE_EMAIL", defaults.store_email),
    )


def _decimal(env: Mapping[str, str], key: str, default: Decimal) -> Decimal:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ConfigurationError(f"{key} must be a decimal number, got {raw!r}") from exc
    if not value.is_finite():
        raise ConfigurationError(f"{key} must be a decimal number, got {raw!r}")
    return value
