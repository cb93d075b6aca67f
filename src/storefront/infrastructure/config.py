"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ORDERS_URL = "https://ecommerce-backend-b0af.onrender.com/api/orders"
DEFAULT_CUSTOMER_ID = "64c2fc801c2f8b4f68b2ef65"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:

    orders_url: str = DEFAULT_ORDERS_URL
    customer_id: str = DEFAULT_CUSTOMER_ID
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    catalog_path: Path | None = None

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get("STOREFRONT_HTTP_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(
                    f"STOREFRONT_HTTP_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from exc
        else:
            timeout = DEFAULT_HTTP_TIMEOUT

        catalog = env.get("STOREFRONT_CATALOG_PATH")
        return Settings(
            orders_url=env.get("STOREFRONT_ORDERS_URL") or DEFAULT_ORDERS_URL,
            customer_id=env.get("STOREFRONT_CUSTOMER_ID") or DEFAULT_CUSTOMER_ID,
            http_timeout=timeout,
            catalog_path=Path(catalog) if catalog else None,
        )
