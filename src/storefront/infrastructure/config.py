"""Store configuration read from the environment.

The core never reads settings itself; bootstrap builds a StoreConfig and
passes each value to the object that needs it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.logger import get_logger

logger = get_logger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r; using %d", name, raw, default)
        return default


@dataclass(frozen=True)
class StoreConfig:
    feed_url: str = ""
    currency: str = "ZAR"
    currency_symbol: str = "R"
    notification_duration_ms: int = 3000
    data_dir: Path = Path("data")
    cart_storage_key: str = "storefront_cart"
    feed_timeout: int = 30
    image_width: int = 800
    order_prefix: str = "sf"

    @property
    def storage_file(self) -> Path:
        return self.data_dir / "storage.json"

    @classmethod
    def from_env(cls) -> StoreConfig:
        return cls(
            feed_url=os.getenv("STOREFRONT_FEED_URL", "").strip(),
            currency=os.getenv("STOREFRONT_CURRENCY", "ZAR").strip().upper(),
            currency_symbol=os.getenv("STOREFRONT_CURRENCY_SYMBOL", "R"),
            notification_duration_ms=_env_int("STOREFRONT_NOTIFICATION_MS", 3000),
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", "data")),
            cart_storage_key=os.getenv("STOREFRONT_CART_KEY", "storefront_cart"),
            feed_timeout=_env_int("STOREFRONT_FEED_TIMEOUT", 30),
            image_width=_env_int("STOREFRONT_IMAGE_WIDTH", 800),
            order_prefix=os.getenv("STOREFRONT_ORDER_PREFIX", "sf"),
        )
