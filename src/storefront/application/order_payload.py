"""Application service: build the payload handed to the payment step.

Reads the cart, never changes it. Each call stamps a fresh timestamp and
a fresh order reference, so retrying checkout produces a new payload.
"""

from __future__ import annotations

import random
import string
import time
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from storefront.application.cart_store import CartStore
from storefront.application.dto import OrderPayload, OrderPayloadItem

_BASE36 = string.digits + string.ascii_lowercase


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_reference(prefix: str = "sf") -> str:
    """``<prefix>_<epoch millis>_<9 random base36 chars>``."""
    suffix = "".join(random.choice(_BASE36) for _ in range(9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


class OrderPayloadBuilder:

    def __init__(
        self,
        cart: CartStore,
        reference_prefix: str = "sf",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._cart = cart
        self._reference_prefix = reference_prefix
        self._clock = clock

    def build(self, customer_info: Mapping[str, Any]) -> OrderPayload:
        return OrderPayload(
            reference=generate_reference(self._reference_prefix),
            customer=dict(customer_info),
            items=tuple(
                OrderPayloadItem(
                    id=item.product_id,
                    name=item.name,
                    size=item.size,
                    color=item.color,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in self._cart.items
            ),
            subtotal=self._cart.get_subtotal(),
            shipping=self._cart.get_shipping(),
            total=self._cart.get_total(),
            currency=self._cart.currency,
            timestamp=self._clock().isoformat(),
        )
