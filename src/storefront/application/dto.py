"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data from the application layer to the CLI and to the
external payment step without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Notification:
    """A user-facing confirmation message (the storefront's toast)."""

    message: str
    kind: str = "success"  # success | error | warning
    duration_ms: int = 3000


@dataclass(frozen=True)
class OrderPayloadItem:
    """Snapshot of one cart line as the payment step sees it.

    Shipping and image are intentionally left out.
    """

    id: str
    name: str
    size: str
    color: str
    quantity: int
    price: Money


@dataclass(frozen=True)
class OrderPayload:
    """Everything the payment collaborator needs for one checkout attempt."""

    reference: str
    customer: Mapping[str, Any]
    items: tuple[OrderPayloadItem, ...]
    subtotal: Money
    shipping: Money
    total: Money
    currency: str
    timestamp: str  # ISO-8601, UTC

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready structure; amounts become numbers."""
        return {
            "reference": self.reference,
            "customer": dict(self.customer),
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "size": item.size,
                    "color": item.color,
                    "quantity": item.quantity,
                    "price": float(item.price.amount),
                }
                for item in self.items
            ],
            "subtotal": float(self.subtotal.amount),
            "shipping": float(self.shipping.amount),
            "total": float(self.total.amount),
            "currency": self.currency,
            "timestamp": self.timestamp,
        }
