"""JSON-file-backed implementation of CartRepository.

The file is a small key/value store: a JSON object whose keys are
storage slots. The cart occupies one slot; other slots are left alone.
There is no locking, so two processes writing the same file race and
the last writer wins.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.logger import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "storefront_cart"


class JsonCartRepository(CartRepository):

    def __init__(
        self,
        file_path: Path,
        storage_key: str = DEFAULT_STORAGE_KEY,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._file_path = file_path
        self._storage_key = storage_key
        self._currency = currency

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartLineItem]:
        slot = self._read_slots().get(self._storage_key)
        if slot is None:
            return []
        if not isinstance(slot, list):
            raise StorageError(f"Cart slot '{self._storage_key}' is not a list")
        return [self._to_domain(raw) for raw in slot]

    def save(self, items: list[CartLineItem]) -> None:
        try:
            slots = self._read_slots()
        except StorageError as exc:
            logger.warning("Overwriting unreadable storage file %s: %s", self._file_path, exc)
            slots = {}

        slots[self._storage_key] = [self._to_raw(item) for item in items]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(slots, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartLineItem) -> dict:
        return {
            "id": item.product_id,
            "name": item.name,
            "price": str(item.price.amount),
            "shipping": str(item.shipping.amount),
            "image": item.image,
            "size": item.size,
            "color": item.color,
            "quantity": item.quantity,
            "category": item.category,
            "currency": item.price.currency,
        }

    def _to_domain(self, raw: object) -> CartLineItem:
        if not isinstance(raw, dict):
            raise StorageError(f"Cart line is not an object: {raw!r}")
        try:
            currency = raw.get("currency") or self._currency
            return CartLineItem(
                product_id=str(raw["id"]),
                name=str(raw["name"]),
                # Older carts stored plain numbers; str() keeps them exact.
                price=Money(Decimal(str(raw["price"])), currency),
                shipping=Money(Decimal(str(raw.get("shipping") or 0)), currency),
                image=raw.get("image") or "",
                category=raw.get("category") or "",
                size=raw.get("size") or "",
                color=raw.get("color") or "",
                quantity=Quantity(raw["quantity"]).value,
            )
        except (KeyError, InvalidOperation, ValidationError) as exc:
            raise StorageError(f"Malformed cart line {raw!r}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _read_slots(self) -> dict:
        if not self._file_path.exists():
            return {}
        try:
            slots = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(slots, dict):
            raise StorageError(f"{self._file_path} does not hold a JSON object")
        return slots
