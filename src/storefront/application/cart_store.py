"""Application service: the shopper's persistent cart.

Wraps the Cart aggregate with durable storage and user feedback. Every
mutation is written through to the repository before it returns and
refreshes the visible item counter. Storage problems are logged and
otherwise ignored; the cart keeps working in memory.
"""

from __future__ import annotations

from storefront.application.dto import Notification
from storefront.application.notifications import Notifier, SilentNotifier
from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.cart import Cart, CartLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.logger import get_logger

logger = get_logger(__name__)


class CartStore:

    def __init__(
        self,
        repository: CartRepository,
        notifier: Notifier | None = None,
        currency: str = DEFAULT_CURRENCY,
        notification_duration_ms: int = 3000,
    ) -> None:
        self._repository = repository
        self._notifier = notifier or SilentNotifier()
        self._duration_ms = notification_duration_ms
        self._cart = Cart(currency=currency)
        self._load()
        self._notifier.update_item_count(self.get_item_count())

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        product: Product,
        size: str = "",
        color: str = "",
        quantity: int = 1,
    ) -> CartLineItem | None:
        """Add *quantity* units; the same product/size/color merges into one line."""
        if quantity <= 0:
            logger.warning(
                "Ignoring add of %s with non-positive quantity %s", product.id, quantity
            )
            return None

        try:
            item = self._cart.add(product, size or "", color or "", quantity)
        except ValidationError as exc:
            logger.warning("Ignoring add of %s: %s", product.id, exc)
            return None
        self._save()
        self._notify(f"{product.name} added to cart")
        return item

    def remove(self, index: int) -> None:
        removed = self._cart.remove(index)
        if removed is None:
            return
        self._save()
        self._notify(f"{removed.name} removed from cart")

    def update_quantity(self, index: int, quantity: int) -> None:
        if not self._cart.in_bounds(index):
            return
        if quantity <= 0:
            self.remove(index)
            return
        try:
            self._cart.update_quantity(index, quantity)
        except ValidationError as exc:
            logger.warning("Ignoring quantity update at position %d: %s", index, exc)
            return
        self._save()

    def clear(self) -> None:
        self._cart.clear()
        self._save()

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return tuple(self._cart.items)

    @property
    def currency(self) -> str:
        return self._cart.currency

    def get_item_count(self) -> int:
        return self._cart.item_count

    def get_subtotal(self) -> Money:
        return self._cart.subtotal

    def get_shipping(self) -> Money:
        return self._cart.shipping

    def get_total(self) -> Money:
        return self._cart.total

    def is_empty(self) -> bool:
        return self._cart.is_empty

    # --- Persistence ----------------------------------------------------------

    def _load(self) -> None:
        try:
            items = self._repository.load()
        except StorageError:
            logger.exception("Error loading cart; starting empty")
            items = []

        kept = [i for i in items if i.price.currency == self._cart.currency]
        if len(kept) != len(items):
            logger.warning(
                "Discarding %d stored cart line(s) priced in another currency",
                len(items) - len(kept),
            )

        self._cart.items = kept

    def _save(self) -> None:
        try:
            self._repository.save(list(self._cart.items))
        except StorageError:
            logger.exception("Error saving cart")
        self._notifier.update_item_count(self.get_item_count())

    def _notify(self, message: str) -> None:
        self._notifier.notify(
            Notification(message=message, kind="success", duration_ms=self._duration_ms)
        )
