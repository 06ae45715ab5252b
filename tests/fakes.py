"""In-memory fakes for testing.

These implement the same abstract interfaces as the real adapters
but keep everything in memory. No file I/O, no network.
"""

from __future__ import annotations

import copy

from storefront.application.dto import Notification
from storefront.application.notifications import Notifier
from storefront.domain.exceptions import FeedError, StorageError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.catalog_feed import CatalogFeed


class FakeCartRepository(CartRepository):

    def __init__(self, items: list[CartLineItem] | None = None) -> None:
        self._stored = copy.deepcopy(items) if items is not None else None
        self.fail_on_load = False
        self.fail_on_save = False
        self.save_count = 0

    @property
    def stored(self) -> list[CartLineItem]:
        return copy.deepcopy(self._stored or [])

    def load(self) -> list[CartLineItem]:
        if self.fail_on_load:
            raise StorageError("slot is corrupt")
        return copy.deepcopy(self._stored or [])

    def save(self, items: list[CartLineItem]) -> None:
        if self.fail_on_save:
            raise StorageError("quota exceeded")
        self.save_count += 1
        self._stored = copy.deepcopy(items)


class FakeCatalogFeed(CatalogFeed):

    def __init__(self, text: str = "", error: str | None = None) -> None:
        self._text = text
        self._error = error
        self.fetch_count = 0

    def fetch(self) -> str:
        self.fetch_count += 1
        if self._error is not None:
            raise FeedError(self._error)
        return self._text


class RecordingNotifier(Notifier):

    def __init__(self) -> None:
        self.notifications: list[Notification] = []
        self.counts: list[int] = []

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def update_item_count(self, count: int) -> None:
        self.counts.append(count)


def make_product(
    product_id: str = "tee-1",
    name: str = "Logo Tee",
    price: str = "100",
    shipping: str = "10",
    category: str = "T-Shirts",
    **kwargs,
) -> Product:
    """Helper to build a valid product."""
    return Product(
        id=product_id,
        name=name,
        price=Money.of(price),
        shipping=Money.of(shipping),
        category=category,
        **kwargs,
    )
