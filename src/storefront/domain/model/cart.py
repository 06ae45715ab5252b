"""Cart aggregate.

The Cart owns an ordered list of line items. Each line captures a
snapshot of the product at add-time, so later catalog reloads never
change what is already in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


@dataclass
class CartLineItem:
    """One product/size/color combination and how many units of it.

    ``quantity`` is a plain int so it can be bumped in place; the Cart
    keeps it positive by removing lines instead of storing zero.
    """

    product_id: str
    name: str
    price: Money  # snapshot at add-time
    shipping: Money
    image: str = ""
    category: str = ""
    size: str = ""
    color: str = ""
    quantity: int = 1

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.product_id, self.size, self.color)

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

    @property
    def shipping_total(self) -> Money:
        return self.shipping * self.quantity

    @staticmethod
    def snapshot(product: Product, size: str, color: str, quantity: int) -> CartLineItem:
        return CartLineItem(
            product_id=product.id,
            name=product.name,
            price=product.price,
            shipping=product.shipping,
            image=product.image,
            category=product.category,
            size=size,
            color=color,
            quantity=Quantity(quantity).value,
        )


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariant: at most one line per ``(product_id, size, color)``.
    Index-based operations ignore out-of-range positions.
    """

    currency: str = DEFAULT_CURRENCY
    items: list[CartLineItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        product: Product,
        size: str = "",
        color: str = "",
        quantity: int = 1,
    ) -> CartLineItem:
        """Merge into the matching line or append a new snapshot."""
        Quantity(quantity)
        existing = self._find((product.id, size, color))
        if existing is not None:
            existing.quantity += quantity
            return existing

        item = CartLineItem.snapshot(product, size, color, quantity)
        self.items.append(item)
        return item

    def remove(self, index: int) -> CartLineItem | None:
        """Delete the line at *index*; returns it, or None when out of range."""
        if not self.in_bounds(index):
            return None
        return self.items.pop(index)

    def update_quantity(self, index: int, quantity: int) -> CartLineItem | None:
        """Overwrite a line's quantity; a quantity of zero or less removes it."""
        if not self.in_bounds(index):
            return None
        if quantity <= 0:
            return self.remove(index)
        item = self.items[index]
        item.quantity = Quantity(quantity).value
        return item

    def clear(self) -> None:
        self.items = []

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def shipping(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.shipping_total
        return result

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self.items)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, key: tuple[str, str, str]) -> CartLineItem | None:
        for item in self.items:
            if item.key == key:
                return item
        return None
