"""Abstract repository for the Cart's durable slot.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLineItem


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartLineItem]:
        """Return the stored line items, or an empty list if nothing is stored.

        Raises StorageError when the slot exists but cannot be read or decoded.
        """

    @abstractmethod
    def save(self, items: list[CartLineItem]) -> None:
        """Overwrite the stored line items. Raises StorageError on failure."""
