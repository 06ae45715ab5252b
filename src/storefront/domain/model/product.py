"""Product entity.

Products are built once per catalog load from decoded feed rows and are
never mutated afterwards. A fresh load replaces the whole list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``extra`` holds any feed columns the decoder does not recognise,
    keyed by their normalised header name.
    """

    id: str
    name: str
    price: Money
    description: str = ""
    shipping: Money = field(default_factory=Money.zero)
    category: str = ""
    sizes: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    image: str = ""
    images: tuple[str, ...] = ()
    in_stock: bool = True
    featured: bool = False
    extra: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # frozen=True does not cover the mapping itself.
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over name, description and category."""
        q = query.lower()
        return (
            q in self.name.lower()
            or q in self.description.lower()
            or q in self.category.lower()
        )
