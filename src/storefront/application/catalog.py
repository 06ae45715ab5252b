"""Application service: the product catalog for one browsing session.

Loads the feed at most once, falls back to the built-in demo products
when the feed is unavailable, and answers every listing query from the
in-memory result. A new session means a new Catalog instance.
"""

from __future__ import annotations

import locale
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from storefront.domain.exceptions import FeedError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_feed import CatalogFeed
from storefront.domain.service.product_decoder import ProductDecoder
from storefront.logger import get_logger

logger = get_logger(__name__)

ALL_CATEGORIES = "all"
DEFAULT_FEATURED_LIMIT = 8


class CatalogState(Enum):
    UNLOADED = "UNLOADED"
    LOADED = "LOADED"


class CatalogSource(Enum):
    FEED = "FEED"
    FALLBACK = "FALLBACK"


class SortOrder(Enum):
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME = "name"
    NEWEST = "newest"  # feed order

    @classmethod
    def parse(cls, value: str | SortOrder | None) -> SortOrder:
        """Unknown or missing sort keys mean feed order."""
        if isinstance(value, SortOrder):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST


@dataclass(frozen=True)
class CatalogStatus:
    """Where the current product list came from.

    Lets callers tell a live feed from the demo fallback, which the
    product list alone cannot show.
    """

    state: CatalogState
    source: CatalogSource | None = None
    error: str | None = None
    dropped_rows: int = 0
    product_count: int = 0


class Catalog:

    def __init__(
        self,
        feed: CatalogFeed,
        decoder: ProductDecoder,
        fallback: Callable[[], list[Product]] = list,
        currency_symbol: str = "R",
    ) -> None:
        self._feed = feed
        self._decoder = decoder
        self._fallback = fallback
        self._currency_symbol = currency_symbol

        self._state = CatalogState.UNLOADED
        self._status = CatalogStatus(state=CatalogState.UNLOADED)
        self._items: list[Product] = []
        self._categories: list[str] = []

    # --- Loading --------------------------------------------------------------

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def status(self) -> CatalogStatus:
        return self._status

    def load(self) -> list[Product]:
        """Return the catalog, fetching the feed on the first call only.

        Never raises: any feed failure degrades to the fallback products
        for the rest of this instance's life.
        """
        if self._state is CatalogState.LOADED:
            return list(self._items)

        try:
            text = self._feed.fetch()
        except FeedError as exc:
            logger.warning("Catalog feed unavailable, using fallback products: %s", exc)
            self._transition(self._fallback(), CatalogSource.FALLBACK, error=str(exc))
        else:
            decoded = self._decoder.decode_text(text)
            if decoded.dropped_rows:
                logger.info(
                    "Dropped %d feed row(s) missing id, name or price",
                    decoded.dropped_rows,
                )
            self._transition(
                decoded.products, CatalogSource.FEED, dropped_rows=decoded.dropped_rows
            )

        return list(self._items)

    def _transition(
        self,
        products: list[Product],
        source: CatalogSource,
        error: str | None = None,
        dropped_rows: int = 0,
    ) -> None:
        self._items = list(products)
        self._categories = _unique_categories(self._items)
        self._state = CatalogState.LOADED
        self._status = CatalogStatus(
            state=CatalogState.LOADED,
            source=source,
            error=error,
            dropped_rows=dropped_rows,
            product_count=len(self._items),
        )
        logger.info("Catalog loaded: %d product(s) from %s", len(self._items), source.value)

    # --- Queries --------------------------------------------------------------

    def categories(self) -> list[str]:
        self.load()
        return list(self._categories)

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self.load():
            if product.id == product_id:
                return product
        return None

    def get_by_category(self, category: str | None) -> list[Product]:
        products = self.load()
        if not category or category.lower() == ALL_CATEGORIES:
            return products
        wanted = category.lower()
        return [p for p in products if p.category and p.category.lower() == wanted]

    def search(self, query: str | None) -> list[Product]:
        products = self.load()
        if not query:
            return products
        return [p for p in products if p.matches(query)]

    def featured(self, limit: int = DEFAULT_FEATURED_LIMIT) -> list[Product]:
        """Flagged products, or the first *limit* products when none are flagged."""
        products = self.load()
        flagged = [p for p in products if p.featured]
        return (flagged or products)[:max(limit, 0)]

    @staticmethod
    def sort(products: Iterable[Product], sort_by: str | SortOrder | None) -> list[Product]:
        """Return a new, stably sorted list; unknown keys keep feed order."""
        ordered = list(products)
        order = SortOrder.parse(sort_by)

        if order is SortOrder.PRICE_LOW:
            ordered.sort(key=lambda p: p.price.amount)
        elif order is SortOrder.PRICE_HIGH:
            ordered.sort(key=lambda p: p.price.amount, reverse=True)
        elif order is SortOrder.NAME:
            ordered.sort(key=lambda p: _name_key(p.name))

        return ordered

    def format_price(self, price: Money) -> str:
        return price.format(self._currency_symbol)


def _name_key(name: str) -> str:
    """Collation key that ignores case and accents, so "Éclair" sorts with "E"."""
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c))
    return locale.strxfrm(folded.casefold())


def _unique_categories(products: list[Product]) -> list[str]:
    seen: dict[str, None] = {}
    for product in products:
        if product.category:
            seen.setdefault(product.category, None)
    return list(seen)
