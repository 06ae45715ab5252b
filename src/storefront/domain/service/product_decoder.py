"""Domain service: decode parsed feed rows into Products.

Every recognised column has an explicit decoder with a defined fallback
value, so a sloppy cell never produces a half-typed product:

=============  ==============================================  ==========
column         decoded as                                      fallback
=============  ==============================================  ==========
price          leading decimal number                          0
shipping       leading decimal number                          0
sizes          comma separated list, trimmed, empties dropped  ()
colors         same as sizes                                   ()
images         same as sizes                                   ()
in_stock       true iff ``yes`` / ``true`` / ``1``             see below
featured       true iff ``yes`` / ``true`` / ``1``             False
=============  ==============================================  ==========

``in_stock`` follows the same rule when the column exists; a sheet with
no ``in_stock`` column at all treats every product as in stock.
Unrecognised columns are kept verbatim in ``Product.extra``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.service.csv_parser import parse_csv
from storefront.logger import get_logger

logger = get_logger(__name__)

KNOWN_COLUMNS = frozenset({
    "id", "name", "description", "price", "shipping", "category",
    "sizes", "colors", "image", "images", "in_stock", "featured",
})
TRUTHY = frozenset({"yes", "true", "1"})

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = re.compile(r"\s+")
BOM = "\ufeff"


@dataclass
class DecodedCatalog:
    """Result of decoding one feed: accepted products plus rejected row count."""

    products: list[Product] = field(default_factory=list)
    dropped_rows: int = 0


def normalize_header(header: str) -> str:
    return _WHITESPACE.sub("_", header.strip().lower())


def decode_number(raw: str) -> Decimal:
    """Read the leading number of *raw*; anything unreadable is zero."""
    match = _NUMBER_PREFIX.match(raw.strip())
    if not match:
        return Decimal("0")
    value = Decimal(match.group(0))
    if value < 0:
        logger.warning("Negative amount %r in feed coerced to 0", raw)
        return Decimal("0")
    return value


def decode_list(raw: str) -> tuple[str, ...]:
    return tuple(token.strip() for token in raw.split(",") if token.strip())


def decode_flag(raw: str) -> bool:
    return raw.strip().lower() in TRUTHY


class ProductDecoder:
    """Turns feed text into Products priced in a single currency."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self._currency = currency

    def decode_text(self, text: str) -> DecodedCatalog:
        # Spreadsheet exports may keep a byte-order mark in front of the header.
        rows = parse_csv(text.removeprefix(BOM))
        if len(rows) < 2:
            return DecodedCatalog()

        headers = [normalize_header(h) for h in rows[0]]
        result = DecodedCatalog()

        for line_no, values in enumerate(rows[1:], start=2):
            product = self.decode_row(headers, values)
            if product is None:
                result.dropped_rows += 1
                logger.debug("Dropped feed row %d: missing id, name or price", line_no)
                continue
            result.products.append(product)

        return result

    def decode_row(self, headers: list[str], values: list[str]) -> Product | None:
        """Build a Product from one row, or None if a required cell is empty."""
        cells: dict[str, str] = {}
        for index, header in enumerate(headers):
            cells[header] = values[index] if index < len(values) else ""

        product_id = cells.get("id", "")
        name = cells.get("name", "")
        raw_price = cells.get("price", "")
        if not product_id or not name or not raw_price:
            return None

        return Product(
            id=product_id,
            name=name,
            price=Money(decode_number(raw_price), self._currency),
            description=cells.get("description", ""),
            shipping=Money(decode_number(cells.get("shipping", "")), self._currency),
            category=cells.get("category", ""),
            sizes=decode_list(cells.get("sizes", "")),
            colors=decode_list(cells.get("colors", "")),
            image=cells.get("image", ""),
            images=decode_list(cells.get("images", "")),
            in_stock=decode_flag(cells["in_stock"]) if "in_stock" in cells else True,
            featured=decode_flag(cells.get("featured", "")),
            extra={k: v for k, v in cells.items() if k not in KNOWN_COLUMNS},
        )
