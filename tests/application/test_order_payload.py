"""Tests for the OrderPayloadBuilder use case."""

import re
from datetime import datetime, timezone

from storefront.application.cart_store import CartStore
from storefront.application.order_payload import OrderPayloadBuilder, generate_reference
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, make_product

FIXED_NOW = datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)
CUSTOMER = {"name": "Thandi", "email": "thandi@example.com"}


def _setup() -> tuple[OrderPayloadBuilder, CartStore, FakeCartRepository]:
    repo = FakeCartRepository()
    store = CartStore(repo)
    store.add(make_product("a", "Alpha", price="100", shipping="10"), "M", "Black", 2)
    store.add(make_product("b", "Beta", price="50", shipping="5"), "", "", 1)
    builder = OrderPayloadBuilder(store, reference_prefix="kk", clock=lambda: FIXED_NOW)
    return builder, store, repo


class TestOrderPayloadBuilder:

    def test_totals_and_currency(self):
        builder, _, _ = _setup()
        payload = builder.build(CUSTOMER)
        assert payload.subtotal == Money.of("250")
        assert payload.shipping == Money.of("25")
        assert payload.total == Money.of("275")
        assert payload.currency == "ZAR"
        assert payload.timestamp == "2026-03-01T12:30:00+00:00"

    def test_items_snapshot(self):
        builder, _, _ = _setup()
        first = builder.build(CUSTOMER).items[0]
        assert (first.id, first.name, first.size, first.color, first.quantity) == (
            "a", "Alpha", "M", "Black", 2,
        )
        assert first.price == Money.of("100")

    def test_does_not_mutate_cart(self):
        builder, store, repo = _setup()
        saves = repo.save_count
        before = store.items
        builder.build(CUSTOMER)
        assert store.items == before
        assert repo.save_count == saves

    def test_customer_is_copied(self):
        builder, _, _ = _setup()
        customer = dict(CUSTOMER)
        payload = builder.build(customer)
        customer["name"] = "Changed"
        assert payload.customer["name"] == "Thandi"

    def test_each_build_gets_fresh_timestamp_and_reference(self):
        times = iter([FIXED_NOW, datetime(2026, 3, 1, 12, 31, tzinfo=timezone.utc)])
        store = CartStore(FakeCartRepository())
        builder = OrderPayloadBuilder(store, clock=lambda: next(times))
        one, two = builder.build({}), builder.build({})
        assert one.timestamp != two.timestamp
        assert one.reference != two.reference

    def test_to_dict_omits_shipping_and_image_per_item(self):
        builder, _, _ = _setup()
        data = builder.build(CUSTOMER).to_dict()
        assert set(data["items"][0]) == {"id", "name", "size", "color", "quantity", "price"}
        assert data["items"][0]["price"] == 100.0
        assert data["total"] == 275.0
        assert data["customer"] == CUSTOMER

    def test_empty_cart(self):
        builder = OrderPayloadBuilder(CartStore(FakeCartRepository()))
        payload = builder.build({})
        assert payload.items == ()
        assert payload.total == Money.zero()


class TestGenerateReference:

    def test_format(self):
        assert re.fullmatch(r"kk_\d{13}_[0-9a-z]{9}", generate_reference("kk"))
