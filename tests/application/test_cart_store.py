"""Tests for the persistent CartStore.

Uses an in-memory fake repository and a recording notifier.
"""

import pytest

from storefront.application.cart_store import CartStore
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, RecordingNotifier, make_product


def _setup(
    items: list[CartLineItem] | None = None,
) -> tuple[CartStore, FakeCartRepository, RecordingNotifier]:
    repo = FakeCartRepository(items)
    notifier = RecordingNotifier()
    store = CartStore(repo, notifier=notifier, notification_duration_ms=1500)
    return store, repo, notifier


def _line(product_id: str, price: str, shipping: str, qty: int) -> CartLineItem:
    return CartLineItem(
        product_id=product_id,
        name=product_id.title(),
        price=Money.of(price),
        shipping=Money.of(shipping),
        size="M",
        color="Black",
        quantity=qty,
    )


class TestCartStoreInit:

    def test_loads_stored_lines(self):
        store, _, notifier = _setup([_line("a", "100", "10", 2)])
        assert len(store.items) == 1
        assert store.get_item_count() == 2
        assert notifier.counts == [2]

    def test_missing_slot_is_empty(self):
        store, _, _ = _setup()
        assert store.is_empty()

    def test_unreadable_slot_is_empty(self):
        repo = FakeCartRepository([_line("a", "100", "10", 2)])
        repo.fail_on_load = True
        store = CartStore(repo)
        assert store.is_empty()

    def test_lines_in_another_currency_are_dropped(self):
        foreign = CartLineItem(
            product_id="usd",
            name="Import",
            price=Money.of("5", "USD"),
            shipping=Money.of("1", "USD"),
        )
        store, _, _ = _setup([_line("a", "100", "10", 1), foreign])
        assert [i.product_id for i in store.items] == ["a"]


class TestCartStoreAdd:

    def test_add_persists_and_notifies(self):
        store, repo, notifier = _setup()
        item = store.add(make_product(), "M", "Black", 2)

        assert item.quantity == 2
        assert repo.stored == [item]
        assert notifier.messages == ["Logo Tee added to cart"]
        assert notifier.notifications[0].kind == "success"
        assert notifier.notifications[0].duration_ms == 1500
        assert notifier.counts[-1] == 2

    def test_same_combination_merges(self):
        store, repo, _ = _setup()
        product = make_product()
        store.add(product, "M", "Black", 2)
        item = store.add(product, "M", "Black", 3)

        assert item.quantity == 5
        assert len(store.items) == 1
        assert repo.stored[0].quantity == 5

    def test_none_variants_are_stored_as_empty(self):
        store, _, _ = _setup()
        store.add(make_product(), None, None)
        store.add(make_product(), "", "")
        assert len(store.items) == 1
        assert store.items[0].quantity == 2

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity_is_ignored(self, qty):
        store, repo, notifier = _setup()
        assert store.add(make_product(), "M", "Black", qty) is None
        assert store.is_empty()
        assert repo.save_count == 0
        assert notifier.messages == []

    def test_fractional_quantity_is_ignored(self):
        store, repo, notifier = _setup()
        assert store.add(make_product(), "M", "Black", 1.5) is None
        assert store.is_empty()
        assert repo.save_count == 0
        assert notifier.messages == []

    def test_save_failure_does_not_raise(self):
        store, repo, notifier = _setup()
        repo.fail_on_save = True
        item = store.add(make_product(), "M", "Black")
        assert item is not None
        assert store.get_item_count() == 1
        assert notifier.counts[-1] == 1


class TestCartStoreRemoveUpdateClear:

    def _store(self):
        return _setup([_line("a", "100", "10", 2), _line("b", "50", "5", 1)])

    def test_remove_persists_and_notifies(self):
        store, repo, notifier = self._store()
        store.remove(0)
        assert [i.product_id for i in repo.stored] == ["b"]
        assert notifier.messages == ["A removed from cart"]
        assert notifier.counts[-1] == 1

    @pytest.mark.parametrize("index", [-1, 2])
    def test_remove_out_of_bounds_is_noop(self, index):
        store, repo, notifier = self._store()
        store.remove(index)
        assert len(store.items) == 2
        assert repo.save_count == 0
        assert notifier.messages == []

    def test_update_quantity(self):
        store, repo, _ = self._store()
        store.update_quantity(1, 4)
        assert store.items[1].quantity == 4
        assert repo.stored[1].quantity == 4

    def test_update_quantity_to_zero_removes_line(self):
        store, _, notifier = self._store()
        before = store.get_item_count()
        store.update_quantity(0, 0)
        assert store.get_item_count() == before - 2
        assert notifier.messages == ["A removed from cart"]

    def test_update_quantity_out_of_bounds_is_noop(self):
        store, repo, _ = self._store()
        store.update_quantity(5, 3)
        assert repo.save_count == 0

    def test_update_quantity_ignores_non_integer(self):
        store, repo, _ = self._store()
        store.update_quantity(1, 2.5)
        assert store.items[1].quantity == 1
        assert repo.save_count == 0

    def test_clear(self):
        store, repo, notifier = self._store()
        store.clear()
        assert store.is_empty()
        assert repo.stored == []
        assert notifier.counts[-1] == 0


class TestCartStoreTotals:

    def test_totals(self):
        store, _, _ = _setup([_line("a", "100", "10", 2), _line("b", "50", "5", 1)])
        assert store.get_subtotal() == Money.of("250")
        assert store.get_shipping() == Money.of("25")
        assert store.get_total() == Money.of("275")

    def test_items_view_is_read_only(self):
        store, _, _ = _setup([_line("a", "100", "10", 2)])
        assert isinstance(store.items, tuple)


class TestCartStoreRoundTrip:

    def test_reload_reconstructs_identical_lines(self):
        repo = FakeCartRepository()
        first = CartStore(repo)
        first.add(make_product("a", "Alpha"), "M", "Black", 2)
        first.add(make_product("b", "Beta"), "L", "White", 1)

        second = CartStore(repo)
        assert second.items == first.items
