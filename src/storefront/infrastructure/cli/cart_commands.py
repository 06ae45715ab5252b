"""CLI commands for the shopping cart.

Cart positions are shown and accepted 1-based.
"""

from __future__ import annotations

import click

from storefront.application.cart_store import CartStore
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import cart_store, catalog, config
from storefront.infrastructure.cli.notifier import ClickNotifier


def _pick_option(value: str | None, options: tuple[str, ...], label: str) -> str:
    """Default to the first option; reject values the product does not offer."""
    if not options:
        return value or ""
    if value is None:
        return options[0]
    for option in options:
        if option.lower() == value.lower():
            return option
    raise click.BadParameter(
        f"'{value}' is not available. Choose from: {', '.join(options)}.",
        param_hint=f"--{label}",
    )


def _display_cart(store: CartStore, symbol: str) -> None:
    def fmt(money: Money) -> str:
        return money.format(symbol)

    if store.is_empty():
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'#':>3} {'Product':<28} {'Variant':<16} {'Qty':>4} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*76}")
    for position, item in enumerate(store.items, start=1):
        variant = " / ".join(v for v in (item.size, item.color) if v) or "-"
        click.echo(
            f"  {position:>3} {item.name[:28]:<28} {variant[:16]:<16} {item.quantity:>4} "
            f"{fmt(item.price):>10} {fmt(item.line_total):>10}"
        )
    click.echo(f"  {'-'*76}")
    click.echo(f"  {'Subtotal':<53} {fmt(store.get_subtotal()):>22}")
    click.echo(f"  {'Shipping':<53} {fmt(store.get_shipping()):>22}")
    click.echo(f"  {'Total':<53} {fmt(store.get_total()):>22}")


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and totals."""
    cfg = config()
    _display_cart(cart_store(cfg), cfg.currency_symbol)


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--size", default=None, help="Size (defaults to the first offered).")
@click.option("--color", default=None, help="Color (defaults to the first offered).")
@click.option("--qty", default=1, show_default=True, type=click.IntRange(min=1), help="Quantity.")
def cart_add(product_id: str, size: str | None, color: str | None, qty: int) -> None:
    """Add a product to the cart."""
    cfg = config()
    product = catalog(cfg).get_by_id(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")
    if not product.in_stock:
        raise click.ClickException(f"{product.name} is out of stock")

    notifier = ClickNotifier()
    store = cart_store(cfg, notifier)
    store.add(
        product,
        _pick_option(size, product.sizes, "size"),
        _pick_option(color, product.colors, "color"),
        qty,
    )
    click.echo(f"Cart now holds {notifier.item_count} item(s).")


@click.command("remove")
@click.option("--index", required=True, type=int, help="Cart position (1-based).")
def cart_remove(index: int) -> None:
    """Remove a line from the cart."""
    cfg = config()
    notifier = ClickNotifier()
    store = cart_store(cfg, notifier)
    if not 1 <= index <= len(store.items):
        raise click.ClickException(f"No cart line at position {index}")
    store.remove(index - 1)
    click.echo(f"Cart now holds {notifier.item_count} item(s).")


@click.command("update")
@click.option("--index", required=True, type=int, help="Cart position (1-based).")
@click.option("--qty", required=True, type=int, help="New quantity; 0 removes the line.")
def cart_update(index: int, qty: int) -> None:
    """Change the quantity of a cart line."""
    cfg = config()
    notifier = ClickNotifier()
    store = cart_store(cfg, notifier)
    if not 1 <= index <= len(store.items):
        raise click.ClickException(f"No cart line at position {index}")
    store.update_quantity(index - 1, qty)
    click.echo(f"Cart now holds {notifier.item_count} item(s).")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    store = cart_store(config())
    store.clear()
    click.echo("Cart cleared.")
