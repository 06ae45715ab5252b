import locale

import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.product_commands import (
    product_categories,
    product_featured,
    product_list,
    product_show,
    product_status,
)
from storefront.logger import get_logger

logger = get_logger(__name__)


@click.group()
def cli() -> None:
    """Storefront — catalog browsing and cart"""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Falling back to the default collation: %s", exc)


@cli.group()
def products() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


# Register subcommands
products.add_command(product_categories)
products.add_command(product_featured)
products.add_command(product_list)
products.add_command(product_show)
products.add_command(product_status)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
cli.add_command(checkout)
