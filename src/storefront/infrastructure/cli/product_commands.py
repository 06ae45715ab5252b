"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.catalog import Catalog, SortOrder
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import catalog, config, image_resolver

SORT_CHOICES = [order.value for order in SortOrder]


def _display_products(cat: Catalog, products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<14} {'Name':<30} {'Category':<12} {'Price':>10}")
    click.echo("-" * 69)
    for p in products:
        badge = " *" if p.featured else ""
        click.echo(
            f"{p.id:<14} {p.name[:30]:<30} {p.category[:12]:<12} "
            f"{cat.format_price(p.price):>10}{badge}"
        )


@click.command("list")
@click.option("--category", default=None, help="Category name, or 'all'.")
@click.option("--search", "query", default=None, help="Text to look for in name, description or category.")
@click.option("--sort", "sort_by", type=click.Choice(SORT_CHOICES), default=None, help="Sort order.")
def product_list(category: str | None, query: str | None, sort_by: str | None) -> None:
    """List products, optionally filtered, searched and sorted."""
    cat = catalog(config())

    products = cat.get_by_category(category)
    if query:
        matching = {p.id for p in cat.search(query)}
        products = [p for p in products if p.id in matching]

    _display_products(cat, cat.sort(products, sort_by))


@click.command("featured")
@click.option("--limit", default=8, show_default=True, type=int, help="Maximum number of products.")
def product_featured(limit: int) -> None:
    """List featured products."""
    cat = catalog(config())
    _display_products(cat, cat.featured(limit))


@click.command("categories")
def product_categories() -> None:
    """List product categories in catalog order."""
    for name in catalog(config()).categories():
        click.echo(name)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    cfg = config()
    cat = catalog(cfg)
    resolver = image_resolver(cfg)

    product = cat.get_by_id(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    click.echo(f"{product.name}  ({product.id})")
    click.echo(f"Category: {product.category or '-'}")
    click.echo(f"Price:    {cat.format_price(product.price)}")
    click.echo(f"Shipping: {cat.format_price(product.shipping)}")
    click.echo(f"Sizes:    {', '.join(product.sizes) or '-'}")
    click.echo(f"Colors:   {', '.join(product.colors) or '-'}")
    click.echo(f"In stock: {'yes' if product.in_stock else 'no'}")
    click.echo(f"Image:    {resolver.resolve(product.image)}")
    for extra in product.images:
        click.echo(f"          {resolver.resolve(extra)}")
    if product.description:
        click.echo()
        click.echo(product.description)


@click.command("status")
def product_status() -> None:
    """Show where the catalog was loaded from."""
    cat = catalog(config())
    cat.load()
    status = cat.status

    click.echo(f"Source:       {status.source.value if status.source else '-'}")
    click.echo(f"Products:     {status.product_count}")
    click.echo(f"Dropped rows: {status.dropped_rows}")
    if status.error:
        click.echo(f"Feed error:   {status.error}")
