"""CLI command that prepares a checkout for the payment step."""

from __future__ import annotations

import json

import click

from storefront.application.customer import is_valid_email, is_valid_phone
from storefront.infrastructure.bootstrap import cart_store, config, order_payload_builder


@click.command("checkout")
@click.option("--name", required=True, help="Customer full name.")
@click.option("--email", required=True, help="Customer email address.")
@click.option("--phone", required=True, help="Customer phone number.")
@click.option("--address", default="", help="Delivery address.")
def checkout(name: str, email: str, phone: str, address: str) -> None:
    """Print the order payload for the payment provider as JSON.

    The cart is left untouched; clear it once the payment succeeds.
    """
    if not name.strip():
        raise click.BadParameter("Name is required.", param_hint="--name")
    if not is_valid_email(email):
        raise click.BadParameter(f"'{email}' is not a valid email address.", param_hint="--email")
    if not is_valid_phone(phone):
        raise click.BadParameter(f"'{phone}' is not a valid phone number.", param_hint="--phone")

    cfg = config()
    store = cart_store(cfg)
    if store.is_empty():
        raise click.ClickException("Your cart is empty.")

    payload = order_payload_builder(cfg, store).build({
        "name": name.strip(),
        "email": email.strip(),
        "phone": phone.strip(),
        "address": address.strip(),
    })
    click.echo(json.dumps(payload.to_dict(), indent=2))
