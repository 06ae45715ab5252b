"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import partial

from storefront.application.cart_store import CartStore
from storefront.application.catalog import Catalog
from storefront.application.notifications import Notifier
from storefront.application.order_payload import OrderPayloadBuilder
from storefront.domain.service.image_url_resolver import ImageUrlResolver
from storefront.domain.service.product_decoder import ProductDecoder
from storefront.infrastructure.config import StoreConfig
from storefront.infrastructure.feed.fallback import fallback_products
from storefront.infrastructure.feed.http_feed import HttpCatalogFeed
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)


def config() -> StoreConfig:
    return StoreConfig.from_env()


def catalog(cfg: StoreConfig) -> Catalog:
    return Catalog(
        feed=HttpCatalogFeed(cfg.feed_url, timeout=cfg.feed_timeout),
        decoder=ProductDecoder(currency=cfg.currency),
        fallback=partial(fallback_products, cfg.currency),
        currency_symbol=cfg.currency_symbol,
    )


def cart_store(cfg: StoreConfig, notifier: Notifier | None = None) -> CartStore:
    repository = JsonCartRepository(
        cfg.storage_file,
        storage_key=cfg.cart_storage_key,
        currency=cfg.currency,
    )
    return CartStore(
        repository,
        notifier=notifier,
        currency=cfg.currency,
        notification_duration_ms=cfg.notification_duration_ms,
    )


def order_payload_builder(cfg: StoreConfig, cart: CartStore) -> OrderPayloadBuilder:
    return OrderPayloadBuilder(cart, reference_prefix=cfg.order_prefix)


def image_resolver(cfg: StoreConfig) -> ImageUrlResolver:
    return ImageUrlResolver(width=cfg.image_width)
