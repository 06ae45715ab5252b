"""Built-in demo catalog served when the feed cannot be fetched."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money

_UNSPLASH = "https://images.unsplash.com/photo-{}?w=600"

# id, name, description, price, shipping, category, sizes, colors, photo, featured
_DEMO_ROWS = [
    (
        "tshirt-001", "Classic Logo Tee",
        "Premium cotton t-shirt featuring the store logo. Comfortable fit "
        "with high-quality screen printing.",
        450, 75, "T-Shirts", ("S", "M", "L", "XL", "XXL"),
        ("Black", "White", "Navy"), "1521572163474-6864f9cf17ab", True,
    ),
    (
        "tshirt-002", "Urban Streetwear Tee",
        "Bold streetwear design on soft-touch fabric. Stand out with this "
        "statement piece.",
        550, 75, "T-Shirts", ("S", "M", "L", "XL"),
        ("Black", "Grey"), "1503341504253-dff4815485f1", True,
    ),
    (
        "tshirt-003", "Limited Edition Graphic Tee",
        "Exclusive limited edition design. Premium heavyweight cotton.",
        650, 75, "T-Shirts", ("M", "L", "XL"),
        ("Black",), "1583743814966-8936f5b7be1a", True,
    ),
    (
        "cap-001", "Signature Snapback",
        "Adjustable snapback cap with embroidered logo. One size fits most.",
        350, 50, "Caps", ("One Size",),
        ("Black", "Navy", "Khaki"), "1588850561407-ed78c282e89b", True,
    ),
    (
        "cap-002", "Dad Cap - Minimal",
        "Relaxed fit dad cap with subtle branding. Curved brim, adjustable strap.",
        299, 50, "Caps", ("One Size",),
        ("Black", "White", "Olive"), "1521369909029-2afed882baee", True,
    ),
    (
        "cap-003", "Trucker Cap",
        "Classic trucker style with mesh back. Perfect for sunny days.",
        320, 50, "Caps", ("One Size",),
        ("Black/White", "Navy/White"), "1534215754734-18e55d13e346", False,
    ),
]


def fallback_products(currency: str = DEFAULT_CURRENCY) -> list[Product]:
    products = []
    for (pid, name, description, price, shipping, category,
         sizes, colors, photo, featured) in _DEMO_ROWS:
        image = _UNSPLASH.format(photo)
        products.append(
            Product(
                id=pid,
                name=name,
                description=description,
                price=Money.of(price, currency),
                shipping=Money.of(shipping, currency),
                category=category,
                sizes=sizes,
                colors=colors,
                image=image,
                images=(image,),
                in_stock=True,
                featured=featured,
            )
        )
    return products
