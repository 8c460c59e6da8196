from decimal import Decimal
from urllib.parse import parse_qs, urlparse

import pytest

from streamstore_api.client.cart import Cart, build_checkout_url, build_order_message

NETFLIX = {"id": 1, "service_id": 1, "name": "Netflix 4K", "price": 24.9}
SPOTIFY = {"id": 2, "service_id": 2, "name": "Spotify Premium", "price": 11.6}


def test_adding_same_product_twice_increments_quantity():
    cart = Cart()
    cart.add(NETFLIX)
    cart.add(NETFLIX)
    assert len(cart) == 1
    assert cart.get(1).quantity == 2
    assert cart.count() == 2


def test_quantity_never_drops_below_one():
    cart = Cart()
    cart.add(NETFLIX)
    assert cart.update_quantity(1, -1).quantity == 1
    assert cart.update_quantity(1, -5).quantity == 1
    assert cart.update_quantity(1, 3).quantity == 4
    assert cart.update_quantity(99, 1) is None


def test_remove():
    cart = Cart()
    cart.add(NETFLIX)
    cart.add(SPOTIFY)
    assert cart.remove(1)
    assert not cart.remove(1)
    assert [item.id for item in cart] == [2]


def test_total_is_exact():
    cart = Cart()
    cart.add(NETFLIX)
    cart.add(SPOTIFY)
    assert cart.total() == Decimal("36.50")
    cart.update_quantity(1, 1)
    assert cart.total() == Decimal("61.40")
    cart.clear()
    assert cart.total() == Decimal("0.00")
    assert cart.count() == 0


def test_cart_items_are_copies():
    product = dict(NETFLIX)
    cart = Cart()
    cart.add(product)
    product["name"] = "changed"
    assert cart.get(1).name == "Netflix 4K"


def test_order_message():
    cart = Cart()
    cart.add(NETFLIX)
    cart.add(SPOTIFY)
    cart.add(SPOTIFY)
    assert build_order_message(cart) == (
        "*Novo Pedido - StreamStore*\n\n"
        "- Netflix 4K (1x): R$ 24.90\n"
        "- Spotify Premium (2x): R$ 23.20\n\n"
        "*Total: R$ 48.10*\n\n"
        "_Aguardando instruções para pagamento._"
    )


def test_checkout_url_carries_encoded_message():
    cart = Cart()
    cart.add(NETFLIX)
    url = build_checkout_url(cart, "+55 (85) 98234-9916", store_name="Loja")
    parsed = urlparse(url)
    assert parsed.scheme == "https"
    assert parsed.netloc == "wa.me"
    assert parsed.path == "/5585982349916"
    assert " " not in url and "\n" not in url
    text = parse_qs(parsed.query)["text"][0]
    assert text == build_order_message(cart, store_name="Loja")


def test_empty_cart_cannot_check_out():
    with pytest.raises(ValueError):
        build_order_message(Cart())
    with pytest.raises(ValueError):
        build_checkout_url(Cart(), "5585982349916")


def test_checkout_requires_phone_digits():
    cart = Cart()
    cart.add(NETFLIX)
    with pytest.raises(ValueError):
        build_checkout_url(cart, "n/a")


def test_total_over_quantities():
    cart = Cart()
    cart.add({"id": 10, "service_id": 1, "name": "A", "price": 10.00})
    cart.update_quantity(10, 1)
    cart.add({"id": 11, "service_id": 1, "name": "B", "price": 5.50})
    cart.update_quantity(11, 2)
    assert cart.total() == Decimal("36.50")
    assert cart.count() == 5
