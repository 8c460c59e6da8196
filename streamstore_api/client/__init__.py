"""
Client side of the storefront.

``StorefrontAPI`` wraps the HTTP endpoints, ``Cart`` holds the shopping
cart, ``Storefront`` keeps the view state and catalog mirrors, and
``AdminPanel`` drives catalog management once logged in.
"""

from .admin import AdminPanel
from .api import StorefrontAPI
from .cart import Cart, CartItem, build_checkout_url, build_order_message
from .storefront import Storefront

__all__ = [
    "AdminPanel",
    "Cart",
    "CartItem",
    "Storefront",
    "StorefrontAPI",
    "build_checkout_url",
    "build_order_message",
]
