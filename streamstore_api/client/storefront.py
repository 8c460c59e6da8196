"""Client-side state of the storefront.

``Storefront`` is what a presentation layer renders: the current view
(``home``, ``service`` or ``admin``), the catalog mirrors fetched from
the API, the cart and the administrator session flag.  Nothing is pushed
from the server; mirrors are refreshed by fetching again.

Checkout settings are read from the environment, as the bot reads its
configuration:

* ``WHATSAPP_NUMBER`` – shop number receiving orders.
* ``STORE_NAME`` – name in the order header.
* ``CURRENCY_SYMBOL`` – prefix of every amount.
"""

from __future__ import annotations

import logging
import os
import webbrowser
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from .admin import AdminPanel
from .api import Error, StorefrontAPI
from .cart import Cart, CartItem, build_checkout_url

logger = logging.getLogger(__name__)

VIEWS = ("home", "service", "admin")


class Storefront:
    """State holder and controller for the public storefront."""

    def __init__(
        self,
        api: StorefrontAPI,
        *,
        confirm: Callable[[str], bool],
        whatsapp_number: Optional[str] = None,
        store_name: Optional[str] = None,
        currency_symbol: Optional[str] = None,
        opener: Callable[[str], Any] = webbrowser.open,
    ) -> None:
        """
        Args:
            api: API client; it also carries the admin token once logged in.
            confirm: Confirmation prompt handed to the admin panel for deletes.
            opener: Receives the checkout deep link.
        """
        self.api = api
        self.confirm = confirm
        self.whatsapp_number = whatsapp_number or os.getenv("WHATSAPP_NUMBER", "5585982349916")
        self.store_name = store_name or os.getenv("STORE_NAME", "StreamStore")
        self.currency_symbol = currency_symbol or os.getenv("CURRENCY_SYMBOL", "R$")
        self.opener = opener

        self.view = "home"
        self.services: List[Dict[str, Any]] = []
        self.slides: List[Dict[str, Any]] = []
        # Products of the selected service only.
        self.products: List[Dict[str, Any]] = []
        self.selected_service: Optional[Dict[str, Any]] = None
        self.cart = Cart()
        self.cart_open = False
        self.is_admin = False
        self.admin_panel: Optional[AdminPanel] = None
        self.last_error: Optional[Error] = None

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def load(self) -> bool:
        """Fetch services and slides for the home page."""
        ok = self.refresh_services()
        slides, error = self.api.list_slides()
        if error:
            self.last_error = error
            return False
        self.slides = slides
        return ok

    def refresh_services(self) -> bool:
        services, error = self.api.list_services()
        if error:
            self.last_error = error
            return False
        self.services = services
        if self.selected_service is not None:
            # Keep the selection pointing at fresh data, or drop it if deleted.
            self.selected_service = next(
                (s for s in services if s["id"] == self.selected_service["id"]), None
            )
            if self.selected_service is None and self.view == "service":
                self.view = "home"
        return True

    def select_service(self, service: Dict[str, Any]) -> bool:
        """Open a service page and fetch its products."""
        self.selected_service = service
        self.view = "service"
        products, error = self.api.list_products(service_id=service["id"])
        if error:
            self.last_error = error
            self.products = []
            return False
        self.products = products
        return True

    def go_home(self) -> None:
        self.view = "home"
        self.selected_service = None
        self.products = []

    def open_admin(self) -> None:
        self.view = "admin"

    # ------------------------------------------------------------------
    # Cart
    # ------------------------------------------------------------------
    def add_to_cart(self, product: Dict[str, Any]) -> CartItem:
        """Add a product and open the cart drawer."""
        item = self.cart.add(product)
        self.cart_open = True
        return item

    def update_quantity(self, product_id: int, delta: int) -> Optional[CartItem]:
        return self.cart.update_quantity(product_id, delta)

    def remove_from_cart(self, product_id: int) -> bool:
        return self.cart.remove(product_id)

    def open_cart(self) -> None:
        self.cart_open = True

    def close_cart(self) -> None:
        self.cart_open = False

    @property
    def cart_total(self) -> Decimal:
        return self.cart.total()

    @property
    def cart_count(self) -> int:
        return self.cart.count()

    def checkout(self) -> str:
        """Hand the order over to WhatsApp and return the deep link used.

        The cart is left untouched; nothing is sent to the API.
        """
        url = build_checkout_url(
            self.cart,
            self.whatsapp_number,
            store_name=self.store_name,
            currency_symbol=self.currency_symbol,
        )
        logger.info("Checking out %d item(s), total %s", self.cart.count(), self.cart.total())
        self.opener(url)
        return url

    # ------------------------------------------------------------------
    # Administrator session
    # ------------------------------------------------------------------
    def admin_login(self, username: str, password: str) -> bool:
        """Log in on the server and unlock the admin panel for this session.

        Returns ``False`` when the credentials are rejected or when the
        panel cannot fetch the catalog; in the latter case the session is
        still unlocked and ``last_error`` holds the fetch error.
        """
        ok, error = self.api.login(username, password)
        if not ok:
            self.last_error = error
            return False
        self.is_admin = True
        self.admin_panel = AdminPanel(self.api, confirm=self.confirm, on_refresh=self.refresh_services)
        if not self.admin_panel.load():
            # Logged in, but the panel could not fetch the catalog.
            self.last_error = self.admin_panel.last_error
            return False
        return True

    def admin_logout(self) -> None:
        self.api.logout()
        self.is_admin = False
        self.admin_panel = None
        if self.view == "admin":
            self.view = "home"
