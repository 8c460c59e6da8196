"""Administrator panel over the catalog.

Three tabs (services, products, slides), each with a list, a save
operation that creates a record without ``id`` or updates the one with
``id``, and a delete operation guarded by a confirmation callback.
Every successful mutation is followed by a fresh fetch of the affected
collection; there are no optimistic updates.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .api import Error, StorefrontAPI

logger = logging.getLogger(__name__)

TABS = ("services", "products", "slides")

CONFIRM_DELETE_SERVICE = "Deleting this service also deletes all of its products. Continue?"
CONFIRM_DELETE_PRODUCT = "Delete this product?"
CONFIRM_DELETE_SLIDE = "Delete this slide?"


class AdminPanel:
    """CRUD surface used by the storefront's admin view."""

    def __init__(
        self,
        api: StorefrontAPI,
        *,
        confirm: Callable[[str], bool],
        on_refresh: Optional[Callable[[], Any]] = None,
    ) -> None:
        """
        Args:
            api: Logged-in API client.
            confirm: Called with a prompt before each delete; a falsy
                answer cancels the deletion.
            on_refresh: Called after service mutations so the
                storefront can re-fetch its own service list.
        """
        self.api = api
        self.confirm = confirm
        self.on_refresh = on_refresh
        self.tab = "services"
        self.services: List[Dict[str, Any]] = []
        self.products: List[Dict[str, Any]] = []
        self.slides: List[Dict[str, Any]] = []
        self.last_error: Optional[Error] = None

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown admin tab: {tab}")
        self.tab = tab

    def load(self) -> bool:
        """Fetch all three collections."""
        results = [self.refresh_services(), self.refresh_products(), self.refresh_slides()]
        return all(results)

    # ------------------------------------------------------------------
    # Refresh helpers
    # ------------------------------------------------------------------
    def _refresh(self, attr: str, fetch: Callable[[], Tuple[List[Dict[str, Any]], Optional[Error]]]) -> bool:
        records, error = fetch()
        if error:
            self.last_error = error
            return False
        setattr(self, attr, records)
        return True

    def refresh_services(self) -> bool:
        ok = self._refresh("services", self.api.list_services)
        if self.on_refresh is not None:
            self.on_refresh()
        return ok

    def refresh_products(self) -> bool:
        return self._refresh("products", self.api.list_products)

    def refresh_slides(self) -> bool:
        return self._refresh("slides", self.api.list_slides)

    def _finish(self, result: Any, error: Optional[Error], refresh: Callable[[], bool]) -> Tuple[Any, Optional[Error]]:
        if error:
            self.last_error = error
            return None, error
        self.last_error = None
        refresh()
        return result, None

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def save_service(self, record: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create or update a service, then refresh services."""
        payload = {key: record[key] for key in ("name", "logo") if key in record}
        if record.get("id"):
            data, error = self.api.update_service(record["id"], payload)
        else:
            data, error = self.api.create_service(payload)
        return self._finish(data, error, self.refresh_services)

    def delete_service(self, service_id: int) -> Tuple[bool, Optional[Error]]:
        if not self.confirm(CONFIRM_DELETE_SERVICE):
            return False, None
        ok, error = self.api.delete_service(service_id)
        result, error = self._finish(ok, error, self.refresh_services)
        if not error:
            # Products of the deleted service are gone too.
            self.refresh_products()
        return bool(result), error

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def save_product(self, record: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        fields = ("service_id", "name", "price", "description", "observations", "image")
        payload = {key: record[key] for key in fields if key in record}
        if record.get("id"):
            data, error = self.api.update_product(record["id"], payload)
        else:
            data, error = self.api.create_product(payload)
        return self._finish(data, error, self.refresh_products)

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        if not self.confirm(CONFIRM_DELETE_PRODUCT):
            return False, None
        ok, error = self.api.delete_product(product_id)
        result, error = self._finish(ok, error, self.refresh_products)
        return bool(result), error

    # ------------------------------------------------------------------
    # Slides
    # ------------------------------------------------------------------
    def save_slide(self, record: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {key: record[key] for key in ("message", "image") if key in record}
        if record.get("id"):
            data, error = self.api.update_slide(record["id"], payload)
        else:
            data, error = self.api.create_slide(payload)
        return self._finish(data, error, self.refresh_slides)

    def delete_slide(self, slide_id: int) -> Tuple[bool, Optional[Error]]:
        if not self.confirm(CONFIRM_DELETE_SLIDE):
            return False, None
        ok, error = self.api.delete_slide(slide_id)
        result, error = self._finish(ok, error, self.refresh_slides)
        return bool(result), error
