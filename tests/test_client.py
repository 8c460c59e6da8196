from decimal import Decimal
from unittest import mock

import pytest
import requests

from streamstore_api.client import AdminPanel, Storefront, StorefrontAPI

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"

NETFLIX = {"name": "Netflix", "logo": "https://example.com/netflix.svg"}
SPOTIFY = {"name": "Spotify", "logo": "https://example.com/spotify.svg"}


@pytest.fixture
def api(api_session):
    return StorefrontAPI(base_url="http://testserver/", session=api_session)


@pytest.fixture
def admin_api(api):
    ok, error = api.login(ADMIN_USERNAME, ADMIN_PASSWORD)
    assert ok, error
    return api


@pytest.fixture
def opened():
    return []


@pytest.fixture
def storefront(api, opened):
    return Storefront(
        api, confirm=lambda message: True, whatsapp_number="5585982349916", opener=opened.append
    )


def test_reads_are_public(api):
    services, error = api.list_services()
    assert error is None
    assert services == []


def test_mutation_without_login_returns_error(api):
    data, error = api.create_service(NETFLIX)
    assert data is None
    assert error["status_code"] == 401


def test_login_failure(api):
    ok, error = api.login(ADMIN_USERNAME, "wrong")
    assert not ok
    assert error == {"status_code": 401, "message": "Invalid credentials"}
    assert api.token is None


def test_error_message_comes_from_detail(admin_api):
    data, error = admin_api.create_product({"service_id": 999, "name": "Orphan", "price": 1})
    assert data is None
    assert error == {"status_code": 409, "message": "Service 999 does not exist"}


def test_crud_round_trip(admin_api, api_session):
    service, error = admin_api.create_service(NETFLIX)
    assert error is None
    product, _ = admin_api.create_product({"service_id": service["id"], "name": "4K", "price": 24.9})

    products, _ = admin_api.list_products(service_id=service["id"])
    assert products == [product]
    assert api_session.calls[-1][2] == {"serviceId": service["id"]}

    admin_api.list_products()
    assert api_session.calls[-1][2] is None

    updated, _ = admin_api.update_product(product["id"], {"price": 19.9})
    assert updated["price"] == 19.9

    ok, error = admin_api.delete_service(service["id"])
    assert ok and error is None
    assert admin_api.list_products() == ([], None)


def test_network_failure_is_reported_not_raised():
    session = mock.Mock()
    session.request.side_effect = requests.ConnectionError("connection refused")
    api = StorefrontAPI(base_url="http://localhost:1", session=session)

    services, error = api.list_services()
    assert services == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]

    ok, error = api.delete_slide(1)
    assert not ok
    assert error is not None


def test_logout_forgets_token(admin_api):
    admin_api.logout()
    data, error = admin_api.create_slide({"message": "Hi", "image": "/a.jpg"})
    assert error["status_code"] == 401


def test_storefront_browse_and_checkout(admin_api, storefront, opened):
    service, _ = admin_api.create_service(NETFLIX)
    admin_api.create_service(SPOTIFY)
    plan, _ = admin_api.create_product({"service_id": service["id"], "name": "Netflix 4K", "price": 24.9})
    admin_api.create_slide({"message": "Promoções", "image": "/slide.jpg"})
    admin_api.logout()

    assert storefront.load()
    assert [s["name"] for s in storefront.services] == ["Netflix", "Spotify"]
    assert len(storefront.slides) == 1
    assert storefront.view == "home"

    assert storefront.select_service(storefront.services[0])
    assert storefront.view == "service"
    assert storefront.products == [plan]

    storefront.add_to_cart(plan)
    storefront.add_to_cart(plan)
    assert storefront.cart_open
    assert storefront.cart_count == 2
    assert storefront.cart_total == Decimal("49.80")

    url = storefront.checkout()
    assert opened == [url]
    assert url.startswith("https://wa.me/5585982349916?text=")
    assert storefront.cart_count == 2

    storefront.go_home()
    assert storefront.view == "home"
    assert storefront.selected_service is None


def test_checkout_of_empty_cart(storefront, opened):
    with pytest.raises(ValueError):
        storefront.checkout()
    assert opened == []


def test_admin_login_unlocks_panel(storefront):
    assert not storefront.admin_login(ADMIN_USERNAME, "wrong")
    assert not storefront.is_admin
    assert storefront.last_error["status_code"] == 401

    assert storefront.admin_login(ADMIN_USERNAME, ADMIN_PASSWORD)
    assert storefront.is_admin
    assert isinstance(storefront.admin_panel, AdminPanel)

    storefront.open_admin()
    storefront.admin_logout()
    assert not storefront.is_admin
    assert storefront.admin_panel is None
    assert storefront.view == "home"


def test_admin_panel_changes_reach_storefront(storefront):
    storefront.admin_login(ADMIN_USERNAME, ADMIN_PASSWORD)
    panel = storefront.admin_panel

    service, error = panel.save_service(dict(NETFLIX))
    assert error is None
    assert panel.services == [service]
    assert storefront.services == [service]

    renamed, _ = panel.save_service({"id": service["id"], "name": "Netflix Brasil"})
    assert renamed["logo"] == NETFLIX["logo"]
    assert storefront.services[0]["name"] == "Netflix Brasil"

    product, _ = panel.save_product({"service_id": service["id"], "name": "4K", "price": 24.9})
    assert panel.products == [product]

    slide, _ = panel.save_slide({"message": "Oferta", "image": "/oferta.jpg"})
    assert panel.slides == [slide]
    assert panel.delete_slide(slide["id"]) == (True, None)
    assert panel.slides == []

    storefront.select_service(storefront.services[0])
    assert panel.delete_service(service["id"]) == (True, None)
    assert panel.services == []
    assert panel.products == []
    assert storefront.services == []
    assert storefront.selected_service is None
    assert storefront.view == "home"


def test_admin_panel_validation_error(storefront):
    storefront.admin_login(ADMIN_USERNAME, ADMIN_PASSWORD)
    panel = storefront.admin_panel
    data, error = panel.save_service({"name": "", "logo": "/x.png"})
    assert data is None
    assert error["status_code"] == 422
    assert panel.last_error == error


def test_declined_delete_keeps_record(admin_api):
    prompts = []

    def decline(message):
        prompts.append(message)
        return False

    panel = AdminPanel(admin_api, confirm=decline)
    service, _ = panel.save_service(dict(NETFLIX))
    product, _ = panel.save_product({"service_id": service["id"], "name": "4K", "price": 24.9})

    assert panel.delete_service(service["id"]) == (False, None)
    assert panel.delete_product(product["id"]) == (False, None)
    assert len(prompts) == 2
    assert "products" in prompts[0]
    assert admin_api.list_services()[0] == [service]
    assert admin_api.list_products()[0] == [product]


def test_admin_panel_tabs(admin_api):
    panel = AdminPanel(admin_api, confirm=lambda message: True)
    assert panel.tab == "services"
    panel.select_tab("slides")
    assert panel.tab == "slides"
    with pytest.raises(ValueError):
        panel.select_tab("orders")


def test_storefront_passes_confirmation_to_panel(api):
    prompts = []

    def decline(message):
        prompts.append(message)
        return False

    storefront = Storefront(api, confirm=decline, opener=lambda url: None)
    storefront.admin_login(ADMIN_USERNAME, ADMIN_PASSWORD)
    slide, _ = storefront.admin_panel.save_slide({"message": "Oferta", "image": "/oferta.jpg"})

    assert storefront.admin_panel.delete_slide(slide["id"]) == (False, None)
    assert prompts == ["Delete this slide?"]
    assert api.list_slides()[0] == [slide]


def test_panel_requires_confirmation_callback(admin_api):
    with pytest.raises(TypeError):
        AdminPanel(admin_api)
    with pytest.raises(TypeError):
        Storefront(admin_api)


def test_admin_login_reports_panel_load_failure():
    failure = {"status_code": 500, "message": "Database error"}
    api = mock.Mock(spec=StorefrontAPI)
    api.login.return_value = (True, None)
    api.list_services.return_value = ([], None)
    api.list_products.return_value = ([], None)
    api.list_slides.return_value = ([], failure)

    storefront = Storefront(api, confirm=lambda message: True, opener=lambda url: None)
    assert not storefront.admin_login(ADMIN_USERNAME, ADMIN_PASSWORD)
    assert storefront.is_admin
    assert storefront.last_error == failure
    assert storefront.admin_panel.last_error == failure
