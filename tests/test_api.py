"""API tests over a fresh, unseeded registry per test."""

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app
from contactbook.infrastructure import InMemoryContactRegistry


@pytest.fixture
def registry():
    return InMemoryContactRegistry()


@pytest.fixture
def client(registry):
    return TestClient(create_app(registry=registry, settings=Settings(seed=False)))


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_index_renders_page_with_contacts(client, registry):
    registry.add("jon", "jon@mail.ru")
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert 'id="contacts"' in r.text
    assert 'id="contact-1"' in r.text
    assert "jon@mail.ru" in r.text
    assert 'hx-post="/contacts"' in r.text


def test_create_contact_returns_form_then_oob_contact(client, registry):
    r = client.post("/contacts", data={"name": "jon", "email": "jon@mail.ru"})
    assert r.status_code == 200
    form_at = r.text.index("<form")
    oob_at = r.text.index('hx-swap-oob="beforeend"')
    assert form_at < oob_at
    assert 'id="contact-1"' in r.text
    assert "Email already exists" not in r.text
    assert len(registry) == 1


def test_create_duplicate_returns_400_form_with_error(client, registry):
    client.post("/contacts", data={"name": "jon", "email": "jon@mail.ru"})
    r = client.post("/contacts", data={"name": "bob", "email": "jon@mail.ru"})
    assert r.status_code == 400
    assert "Email already exists" in r.text
    assert 'value="bob"' in r.text
    assert 'value="jon@mail.ru"' in r.text
    assert "hx-swap-oob" not in r.text
    assert len(registry) == 1


def test_create_contact_escapes_html(client):
    r = client.post("/contacts", data={"name": "<b>x</b>", "email": "x@mail.ru"})
    assert r.status_code == 200
    assert "<b>x</b>" not in r.text
    assert "&lt;b&gt;x&lt;/b&gt;" in r.text


def test_delete_contact(client, registry):
    registry.add("jon", "jon@mail.ru")
    r = client.delete("/contacts/1")
    assert r.status_code == 204
    assert r.content == b""
    assert len(registry) == 0

    r2 = client.delete("/contacts/1")
    assert r2.status_code == 400
    assert r2.text == "Contact not found"


def test_delete_invalid_id(client, registry):
    registry.add("jon", "jon@mail.ru")
    r = client.delete("/contacts/abc")
    assert r.status_code == 400
    assert r.text == "Invalid id"
    assert r.headers["content-type"].startswith("text/plain")
    assert len(registry) == 1


def test_static_css_served(client):
    r = client.get("/css/index.css")
    assert r.status_code == 200
    assert ".contact" in r.text


def test_default_app_is_seeded():
    app = create_app(settings=Settings(seed=True))
    r = TestClient(app).get("/")
    for email in ("jon@mail.ru", "bob@mail.ru", "duke@mail.ru"):
        assert email in r.text


def test_delete_overflowing_id_is_invalid(client, registry):
    registry.add("jon", "jon@mail.ru")
    r = client.delete("/contacts/99999999999999999999")
    assert r.status_code == 400
    assert r.text == "Invalid id"
    assert len(registry) == 1


def test_missing_form_fields_are_empty_strings(client, registry):
    r = client.post("/contacts", data={"name": "jon"})
    assert r.status_code == 200
    assert registry.snapshot()[0].email == ""

    r2 = client.post("/contacts", data={"name": "bob"})
    assert r2.status_code == 400
    assert "Email already exists" in r2.text
    assert len(registry) == 1


def test_index_swaps_204_and_scopes_400_to_form(client):
    page = client.get("/").text
    assert "status === 204" in page
    assert 'status === 400 && evt.detail.elt.tagName === "FORM"' in page
