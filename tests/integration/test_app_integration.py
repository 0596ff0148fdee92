"""Integration tests for language switching, assets and the app shell."""

import re

import pytest

from nova_users.core.i18n import get_translator


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "Nova Users", "version": "3.0.0"}


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "cid_test"})

    assert response.headers["X-Correlation-ID"] == "cid_test"


@pytest.mark.asyncio
async def test_home_redirects_to_roles(client):
    response = await client.get("/")

    assert response.status_code == 303
    assert response.headers["location"] == "/roles"


@pytest.mark.asyncio
async def test_language_switch_translates_pages(client):
    get_translator().add_messages("fr", "users", {"Roles": "Rôles", "Dashboard": "Tableau de bord"})

    response = await client.get("/language/fr", headers={"referer": "http://test/roles"})

    assert response.status_code == 303
    assert response.headers["location"] == "http://test/roles"

    html = (await client.get("/roles")).text
    assert "<title>Rôles - Nova Users</title>" in html
    assert "Tableau de bord" in html
    assert re.search(r'<li class="active">\s*<a href="/language/fr"', html)


@pytest.mark.asyncio
async def test_language_code_is_case_insensitive(client):
    get_translator().add_messages("de", "users", {"Roles": "Rollen"})

    await client.get("/language/DE")

    assert "<title>Rollen - Nova Users</title>" in (await client.get("/roles")).text


@pytest.mark.asyncio
async def test_unknown_language_flashes_error(client):
    response = await client.get("/language/<xx>")

    assert response.status_code == 303
    assert response.headers["location"] == "/"

    html = (await client.get("/roles")).text
    assert "Unknown language: &lt;xx&gt;" in html
    assert '<html lang="en">' in html


@pytest.mark.asyncio
async def test_assets_are_served_with_cache_control(client):
    response = await client.get("/assets/bootstrap/css/style.css")

    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, max-age=10800"
    assert "navbar-xs" in response.text


@pytest.mark.asyncio
async def test_missing_page_renders_html_error(client):
    response = await client.get("/nowhere")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>404 - Nova Users</title>" in response.text
