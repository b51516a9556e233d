import logging

import pytest

from contact_backend.services.routers.frontend_api import FrontendAPI
from tests.conftest import INDEX_HTML


@pytest.mark.parametrize("path", ["/", "/about", "/deeply/nested/route", "/api/unknown"])
async def test_unmatched_path_serves_index(client, path):
    response = await client.get(path)

    assert response.status_code == 200
    assert response.text == INDEX_HTML
    assert response.headers["content-type"].startswith("text/html")


async def test_get_on_post_only_route_serves_index(client):
    response = await client.get("/api/contact")

    assert response.status_code == 200
    assert response.text == INDEX_HTML


async def test_existing_static_file_is_served(client):
    response = await client.get("/styles.css")

    assert response.status_code == 200
    assert response.text == "body { color: black; }"
    assert response.headers["content-type"].startswith("text/css")


def test_resolve_file_stays_inside_static_dir(static_dir):
    (static_dir.parent / "secret.txt").write_text("secret")
    frontend_api = FrontendAPI(str(static_dir), logging.getLogger(__name__))

    assert frontend_api.resolve_file("../secret.txt") is None
    assert frontend_api.resolve_file("") is None
    assert frontend_api.resolve_file("missing.js") is None
    assert frontend_api.resolve_file("styles.css") == (static_dir / "styles.css").resolve()


async def test_missing_index_returns_not_found(client, static_dir):
    (static_dir / "index.html").unlink()

    response = await client.get("/anything")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not found."}


async def test_path_with_null_byte_serves_index(client):
    response = await client.get("/a%00b")

    assert response.status_code == 200
    assert response.text == INDEX_HTML


def test_resolve_file_rejects_null_byte(static_dir):
    frontend_api = FrontendAPI(str(static_dir), logging.getLogger(__name__))

    assert frontend_api.resolve_file("a\x00b") is None


async def test_head_on_unmatched_path(client):
    response = await client.head("/about")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.content == b""
