"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestRenderApi:
    """Tests for render endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_menu(self, client: TestClient, site_outline: str) -> None:
        response = client.post("/api/menu", json={"outline": site_outline})
        assert response.status_code == 200
        menu = response.json()["menu"]
        assert menu["label"]["text"] == "Site"
        about = menu["children"][1]
        assert [child["label"]["href"] for child in about["children"]] == [
            "/about/team",
            "/about/contact",
        ]

    def test_malformed_outline_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/api/menu", json={"outline": "- ok\n> quote"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["line_number"] == 2
        assert "'>'" in detail["error"]

    def test_indentation_mode_defaults_to_configuration(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Omitting strict_indentation defers to the server setting."""
        outline = "- a\n    - b\n  - c\n"
        monkeypatch.setattr("bootstencil.outline.BOOTSTENCIL_STRICT_INDENTATION", False)
        assert client.post("/api/menu", json={"outline": outline}).status_code == 200

        monkeypatch.setattr("bootstencil.outline.BOOTSTENCIL_STRICT_INDENTATION", True)
        assert client.post("/api/menu", json={"outline": outline}).status_code == 400
        response = client.post("/api/menu", json={"outline": outline, "strict_indentation": False})
        assert response.status_code == 200

    def test_blank_outline_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/menu", json={"outline": "   "})
        assert response.status_code == 422

    def test_navbar(self, client: TestClient, site_outline: str) -> None:
        response = client.post(
            "/api/navbar",
            json={"outline": site_outline, "css_class": "navbar-dark", "in_container": True},
        )
        assert response.status_code == 200
        html = response.json()["html"]
        assert html.startswith("<nav")
        assert "navbar-dark" in html
        assert 'class="container"' in html

    def test_modal(self, client: TestClient) -> None:
        response = client.post(
            "/api/modal",
            json={"title": "Hello", "text": "World", "buttons": [{"label": "OK"}]},
        )
        assert response.status_code == 200
        html = response.json()["html"]
        assert "Hello" in html
        assert "modal-footer" in html
        assert 'data-dismiss="modal"' in html
