"""Tests for application wiring (mirrorfind/main.py)."""

import logging

import pytest
from fastapi.testclient import TestClient

from mirrorfind.main import create_app


@pytest.mark.unit
class TestRoutes:
    def test_root_redirects_to_search(self, client):
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 301
        assert response.headers["location"] == "/s"

    def test_unknown_path_is_404(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert "/nope" in response.text
        assert 'href="/s"' in response.text

    def test_static_files(self, client):
        response = client.get("/static/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_missing_static_file(self, client):
        assert client.get("/static/missing.css").status_code == 404

    def test_post_not_allowed(self, client):
        assert client.post("/s").status_code == 405

    def test_no_api_docs(self, client):
        assert client.get("/docs").status_code == 404


@pytest.mark.unit
class TestCreateApp:
    def test_context_is_shared(self, settings, fake_backend):
        app = create_app(settings, backend=fake_backend)
        context = app.state.context

        assert context.settings is settings
        assert context.backend is fake_backend
        assert "humansize" in context.templates.env.filters

    def test_missing_static_dir(self, settings, fake_backend, tmp_path, caplog):
        missing = tmp_path / "nothing-here"

        with caplog.at_level(logging.WARNING, logger="mirrorfind"):
            app = create_app(settings.model_copy(update={"static_dir": str(missing)}), backend=fake_backend)

        assert "Static directory not found" in caplog.text
        assert TestClient(app).get("/static/style.css").status_code == 404

    def test_default_backend_is_meilisearch(self, settings):
        from mirrorfind.backend import MeilisearchBackend

        app = create_app(settings)
        assert isinstance(app.state.context.backend, MeilisearchBackend)

    def test_page_count_rounding_setting(self, settings, fake_backend):
        from mirrorfind.models import SearchHit, SearchResponse

        fake_backend.response = SearchResponse(hits=[SearchHit(payload={"filename": "a"})], total=15)
        floor_app = create_app(settings.model_copy(update={"page_count_rounding": "floor"}), backend=fake_backend)

        response = TestClient(floor_app).get("/s?q=a")

        assert "Page 1 of 1" in response.text
