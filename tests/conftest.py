"""pytest global fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Use the packaged catalog and default settings in every test."""
    monkeypatch.delenv("CATALOG_DIR", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("ENABLE_DOCS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    from tripbuilder.adapters.catalog import reset_cache

    reset_cache()
    yield
    reset_cache()
