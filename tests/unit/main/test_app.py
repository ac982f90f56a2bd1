from __future__ import annotations

import pytest
from dependency_injector import providers

from pulsecheck.main import app as module_app
from pulsecheck.main.app import create_app
from pulsecheck.main.container import get_container


class _StubDatabase:
    def verify_connectivity(self) -> None:
        return None

    def close(self) -> None:
        return None


class _StubCache:
    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    container = get_container()
    container.sql_database.override(providers.Object(_StubDatabase()))
    container.redis_cache.override(providers.Object(_StubCache()))

    assert app.title
    assert any(getattr(route, "path", None) == "/health" for route in app.routes)

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is container

    assert isinstance(module_app.app, type(app))
