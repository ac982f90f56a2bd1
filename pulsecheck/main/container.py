"""
Dependency container injection module - Main Layer

Composition root wiring settings, dependency clients, probes and the
health use case with dependency-injector.
"""

from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import containers, providers

from pulsecheck.application.dtos.health_dto import ResponseMapper
from pulsecheck.application.models import HealthCheckPolicy
from pulsecheck.application.use_cases.health_use_cases import GetHealthStatusUseCase
from pulsecheck.domain.ports.probe import Probe
from pulsecheck.domain.services import HealthAggregator, ProbeRegistry
from pulsecheck.infrastructure.cache import RedisCache
from pulsecheck.infrastructure.database import SqlDatabase
from pulsecheck.infrastructure.probes import CacheProbe, DatabaseProbe
from pulsecheck.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def build_probe_registry(
    database_probe_name: str,
    cache_probe_name: str,
    database_enabled: bool,
    cache_enabled: bool,
    database_probe: providers.Provider,
    cache_probe: providers.Provider,
) -> ProbeRegistry:
    """
    Register the enabled probes, database first, then freeze the registry.

    Probe providers are only called for enabled probes so a disabled
    dependency never gets a client.

    Raises:
        DuplicateNameError: if both probes are configured with the same name.
    """
    registry = ProbeRegistry()
    candidates: list[tuple[bool, str, providers.Provider]] = [
        (database_enabled, database_probe_name, database_probe),
        (cache_enabled, cache_probe_name, cache_probe),
    ]
    for enabled, name, provider in candidates:
        if not enabled:
            logger.info("container.probe.disabled", probe=name)
            continue
        probe: Probe = provider()
        registry.register(name, probe)
    registry.freeze()
    return registry


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    sql_database = providers.Singleton(
        SqlDatabase,
        database_url=config.database.url,
        connect_timeout=config.database.connect_timeout,
        pool_size=config.database.pool_size,
    )

    redis_cache = providers.Singleton(
        RedisCache,
        redis_url=config.cache.url,
        socket_timeout=config.cache.socket_timeout,
    )

    database_probe = providers.Singleton(DatabaseProbe, database=sql_database)

    cache_probe = providers.Singleton(CacheProbe, cache=redis_cache)

    # Domain
    probe_registry = providers.Singleton(
        build_probe_registry,
        database_probe_name=config.health.database_probe_name,
        cache_probe_name=config.health.cache_probe_name,
        database_enabled=config.health.database_enabled,
        cache_enabled=config.health.cache_enabled,
        database_probe=database_probe.provider,
        cache_probe=cache_probe.provider,
    )

    health_aggregator = providers.Singleton(HealthAggregator)

    # Application (use cases)
    health_check_policy = providers.Singleton(
        HealthCheckPolicy,
        per_probe_timeout=config.health.per_probe_timeout,
        overall_timeout=config.health.overall_timeout,
    )

    response_mapper = providers.Singleton(ResponseMapper)

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        registry=probe_registry,
        aggregator=health_aggregator,
        policy=health_check_policy,
        mapper=response_mapper,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: Optional[AppContainer] = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Startup and shutdown of the dependency clients.

    The probe registry is built on entry so a misconfigured registry
    (duplicate probe names) aborts startup. Clients created for enabled
    probes are closed on exit.
    """
    container = get_container()
    config = container.config.health

    registry = container.probe_registry()
    logger.info("container.registry.ready", probes=registry.names())

    try:
        yield container
    finally:
        if config.database_enabled():
            logger.info("container.database.close")
            container.sql_database().close()
        if config.cache_enabled():
            logger.info("container.cache.close")
            await container.redis_cache().close()
        logger.info("container.resources.shutdown")
