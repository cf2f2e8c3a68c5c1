"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from roost.domain.service import ViewTracker
from roost.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)


async def shutdown_container(container: AsyncContainer) -> None:
    """Close a container once its background view tracking has finished.

    View tracking tasks hold their own sessions from the app-scoped session
    factory, so they must complete before the engine is disposed.

    Args:
        container: Container to close
    """
    view_tracker = await container.get(ViewTracker)
    if view_tracker.pending:
        logfire.info("Draining view tracking tasks", pending=view_tracker.pending)
    await view_tracker.drain()
    await container.close()
