"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from showcase.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container used by the API and the maintenance scripts.

    Every provider family resolves to its real implementation: Postgres
    repositories and the Supabase storage client. Settings come from the
    environment.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can resolve FromDishka parameters."""
    setup_dishka(container, app)
