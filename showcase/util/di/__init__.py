"""Dishka providers for the Showcase API.

Config, domain services and use cases always come from a single production
provider. Persistence and storage are families: an abstract base whose
subclasses are the Postgres/Supabase implementations and, in tests, the
in-memory fakes. ``get_provider`` picks one subclass per family.
"""

from typing import Type

from showcase.util.di.application import ProdApplicationProvider
from showcase.util.di.base import Component, ProviderBase
from showcase.util.di.core import ProdConfigProvider
from showcase.util.di.domain import ProdDomainProvider
from showcase.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)
from showcase.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable families
    PersistenceProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Entries without subclasses are concrete and returned unchanged. For a
    family, the subclass whose ``__is_mock__`` equals ``use_mock`` wins.

    Raises:
        DependencyInjectionError: If the family has no matching implementation,
            e.g. a mock was requested but tests/di was never imported
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "StorageProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
