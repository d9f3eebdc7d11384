"""Persistence and storage provider families.

The production subclasses are imported here so they are registered as
``__subclasses__()`` of their family before ``get_provider`` looks.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .storage import ProdStorageProvider, StorageProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
