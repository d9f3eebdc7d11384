"""Mock storage providers for testing."""

from dishka import Scope, provide

from showcase.adapter.supabase.storage import MockStorageClient
from showcase.domain.service import StorageClient
from showcase.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider backed by an in-memory object dict."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_storage_client(self) -> MockStorageClient:
        """Provide the mock client itself, for assertions in tests."""
        return MockStorageClient()

    @provide(scope=Scope.APP)
    def get_storage_client(self, client: MockStorageClient) -> StorageClient:
        """Provide the mock client as the storage client."""
        return client
