"""Object storage infrastructure providers."""

from dishka import Scope, provide

from showcase.adapter.supabase.storage import SupabaseStorageClient
from showcase.config import Settings
from showcase.domain.service import StorageClient
from showcase.util.di.base import ProviderBase
from showcase.util.error import ConfigurationError

_UNSET_KEY = "CHANGE_ME_IN_PRODUCTION"


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider backed by Supabase Storage."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_storage_client(self, settings: Settings) -> StorageClient:
        """Provide Supabase storage client.

        Raises:
            ConfigurationError: If no service key is configured in production
        """
        if settings.is_production and settings.storage.service_key == _UNSET_KEY:
            raise ConfigurationError("STORAGE__SERVICE_KEY must be configured")

        return SupabaseStorageClient(
            base_url=settings.storage.url,
            service_key=settings.storage.service_key,
            bucket=settings.storage.bucket,
            cache_control_seconds=settings.storage.cache_control_seconds,
        )
