"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from showcase.config import AuthSettings, GallerySettings, Settings, StorageSettings
from showcase.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage

    @provide
    def provide_gallery_settings(self, settings: Settings) -> GallerySettings:
        """Provide gallery settings."""
        return settings.gallery
