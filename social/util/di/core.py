"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from social.config import GraphSettings, MediaSettings, Settings
from social.util.di.base import ProviderBase
from social.util.password import PasswordHasher


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_graph_settings(self, settings: Settings) -> GraphSettings:
        """Provide graph store settings."""
        return settings.graph

    @provide(scope=Scope.APP)
    def provide_media_settings(self, settings: Settings) -> MediaSettings:
        """Provide media store settings."""
        return settings.media

    @provide(scope=Scope.APP)
    def provide_password_hasher(self) -> PasswordHasher:
        """Provide the password hasher."""
        return PasswordHasher()
