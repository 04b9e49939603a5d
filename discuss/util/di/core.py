"""Settings providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, Settings, ThreadSettings
from discuss.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads Settings once per process and hands out its sections."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_thread_settings(self, settings: Settings) -> ThreadSettings:
        return settings.threads
