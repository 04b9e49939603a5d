"""Dependency injection wiring."""

from discuss.util.di.application import ProdApplicationProvider
from discuss.util.di.base import Component, ProviderBase
from discuss.util.di.core import ProdConfigProvider
from discuss.util.di.domain import ProdDomainProvider
from discuss.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Config, services and use cases are always real; persistence can be mocked
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def is_mockable(base: type[ProviderBase]) -> bool:
    """A provider is mockable when it has implementation subclasses."""
    return bool(base.__subclasses__())


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Raises:
        ValueError: If ``base`` is mockable but lacks the requested flavour
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    flavour = "mock" if use_mock else "production"
    raise ValueError(
        f"No {flavour} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "is_mockable",
]
