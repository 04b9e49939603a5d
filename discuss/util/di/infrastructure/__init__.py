"""Infrastructure providers.

Importing the production subclass here registers it with its base for
``get_provider``; the mock lives under tests/di.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
