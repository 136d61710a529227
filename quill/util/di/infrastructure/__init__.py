"""Infrastructure providers."""

# Import bases
from .contentful import ContentfulProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .contentful import ProdContentfulProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ContentfulProvider",
    "PersistenceProvider",
    "ProdContentfulProvider",
    "ProdPersistenceProvider",
]
