"""Infrastructure providers."""

# Import bases
from .classifier import ClassifierProvider
from .delivery import DeliveryProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .classifier import ProdClassifierProvider  # noqa: F401
from .delivery import ProdDeliveryProvider  # noqa: F401

__all__ = [
    "ClassifierProvider",
    "DeliveryProvider",
    "PersistenceProvider",
    "ProdClassifierProvider",
    "ProdDeliveryProvider",
]
