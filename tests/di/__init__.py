"""Mock providers for testing."""

from .classifier import MockClassifierProvider
from .delivery import MockDeliveryProvider
from .container import build_test_container

__all__ = [
    "MockClassifierProvider",
    "MockDeliveryProvider",
    "build_test_container",
]
