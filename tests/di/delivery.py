"""Mock delivery providers for testing."""

from dishka import Scope, provide

from forum.adapter.delivery.local import MockFileDelivery
from forum.domain.service import FileDelivery
from forum.util.di.infrastructure.delivery import DeliveryProvider


class MockDeliveryProvider(DeliveryProvider):
    """Mock delivery provider keeping exports in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_file_delivery(self) -> FileDelivery:
        """Provide in-memory file delivery."""
        return MockFileDelivery()
