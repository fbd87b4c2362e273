"""File delivery infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.delivery.local import LocalFileDelivery
from forum.config import ExportSettings
from forum.domain.service import FileDelivery
from forum.util.di.base import ProviderBase


class DeliveryProvider(ProviderBase):
    """Delivery component base."""

    __mock_component__ = "delivery"


class ProdDeliveryProvider(DeliveryProvider):
    """Production delivery provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_delivery(self, settings: ExportSettings) -> FileDelivery:
        """Provide file delivery."""
        return LocalFileDelivery(directory=settings.directory)
