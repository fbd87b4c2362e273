"""Content export domain service."""

from abc import ABC, abstractmethod

import logfire

from forum.config import ExportSettings
from forum.domain.model.export import ContentExport

from .base import Service


class FileDelivery(ABC):
    """Collaborator that hands exported content to the user (e.g. a file save)."""

    @abstractmethod
    async def deliver(self, export: ContentExport) -> str:
        """Deliver an export.

        Args:
            export: Packaged content

        Returns:
            Where the content ended up (path, URL, ...)
        """
        pass


class ExportService(Service):
    """Packages arbitrary text for external delivery. The text is not validated."""

    def __init__(self, delivery: FileDelivery, settings: ExportSettings) -> None:
        """Initialize export service.

        Args:
            delivery: File delivery collaborator
            settings: Default filename, media type and encoding
        """
        self.delivery = delivery
        self.settings = settings

    def export_content(self, text: str, filename_hint: str | None = None) -> ContentExport:
        """Package ``text`` as bytes.

        Args:
            text: Content to export
            filename_hint: Suggested filename (defaults to the configured one)

        Returns:
            Export with a byte stream accessor
        """
        export = ContentExport(
            filename=filename_hint or self.settings.default_filename,
            media_type=self.settings.media_type,
            content=text.encode(self.settings.encoding),
        )
        logfire.info("Content exported", filename=export.filename, size=export.size)
        return export

    async def deliver(self, export: ContentExport) -> str:
        """Hand an export to the delivery collaborator.

        Args:
            export: Packaged content

        Returns:
            Delivery location
        """
        with logfire.span("export_service.deliver", filename=export.filename):
            location = await self.delivery.deliver(export)
            logfire.info("Content delivered", filename=export.filename, location=location)
            return location
