"""Export content use case."""

from pydantic import BaseModel

from forum.domain.model.export import ContentExport
from forum.domain.service import ExportService


class ExportContentRequest(BaseModel):
    """Export content request."""

    text: str
    filename: str | None = None  # Defaults to the configured filename
    deliver: bool = False  # Also hand the export to the file delivery


class ExportContentResponse(BaseModel):
    """Export content response."""

    export: ContentExport
    location: str | None = None  # Set when delivered


class ExportContentUseCase:
    """Use case for downloading text (typically a post's code) as a file."""

    def __init__(self, export_service: ExportService) -> None:
        """Initialize export content use case.

        Args:
            export_service: Export domain service
        """
        self.export_service = export_service

    async def execute(self, request: ExportContentRequest) -> ExportContentResponse:
        """Execute export content flow.

        Args:
            request: Export content request

        Returns:
            Packaged export, and its location when delivered

        Raises:
            DeliveryError: If delivery was requested and failed
        """
        export = self.export_service.export_content(request.text, request.filename)
        location = None
        if request.deliver:
            location = await self.export_service.deliver(export)
        return ExportContentResponse(export=export, location=location)
