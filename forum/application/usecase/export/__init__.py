"""Export use cases."""

from .export_content import (
    ExportContentRequest,
    ExportContentResponse,
    ExportContentUseCase,
)

__all__ = [
    "ExportContentRequest",
    "ExportContentResponse",
    "ExportContentUseCase",
]
