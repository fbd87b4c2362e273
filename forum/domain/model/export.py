"""Exported content ready for delivery."""

import io

from forum.domain.model.common import DomainModel


class ContentExport(DomainModel):
    """Text content packaged as bytes for a file-save collaborator."""

    filename: str
    media_type: str
    content: bytes

    def open(self) -> io.BytesIO:
        """Return a fresh byte stream over the content."""
        return io.BytesIO(self.content)

    @property
    def size(self) -> int:
        """Content size in bytes."""
        return len(self.content)
