"""File delivery implementations."""

import asyncio
from pathlib import Path

from forum.adapter.error import DeliveryError
from forum.domain.model.export import ContentExport
from forum.domain.service.export_service import FileDelivery


class LocalFileDelivery(FileDelivery):
    """Writes exports into a local directory."""

    def __init__(self, directory: Path):
        """Initialize delivery.

        Args:
            directory: Target directory (created on first delivery)
        """
        self.directory = directory

    async def deliver(self, export: ContentExport) -> str:
        """Write the export and return its path.

        Only the final component of the filename is used, so a hint cannot
        escape the target directory.

        Raises:
            DeliveryError: If the file cannot be written
        """
        target = self.directory / Path(export.filename).name
        try:
            await asyncio.to_thread(self._write, target, export.content)
        except OSError as e:
            raise DeliveryError(f"Could not write {target}: {e}") from e
        return str(target)

    def _write(self, target: Path, content: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)


class MockFileDelivery(FileDelivery):
    """In-memory delivery for testing.

    Keeps every delivered export instead of touching the filesystem.
    """

    def __init__(self):
        self.delivered: list[ContentExport] = []

    async def deliver(self, export: ContentExport) -> str:
        """Record the export and return a mock location."""
        self.delivered.append(export)
        return f"memory://{export.filename}"
