"""Unit tests for LocalFileDelivery."""

import pytest

from forum.adapter.delivery.local import LocalFileDelivery
from forum.adapter.error import DeliveryError
from forum.domain.model import ContentExport


def _export(filename: str = "code.txt", content: bytes = b"fn main() {}") -> ContentExport:
    return ContentExport(filename=filename, media_type="text/plain", content=content)


class TestLocalFileDelivery:
    """Tests for writing exports to disk."""

    @pytest.mark.asyncio
    async def test_deliver_writes_file(self, tmp_path):
        """The export is written under the target directory."""
        # Arrange
        delivery = LocalFileDelivery(directory=tmp_path / "exports")

        # Act
        location = await delivery.deliver(_export())

        # Assert
        target = tmp_path / "exports" / "code.txt"
        assert location == str(target)
        assert target.read_bytes() == b"fn main() {}"

    @pytest.mark.asyncio
    async def test_deliver_strips_directories_from_filename(self, tmp_path):
        """A filename cannot escape the target directory."""
        # Arrange
        delivery = LocalFileDelivery(directory=tmp_path)

        # Act
        location = await delivery.deliver(_export(filename="../../etc/evil.txt"))

        # Assert
        assert location == str(tmp_path / "evil.txt")

    @pytest.mark.asyncio
    async def test_deliver_failure_raises_delivery_error(self, tmp_path):
        """I/O errors surface as DeliveryError."""
        # Arrange
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        delivery = LocalFileDelivery(directory=blocker)

        # Act & Assert
        with pytest.raises(DeliveryError):
            await delivery.deliver(_export())
