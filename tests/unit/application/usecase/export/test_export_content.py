"""Unit tests for ExportContentUseCase."""

import pytest

from forum.application.usecase.export import ExportContentRequest, ExportContentUseCase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()
delivery_env = create_env_fixture(unmock={"delivery"})


class TestExportContentUseCase:
    """Tests for ExportContentUseCase."""

    @pytest.mark.asyncio
    async def test_export_without_delivery(self, unit_env):
        use_case = await unit_env.get(ExportContentUseCase)

        response = await use_case.execute(ExportContentRequest(text="let x = 1;"))

        assert response.export.filename == "code.txt"
        assert response.export.content == b"let x = 1;"
        assert response.location is None

    @pytest.mark.asyncio
    async def test_export_with_mock_delivery(self, unit_env):
        use_case = await unit_env.get(ExportContentUseCase)

        response = await use_case.execute(
            ExportContentRequest(text="x", filename="main.py", deliver=True)
        )

        assert response.location == "memory://main.py"

    @pytest.mark.asyncio
    async def test_export_with_local_delivery(self, delivery_env, tmp_path, monkeypatch):
        """The production delivery writes into the configured directory."""
        # Arrange
        monkeypatch.chdir(tmp_path)
        use_case = await delivery_env.get(ExportContentUseCase)

        # Act
        response = await use_case.execute(
            ExportContentRequest(text="hello", filename="out.txt", deliver=True)
        )

        # Assert
        assert (tmp_path / "exports" / "out.txt").read_text() == "hello"
        assert response.location.endswith("out.txt")
