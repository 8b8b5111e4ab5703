"""
Integration tests for application use cases.

These tests verify that use cases work correctly with mocked infrastructure.
"""

import pytest

from pathkit.application.use_cases.inspect_path import InspectPathUseCase
from pathkit.application.use_cases.transform_path import TransformPathUseCase
from pathkit.application.dtos.path_dtos import (
    InspectPathRequest,
    PathOperation,
    PathOperationType,
    TransformPathRequest,
)
from pathkit.domain.exceptions.domain_exceptions import InvalidPathError


@pytest.mark.asyncio
class TestInspectPathUseCase:
    """Tests for InspectPathUseCase."""

    @pytest.fixture
    def use_case(self) -> InspectPathUseCase:
        return InspectPathUseCase(default_separator="/")

    async def test_inspect_url(self, use_case):
        """Test decomposing a URL."""
        result = await use_case.execute(
            InspectPathRequest(path="https://example.com/files/document.pdf?download=1")
        )

        assert result.components.scheme == "https"
        assert result.components.host == "example.com"
        assert result.components.query == "download=1"
        assert result.components.separator == "/"
        assert result.rendered_with_prefix == "files/document.pdf"

    async def test_inspect_with_separator_and_prefix(self, use_case):
        """Test a request separator overriding the default."""
        result = await use_case.execute(
            InspectPathRequest(path="a/b/c.txt", separator="\\", prefix="/root/")
        )

        assert result.components.rendered == "a\\b\\c.txt"
        assert result.rendered_with_prefix == "root\\a\\b\\c.txt"

    async def test_inspect_invalid_path(self, use_case):
        """Test that undecomposable input raises."""
        with pytest.raises(InvalidPathError):
            await use_case.execute(InspectPathRequest(path="http://[::1/a.txt"))


@pytest.mark.asyncio
class TestTransformPathUseCase:
    """Tests for TransformPathUseCase."""

    @pytest.fixture
    def use_case(self, mock_directory_service) -> TransformPathUseCase:
        return TransformPathUseCase(
            directory_service=mock_directory_service,
            default_separator="/",
        )

    async def test_chain_of_operations(self, use_case, mock_directory_service):
        """Test applying operations in order."""
        request = TransformPathRequest(
            path="temp/file.txt",
            operations=[
                PathOperation(op=PathOperationType.PATH_ALL, value="storage"),
                PathOperation(op=PathOperationType.PATH, value="2024/11"),
                PathOperation(op=PathOperationType.FILENAME, value="abc"),
                PathOperation(op=PathOperationType.EXTENSION, value="jpg"),
            ],
        )

        result = await use_case.execute(request)

        assert result.original.rendered == "temp/file.txt"
        assert result.result.rendered == "storage/2024/11/abc.jpg"
        assert result.unchanged is False
        assert result.directory_ready is None
        mock_directory_service.ensure_parent_directory.assert_not_called()

    async def test_url_operations(self, use_case):
        """Test changing URL components."""
        request = TransformPathRequest(
            path="https://example.com/files/document.pdf?download=1",
            operations=[
                PathOperation(op="scheme", value="http"),
                PathOperation(op="port", value="8080"),
                PathOperation(op="query", value="v=2"),
                PathOperation(op="basename", value="report.docx"),
            ],
        )

        result = await use_case.execute(request)

        assert (
            result.result.full
            == "http://example.com:8080/files/report.docx?download=1&v=2"
        )
        assert result.result.extension == "docx"
        assert result.original.full == (
            "https://example.com/files/document.pdf?download=1"
        )

    async def test_no_op_operations(self, use_case):
        """Test that operations matching current values leave the path as is."""
        request = TransformPathRequest(
            path="uploads/images/photo.jpg",
            operations=[
                PathOperation(op="extension", value="jpg"),
                PathOperation(op="path_all", value="uploads/images"),
                PathOperation(op="basename", value="noext"),
                PathOperation(op="dir_separator", value="/"),
            ],
        )

        result = await use_case.execute(request)

        assert result.unchanged is True
        assert result.result == result.original

    async def test_no_operations(self, use_case):
        """Test a request without operations."""
        result = await use_case.execute(TransformPathRequest(path="a/b.txt"))
        assert result.unchanged is True

    async def test_ensure_directory(self, use_case, mock_directory_service):
        """Test that the rendered result is handed to the directory service."""
        request = TransformPathRequest(
            path="a/b.txt",
            operations=[PathOperation(op="path", value="c")],
            ensure_directory=True,
        )

        result = await use_case.execute(request)

        assert result.directory_ready is True
        mock_directory_service.ensure_parent_directory.assert_called_once_with(
            "a/c/b.txt"
        )

    async def test_ensure_directory_failure_is_reported(
        self, use_case, mock_directory_service
    ):
        """Test that a failed directory creation is reported, not raised."""
        mock_directory_service.ensure_parent_directory.return_value = False

        result = await use_case.execute(
            TransformPathRequest(path="a/b.txt", ensure_directory=True)
        )

        assert result.directory_ready is False

    async def test_invalid_path(self, use_case):
        """Test that undecomposable input raises."""
        with pytest.raises(InvalidPathError):
            await use_case.execute(TransformPathRequest(path="http://[::1/a.txt"))
