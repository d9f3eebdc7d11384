"""Unit tests for bounded reading of uploaded files."""

import pytest

from showcase.domain.error import UploadTooLargeError
from showcase.interface.api.routes.uploads import read_upload


class CountingUpload:
    """Upload stand-in that records how many bytes were asked for."""

    def __init__(self, content: bytes, size: int | None = None):
        self.content = content
        self.size = size
        self.requested: list[int] = []

    async def read(self, size: int = -1) -> bytes:
        self.requested.append(size)
        return self.content if size < 0 else self.content[:size]


class TestReadUpload:
    @pytest.mark.asyncio
    async def test_declared_size_over_limit_is_rejected_without_reading(self):
        upload = CountingUpload(b"", size=2 * 1024 * 1024 * 1024)

        with pytest.raises(UploadTooLargeError):
            await read_upload(upload, limit=1024)

        assert upload.requested == []

    @pytest.mark.asyncio
    async def test_undeclared_oversized_body_is_read_only_past_the_limit(self):
        upload = CountingUpload(b"x" * 10_000)

        with pytest.raises(UploadTooLargeError) as exc_info:
            await read_upload(upload, limit=1024)

        assert upload.requested == [1025]
        assert exc_info.value.limit == 1024

    @pytest.mark.asyncio
    async def test_content_at_the_limit_is_returned(self):
        upload = CountingUpload(b"x" * 1024, size=1024)

        content = await read_upload(upload, limit=1024)

        assert content == b"x" * 1024
