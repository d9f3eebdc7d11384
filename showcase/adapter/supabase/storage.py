"""Supabase Storage client.

Talks to the Storage REST API (/storage/v1/object/...) of a Supabase project
with a service key. One client serves one bucket.
"""

import httpx
import logfire

from showcase.adapter.error import StorageError
from showcase.domain.service.storage_service import StorageClient


class SupabaseStorageClient(StorageClient):
    """Object storage client backed by Supabase Storage."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        bucket: str,
        cache_control_seconds: int = 3600,
        timeout: float = 60.0,
    ) -> None:
        """Initialize Supabase storage client.

        Args:
            base_url: Supabase project URL
            service_key: Service role key
            bucket: Bucket name
            cache_control_seconds: Cache-Control max-age for uploaded objects
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket = bucket
        self.cache_control_seconds = cache_control_seconds
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
        }

    def _object_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/{self.bucket}/{path}"

    def public_url(self, path: str) -> str:
        """Public URL of an object in a public bucket."""
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{path}"

    async def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Upload an object; an existing object at path is not overwritten.

        Raises:
            StorageError: If the request fails or is rejected
        """
        headers = {
            **self._headers(),
            "Content-Type": content_type or "application/octet-stream",
            "cache-control": f"max-age={self.cache_control_seconds}",
            "x-upsert": "false",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._object_url(path),
                    content=content,
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Storage upload HTTP error", path=path, error=str(e))
            raise StorageError(f"HTTP error during upload: {e}")

        if response.status_code not in (200, 201):
            logfire.error(
                "Storage upload rejected",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise StorageError(
                f"Upload failed: {response.status_code}",
                status_code=response.status_code,
            )

    async def delete(self, path: str) -> None:
        """Delete an object.

        Raises:
            StorageError: If the request fails or is rejected
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    "DELETE",
                    f"{self.base_url}/storage/v1/object/{self.bucket}",
                    json={"prefixes": [path]},
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Storage delete HTTP error", path=path, error=str(e))
            raise StorageError(f"HTTP error during delete: {e}")

        if response.status_code != 200:
            logfire.error(
                "Storage delete rejected",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise StorageError(
                f"Delete failed: {response.status_code}",
                status_code=response.status_code,
            )


class MockStorageClient(StorageClient):
    """In-memory storage client for testing.

    Stores objects in a dict. Set fail=True to make every call raise
    StorageError.
    """

    def __init__(self, base_url: str = "https://storage.test", bucket: str = "works"):
        self.base_url = base_url
        self.bucket = bucket
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.fail = False

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{path}"

    async def upload(self, path: str, content: bytes, content_type: str) -> None:
        if self.fail:
            raise StorageError("Mock storage unavailable", status_code=503)
        if path in self.objects:
            raise StorageError("The resource already exists", status_code=409)
        self.objects[path] = (content, content_type)

    async def delete(self, path: str) -> None:
        if self.fail:
            raise StorageError("Mock storage unavailable", status_code=503)
        self.objects.pop(path, None)
