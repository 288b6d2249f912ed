"""Supabase Storage client over httpx."""

from collections.abc import Callable
from typing import Optional
from urllib.parse import quote

import httpx
import structlog

from core.config import settings
from core.exceptions import StorageError

logger = structlog.get_logger()


class SupabaseBlobStorage:
    """Blob storage backed by the Supabase Storage REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        storage_url: str = settings.supabase_storage_url,
        anon_key: str = settings.supabase_anon_key,
        access_token: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        self._client = client
        self._storage_url = storage_url.rstrip("/")
        self._anon_key = anon_key
        # Uploads run as the signed-in operator when a token is available
        self._access_token = access_token

    async def upload(
        self, bucket: str, name: str, content: bytes, content_type: str
    ) -> str:
        if not self._storage_url:
            raise StorageError("Supabase URL is not configured", bucket=bucket)

        token = (self._access_token() if self._access_token else None) or self._anon_key
        try:
            response = await self._client.post(
                f"{self._storage_url}/object/{bucket}/{quote(name)}",
                content=content,
                headers={
                    "apikey": self._anon_key,
                    "Authorization": f"Bearer {token}",
                    "Content-Type": content_type,
                    "x-upsert": "false",
                },
            )
        except httpx.HTTPError as e:
            raise StorageError(f"Storage unreachable: {e}", bucket=bucket) from e

        if response.is_error:
            try:
                message = response.json().get("message") or response.text
            except (ValueError, AttributeError):
                message = response.text
            logger.warning(
                "image_upload_rejected",
                bucket=bucket,
                status_code=response.status_code,
                message=message,
            )
            raise StorageError(f"Upload rejected: {message}", bucket=bucket)

        logger.info("image_uploaded", bucket=bucket, path=name)
        return name

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._storage_url}/object/public/{bucket}/{quote(path)}"
