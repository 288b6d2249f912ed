"""Blob storage protocol."""

from typing import Protocol


class IBlobStorage(Protocol):
    """Protocol for the file store holding product images."""

    async def upload(
        self, bucket: str, name: str, content: bytes, content_type: str
    ) -> str:
        """
        Upload a file under a caller-chosen unique name.

        Returns:
            The stored path, to be saved on the record

        Raises:
            StorageError: The upload was rejected or could not be sent
        """
        ...

    def public_url(self, bucket: str, path: str) -> str:
        """Resolve a stored path to a publicly fetchable URL."""
        ...
