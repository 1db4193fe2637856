"""Hosted backend interface for generated images.

This module defines the seam between the admin page and the hosted platform
that actually stores records, stores image bytes, and runs the remote
generation function. The page never talks to the platform SDK directly; it
receives an :class:`ImageBackend` instance and calls the five operations it
exposes.

Backend Operations
------------------
- **invoke_generation**: call the remote generation function with
  ``{prompt, category}`` and return its decoded JSON body
- **list_images**: list every record, newest first
- **delete_record**: delete one record by identifier
- **remove_object**: remove one object from the storage bucket
- **public_url**: derive the publicly servable URL of a stored object

Error Model
-----------
Every failure raised by the platform client is wrapped into
:class:`BackendError` with the client's message preserved and the original
exception chained. Application-level errors reported *inside* a successful
generation response are not raised here; they are returned in the body and
interpreted by the generation handler.

Usage Example
-------------
    from neonstudio.core.backend import create_backend
    from neonstudio.core.config import config

    backend = create_backend(config)
    for image in backend.list_images():
        print(image.id, backend.public_url(image.storage_path))

See Also
--------
- SupabaseBackend: Implementation on top of the ``supabase`` client
- neonstudio.ui.handlers: Page operations that consume the backend
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .config import NeonStudioConfig

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Failure reported by the hosted platform or its transport.

    The message is the platform's own error text when one is available and
    may be shown to the operator verbatim.
    """

    pass


class GenerationError(BackendError):
    """Application-level error returned by the remote generation function."""

    pass


class BackendConfigurationError(BackendError):
    """Backend cannot be created because credentials are missing."""

    pass


def user_message(error: BaseException, fallback: str) -> str:
    """Pick the message to show for an error.

    Args:
        error: Exception raised by a backend call
        fallback: Generic message used when the error carries no text

    Returns:
        The error's message if it has one, otherwise ``fallback``
    """
    message = getattr(error, "message", None)
    if not isinstance(message, str) or not message.strip():
        message = str(error)
    return message if message.strip() else fallback


@dataclass(frozen=True)
class GeneratedImage:
    """One generated image record as stored in the record store.

    Attributes:
        id: Backend-assigned identifier
        prompt: Full prompt text used to generate the image
        storage_path: Object locator within the storage bucket
        category: Free-form tag (gallery, events, artists, hero in practice)
        created_at: Creation timestamp as returned by the store
    """

    id: str
    prompt: str
    storage_path: str
    category: str
    created_at: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "GeneratedImage":
        """Build a record from a table row.

        Extra columns are ignored. ``prompt`` and ``category`` default to an
        empty string when absent or null.

        Raises:
            KeyError: If ``id`` or ``storage_path`` is missing or null
        """
        for key in ("id", "storage_path"):
            if row.get(key) is None:
                raise KeyError(key)
        return cls(
            id=str(row["id"]),
            prompt=row.get("prompt") or "",
            storage_path=row["storage_path"],
            category=row.get("category") or "",
            created_at=str(row.get("created_at") or ""),
        )

    def short_label(self, limit: int) -> str:
        """Return the prompt truncated to ``limit`` characters."""
        return self.prompt[:limit]


class ImageBackend(ABC):
    """Abstract interface to the hosted record store, object store and function.

    Implementations must raise :class:`BackendError` (or a subclass) for every
    failure so that callers can isolate each remote call in its own boundary.
    """

    @abstractmethod
    def invoke_generation(self, prompt: str, category: str) -> dict[str, Any]:
        """Invoke the remote generation function.

        Args:
            prompt: Prompt text, sent as typed
            category: Category tag for the new record

        Returns:
            Decoded response body, ``{"imageUrl": ...}`` or ``{"error": ...}``

        Raises:
            BackendError: On transport-level failure
        """

    @abstractmethod
    def list_images(self) -> list[GeneratedImage]:
        """Return every record ordered by ``created_at`` descending."""

    @abstractmethod
    def delete_record(self, image_id: str) -> None:
        """Delete the record with the given identifier."""

    @abstractmethod
    def remove_object(self, storage_path: str) -> None:
        """Remove the object stored at ``storage_path``."""

    @abstractmethod
    def public_url(self, storage_path: str) -> str:
        """Compute the public URL for ``storage_path`` without checking it exists."""


class SupabaseBackend(ImageBackend):
    """Backend implementation on top of a ``supabase`` client.

    Args:
        client: A ``supabase.Client`` (or compatible object)
        table: Record store table name
        bucket: Storage bucket name
        function_name: Edge function that generates images
    """

    def __init__(
        self,
        client: Any,
        table: str = "generated_images",
        bucket: str = "generated-images",
        function_name: str = "generate-image",
    ) -> None:
        self.client = client
        self.table = table
        self.bucket = bucket
        self.function_name = function_name

    def invoke_generation(self, prompt: str, category: str) -> dict[str, Any]:
        logger.info(f"Invoking {self.function_name} (category={category})")
        try:
            data = self.client.functions.invoke(
                self.function_name,
                invoke_options={
                    "body": {"prompt": prompt, "category": category},
                    "responseType": "json",
                },
            )
        except Exception as e:
            raise BackendError(user_message(e, "")) from e

        if not isinstance(data, dict):
            raise BackendError(f"Unexpected response from {self.function_name}")
        return data

    def list_images(self) -> list[GeneratedImage]:
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            raise BackendError(user_message(e, "")) from e

        rows = response.data or []
        try:
            return [GeneratedImage.from_row(row) for row in rows]
        except (KeyError, TypeError) as e:
            raise BackendError(f"Malformed row in {self.table}: {e}") from e

    def delete_record(self, image_id: str) -> None:
        try:
            self.client.table(self.table).delete().eq("id", image_id).execute()
        except Exception as e:
            raise BackendError(user_message(e, "")) from e

    def remove_object(self, storage_path: str) -> None:
        try:
            self.client.storage.from_(self.bucket).remove([storage_path])
        except Exception as e:
            raise BackendError(user_message(e, "")) from e

    def public_url(self, storage_path: str) -> str:
        url = self.client.storage.from_(self.bucket).get_public_url(storage_path)
        # Older clients return {"publicURL": ...}
        if isinstance(url, dict):
            url = url.get("publicUrl") or url.get("publicURL") or ""
        return url

    def __repr__(self) -> str:
        return f"SupabaseBackend(table={self.table!r}, bucket={self.bucket!r})"


def create_backend(config: NeonStudioConfig) -> SupabaseBackend:
    """Create the Supabase-backed implementation from configuration.

    Args:
        config: Application configuration

    Returns:
        Configured SupabaseBackend

    Raises:
        BackendConfigurationError: If the project URL or key is not set
    """
    if not config.has_backend_credentials():
        raise BackendConfigurationError(
            "NEONSTUDIO_SUPABASE_URL and NEONSTUDIO_SUPABASE_KEY must be set"
        )

    from supabase import create_client

    logger.info(f"Connecting to Supabase project at {config.supabase_url}")
    client = create_client(config.supabase_url, config.supabase_key)
    return SupabaseBackend(
        client,
        table=config.images_table,
        bucket=config.images_bucket,
        function_name=config.generate_function,
    )
