"""Pydantic request and response models for the admin images API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
GenerateRequest
    Payload for ``POST /api/generate``.
ImageOut
    One gallery record with its resolved public URL.
NotificationOut
    A success or error message produced by a page operation.
GenerateResponse
    Result of ``POST /api/generate``.
DeleteResponse
    Result of ``DELETE /api/images/{id}``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Attributes:
        prompt: Prompt text, sent to the remote function as typed.
        category: Category tag.  Defaults to ``"gallery"``.
    """

    prompt: str = Field(
        default="",
        description="Prompt text for the image.",
    )
    category: str = Field(
        default="gallery",
        description="Category tag (gallery, events, artists, hero).",
    )


class ImageOut(BaseModel):
    """A generated image record as returned by the API."""

    id: str
    prompt: str
    storage_path: str
    category: str
    created_at: str
    public_url: str = Field(
        ...,
        description="Publicly servable URL derived from storage_path.",
    )


class NotificationOut(BaseModel):
    """A message produced by a page operation."""

    level: Literal["success", "error"]
    message: str


class GenerateResponse(BaseModel):
    """Response body for ``POST /api/generate``.

    Attributes:
        success: ``True`` if an image URL was returned.
        image_url: URL of the generated image, or ``None`` on failure.
        error: The user-facing error message on failure.
        notifications: Every message the operation produced, in order.
        images: The refreshed gallery, newest first.
    """

    success: bool
    image_url: str | None = None
    error: str | None = None
    notifications: list[NotificationOut] = Field(default_factory=list)
    images: list[ImageOut] = Field(default_factory=list)


class DeleteResponse(BaseModel):
    """Response body for ``DELETE /api/images/{id}``."""

    success: bool
    deleted: str
    notifications: list[NotificationOut] = Field(default_factory=list)
