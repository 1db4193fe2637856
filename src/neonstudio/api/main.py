"""Neon Studio admin images — FastAPI application.

This module is the single entry point for the hosted application.  It
defines the FastAPI ``app`` instance, a small JSON API over the same page
operations the Gradio page uses, the Gradio page mount, and the ``main()``
CLI function that launches the uvicorn server.

Architecture
------------
- **Configuration** is loaded from ``NEONSTUDIO_*`` environment variables.
- **The backend** (Supabase record store, storage bucket and generation
  function) is created once in the lifespan handler and stored on
  ``app.state``.  Routes receive it through the :func:`get_backend`
  dependency, so tests can substitute a fake.
- **Page operations** live in :mod:`neonstudio.ui.handlers`; every route
  builds a throwaway :class:`AdminImagesState` and a
  :class:`CollectingNotifier`, runs the handler, and returns the collected
  messages.
- **The admin page** is the Gradio app from :mod:`neonstudio.ui.app`,
  mounted at ``config.ui_path``.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/config``               Version, categories, preset prompts
GET       ``/api/images``               Gallery listing, newest first
POST      ``/api/generate``             Generate an image
DELETE    ``/api/images/{id}``          Delete stored object and record
GET       ``/admin/images``             Gradio admin page
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    neonstudio

Direct invocation::

    python -m neonstudio.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import gradio as gr
from fastapi import Depends, FastAPI, HTTPException, Request

from neonstudio import __version__
from neonstudio.api.models import (
    DeleteResponse,
    GenerateRequest,
    GenerateResponse,
    ImageOut,
    NotificationOut,
)
from neonstudio.core.backend import BackendError, ImageBackend, create_backend
from neonstudio.core.config import config
from neonstudio.ui.app import create_ui
from neonstudio.ui.handlers import (
    delete_image,
    fetch_images,
    generate_image,
    get_public_url,
    select_category,
    update_prompt,
)
from neonstudio.ui.models import CATEGORIES, PRESET_PROMPTS, AdminImagesState
from neonstudio.ui.notifications import CollectingNotifier
from neonstudio.ui.state import create_ui_state
from neonstudio.ui.validation import ValidationError, validate_prompt

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifecycle: backend setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the backend on startup unless one was already provided.

    Missing credentials are logged rather than fatal so the process still
    starts; routes then answer 503 until the environment is fixed.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    if getattr(app.state, "backend", None) is None:
        try:
            app.state.backend = create_backend(config)
            logger.info(f"Backend ready: {app.state.backend!r}")
        except BackendError as e:
            app.state.backend = None
            logger.error(f"Backend not configured: {e}")

    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Neon Studio Admin Images",
    description="Generate images through the hosted generation function and manage the gallery.",
    version=__version__,
    lifespan=lifespan,
)
app.state.backend = None


def get_backend(request: Request) -> ImageBackend:
    """FastAPI dependency returning the configured backend.

    Raises:
        HTTPException: 503 if the backend has not been configured.
    """
    backend = getattr(request.app.state, "backend", None)
    if backend is None:
        raise HTTPException(status_code=503, detail="Image backend is not configured")
    return backend


def _ui_backend() -> ImageBackend:
    """Backend lookup for the mounted Gradio page."""
    backend = app.state.backend
    if backend is None:
        raise gr.Error("Image backend is not configured")
    return backend


# ---------------------------------------------------------------------------
# Serialisation helpers.
# ---------------------------------------------------------------------------


def _images_out(state: AdminImagesState, backend: ImageBackend) -> list[ImageOut]:
    """Convert the state's gallery list to API models with public URLs."""
    return [
        ImageOut(
            id=image.id,
            prompt=image.prompt,
            storage_path=image.storage_path,
            category=image.category,
            created_at=image.created_at,
            public_url=get_public_url(image.storage_path, backend),
        )
        for image in state.images
    ]


def _notifications_out(notifier: CollectingNotifier) -> list[NotificationOut]:
    return [NotificationOut(level=n.level, message=n.message) for n in notifier.notifications]


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config() -> dict:
    """Return the page configuration for API clients.

    Returns:
        Dictionary with keys ``version``, ``default_category``,
        ``categories`` and ``presets``.
    """
    return {
        "version": __version__,
        "default_category": config.default_category,
        "categories": [{"value": value, "label": label} for value, label in CATEGORIES.items()],
        "presets": [{"label": p.label, "prompt": p.prompt} for p in PRESET_PROMPTS],
    }


@app.get("/api/images", response_model=list[ImageOut])
def list_images(backend: ImageBackend = Depends(get_backend)) -> list[ImageOut]:
    """Return every generated image, newest first.

    A failed fetch is logged by the handler and yields an empty list.
    """
    state = fetch_images(AdminImagesState(), backend)
    return _images_out(state, backend)


@app.post("/api/generate", response_model=GenerateResponse)
def generate(
    req: GenerateRequest, backend: ImageBackend = Depends(get_backend)
) -> GenerateResponse:
    """Generate an image through the remote generation function.

    Args:
        req: Validated :class:`GenerateRequest` payload.

    Returns:
        :class:`GenerateResponse` with the image URL or the error message.
        Generation failures are reported in the body with status 200.

    Raises:
        HTTPException: 400 if the prompt is empty.
    """
    try:
        validate_prompt(req.prompt)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    state = create_ui_state(config.default_category)
    state = update_prompt(req.prompt, state)
    state = select_category(req.category, state)

    notifier = CollectingNotifier()
    state = generate_image(state, backend, notifier)

    errors = notifier.errors
    return GenerateResponse(
        success=state.preview_url is not None,
        image_url=state.preview_url,
        error=errors[0] if errors else None,
        notifications=_notifications_out(notifier),
        images=_images_out(state, backend),
    )


@app.delete("/api/images/{image_id}", response_model=DeleteResponse)
def delete_generated_image(
    image_id: str,
    storage_path: str,
    backend: ImageBackend = Depends(get_backend),
) -> DeleteResponse:
    """Delete a generated image's stored object and then its record.

    Args:
        image_id: Record identifier.
        storage_path: Object locator in the bucket (query parameter).

    Returns:
        :class:`DeleteResponse`.

    Raises:
        HTTPException: 502 if the record could not be deleted.
    """
    notifier = CollectingNotifier()
    delete_image(image_id, storage_path, AdminImagesState(), backend, notifier)

    if notifier.errors:
        raise HTTPException(status_code=502, detail=notifier.errors[0])

    return DeleteResponse(
        success=True,
        deleted=image_id,
        notifications=_notifications_out(notifier),
    )


# Mount the admin page last so the API routes take precedence.
app = gr.mount_gradio_app(app, create_ui(_ui_backend), path=config.ui_path)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~neonstudio.core.config.config` (which
    loads from ``NEONSTUDIO_SERVER_HOST`` and ``NEONSTUDIO_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:7860``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "neonstudio.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
