"""State management utilities for the admin image page.

This module handles creation of the per-session page state and the initial
gallery fetch performed when the page is first mounted.
"""

import logging

from neonstudio.core.backend import ImageBackend

from .handlers.gallery import fetch_images
from .models import AdminImagesState
from .validation import normalize_category

logger = logging.getLogger(__name__)


def create_ui_state(default_category: str | None = None) -> AdminImagesState:
    """Create a fresh page state.

    Args:
        default_category: Category preselected in the form (default: gallery)

    Returns:
        New AdminImagesState instance
    """
    return AdminImagesState(category=normalize_category(default_category))


def initialize_ui_state(
    state: AdminImagesState | None, backend: ImageBackend
) -> AdminImagesState:
    """Initialize or ensure the page state is ready.

    On the first call for a session the gallery is fetched from the backend.
    Later calls return the state unchanged; the gallery is refetched by the
    generation and deletion handlers instead.

    Args:
        state: Existing state or None
        backend: Hosted backend

    Returns:
        Initialized AdminImagesState
    """
    if state is None:
        logger.info("Creating new AdminImagesState")
        state = create_ui_state()

    if state.initialized:
        logger.debug("AdminImagesState already initialized")
        return state

    logger.info("Loading gallery on mount")
    state = fetch_images(state, backend)
    state.initialized = True
    return state
