"""Image generation handler."""

import logging

from neonstudio.core.backend import GenerationError, ImageBackend, user_message

from ..models import GENERATE_FALLBACK_ERROR, GENERATE_SUCCESS_MESSAGE, AdminImagesState
from ..notifications import Notifier
from ..validation import ValidationError, validate_prompt
from .gallery import fetch_images

logger = logging.getLogger(__name__)


def begin_generation(state: AdminImagesState) -> AdminImagesState:
    """Mark a generation as in flight and clear the previous preview."""
    state.is_generating = True
    state.preview_url = None
    return state


def generate_image(
    state: AdminImagesState, backend: ImageBackend, notifier: Notifier
) -> AdminImagesState:
    """Generate an image from the current prompt and category.

    Flow:
    1. Reject an empty prompt locally (no network call)
    2. Set the busy flag and clear the preview
    3. Invoke the remote generation function with ``{prompt, category}``
    4. On success show the returned URL as preview and refetch the gallery
    5. On any failure show one error message
    6. Clear the busy flag whatever happened

    Transport failures and ``error`` fields in an otherwise successful
    response are reported the same way: the error's own message, or a
    generic fallback when it carries none. Nothing is retried.

    Args:
        state: Page state
        backend: Hosted backend
        notifier: Notification surface

    Returns:
        Updated state
    """
    try:
        validate_prompt(state.prompt)
    except ValidationError as e:
        notifier.error(str(e))
        return state

    begin_generation(state)

    try:
        data = backend.invoke_generation(state.prompt, state.category)

        if data.get("error"):
            raise GenerationError(str(data["error"]))

        image_url = data.get("imageUrl")
        if not image_url:
            raise GenerationError("")

        notifier.success(GENERATE_SUCCESS_MESSAGE)
        state.preview_url = image_url
        logger.info(f"Generated image: {image_url}")
        fetch_images(state, backend)

    except Exception as e:
        logger.error(f"Error generating image: {e}", exc_info=True)
        notifier.error(user_message(e, GENERATE_FALLBACK_ERROR))

    finally:
        state.is_generating = False

    return state
