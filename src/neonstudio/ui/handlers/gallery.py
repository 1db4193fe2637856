"""Gallery listing, public URL and deletion handlers."""

import logging

from neonstudio.core.backend import BackendError, ImageBackend

from ..models import (
    CAPTION_LENGTH,
    DELETE_FAILED_MESSAGE,
    DELETE_SUCCESS_MESSAGE,
    NO_SELECTION_MESSAGE,
    AdminImagesState,
)
from ..notifications import Notifier

logger = logging.getLogger(__name__)


def fetch_images(state: AdminImagesState, backend: ImageBackend) -> AdminImagesState:
    """Replace the gallery list with the records currently in the store.

    Records are kept in the order the store returns them (newest first). If
    the fetch fails, the error is logged and the previous list is left in
    place; the operator is not notified.

    Args:
        state: Page state
        backend: Hosted backend

    Returns:
        Updated state
    """
    try:
        images = backend.list_images()
    except Exception as e:
        logger.error(f"Error fetching images: {e}", exc_info=True)
        return state

    state.images = list(images)

    # Selection follows the record id; drop it once the record is gone
    if state.selected_image() is None:
        state.selected_id = None

    logger.info(f"Fetched {len(state.images)} generated images")
    return state


def get_public_url(storage_path: str, backend: ImageBackend) -> str:
    """Compute the public URL for a stored image.

    Args:
        storage_path: Object locator in the bucket
        backend: Hosted backend

    Returns:
        Publicly servable URL (existence is not checked)
    """
    return backend.public_url(storage_path)


def gallery_items(state: AdminImagesState, backend: ImageBackend) -> list[tuple[str, str]]:
    """Build ``(url, caption)`` pairs for the thumbnail grid.

    Args:
        state: Page state
        backend: Hosted backend

    Returns:
        One pair per record, in list order
    """
    items = []
    for image in state.images:
        caption = f"[{image.category}] {image.short_label(CAPTION_LENGTH)}..."
        items.append((get_public_url(image.storage_path, backend), caption))
    return items


def select_image(index: int | None, state: AdminImagesState) -> AdminImagesState:
    """Remember which record the clicked thumbnail shows, for deletion."""
    if index is not None and 0 <= index < len(state.images):
        state.selected_id = state.images[index].id
    else:
        state.selected_id = None
    return state


def delete_image(
    image_id: str,
    storage_path: str,
    state: AdminImagesState,
    backend: ImageBackend,
    notifier: Notifier,
) -> AdminImagesState:
    """Delete a generated image: storage object first, then its record.

    The two removals are independent. A failed storage removal is logged and
    the record is still deleted, which can leave an orphaned object in the
    bucket. A failed record removal is reported and stops the operation
    without a success message or a refetch.

    Args:
        image_id: Record identifier
        storage_path: Object locator in the bucket
        state: Page state
        backend: Hosted backend
        notifier: Notification surface

    Returns:
        Updated state
    """
    logger.info(f"Deleting image {image_id} ({storage_path})")

    try:
        backend.remove_object(storage_path)
    except BackendError as e:
        logger.error(f"Storage delete error for {storage_path}: {e}", exc_info=True)

    try:
        backend.delete_record(image_id)
    except BackendError as e:
        logger.error(f"Error deleting image {image_id}: {e}", exc_info=True)
        notifier.error(DELETE_FAILED_MESSAGE)
        return state

    notifier.success(DELETE_SUCCESS_MESSAGE)
    state.selected_id = None
    return fetch_images(state, backend)


def delete_selected_image(
    state: AdminImagesState, backend: ImageBackend, notifier: Notifier
) -> AdminImagesState:
    """Delete the image currently selected in the gallery grid.

    Args:
        state: Page state
        backend: Hosted backend
        notifier: Notification surface

    Returns:
        Updated state
    """
    image = state.selected_image()
    if image is None:
        notifier.error(NO_SELECTION_MESSAGE)
        return state

    return delete_image(image.id, image.storage_path, state, backend, notifier)
