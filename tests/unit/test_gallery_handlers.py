"""Unit tests for gallery handler functions."""

from neonstudio.core.backend import BackendError, GeneratedImage
from neonstudio.ui.handlers.gallery import (
    delete_image,
    delete_selected_image,
    fetch_images,
    gallery_items,
    get_public_url,
    select_image,
)
from neonstudio.ui.handlers.generation import generate_image
from neonstudio.ui.models import (
    DELETE_FAILED_MESSAGE,
    DELETE_SUCCESS_MESSAGE,
    NO_SELECTION_MESSAGE,
    AdminImagesState,
)

# ============================================================================
# fetch_images Tests
# ============================================================================


class TestFetchImages:
    """Tests for fetch_images handler."""

    def test_fetch_populates_list(self, backend, ui_state):
        """Fetching fills the list from the backend."""
        state = fetch_images(ui_state, backend)

        assert [image.id for image in state.images] == ["img-3", "img-2", "img-1"]

    def test_fetch_keeps_store_order(self, backend, ui_state):
        """The list is rendered in the order the store returns (newest first)."""
        state = fetch_images(ui_state, backend)

        created = [image.created_at for image in state.images]
        assert created == sorted(created, reverse=True)

    def test_fetch_replaces_whole_list(self, backend, sample_images):
        """A fetch replaces rather than merges."""
        stale = GeneratedImage("old", "gone", "gone.png", "gallery", "2020-01-01")
        state = AdminImagesState(images=[stale])

        state = fetch_images(state, backend)

        assert "old" not in [image.id for image in state.images]
        assert len(state.images) == len(sample_images)

    def test_fetch_error_keeps_previous_list(self, backend, loaded_state, notifier):
        """A failed fetch leaves the displayed list unchanged."""
        previous = list(loaded_state.images)
        backend.list_error = BackendError("connection reset")

        state = fetch_images(loaded_state, backend)

        assert state.images == previous

    def test_fetch_error_on_empty_state(self, empty_backend, ui_state):
        """A failed first fetch leaves an empty gallery."""
        empty_backend.list_error = BackendError("connection reset")

        state = fetch_images(ui_state, empty_backend)

        assert state.images == []

    def test_unexpected_fetch_error_keeps_previous_list(self, backend, loaded_state):
        """Errors outside the backend hierarchy are logged, not raised."""
        previous = list(loaded_state.images)
        backend.list_error = KeyError("storage_path")

        state = fetch_images(loaded_state, backend)

        assert state.images == previous

        """A selection whose record is no longer listed is cleared."""
        """A selection pointing past the new list is cleared."""
        loaded_state.selected_id = "img-1"
        backend.images = backend.images[:1]

        state = fetch_images(loaded_state, backend)

        assert state.selected_id is None


# ============================================================================
# Public URL Tests
# ============================================================================


class TestPublicUrl:
    """Tests for get_public_url and gallery_items."""

    def test_get_public_url_uses_backend(self, backend):
        url = get_public_url("events/2.png", backend)
        assert url.endswith("/generated-images/events/2.png")

    def test_gallery_items_pairs(self, backend, loaded_state):
        """Each record maps to a (url, caption) pair, in order."""
        items = gallery_items(loaded_state, backend)

        assert len(items) == 3
        assert items[0][0].endswith("gallery/3.png")
        assert items[1][1].startswith("[events] Professional DJ")

    def test_gallery_caption_truncated(self, backend):
        """Captions show at most 60 prompt characters."""
        long_prompt = "x" * 200
        state = AdminImagesState(
            images=[GeneratedImage("a", long_prompt, "a.png", "hero", "2026-01-01")]
        )

        (_, caption), = gallery_items(state, backend)

        assert caption == "[hero] " + "x" * 60 + "..."

    def test_gallery_items_empty(self, backend, ui_state):
        assert gallery_items(ui_state, backend) == []


# ============================================================================
# delete_image Tests
# ============================================================================


class TestDeleteImage:
    """Tests for delete_image handler."""

    def test_delete_removes_object_then_record(self, backend, loaded_state, notifier):
        """Storage removal runs before record removal, then the list is refetched."""
        delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert backend.calls == [
            ("remove_object", "events/2.png"),
            ("delete_record", "img-2"),
            ("list_images",),
        ]

    def test_delete_success(self, backend, loaded_state, notifier):
        """The image disappears from the list and success is shown."""
        state = delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert "img-2" not in [image.id for image in state.images]
        assert notifier.successes == [DELETE_SUCCESS_MESSAGE]
        assert notifier.errors == []

    def test_storage_failure_still_deletes_record(self, backend, loaded_state, notifier):
        """A failed storage removal is not fatal."""
        backend.remove_object_error = BackendError("Object not found")

        state = delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert "img-2" not in [image.id for image in state.images]
        assert notifier.successes == [DELETE_SUCCESS_MESSAGE]
        assert notifier.errors == []
        # The object is left behind in the bucket
        assert "events/2.png" in backend.objects

    def test_record_failure_keeps_image(self, backend, loaded_state, notifier):
        """A failed record removal keeps the image and reports failure."""
        backend.delete_record_error = BackendError("permission denied")

        state = delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert "img-2" in [image.id for image in state.images]
        assert notifier.errors == [DELETE_FAILED_MESSAGE]
        assert notifier.successes == []

    def test_record_failure_does_not_refetch(self, backend, loaded_state, notifier):
        backend.delete_record_error = BackendError("permission denied")

        delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert "list_images" not in backend.call_names()

    def test_record_failure_after_storage_removal(self, backend, loaded_state, notifier):
        """Storage removal is not rolled back when the record removal fails."""
        backend.delete_record_error = BackendError("permission denied")

        delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert "events/2.png" not in backend.objects

    def test_delete_clears_selection(self, backend, loaded_state, notifier):
        loaded_state.selected_id = "img-2"

        state = delete_image("img-2", "events/2.png", loaded_state, backend, notifier)

        assert state.selected_id is None


# ============================================================================
# Selection Tests
# ============================================================================


class TestSelection:
    """Tests for select_image and delete_selected_image."""

    def test_select_valid_index(self, loaded_state):
        state = select_image(1, loaded_state)

        assert state.selected_id == "img-2"
        assert state.selected_image().id == "img-2"

    def test_select_out_of_range_clears(self, loaded_state):
        loaded_state.selected_id = "img-3"

        state = select_image(10, loaded_state)

        assert state.selected_id is None
        assert state.selected_image() is None

    def test_select_none_clears(self, loaded_state):
        state = select_image(None, loaded_state)
        assert state.selected_id is None

    def test_delete_selected_image(self, backend, loaded_state, notifier):
        """The selected record is deleted with its own storage path."""
        loaded_state = select_image(2, loaded_state)

        state = delete_selected_image(loaded_state, backend, notifier)

        assert ("remove_object", "hero/1.png") in backend.calls
        assert ("delete_record", "img-1") in backend.calls
        assert [image.id for image in state.images] == ["img-3", "img-2"]

    def test_delete_without_selection(self, backend, loaded_state, notifier):
        """Nothing is deleted when no thumbnail is selected."""
        state = delete_selected_image(loaded_state, backend, notifier)

        assert backend.calls == []
        assert notifier.errors == [NO_SELECTION_MESSAGE]
        assert len(state.images) == 3

    def test_selection_follows_record_after_refresh(self, backend, loaded_state):
        """A newer record at the top of the list does not move the selection."""
        loaded_state = select_image(1, loaded_state)
        backend.images.insert(
            0, GeneratedImage("img-4", "Rooftop party", "gallery/4.png", "gallery", "2026-10-04")
        )

        state = fetch_images(loaded_state, backend)

        assert state.selected_image().id == "img-2"

    def test_delete_selected_after_generation(self, backend, loaded_state, notifier):
        """Generating between selecting and deleting still deletes the selected record."""
        loaded_state = select_image(1, loaded_state)
        loaded_state.prompt = "Neon skyline"
        loaded_state = generate_image(loaded_state, backend, notifier)
        backend.calls.clear()

        state = delete_selected_image(loaded_state, backend, notifier)

        assert backend.calls[:2] == [
            ("remove_object", "events/2.png"),
            ("delete_record", "img-2"),
        ]
        assert "img-2" not in [image.id for image in state.images]
