"""Shared pytest fixtures for admin image page tests."""

from typing import Any

import pytest

from neonstudio.core.backend import BackendError, GeneratedImage, ImageBackend
from neonstudio.core.config import NeonStudioConfig
from neonstudio.ui.models import AdminImagesState
from neonstudio.ui.notifications import CollectingNotifier

PUBLIC_PREFIX = "https://project.supabase.co/storage/v1/object/public/generated-images/"


class FakeBackend(ImageBackend):
    """In-memory backend with switchable failures.

    Records are kept newest first. Every call is appended to ``calls`` so
    tests can assert which remote operations ran and in what order.
    """

    def __init__(self, images: list[GeneratedImage] | None = None):
        self.images: list[GeneratedImage] = list(images or [])
        self.objects: set[str] = {image.storage_path for image in self.images}
        self.calls: list[tuple] = []
        self.generation_response: dict[str, Any] = {"imageUrl": "https://x/y.png"}
        self.generation_error: BackendError | None = None
        self.list_error: Exception | None = None
        self.delete_record_error: BackendError | None = None
        self.remove_object_error: BackendError | None = None

    def invoke_generation(self, prompt: str, category: str) -> dict[str, Any]:
        self.calls.append(("invoke_generation", prompt, category))
        if self.generation_error is not None:
            raise self.generation_error
        if self.generation_response.get("imageUrl"):
            # The remote function inserts the record as a side effect
            index = len(self.images) + 1
            path = f"{category}/generated-{index}.png"
            self.images.insert(
                0,
                GeneratedImage(
                    id=f"img-{index}",
                    prompt=prompt,
                    storage_path=path,
                    category=category,
                    created_at=f"2026-10-{index:02d}T12:00:00+00:00",
                ),
            )
            self.objects.add(path)
        return dict(self.generation_response)

    def list_images(self) -> list[GeneratedImage]:
        self.calls.append(("list_images",))
        if self.list_error is not None:
            raise self.list_error
        return list(self.images)

    def delete_record(self, image_id: str) -> None:
        self.calls.append(("delete_record", image_id))
        if self.delete_record_error is not None:
            raise self.delete_record_error
        self.images = [image for image in self.images if image.id != image_id]

    def remove_object(self, storage_path: str) -> None:
        self.calls.append(("remove_object", storage_path))
        if self.remove_object_error is not None:
            raise self.remove_object_error
        self.objects.discard(storage_path)

    def public_url(self, storage_path: str) -> str:
        return PUBLIC_PREFIX + storage_path

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def sample_images() -> list[GeneratedImage]:
    """Three records in the order the store returns them (newest first)."""
    return [
        GeneratedImage(
            id="img-3",
            prompt="Packed dance floor with people dancing, colorful LED lights from above",
            storage_path="gallery/3.png",
            category="gallery",
            created_at="2026-10-03T21:00:00+00:00",
        ),
        GeneratedImage(
            id="img-2",
            prompt="Professional DJ performing on stage",
            storage_path="events/2.png",
            category="events",
            created_at="2026-10-02T21:00:00+00:00",
        ),
        GeneratedImage(
            id="img-1",
            prompt="Stylish VIP lounge",
            storage_path="hero/1.png",
            category="hero",
            created_at="2026-10-01T21:00:00+00:00",
        ),
    ]


@pytest.fixture
def backend(sample_images) -> FakeBackend:
    """Fake backend pre-loaded with the sample records."""
    return FakeBackend(sample_images)


@pytest.fixture
def empty_backend() -> FakeBackend:
    """Fake backend with no records."""
    return FakeBackend()


@pytest.fixture
def notifier() -> CollectingNotifier:
    """Notifier that records messages instead of showing toasts."""
    return CollectingNotifier()


@pytest.fixture
def ui_state() -> AdminImagesState:
    """Create empty page state for testing."""
    return AdminImagesState()


@pytest.fixture
def loaded_state(backend: FakeBackend) -> AdminImagesState:
    """Page state whose gallery already holds the backend's records."""
    return AdminImagesState(images=list(backend.images), initialized=True)


@pytest.fixture
def test_config(monkeypatch) -> NeonStudioConfig:
    """Create a configuration isolated from the environment and .env file."""
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "SERVER_PORT", "DEFAULT_CATEGORY"):
        monkeypatch.delenv(f"NEONSTUDIO_{name}", raising=False)

    return NeonStudioConfig(
        supabase_url="https://project.supabase.co",
        supabase_key="test-anon-key",
        _env_file=None,
    )
