"""Data models for the admin image page state and presets."""

import logging
from dataclasses import dataclass, field

from neonstudio.core.backend import GeneratedImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PresetPrompt:
    """A fixed, named prompt offered as a one-click shortcut."""

    label: str
    prompt: str


@dataclass
class AdminImagesState:
    """Session state for the admin image page.

    Each browser session gets its own instance. The fields are only mutated
    by the handlers in :mod:`neonstudio.ui.handlers`.

    Attributes
    ----------
    prompt : str
        Free-text prompt currently in the form
    category : str
        Selected category tag
    is_generating : bool
        Busy flag, true while a generation request is in flight
    preview_url : str | None
        URL of the last successfully generated image
    images : list[GeneratedImage]
        Snapshot of the last successful gallery fetch, newest first
    selected_id : str | None
        Record id of the gallery thumbnail selected for deletion
    initialized : bool
        Whether the initial gallery fetch has run
    """

    prompt: str = ""
    category: str = "gallery"
    is_generating: bool = False
    preview_url: str | None = None
    images: list[GeneratedImage] = field(default_factory=list)
    selected_id: str | None = None
    initialized: bool = False

    def can_generate(self) -> bool:
        """Check if the generate control should be enabled.

        Returns:
            True if no generation is in flight and the prompt has content
        """
        return not self.is_generating and bool(self.prompt.strip())

    def selected_image(self) -> GeneratedImage | None:
        """Return the selected gallery record, or None if nothing valid is selected."""
        if self.selected_id is None:
            return None
        for image in self.images:
            if image.id == self.selected_id:
                return image
        return None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AdminImagesState(category={self.category}, "
            f"busy={self.is_generating}, images={len(self.images)})"
        )


# Preset prompts shown as quick buttons above the prompt box
PRESET_PROMPTS = [
    PresetPrompt(
        label="Nightclub Crowd",
        prompt=(
            "Vibrant African nightclub scene with energetic crowd dancing under neon blue "
            "and pink lights, urban atmosphere, concert photography style, high energy party vibe"
        ),
    ),
    PresetPrompt(
        label="DJ Performance",
        prompt=(
            "Professional DJ performing on stage with dramatic spotlight beams and colorful "
            "laser effects, crowd silhouettes in foreground, concert photography, neon lighting"
        ),
    ),
    PresetPrompt(
        label="Afrobeats Party",
        prompt=(
            "Exciting Afrobeats concert party with diverse crowd celebrating, colorful stage "
            "lights, Nigerian nightclub atmosphere, vibrant energy"
        ),
    ),
    PresetPrompt(
        label="VIP Lounge",
        prompt=(
            "Stylish VIP lounge area in upscale nightclub with purple and gold ambient "
            "lighting, elegant decor, bottle service setup"
        ),
    ),
    PresetPrompt(
        label="DJ Equipment",
        prompt=(
            "Close-up of professional DJ mixer and turntables with neon glow effects, "
            "smoke atmosphere, nightclub setting"
        ),
    ),
    PresetPrompt(
        label="Dance Floor",
        prompt=(
            "Packed dance floor with people dancing, colorful LED lights from above, "
            "smoke machine effects, nightclub party atmosphere"
        ),
    ),
    PresetPrompt(
        label="Stage Lights",
        prompt=(
            "Dramatic stage with concert lighting, spotlights and laser beams cutting "
            "through smoke, empty stage ready for performance"
        ),
    ),
    PresetPrompt(
        label="Artist Portrait",
        prompt=(
            "Professional portrait of a DJ artist with neon lighting, urban style, "
            "confident pose, nightclub background blur"
        ),
    ),
]

# Category value -> display label, in dropdown order
CATEGORIES = {
    "gallery": "Gallery",
    "events": "Events",
    "artists": "Artists",
    "hero": "Hero Backgrounds",
}

DEFAULT_CATEGORY = "gallery"

# User-facing messages
EMPTY_PROMPT_MESSAGE = "Please enter a prompt"
GENERATE_SUCCESS_MESSAGE = "Image generated successfully!"
GENERATE_FALLBACK_ERROR = "Failed to generate image"
DELETE_SUCCESS_MESSAGE = "Image deleted"
DELETE_FAILED_MESSAGE = "Failed to delete image"
NO_SELECTION_MESSAGE = "Select an image to delete"

# Thumbnail text limits
ALT_TEXT_LENGTH = 50
CAPTION_LENGTH = 60
