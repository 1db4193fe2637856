"""UI event handlers organized by feature area.

This package provides the page operations, organized into logical modules:
- prompt: Preset prompts, free-text prompt and category selection
- generation: Remote image generation with busy flag and preview
- gallery: Gallery fetch, public URLs, selection and deletion

Handlers are framework-free: they take the page state plus an injected
backend and notifier, and return the updated state. The Gradio page and the
JSON API both drive them.
"""

from .gallery import (
    delete_image,
    delete_selected_image,
    fetch_images,
    gallery_items,
    get_public_url,
    select_image,
)
from .generation import (
    begin_generation,
    generate_image,
)
from .prompt import (
    get_preset_labels,
    select_category,
    select_preset,
    update_prompt,
)

__all__ = [
    # Generation handlers
    "begin_generation",
    "generate_image",
    # Prompt handlers
    "get_preset_labels",
    "select_category",
    "select_preset",
    "update_prompt",
    # Gallery handlers
    "delete_image",
    "delete_selected_image",
    "fetch_images",
    "gallery_items",
    "get_public_url",
    "select_image",
]
