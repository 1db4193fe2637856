"""Prompt form handlers: presets, free text and category."""

import logging

from ..models import PRESET_PROMPTS, AdminImagesState
from ..validation import find_preset, normalize_category

logger = logging.getLogger(__name__)


def get_preset_labels() -> list[str]:
    """Get preset button labels in display order.

    Returns:
        List of preset labels
    """
    return [preset.label for preset in PRESET_PROMPTS]


def select_preset(label: str, state: AdminImagesState) -> AdminImagesState:
    """Overwrite the prompt with a preset's text.

    Any manual edits in the prompt box are discarded.

    Args:
        label: Label of the clicked preset
        state: Page state

    Returns:
        Updated state

    Raises:
        ValidationError: If ``label`` does not name a preset
    """
    preset = find_preset(label)
    state.prompt = preset.prompt
    logger.debug(f"Applied preset: {label}")
    return state


def update_prompt(text: str | None, state: AdminImagesState) -> AdminImagesState:
    """Store the prompt exactly as typed."""
    state.prompt = text or ""
    return state


def select_category(category: str | None, state: AdminImagesState) -> AdminImagesState:
    """Store the selected category (empty values fall back to the default)."""
    state.category = normalize_category(category)
    return state
