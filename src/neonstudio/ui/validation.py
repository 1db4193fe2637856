"""Validation utilities for admin page inputs."""

import logging

from .models import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    EMPTY_PROMPT_MESSAGE,
    PRESET_PROMPTS,
    PresetPrompt,
)

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_prompt(prompt: str | None) -> str:
    """Ensure the prompt has content.

    Only emptiness is checked; the prompt is returned unchanged (not trimmed)
    so it is sent exactly as typed.

    Args:
        prompt: Prompt text from the form

    Returns:
        The prompt unchanged

    Raises:
        ValidationError: If the prompt is empty or whitespace-only
    """
    if not prompt or not prompt.strip():
        raise ValidationError(EMPTY_PROMPT_MESSAGE)
    return prompt


def normalize_category(category: str | None) -> str:
    """Return the category to store, falling back to the default when empty.

    Categories outside :data:`CATEGORIES` are accepted as free-form tags.
    """
    if not category or not category.strip():
        return DEFAULT_CATEGORY
    category = category.strip()
    if category not in CATEGORIES:
        logger.debug(f"Using free-form category: {category}")
    return category


def find_preset(label: str) -> PresetPrompt:
    """Look up a preset prompt by its button label.

    Raises:
        ValidationError: If no preset has that label
    """
    for preset in PRESET_PROMPTS:
        if preset.label == label:
            return preset
    raise ValidationError(f"Unknown preset: {label}")
