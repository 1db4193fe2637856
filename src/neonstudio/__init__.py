"""Neon Studio admin images - AI image generation and gallery management page."""

__version__ = "0.1.0"

from neonstudio.core.backend import GeneratedImage, ImageBackend
from neonstudio.core.config import NeonStudioConfig, config

__all__ = [
    "GeneratedImage",
    "ImageBackend",
    "NeonStudioConfig",
    "config",
]
