"""Core functionality for the admin image page.

This module provides the components that sit below the user interface:

- **NeonStudioConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
- **ImageBackend**: Interface to the hosted record store, object store and
  remote generation function
- **SupabaseBackend**: ImageBackend implementation using the supabase client
- **GeneratedImage**: Record type owned by the hosted backend

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with NEONSTUDIO_ in .env files

2. **Backend Layer** (backend.py):
   - Abstract interface injected into every page operation
   - Supabase implementation wrapping client failures into BackendError

Usage Example
-------------
    from neonstudio.core import config, create_backend

    backend = create_backend(config)
    images = backend.list_images()
"""

from neonstudio.core.backend import (
    BackendConfigurationError,
    BackendError,
    GeneratedImage,
    GenerationError,
    ImageBackend,
    SupabaseBackend,
    create_backend,
)
from neonstudio.core.config import NeonStudioConfig, config

__all__ = [
    "BackendConfigurationError",
    "BackendError",
    "GeneratedImage",
    "GenerationError",
    "ImageBackend",
    "SupabaseBackend",
    "create_backend",
    "NeonStudioConfig",
    "config",
]
