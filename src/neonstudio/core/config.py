"""Configuration management for the Neon Studio admin image page.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the NEONSTUDIO_ prefix,
allowing the hosted backend to be wired in without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (NEONSTUDIO_* prefix)
2. .env file in the project root
3. Default values defined in NeonStudioConfig

Example .env file:
    NEONSTUDIO_SUPABASE_URL=https://example.supabase.co
    NEONSTUDIO_SUPABASE_KEY=public-anon-key
    NEONSTUDIO_IMAGES_BUCKET=generated-images
    NEONSTUDIO_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
It is read by the entry points only; handlers receive their backend through
injection and never consult the configuration directly.

Usage Example
-------------
    from neonstudio.core.config import config

    print(config.images_table)
    print(config.server_port)

See Also
--------
- NeonStudioConfig: Full configuration class documentation
- neonstudio.core.backend.create_backend: Builds the backend from this config
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NeonStudioConfig(BaseSettings):
    """Main configuration for the admin image page.

    Values are loaded from environment variables with the NEONSTUDIO_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Backend Settings:
        supabase_url : str
            Base URL of the hosted Supabase project
        supabase_key : str
            API key used by the page (anon or service role)
        images_table : str
            Record store table holding generated image rows
        images_bucket : str
            Object store bucket holding generated image bytes
        generate_function : str
            Name of the remote edge function that generates images

    Page Settings:
        default_category : str
            Category preselected in the form

    Server Settings:
        server_host : str
            Bind address for uvicorn / Gradio
        server_port : int
            Port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for admin pages)
        ui_path : str
            Mount path of the Gradio page inside the FastAPI app
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level used by the entry points

    Examples
    --------
        >>> custom_config = NeonStudioConfig(
        ...     supabase_url="https://example.supabase.co",
        ...     supabase_key="anon",
        ...     _env_file=None,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NEONSTUDIO_",
        case_sensitive=False,
        extra="ignore",
    )

    # Hosted backend
    supabase_url: str = Field(
        default="",
        description="Base URL of the Supabase project",
    )
    supabase_key: str = Field(
        default="",
        description="Supabase API key used by the admin page",
    )
    images_table: str = Field(
        default="generated_images",
        description="Table holding generated image records",
    )
    images_bucket: str = Field(
        default="generated-images",
        description="Storage bucket holding generated image files",
    )
    generate_function: str = Field(
        default="generate-image",
        description="Edge function invoked to generate an image",
    )

    # Page defaults
    default_category: str = Field(
        default="gallery",
        description="Category preselected in the generation form",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for admin pages)",
    )
    ui_path: str = Field(
        default="/admin/images",
        description="Mount path of the Gradio page inside the API app",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the entry points",
    )

    def has_backend_credentials(self) -> bool:
        """Check whether both the project URL and the key are set."""
        return bool(self.supabase_url.strip() and self.supabase_key.strip())


# Global configuration instance
config = NeonStudioConfig()
