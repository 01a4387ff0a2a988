"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) outside the CLI.
- Environment only: `mkd` reads no configuration files.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.color import ColorChoice


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed + validated at the edge (env vars) without leaking into the core.
    - A single configuration contract for CLI and pipeline.
    """

    model_config = SettingsConfigDict(
        env_prefix="MKD_",
        extra="ignore",
        case_sensitive=False,
    )

    color: ColorChoice = Field(
        default_factory=ColorChoice.default,
        description="Default for --color (auto/always/never).",
    )
