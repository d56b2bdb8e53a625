# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona settings loaded from environment variables.

Environment Variables:
    PERSONA_HOME: Root directory scanned for persona directories
        Default: ./personas
    PERSONA_IMAGE_BASE_PATH: Prefix under which persona images are served
        Default: /persona/images
    PERSONA_HTTP_TIMEOUT: Timeout in seconds for HTTP documents and image lookups
        Default: 10.0
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PERSONA_HOME = "./personas"
DEFAULT_IMAGE_BASE_PATH = "/persona/images"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0


class ModelPersonaSettings(BaseModel):
    """Runtime settings for persona discovery and asset resolution."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    persona_home: Path = Field(
        default=Path(DEFAULT_PERSONA_HOME),
        description="Root directory scanned for persona directories",
    )
    image_base_path: str = Field(
        default=DEFAULT_IMAGE_BASE_PATH,
        description="Prefix under which persona images are served",
    )
    http_timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout in seconds for HTTP documents and image lookups",
    )

    @classmethod
    def from_env(cls) -> ModelPersonaSettings:
        """Build settings from PERSONA_* environment variables."""
        return cls(
            persona_home=Path(os.getenv("PERSONA_HOME", DEFAULT_PERSONA_HOME)),
            image_base_path=os.getenv(
                "PERSONA_IMAGE_BASE_PATH", DEFAULT_IMAGE_BASE_PATH
            ),
            http_timeout_seconds=float(
                os.getenv("PERSONA_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
            ),
        )


__all__ = [
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "DEFAULT_IMAGE_BASE_PATH",
    "DEFAULT_PERSONA_HOME",
    "ModelPersonaSettings",
]
