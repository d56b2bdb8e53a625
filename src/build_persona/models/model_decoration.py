# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decoration model returned per selection request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelDecoration(BaseModel):
    """Icon plus the image selected for one build outcome.

    ``image`` is None when the persona has no image for the requested
    category; callers omit the image from the rendered decoration.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    icon: str = Field(..., description="Persona icon path")
    image: str | None = Field(
        default=None,
        description="Selected image path, None when none is available",
    )

    @property
    def has_image(self) -> bool:
        return self.image is not None


__all__ = ["ModelDecoration"]
