# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona source model: the three inputs a persona is loaded from."""

from __future__ import annotations

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelPersonaSource(BaseModel):
    """Inputs for loading and reloading one persona.

    Attributes:
        document_location: Path or http(s) URL of the persona document.
        image_base: Path or http(s) URL of the directory holding the persona's
            images (``icon.png`` and friends).
        image_base_path: Prefix prepended to every produced image path so
            consumers can address assets relative to their own serving root.

    Example:
        >>> source = ModelPersonaSource(
        ...     document_location="personas/chuck/persona.xml",
        ...     image_base="personas/chuck",
        ...     image_base_path="/persona/images/chuck",
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    document_location: str = Field(
        ...,
        min_length=1,
        description="Path or http(s) URL of the persona document",
    )
    image_base: str = Field(
        ...,
        min_length=1,
        description="Path or http(s) URL of the persona image directory",
    )
    image_base_path: str = Field(
        default="",
        description="Prefix prepended to every produced image path",
    )

    @field_validator("document_location", "image_base", mode="before")
    @classmethod
    def _coerce_path(cls, value: object) -> object:
        if isinstance(value, PurePath):
            return str(value)
        return value


__all__ = ["ModelPersonaSource"]
