# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Format-neutral element of a persona document."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelPersonaElement(BaseModel):
    """One ``image`` or ``quote`` child of a persona document.

    ``type`` is None when the attribute is absent; ``text`` is the trimmed
    element text, or None when the element carries no text at all.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    tag: Literal["image", "quote"] = Field(
        ...,
        description="Element kind",
    )
    type: str | None = Field(
        default=None,
        description="Raw 'type' attribute value, None when absent",
    )
    text: str | None = Field(
        default=None,
        description="Trimmed element text, None when absent",
    )


__all__ = ["ModelPersonaElement"]
