# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Immutable snapshot of one loaded persona.

A snapshot is built in full by the loader and never mutated afterwards.
Reloading a persona builds a new snapshot and swaps the reference, so
readers always see either the old or the new state as a whole.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from build_persona.enums import EnumOutcomeCategory


class ModelPersonaSnapshot(BaseModel):
    """Categorized images and quotes of a persona plus its resolved icon.

    Attributes:
        persona_id: Stable persona identifier.
        display_name: Human label, None when the document has none.
        icon: Resolved icon path (prefixed with the image base path).
        images_success: Image paths shown for successful builds.
        images_failure: Image paths shown for failed builds.
        images_other: Image paths shown for any other result.
        quotes_success: Quotes for successful builds.
        quotes_failure: Quotes for failed builds.
        quotes_other: Quotes for any other result.
        quotes_default: Quotes with no or an unrecognized type.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    persona_id: str = Field(..., min_length=1)
    display_name: str | None = Field(default=None)
    icon: str = Field(..., min_length=1)
    images_success: tuple[str, ...] = Field(default=())
    images_failure: tuple[str, ...] = Field(default=())
    images_other: tuple[str, ...] = Field(default=())
    quotes_success: tuple[str, ...] = Field(default=())
    quotes_failure: tuple[str, ...] = Field(default=())
    quotes_other: tuple[str, ...] = Field(default=())
    quotes_default: tuple[str, ...] = Field(default=())

    def images_for(self, category: EnumOutcomeCategory) -> tuple[str, ...]:
        """Return the image collection for an outcome category."""
        if category is EnumOutcomeCategory.SUCCESS:
            return self.images_success
        if category is EnumOutcomeCategory.FAILURE:
            return self.images_failure
        return self.images_other

    def quotes_for(self, category: EnumOutcomeCategory) -> tuple[str, ...]:
        """Return the categorized quote collection (without the default)."""
        if category is EnumOutcomeCategory.SUCCESS:
            return self.quotes_success
        if category is EnumOutcomeCategory.FAILURE:
            return self.quotes_failure
        return self.quotes_other


__all__ = ["ModelPersonaSnapshot"]
