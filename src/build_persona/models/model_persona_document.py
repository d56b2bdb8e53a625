# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Format-neutral parse of a persona document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from build_persona.models.model_persona_element import ModelPersonaElement


class ModelPersonaDocument(BaseModel):
    """Root attributes plus ordered children of a persona document.

    The document reader produces this model for both XML and YAML sources so
    the loader classifies elements without knowing the source format.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    location: str = Field(
        ...,
        description="Location the document was read from",
    )
    persona_id: str | None = Field(
        default=None,
        description="Root 'id' attribute, None when absent",
    )
    display_name: str | None = Field(
        default=None,
        description="Root 'displayName' attribute, None when absent",
    )
    elements: tuple[ModelPersonaElement, ...] = Field(
        default=(),
        description="image and quote children in document order",
    )

    def elements_of(self, tag: str) -> tuple[ModelPersonaElement, ...]:
        """Return the children with the given tag, in document order."""
        return tuple(e for e in self.elements if e.tag == tag)


__all__ = ["ModelPersonaDocument"]
