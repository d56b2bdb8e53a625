# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona Error Context Configuration Model.

This module defines the configuration model for persona error context,
bundling the common structured fields carried by every PersonaError.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelPersonaErrorContext(BaseModel):
    """Configuration model for persona error context.

    Attributes:
        operation: Operation being performed (load_persona, resolve_asset, etc.)
        target_name: Persona id, document location or asset pattern involved
        correlation_id: Correlation ID for tracing a failure across log lines

    Example:
        >>> context = ModelPersonaErrorContext.with_correlation(
        ...     operation="resolve_asset",
        ...     target_name="personas/chuck/icon.*",
        ... )
        >>> raise PersonaIOError("No image found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (load_persona, resolve_asset, etc.)",
    )
    target_name: str | None = Field(
        default=None,
        description="Persona id, document location or asset pattern involved",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing a failure across log lines",
    )

    @classmethod
    def with_correlation(
        cls,
        operation: str | None = None,
        target_name: str | None = None,
        correlation_id: UUID | None = None,
    ) -> ModelPersonaErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id or uuid4(),
        )


__all__ = ["ModelPersonaErrorContext"]
