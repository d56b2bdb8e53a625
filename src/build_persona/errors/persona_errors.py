# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona-Specific Error Classes.

Error Hierarchy:
    PersonaError (base persona error)
    ├── PersonaParseError
    ├── PersonaIOError
    └── PersonaRegistryError

All errors:
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for tracing
    - Accept ModelPersonaErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from build_persona.errors.model_persona_error_context import (
    ModelPersonaErrorContext,
)


class PersonaError(Exception):
    """Base error class for persona loading and selection errors.

    Structured Fields (via ModelPersonaErrorContext):
        operation: Operation being performed
        target_name: Persona id, document location or asset pattern
        correlation_id: Correlation ID for tracing

    Example:
        >>> context = ModelPersonaErrorContext(
        ...     operation="load_persona",
        ...     target_name="personas/chuck/persona.xml",
        ... )
        >>> raise PersonaError("Load failed", context=context, attempt=2)
    """

    def __init__(
        self,
        message: str,
        context: ModelPersonaErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize PersonaError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled persona error context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> UUID | None:
        """Correlation ID from the bundled context, if any."""
        if self.context is None:
            return None
        return self.context.correlation_id

    @property
    def operation(self) -> str | None:
        """Operation from the bundled context, if any."""
        if self.context is None:
            return None
        return self.context.operation

    @property
    def target_name(self) -> str | None:
        """Target name from the bundled context, if any."""
        if self.context is None:
            return None
        return self.context.target_name


class PersonaParseError(PersonaError):
    """Raised when a persona document is malformed or misses its ``id``.

    Example:
        >>> raise PersonaParseError(
        ...     "Persona document has no 'id' attribute",
        ...     context=ModelPersonaErrorContext.with_correlation(
        ...         operation="load_persona",
        ...         target_name="personas/chuck/persona.xml",
        ...     ),
        ... )
    """


class PersonaIOError(PersonaError):
    """Raised when a document is unreachable or a required image is missing."""


class PersonaRegistryError(PersonaError):
    """Raised for duplicate registrations and lookups of unknown persona ids."""


__all__ = [
    "PersonaError",
    "PersonaIOError",
    "PersonaParseError",
    "PersonaRegistryError",
]
