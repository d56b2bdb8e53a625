# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build Persona Errors Module.

Exports:
    ModelPersonaErrorContext: Configuration model for bundled error context
    PersonaError: Base persona error class
    PersonaParseError: Malformed document or missing persona id
    PersonaIOError: Unreachable document or unresolvable image asset
    PersonaRegistryError: Duplicate or unknown persona id in a registry

Load and reload treat PersonaParseError and PersonaIOError as fatal: they
propagate to the caller unchanged and no partial persona is produced.
Element-level anomalies inside an otherwise valid document are not errors;
they are omitted silently.
"""

from build_persona.errors.model_persona_error_context import (
    ModelPersonaErrorContext,
)
from build_persona.errors.persona_errors import (
    PersonaError,
    PersonaIOError,
    PersonaParseError,
    PersonaRegistryError,
)

__all__: list[str] = [
    "ModelPersonaErrorContext",
    "PersonaError",
    "PersonaIOError",
    "PersonaParseError",
    "PersonaRegistryError",
]
