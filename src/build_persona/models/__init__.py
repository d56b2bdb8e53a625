# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build Persona Models Module.

Exports:
    ModelDecoration: Icon plus selected image for one outcome
    ModelPersonaDocument: Format-neutral parse of a persona document
    ModelPersonaElement: One image or quote child of a persona document
    ModelPersonaSettings: Environment-driven runtime settings
    ModelPersonaSnapshot: Immutable categorized persona state
    ModelPersonaSource: Document location, image base and image base path
"""

from build_persona.models.model_decoration import ModelDecoration
from build_persona.models.model_persona_document import ModelPersonaDocument
from build_persona.models.model_persona_element import ModelPersonaElement
from build_persona.models.model_persona_settings import ModelPersonaSettings
from build_persona.models.model_persona_snapshot import ModelPersonaSnapshot
from build_persona.models.model_persona_source import ModelPersonaSource

__all__: list[str] = [
    "ModelDecoration",
    "ModelPersonaDocument",
    "ModelPersonaElement",
    "ModelPersonaSettings",
    "ModelPersonaSnapshot",
    "ModelPersonaSource",
]
