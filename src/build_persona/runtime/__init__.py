# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build Persona Runtime Module.

Exports:
    FilesystemAssetOrigin: Assets in a local directory
    HttpAssetOrigin: Assets served under an HTTP base URL
    PackageAssetOrigin: Assets bundled as package resources
    IMAGE_EXTENSIONS: Ordered extensions tried by the asset resolver
    Persona: One loaded persona with atomic reload
    PersonaRegistry: Thread-safe persona index with directory discovery
    PersonaSelector: Uniform random selection over snapshot collections
    ProtocolAssetOrigin: Protocol for asset locations
    ProtocolRandomChoice: Protocol for the injectable random choice
    asset_origin_for: Origin factory keyed by URL scheme
    get_persona_registry: Process-wide registry singleton
    load_persona_snapshot: Build a snapshot from a persona source
    read_persona_document: Parse an XML or YAML persona document
    resolve_asset: Find an image by logical name
"""

from build_persona.runtime.asset_resolver import (
    IMAGE_EXTENSIONS,
    FilesystemAssetOrigin,
    HttpAssetOrigin,
    PackageAssetOrigin,
    asset_origin_for,
    resolve_asset,
)
from build_persona.runtime.persona import Persona
from build_persona.runtime.persona_document_reader import read_persona_document
from build_persona.runtime.persona_loader import load_persona_snapshot
from build_persona.runtime.persona_registry import (
    PersonaRegistry,
    get_persona_registry,
)
from build_persona.runtime.persona_selector import (
    PersonaSelector,
    ProtocolRandomChoice,
)
from build_persona.runtime.protocol_asset_origin import ProtocolAssetOrigin

__all__: list[str] = [
    "IMAGE_EXTENSIONS",
    "FilesystemAssetOrigin",
    "HttpAssetOrigin",
    "PackageAssetOrigin",
    "Persona",
    "PersonaRegistry",
    "PersonaSelector",
    "ProtocolAssetOrigin",
    "ProtocolRandomChoice",
    "asset_origin_for",
    "get_persona_registry",
    "load_persona_snapshot",
    "read_persona_document",
    "resolve_asset",
]
