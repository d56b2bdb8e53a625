# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build Persona - themed decorations for build outcomes.

This package resolves a persona descriptor (an icon, categorized images and
categorized quotes) and selects one decoration for a given build outcome:

- Descriptor loading from XML or YAML persona documents
- Asset resolution by trying a fixed list of image extensions
- Uniform random selection keyed by outcome category
- PersonaRegistry: discovery and thread-safe indexing of personas

Key Components:
    - Persona: owns one loaded snapshot and publishes reloads atomically
    - PersonaSelector: injectable random choice over snapshot collections
    - PersonaRegistry: persona lookup by id with directory discovery
"""

__all__: list[str] = []
