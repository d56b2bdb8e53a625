# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build Persona CLI."""

from build_persona.cli.commands import cli

__all__: list[str] = ["cli"]
