# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build result enumeration supplied by the host build system."""

from __future__ import annotations

from enum import Enum

from build_persona.enums.enum_outcome_category import EnumOutcomeCategory


class EnumBuildResult(str, Enum):
    """Result of a build as reported by the host.

    Only exact SUCCESS and exact FAILURE have dedicated decorations; every
    other result shares the OTHER outcome category.
    """

    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    NOT_BUILT = "NOT_BUILT"
    ABORTED = "ABORTED"

    def to_outcome_category(self) -> EnumOutcomeCategory:
        """Map this result onto its outcome category."""
        if self is EnumBuildResult.SUCCESS:
            return EnumOutcomeCategory.SUCCESS
        if self is EnumBuildResult.FAILURE:
            return EnumOutcomeCategory.FAILURE
        return EnumOutcomeCategory.OTHER


__all__ = ["EnumBuildResult"]
