# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build Persona Enumerations Module.

Exports:
    EnumBuildResult: Host build result (SUCCESS, UNSTABLE, FAILURE, NOT_BUILT, ABORTED)
    EnumCategoryMatch: Parsed ``type`` attribute of persona document elements
    EnumOutcomeCategory: Outcome category used for selection (SUCCESS, FAILURE, OTHER)
"""

from build_persona.enums.enum_build_result import EnumBuildResult
from build_persona.enums.enum_category_match import EnumCategoryMatch
from build_persona.enums.enum_outcome_category import EnumOutcomeCategory

__all__: list[str] = [
    "EnumBuildResult",
    "EnumCategoryMatch",
    "EnumOutcomeCategory",
]
