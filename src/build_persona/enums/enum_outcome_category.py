# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome category enumeration for decoration selection."""

from enum import Enum


class EnumOutcomeCategory(str, Enum):
    """Coarse classification of a build result used to pick a decoration.

    OTHER is the catch-all for anything that is not an exact success or
    failure (unstable, aborted, not built).
    """

    SUCCESS = "success"
    FAILURE = "failure"
    OTHER = "other"


__all__ = ["EnumOutcomeCategory"]
