# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Category match enumeration for persona document ``type`` attributes.

The ``type`` attribute on ``image`` and ``quote`` elements is parsed into one
of these values. Callers decide what UNRECOGNIZED means:

- image elements drop the entry
- quote elements file it under the default quotes

The two policies are intentionally different and must not be unified.
"""

from __future__ import annotations

from enum import Enum


class EnumCategoryMatch(str, Enum):
    """Result of matching a ``type`` attribute against the known categories."""

    SUCCESS = "success"
    FAILURE = "failure"
    OTHER = "other"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str | None) -> EnumCategoryMatch:
        """Match a raw ``type`` value case-insensitively.

        Args:
            value: Raw attribute value, or None when the attribute is absent.

        Returns:
            The matching category, or UNRECOGNIZED for None and any other value.

        Example:
            >>> EnumCategoryMatch.parse("Success")
            <EnumCategoryMatch.SUCCESS: 'success'>
            >>> EnumCategoryMatch.parse("foo")
            <EnumCategoryMatch.UNRECOGNIZED: 'unrecognized'>
        """
        if value is None:
            return cls.UNRECOGNIZED
        normalized = value.lower()
        for member in (cls.SUCCESS, cls.FAILURE, cls.OTHER):
            if normalized == member.value:
                return member
        return cls.UNRECOGNIZED


__all__ = ["EnumCategoryMatch"]
