# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona Selector.

Draws one image or quote from a persona snapshot for an outcome category.
Selection is a fresh uniform draw per call over an immutable snapshot, so a
selector can be shared between threads without coordination.

An empty collection yields None (the absence marker) on every call; the
random source is never consulted in that case.
"""

from __future__ import annotations

import secrets
from collections.abc import Sequence
from typing import Protocol, TypeVar

from build_persona.enums import EnumOutcomeCategory
from build_persona.models import ModelPersonaSnapshot

T = TypeVar("T")


class ProtocolRandomChoice(Protocol):
    """Callable returning one element of a non-empty sequence."""

    def __call__(self, seq: Sequence[T], /) -> T: ...


_system_random = secrets.SystemRandom()


class PersonaSelector:
    """Uniform random selection over snapshot collections.

    Args:
        random_choice: Callable picking one element from a non-empty sequence.
            Defaults to ``secrets.SystemRandom().choice``. Tests substitute a
            deterministic callable.

    Example:
        >>> selector = PersonaSelector(random_choice=lambda seq: seq[0])
        >>> selector.pick_image(snapshot, EnumOutcomeCategory.SUCCESS)
        '/persona/images/chuck/success.jpg'
    """

    def __init__(self, random_choice: ProtocolRandomChoice | None = None) -> None:
        self._random_choice = random_choice or _system_random.choice

    def choose(self, items: Sequence[T]) -> T | None:
        """Pick one item, or None when there is nothing to pick from."""
        if not items:
            return None
        return self._random_choice(items)

    def pick_image(
        self,
        snapshot: ModelPersonaSnapshot,
        category: EnumOutcomeCategory,
    ) -> str | None:
        """Pick an image for the category, or None if it has no images."""
        return self.choose(snapshot.images_for(category))

    def pick_default_image(self, snapshot: ModelPersonaSnapshot) -> str | None:
        """Pick an image when no outcome is known. Draws from success images."""
        return self.choose(snapshot.images_success)

    def pick_quote(
        self,
        snapshot: ModelPersonaSnapshot,
        category: EnumOutcomeCategory,
    ) -> str | None:
        """Pick a quote for the category.

        Falls back to the default quotes when the category has none, and
        returns None when both are empty.
        """
        quotes = snapshot.quotes_for(category) or snapshot.quotes_default
        return self.choose(quotes)


__all__ = ["PersonaSelector", "ProtocolRandomChoice"]
