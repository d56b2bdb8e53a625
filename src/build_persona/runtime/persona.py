# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona: one loaded persona and its per-request decoration API.

Thread Safety:
    The current state is a single reference to an immutable
    ModelPersonaSnapshot. reload() builds a new snapshot off to the side and
    publishes it with one assignment, so concurrent readers observe either
    the old or the new snapshot, never a mix. A lock serializes reloads.
    If building the new snapshot fails, nothing is published.
"""

from __future__ import annotations

import logging
import threading

from build_persona.enums import EnumBuildResult, EnumOutcomeCategory
from build_persona.models import (
    ModelDecoration,
    ModelPersonaSnapshot,
    ModelPersonaSource,
)
from build_persona.models.model_persona_settings import DEFAULT_HTTP_TIMEOUT_SECONDS
from build_persona.runtime.persona_loader import load_persona_snapshot
from build_persona.runtime.persona_selector import PersonaSelector
from build_persona.runtime.protocol_asset_origin import ProtocolAssetOrigin

logger = logging.getLogger(__name__)


def _outcome_category(
    outcome: EnumOutcomeCategory | EnumBuildResult,
) -> EnumOutcomeCategory:
    if isinstance(outcome, EnumBuildResult):
        return outcome.to_outcome_category()
    return outcome


class Persona:
    """A persona loaded from a document, reloadable in place.

    Use Persona.create() to load one; the constructor takes an already built
    snapshot.

    Example:
        >>> persona = Persona.create(
        ...     ModelPersonaSource(
        ...         document_location="personas/chuck/persona.xml",
        ...         image_base="personas/chuck",
        ...         image_base_path="/persona/images/chuck",
        ...     )
        ... )
        >>> decoration = persona.get_image(EnumBuildResult.FAILURE)
        >>> decoration.icon
        '/persona/images/chuck/icon.png'
    """

    def __init__(
        self,
        source: ModelPersonaSource,
        snapshot: ModelPersonaSnapshot,
        origin: ProtocolAssetOrigin | None = None,
        selector: PersonaSelector | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self._source = source
        self._origin = origin
        self._timeout = timeout
        self._selector = selector or PersonaSelector()
        self._snapshot = snapshot
        self._reload_lock = threading.Lock()

    @classmethod
    def create(
        cls,
        source: ModelPersonaSource,
        origin: ProtocolAssetOrigin | None = None,
        selector: PersonaSelector | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> Persona:
        """Load a persona from its source.

        Args:
            source: Document location, image base and image base path.
            origin: Asset origin for the image base, kept for reloads.
            selector: Random selection used by the get_* methods.
            timeout: Timeout in seconds for http(s) documents and image
                checks, on this load and every reload.

        Raises:
            PersonaParseError: If the document is malformed or has no ``id``.
            PersonaIOError: If the document is unreachable or no icon resolves.
        """
        snapshot = load_persona_snapshot(source, origin, timeout=timeout)
        return cls(
            source, snapshot, origin=origin, selector=selector, timeout=timeout
        )

    @property
    def source(self) -> ModelPersonaSource:
        return self._source

    @property
    def timeout(self) -> float:
        """HTTP timeout in seconds used by reload()."""
        return self._timeout

    @property
    def snapshot(self) -> ModelPersonaSnapshot:
        """The currently published snapshot."""
        return self._snapshot

    @property
    def persona_id(self) -> str:
        return self._snapshot.persona_id

    @property
    def display_name(self) -> str | None:
        return self._snapshot.display_name

    @property
    def icon(self) -> str:
        return self._snapshot.icon

    def reload(self) -> ModelPersonaSnapshot:
        """Reload this persona from its original document.

        Returns:
            The newly published snapshot.

        Raises:
            PersonaParseError: If the document is malformed or has no ``id``.
            PersonaIOError: If the document is unreachable or no icon resolves.
                On any error the previous snapshot stays published.
        """
        with self._reload_lock:
            snapshot = load_persona_snapshot(
                self._source, self._origin, timeout=self._timeout
            )
            previous_id = self._snapshot.persona_id
            self._snapshot = snapshot

        if snapshot.persona_id != previous_id:
            logger.warning(
                "Persona id changed on reload: %s -> %s",
                previous_id,
                snapshot.persona_id,
                extra={
                    "previous_id": previous_id,
                    "persona_id": snapshot.persona_id,
                    "document_location": self._source.document_location,
                },
            )
        logger.info(
            "Reloaded persona %s",
            snapshot.persona_id,
            extra={
                "persona_id": snapshot.persona_id,
                "document_location": self._source.document_location,
            },
        )
        return snapshot

    def get_image(
        self,
        outcome: EnumOutcomeCategory | EnumBuildResult,
    ) -> ModelDecoration:
        """Select a decoration for a build outcome.

        Args:
            outcome: Outcome category, or the host's build result which is
                mapped onto a category.

        Returns:
            Decoration with the persona icon and an image for the outcome,
            or ``image=None`` when the outcome's category has no images.
        """
        snapshot = self._snapshot
        image = self._selector.pick_image(snapshot, _outcome_category(outcome))
        return ModelDecoration(icon=snapshot.icon, image=image)

    def get_default_image(self) -> ModelDecoration:
        """Select a decoration when no build outcome is available."""
        snapshot = self._snapshot
        return ModelDecoration(
            icon=snapshot.icon,
            image=self._selector.pick_default_image(snapshot),
        )

    def get_quote(
        self,
        outcome: EnumOutcomeCategory | EnumBuildResult,
    ) -> str | None:
        """Select a quote for a build outcome, or None if there are none."""
        return self._selector.pick_quote(self._snapshot, _outcome_category(outcome))

    def __repr__(self) -> str:
        return f"Persona({self.persona_id!r})"


__all__ = ["Persona"]
