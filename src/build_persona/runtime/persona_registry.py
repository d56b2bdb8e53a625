# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona Registry - indexes available personas by id.

The registry owns the personas it holds: a persona lives as long as the
registry keeps its reference. Personas can be registered directly or
discovered from a directory tree laid out as:

    personas/
        chuck/
            persona.xml     (or persona.yaml / persona.yml)
            icon.png
            success.jpg
            ...
        yoda/
            persona.yaml
            icon.gif

Each persona's images are served under ``<image_base_path>/<dirname>``.

Thread Safety:
    All registry mutations and lookups are protected by a threading.Lock.
    Reloads run outside the lock; each Persona publishes its own reload
    atomically.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from build_persona.errors import (
    ModelPersonaErrorContext,
    PersonaError,
    PersonaRegistryError,
)
from build_persona.models import ModelPersonaSource
from build_persona.models.model_persona_settings import DEFAULT_HTTP_TIMEOUT_SECONDS
from build_persona.runtime.persona import Persona
from build_persona.runtime.persona_selector import PersonaSelector

logger = logging.getLogger(__name__)

PERSONA_DOCUMENT_NAMES: tuple[str, ...] = (
    "persona.xml",
    "persona.yaml",
    "persona.yml",
)


def find_persona_document(directory: Path) -> Path | None:
    """Return the persona document in a directory, or None if it has none."""
    for name in PERSONA_DOCUMENT_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


class PersonaRegistry:
    """Thread-safe index of personas keyed by persona id.

    Example:
        >>> registry = PersonaRegistry()
        >>> registry.discover(Path("personas"), "/persona/images")
        ['chuck', 'yoda']
        >>> registry.get("chuck").get_image(EnumBuildResult.SUCCESS)
        ModelDecoration(icon='/persona/images/chuck/icon.png', image=...)
    """

    def __init__(self) -> None:
        self._personas: dict[str, Persona] = {}
        self._lock: threading.Lock = threading.Lock()

    def register(self, persona: Persona, *, replace: bool = False) -> None:
        """Register a persona under its id.

        Args:
            persona: The persona to register.
            replace: Overwrite an existing persona with the same id.

        Raises:
            PersonaRegistryError: If the id is taken and replace is False.
        """
        persona_id = persona.persona_id
        with self._lock:
            if persona_id in self._personas and not replace:
                raise PersonaRegistryError(
                    f"Persona already registered: {persona_id}",
                    context=ModelPersonaErrorContext.with_correlation(
                        operation="register_persona",
                        target_name=persona_id,
                    ),
                )
            self._personas[persona_id] = persona

    def get(self, persona_id: str) -> Persona:
        """Return the persona registered under an id.

        Raises:
            PersonaRegistryError: If no persona has that id.
        """
        with self._lock:
            persona = self._personas.get(persona_id)
            known = sorted(self._personas)
        if persona is None:
            raise PersonaRegistryError(
                f"No persona registered with id '{persona_id}'. "
                f"Registered: {known}",
                context=ModelPersonaErrorContext.with_correlation(
                    operation="get_persona",
                    target_name=persona_id,
                ),
            )
        return persona

    def list_keys(self) -> list[str]:
        """Return registered persona ids, sorted."""
        with self._lock:
            return sorted(self._personas)

    def list_personas(self) -> list[Persona]:
        """Return registered personas, sorted by id."""
        with self._lock:
            return [self._personas[k] for k in sorted(self._personas)]

    def is_registered(self, persona_id: str) -> bool:
        with self._lock:
            return persona_id in self._personas

    def unregister(self, persona_id: str) -> bool:
        """Drop a persona. Returns True if one was registered."""
        with self._lock:
            return self._personas.pop(persona_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._personas.clear()

    def reload_all(self) -> dict[str, PersonaError]:
        """Reload every registered persona.

        A failing persona keeps its previous snapshot; the others still
        reload.

        Returns:
            Errors keyed by persona id, empty when every reload succeeded.
        """
        failures: dict[str, PersonaError] = {}
        for persona in self.list_personas():
            persona_id = persona.persona_id
            try:
                persona.reload()
            except PersonaError as e:
                logger.warning(
                    "Failed to reload persona %s, keeping previous state: %s",
                    persona_id,
                    e,
                    extra={
                        "persona_id": persona_id,
                        "document_location": persona.source.document_location,
                        "correlation_id": str(e.correlation_id),
                    },
                )
                failures[persona_id] = e
        return failures

    def discover(
        self,
        root: Path,
        image_base_path: str,
        *,
        graceful_mode: bool = False,
        selector: PersonaSelector | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> list[str]:
        """Load and register every persona directory directly under root.

        Args:
            root: Directory whose subdirectories hold persona documents.
            image_base_path: Serving prefix; each persona gets
                ``<image_base_path>/<dirname>``.
            graceful_mode: If True, log and skip personas that fail to load.
                If False (default), raise on the first failure.
            selector: Selector shared by the discovered personas.
            timeout: Timeout in seconds for http(s) access while loading and
                reloading the discovered personas.

        Returns:
            Ids of the personas registered by this call, in directory order.

        Raises:
            PersonaRegistryError: In strict mode, if root does not exist.
            PersonaError: In strict mode, the first load or registration
                failure.
        """
        if not root.is_dir():
            error = PersonaRegistryError(
                f"Persona root does not exist: {root}",
                context=ModelPersonaErrorContext.with_correlation(
                    operation="discover_personas",
                    target_name=str(root),
                ),
            )
            if not graceful_mode:
                raise error
            logger.warning(
                "Persona root does not exist, skipping: %s",
                root,
                extra={"root": str(root), "graceful_mode": graceful_mode},
            )
            return []

        prefix = image_base_path.rstrip("/")
        registered: list[str] = []
        failure_count = 0

        for directory in sorted(p for p in root.iterdir() if p.is_dir()):
            document = find_persona_document(directory)
            if document is None:
                continue
            source = ModelPersonaSource(
                document_location=document,
                image_base=directory,
                image_base_path=f"{prefix}/{directory.name}",
            )
            try:
                persona = Persona.create(source, selector=selector, timeout=timeout)
                self.register(persona)
            except PersonaError as e:
                if not graceful_mode:
                    raise
                failure_count += 1
                logger.warning(
                    "Failed to load persona, continuing in graceful mode: %s",
                    document,
                    extra={
                        "document": str(document),
                        "error_type": type(e).__name__,
                        "graceful_mode": graceful_mode,
                    },
                )
                continue
            registered.append(persona.persona_id)

        logger.info(
            "Persona discovery completed: discovered_count=%d, failure_count=%d",
            len(registered),
            failure_count,
            extra={
                "root": str(root),
                "discovered_count": len(registered),
                "failure_count": failure_count,
                "graceful_mode": graceful_mode,
            },
        )
        return registered

    def __len__(self) -> int:
        with self._lock:
            return len(self._personas)

    def __contains__(self, persona_id: str) -> bool:
        return self.is_registered(persona_id)


# Module-level singleton instance (lazy initialized)
_persona_registry: PersonaRegistry | None = None
_singleton_lock: threading.Lock = threading.Lock()


def get_persona_registry() -> PersonaRegistry:
    """Return the process-wide persona registry, creating it on first use."""
    global _persona_registry  # noqa: PLW0603
    if _persona_registry is None:
        with _singleton_lock:
            # Double-check locking pattern
            if _persona_registry is None:
                _persona_registry = PersonaRegistry()
    return _persona_registry


__all__ = [
    "PERSONA_DOCUMENT_NAMES",
    "PersonaRegistry",
    "find_persona_document",
    "get_persona_registry",
]
