# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona Document Reader.

This module reads a persona document from a filesystem path or an http(s)
URL and parses it into a format-neutral ModelPersonaDocument.

Document Formats:
    XML (``.xml``, and any suffix that is not YAML):

    ```xml
    <persona id="chuck" displayName="Chuck Norris">
      <image type="success">success.jpg</image>
      <image type="failure">failure.jpg</image>
      <quote type="failure">Chuck Norris does not fail builds.</quote>
      <quote>When Chuck Norris commits, the build passes.</quote>
    </persona>
    ```

    YAML (``.yaml`` / ``.yml``):

    ```yaml
    id: chuck
    displayName: Chuck Norris
    images:
      - type: success
        text: success.jpg
    quotes:
      - type: failure
        text: Chuck Norris does not fail builds.
      - When Chuck Norris commits, the build passes.
    ```

    A bare string entry in ``images`` or ``quotes`` carries no ``type``.

The reader validates:
- Document reachability (PersonaIOError otherwise)
- Document size (PersonaParseError above MAX_DOCUMENT_SIZE_BYTES)
- XML/YAML syntax and a mapping root for YAML (PersonaParseError)

It does not validate the ``id`` attribute; that belongs to the loader.

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from contextlib import ExitStack
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import httpx
import yaml

from build_persona.errors import (
    ModelPersonaErrorContext,
    PersonaIOError,
    PersonaParseError,
)
from build_persona.models import ModelPersonaDocument, ModelPersonaElement
from build_persona.models.model_persona_settings import DEFAULT_HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

# Maximum persona document size (1 MiB)
MAX_DOCUMENT_SIZE_BYTES = 1024 * 1024

YAML_SUFFIXES = frozenset({".yaml", ".yml"})

_ELEMENT_TAGS = ("image", "quote")
_YAML_LIST_KEYS = {"images": "image", "quotes": "quote"}


def is_url(location: str) -> bool:
    """Return True when the location is an http(s) URL."""
    return urlparse(location).scheme in ("http", "https")


def read_persona_document(
    location: str | Path,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
) -> ModelPersonaDocument:
    """Read and parse a persona document.

    Args:
        location: Filesystem path or http(s) URL of the document.
        client: Optional httpx client used for URL locations. A short-lived
            client is created when omitted.
        timeout: Timeout in seconds for URL locations without a client.

    Returns:
        ModelPersonaDocument with root attributes and ordered elements.

    Raises:
        PersonaIOError: If the document cannot be read.
        PersonaParseError: If the document is too large or malformed.
    """
    location = str(location)
    raw = _read_bytes(location, client=client, timeout=timeout)

    if _suffix_of(location) in YAML_SUFFIXES:
        document = _parse_yaml(location, raw)
    else:
        document = _parse_xml(location, raw)

    logger.debug(
        "Read persona document",
        extra={
            "location": location,
            "persona_id": document.persona_id,
            "element_count": len(document.elements),
        },
    )
    return document


def _context(location: str) -> ModelPersonaErrorContext:
    return ModelPersonaErrorContext.with_correlation(
        operation="read_persona_document",
        target_name=location,
    )


def _suffix_of(location: str) -> str:
    if is_url(location):
        return PurePosixPath(urlparse(location).path).suffix.lower()
    return Path(location).suffix.lower()


def _too_large(location: str, size: int) -> PersonaParseError:
    return PersonaParseError(
        f"Persona document too large: {size} bytes (max {MAX_DOCUMENT_SIZE_BYTES})",
        context=_context(location),
    )


def _read_bytes(
    location: str,
    *,
    client: httpx.Client | None,
    timeout: float,
) -> bytes:
    if is_url(location):
        return _fetch_url(location, client=client, timeout=timeout)

    path = Path(location)
    try:
        file_size = path.stat().st_size
        if file_size > MAX_DOCUMENT_SIZE_BYTES:
            raise _too_large(location, file_size)
        return path.read_bytes()
    except OSError as e:
        raise PersonaIOError(
            f"Persona document not readable: {location}",
            context=_context(location),
        ) from e


def _fetch_url(
    location: str,
    *,
    client: httpx.Client | None,
    timeout: float,
) -> bytes:
    try:
        with ExitStack() as stack:
            if client is None:
                client = stack.enter_context(
                    httpx.Client(timeout=timeout, follow_redirects=True)
                )
            with client.stream("GET", location) as response:
                response.raise_for_status()
                return _read_limited(location, response)
    except httpx.HTTPError as e:
        raise PersonaIOError(
            f"Persona document not reachable: {location}",
            context=_context(location),
        ) from e


def _read_limited(location: str, response: httpx.Response) -> bytes:
    """Read a streamed body, stopping once it exceeds MAX_DOCUMENT_SIZE_BYTES."""
    declared = response.headers.get("Content-Length")
    if declared is not None and declared.isdigit():
        if int(declared) > MAX_DOCUMENT_SIZE_BYTES:
            raise _too_large(location, int(declared))

    body = bytearray()
    for chunk in response.iter_bytes():
        body.extend(chunk)
        if len(body) > MAX_DOCUMENT_SIZE_BYTES:
            raise _too_large(location, len(body))
    return bytes(body)


def _clean_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value).strip()


def _parse_xml(location: str, raw: bytes) -> ModelPersonaDocument:
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise PersonaParseError(
            f"Invalid XML in persona document: {e}",
            context=_context(location),
        ) from e

    elements = [
        ModelPersonaElement(
            tag=child.tag,
            type=child.get("type"),
            text=_clean_text(child.text),
        )
        for child in root
        if child.tag in _ELEMENT_TAGS
    ]
    return ModelPersonaDocument(
        location=location,
        persona_id=root.get("id"),
        display_name=root.get("displayName"),
        elements=tuple(elements),
    )


def _parse_yaml(location: str, raw: bytes) -> ModelPersonaDocument:
    try:
        content = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise PersonaParseError(
            f"Invalid YAML in persona document: {e}",
            context=_context(location),
        ) from e

    if not isinstance(content, dict):
        raise PersonaParseError(
            f"Persona document must be a mapping, got {type(content).__name__}",
            context=_context(location),
        )

    elements: list[ModelPersonaElement] = []
    for key, tag in _YAML_LIST_KEYS.items():
        entries = content.get(key) or []
        if not isinstance(entries, list):
            raise PersonaParseError(
                f"Persona document '{key}' must be a list, "
                f"got {type(entries).__name__}",
                context=_context(location),
            )
        for entry in entries:
            if isinstance(entry, dict):
                raw_type = entry.get("type")
                elements.append(
                    ModelPersonaElement(
                        tag=tag,
                        type=None if raw_type is None else str(raw_type),
                        text=_clean_text(entry.get("text")),
                    )
                )
            elif entry is not None:
                elements.append(ModelPersonaElement(tag=tag, text=_clean_text(entry)))

    persona_id = content.get("id")
    display_name = content.get("displayName")
    return ModelPersonaDocument(
        location=location,
        persona_id=None if persona_id is None else str(persona_id),
        display_name=None if display_name is None else str(display_name),
        elements=tuple(elements),
    )


__all__ = [
    "MAX_DOCUMENT_SIZE_BYTES",
    "YAML_SUFFIXES",
    "is_url",
    "read_persona_document",
]
