# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Persona Loader.

Builds an immutable ModelPersonaSnapshot from a ModelPersonaSource:

1. Read the persona document (XML or YAML) into a neutral model.
2. Require the root ``id``.
3. Classify ``image`` elements. Entries without a ``type`` or without text
   are skipped; an unrecognized ``type`` drops the entry.
4. Classify ``quote`` elements. Entries without text are skipped; a missing
   or unrecognized ``type`` files the quote under the default quotes.
5. Resolve the ``icon`` asset under the image base.

Any failure raises before a snapshot exists, so callers never see a partially
loaded persona.

Note:
    Images and quotes deliberately handle an unrecognized ``type``
    differently: an image is dropped, a quote is kept as a default quote.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack

from build_persona.enums import EnumCategoryMatch
from build_persona.errors import ModelPersonaErrorContext, PersonaParseError
from build_persona.models import (
    ModelPersonaDocument,
    ModelPersonaSnapshot,
    ModelPersonaSource,
)
from build_persona.models.model_persona_settings import DEFAULT_HTTP_TIMEOUT_SECONDS
from build_persona.runtime.asset_resolver import (
    HttpAssetOrigin,
    asset_origin_for,
    resolve_asset,
)
from build_persona.runtime.persona_document_reader import read_persona_document
from build_persona.runtime.protocol_asset_origin import ProtocolAssetOrigin

logger = logging.getLogger(__name__)

ICON_ASSET_NAME = "icon"


def load_persona_snapshot(
    source: ModelPersonaSource,
    origin: ProtocolAssetOrigin | None = None,
    *,
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
) -> ModelPersonaSnapshot:
    """Load a persona snapshot from its source.

    Args:
        source: Document location, image base and image base path.
        origin: Asset origin for the image base. Derived from
            ``source.image_base`` when omitted; a derived origin is closed
            before returning.
        timeout: Timeout in seconds for http(s) documents and image lookups.

    Returns:
        A fully built, immutable snapshot.

    Raises:
        PersonaParseError: If the document is malformed or has no ``id``.
        PersonaIOError: If the document is unreachable or no icon resolves.
    """
    document = read_persona_document(source.document_location, timeout=timeout)
    persona_id = _require_id(document)

    images = _classify_images(document, source.image_base_path)
    quotes = _classify_quotes(document)

    with ExitStack() as stack:
        if origin is None:
            origin = asset_origin_for(source.image_base, timeout=timeout)
            if isinstance(origin, HttpAssetOrigin):
                stack.enter_context(origin)
        icon = resolve_asset(origin, source.image_base_path, ICON_ASSET_NAME)

    snapshot = ModelPersonaSnapshot(
        persona_id=persona_id,
        display_name=document.display_name,
        icon=icon,
        images_success=tuple(images[EnumCategoryMatch.SUCCESS]),
        images_failure=tuple(images[EnumCategoryMatch.FAILURE]),
        images_other=tuple(images[EnumCategoryMatch.OTHER]),
        quotes_success=tuple(quotes[EnumCategoryMatch.SUCCESS]),
        quotes_failure=tuple(quotes[EnumCategoryMatch.FAILURE]),
        quotes_other=tuple(quotes[EnumCategoryMatch.OTHER]),
        quotes_default=tuple(quotes[EnumCategoryMatch.UNRECOGNIZED]),
    )

    logger.debug(
        "Loaded persona %s",
        persona_id,
        extra={
            "persona_id": persona_id,
            "document_location": source.document_location,
            "icon": icon,
            "image_count": sum(len(v) for v in images.values()),
            "quote_count": sum(len(v) for v in quotes.values()),
        },
    )
    return snapshot


def _require_id(document: ModelPersonaDocument) -> str:
    persona_id = (document.persona_id or "").strip()
    if not persona_id:
        raise PersonaParseError(
            f"Persona document has no 'id' attribute: {document.location}",
            context=ModelPersonaErrorContext.with_correlation(
                operation="load_persona",
                target_name=document.location,
            ),
        )
    return persona_id


def _empty_buckets() -> dict[EnumCategoryMatch, list[str]]:
    return {match: [] for match in EnumCategoryMatch}


def _classify_images(
    document: ModelPersonaDocument,
    image_base_path: str,
) -> dict[EnumCategoryMatch, list[str]]:
    buckets = _empty_buckets()
    for element in document.elements_of("image"):
        if element.type is None or not element.text:
            continue
        match = EnumCategoryMatch.parse(element.type)
        if match is EnumCategoryMatch.UNRECOGNIZED:
            continue
        buckets[match].append(f"{image_base_path}/{element.text}")
    return buckets


def _classify_quotes(
    document: ModelPersonaDocument,
) -> dict[EnumCategoryMatch, list[str]]:
    # UNRECOGNIZED doubles as the default bucket, which also takes untyped quotes
    buckets = _empty_buckets()
    for element in document.elements_of("quote"):
        if not element.text:
            continue
        buckets[EnumCategoryMatch.parse(element.type)].append(element.text)
    return buckets


__all__ = ["ICON_ASSET_NAME", "load_persona_snapshot"]
