# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Asset Resolver for Persona Images.

Locates an image by logical name (``icon``, ``success`` ...) under an asset
origin by trying a fixed, ordered list of extensions. The first extension
that opens wins, so when several variants exist the earliest one in
IMAGE_EXTENSIONS is chosen deterministically.

Example:
    >>> origin = FilesystemAssetOrigin(Path("personas/chuck"))
    >>> resolve_asset(origin, "/persona/images/chuck", "icon")
    '/persona/images/chuck/icon.png'
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from urllib.parse import urljoin

import httpx

from build_persona.errors import ModelPersonaErrorContext, PersonaIOError
from build_persona.models.model_persona_settings import DEFAULT_HTTP_TIMEOUT_SECONDS
from build_persona.runtime.persona_document_reader import is_url
from build_persona.runtime.protocol_asset_origin import ProtocolAssetOrigin

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS: tuple[str, ...] = (
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".JPG",
    ".JPEG",
    ".PNG",
    ".GIF",
)


class FilesystemAssetOrigin:
    """Assets stored in a local directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def check_exists(self, name: str) -> None:
        with (self._root / name).open("rb"):
            pass

    def describe(self, name: str) -> str:
        return str(self._root / name)

    def __repr__(self) -> str:
        return f"FilesystemAssetOrigin({str(self._root)!r})"


class HttpAssetOrigin:
    """Assets served over HTTP under a base URL.

    Any non-2xx response or transport error counts as "not found". The
    response body is never read; the stream is closed as soon as the status
    is known.

    A client created by the origin is closed by close() or on leaving a
    ``with`` block; a client passed in stays owned by the caller.
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> None:
        # urljoin drops the last path segment unless the base ends with "/"
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    @property
    def base_url(self) -> str:
        return self._base_url

    def check_exists(self, name: str) -> None:
        url = self.describe(name)
        try:
            with self._client.stream("GET", url) as response:
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise OSError(f"Asset not reachable: {url}") from e

    def describe(self, name: str) -> str:
        return urljoin(self._base_url, name)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpAssetOrigin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HttpAssetOrigin({self._base_url!r})"


class PackageAssetOrigin:
    """Assets bundled as package resources (``importlib.resources``)."""

    def __init__(self, package: str, subdirectory: str = "") -> None:
        self._package = package
        self._subdirectory = subdirectory.strip("/")

    def check_exists(self, name: str) -> None:
        try:
            resource = resources.files(self._package)
        except ModuleNotFoundError as e:
            raise OSError(f"Package not found: {self._package}") from e
        if self._subdirectory:
            resource = resource.joinpath(self._subdirectory)
        with resource.joinpath(name).open("rb"):
            pass

    def describe(self, name: str) -> str:
        parts = [p for p in (self._subdirectory, name) if p]
        return f"{self._package}:{'/'.join(parts)}"

    def __repr__(self) -> str:
        return f"PackageAssetOrigin({self._package!r}, {self._subdirectory!r})"


def asset_origin_for(
    location: str | Path,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
) -> ProtocolAssetOrigin:
    """Choose an asset origin for a location by its URL scheme.

    http(s) URLs get an HttpAssetOrigin; anything else is a local directory.
    """
    location = str(location)
    if is_url(location):
        return HttpAssetOrigin(location, client=client, timeout=timeout)
    return FilesystemAssetOrigin(location)


def resolve_asset(
    origin: ProtocolAssetOrigin,
    base_path: str,
    logical_name: str,
) -> str:
    """Find ``<logical_name><ext>`` under the origin for a known extension.

    Args:
        origin: Where to look for the asset.
        base_path: Prefix for the returned path.
        logical_name: Asset name without extension (e.g. "icon").

    Returns:
        ``base_path + "/" + logical_name + ext`` for the first extension in
        IMAGE_EXTENSIONS that opens.

    Raises:
        PersonaIOError: If no extension resolves.
    """
    for ext in IMAGE_EXTENSIONS:
        name = logical_name + ext
        try:
            origin.check_exists(name)
        except OSError:
            continue
        logger.debug(
            "Resolved asset %s",
            name,
            extra={"asset": origin.describe(name), "base_path": base_path},
        )
        return f"{base_path}/{name}"

    pattern = origin.describe(logical_name) + ".*"
    raise PersonaIOError(
        f"No image found that matches {pattern}",
        context=ModelPersonaErrorContext.with_correlation(
            operation="resolve_asset",
            target_name=pattern,
        ),
        extensions_tried=len(IMAGE_EXTENSIONS),
    )


__all__ = [
    "IMAGE_EXTENSIONS",
    "FilesystemAssetOrigin",
    "HttpAssetOrigin",
    "PackageAssetOrigin",
    "asset_origin_for",
    "resolve_asset",
]
