# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Asset Origin Protocol Definition.

An asset origin is anything the asset resolver can ask "does this file
exist?": a local directory, an HTTP endpoint, or a bundled package resource.

See Also:
    - asset_resolver.FilesystemAssetOrigin
    - asset_resolver.HttpAssetOrigin
    - asset_resolver.PackageAssetOrigin
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolAssetOrigin(Protocol):
    """Protocol for locations holding persona image assets."""

    def check_exists(self, name: str) -> None:
        """Open the named asset and release it immediately.

        Args:
            name: Asset file name relative to the origin (e.g. "icon.png").

        Raises:
            OSError: If the asset does not exist or cannot be opened.
        """
        ...

    def describe(self, name: str) -> str:
        """Return a human-readable location for the named asset."""
        ...


__all__ = ["ProtocolAssetOrigin"]
