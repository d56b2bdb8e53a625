"""Pytest configuration and shared fixtures for build_persona tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape, quoteattr

import httpx
import pytest

# A minimal but valid 1x1 GIF; the resolver only opens the file
ICON_BYTES = b"GIF89a\x01\x00\x01\x00\x00\x00\x00;"

# (tag, type or None, text or None)
PersonaEntry = tuple[str, str | None, str | None]


def render_persona_xml(
    persona_id: str | None,
    display_name: str | None = None,
    entries: Sequence[PersonaEntry] = (),
) -> str:
    """Render a persona XML document.

    Args:
        persona_id: Root 'id' attribute, omitted when None.
        display_name: Root 'displayName' attribute, omitted when None.
        entries: (tag, type, text) children; None type or text is omitted.
    """
    attrs = ""
    if persona_id is not None:
        attrs += f" id={quoteattr(persona_id)}"
    if display_name is not None:
        attrs += f" displayName={quoteattr(display_name)}"

    lines = [f"<persona{attrs}>"]
    for tag, type_, text in entries:
        type_attr = "" if type_ is None else f" type={quoteattr(type_)}"
        if text is None:
            lines.append(f"  <{tag}{type_attr}/>")
        else:
            lines.append(f"  <{tag}{type_attr}>{escape(text)}</{tag}>")
    lines.append("</persona>")
    return "\n".join(lines) + "\n"


PersonaDirFactory = Callable[..., Path]


@pytest.fixture
def make_persona_dir(tmp_path: Path) -> PersonaDirFactory:
    """Factory writing a persona directory with persona.xml and assets.

    Example:
        >>> directory = make_persona_dir(
        ...     "chuck",
        ...     entries=[("image", "success", "a.png")],
        ...     assets=["icon.png"],
        ... )
    """

    def _make(
        persona_id: str | None = "x",
        *,
        display_name: str | None = "X",
        entries: Sequence[PersonaEntry] = (),
        assets: Sequence[str] = ("icon.png",),
        root: Path | None = None,
        dirname: str | None = None,
    ) -> Path:
        base = root if root is not None else tmp_path
        directory = base / (dirname or persona_id or "persona")
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "persona.xml").write_text(
            render_persona_xml(persona_id, display_name, entries),
            encoding="utf-8",
        )
        for asset in assets:
            (directory / asset).write_bytes(ICON_BYTES)
        return directory

    return _make


HttpHandler = Callable[[httpx.Request], httpx.Response]


class RecordingClientFactory:
    """Stands in for httpx.Client, routing each created client to a handler.

    Records the timeout every client was built with so tests can check it
    reached the HTTP layer, and keeps the clients to check they get closed.
    """

    def __init__(self, handler: HttpHandler) -> None:
        self._handler = handler
        self._client_cls = httpx.Client
        self.clients: list[httpx.Client] = []
        self.timeouts: list[Any] = []

    def __call__(self, *args: Any, **kwargs: Any) -> httpx.Client:
        self.timeouts.append(kwargs.get("timeout"))
        client = self._client_cls(
            *args, transport=httpx.MockTransport(self._handler), **kwargs
        )
        self.clients.append(client)
        return client


@pytest.fixture
def mock_http_clients(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[HttpHandler], RecordingClientFactory]:
    """Replace httpx.Client for the test with a RecordingClientFactory."""

    def _install(handler: HttpHandler) -> RecordingClientFactory:
        factory = RecordingClientFactory(handler)
        monkeypatch.setattr(httpx, "Client", factory)
        return factory

    return _install
