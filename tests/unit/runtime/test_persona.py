# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for Persona: decoration API and atomic reload."""

from __future__ import annotations

import threading
from pathlib import Path

import httpx
import pytest

from build_persona.enums import EnumBuildResult, EnumOutcomeCategory
from build_persona.errors import PersonaIOError, PersonaParseError
from build_persona.models import ModelDecoration, ModelPersonaSource
from build_persona.runtime.persona import Persona
from build_persona.runtime.persona_selector import PersonaSelector

PREFIX = "/persona/images/x"


def _source(directory: Path) -> ModelPersonaSource:
    return ModelPersonaSource(
        document_location=directory / "persona.xml",
        image_base=directory,
        image_base_path=PREFIX,
    )


class TestEndToEnd:
    """Document with one success and one failure image and an untyped quote."""

    @pytest.fixture
    def persona(self, make_persona_dir) -> Persona:
        directory = make_persona_dir(
            "x",
            display_name="X",
            entries=[
                ("image", "success", "a.png"),
                ("image", "failure", "b.png"),
                ("quote", None, "hi"),
            ],
            assets=["icon.png"],
        )
        return Persona.create(_source(directory))

    def test_identity(self, persona: Persona) -> None:
        assert persona.persona_id == "x"
        assert persona.display_name == "X"
        assert persona.icon == f"{PREFIX}/icon.png"

    def test_success_always_a(self, persona: Persona) -> None:
        for _ in range(20):
            assert persona.get_image(EnumOutcomeCategory.SUCCESS) == ModelDecoration(
                icon=f"{PREFIX}/icon.png", image=f"{PREFIX}/a.png"
            )

    def test_failure_always_b(self, persona: Persona) -> None:
        for _ in range(20):
            assert persona.get_image(EnumOutcomeCategory.FAILURE).image == (
                f"{PREFIX}/b.png"
            )

    def test_other_is_absent(self, persona: Persona) -> None:
        for _ in range(20):
            decoration = persona.get_image(EnumOutcomeCategory.OTHER)
            assert decoration.image is None
            assert decoration.icon == f"{PREFIX}/icon.png"

    def test_quote_falls_back_to_default(self, persona: Persona) -> None:
        for category in EnumOutcomeCategory:
            assert persona.get_quote(category) == "hi"

    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (EnumBuildResult.SUCCESS, f"{PREFIX}/a.png"),
            (EnumBuildResult.FAILURE, f"{PREFIX}/b.png"),
            (EnumBuildResult.UNSTABLE, None),
            (EnumBuildResult.ABORTED, None),
            (EnumBuildResult.NOT_BUILT, None),
        ],
    )
    def test_build_results_map_to_categories(
        self, persona: Persona, result: EnumBuildResult, expected: str | None
    ) -> None:
        assert persona.get_image(result).image == expected

    def test_default_image_uses_success(self, persona: Persona) -> None:
        assert persona.get_default_image().image == f"{PREFIX}/a.png"


class TestReload:
    def test_reload_picks_up_changes(self, make_persona_dir) -> None:
        directory = make_persona_dir(entries=[("image", "success", "a.png")])
        persona = Persona.create(_source(directory))

        make_persona_dir(
            entries=[("image", "success", "new.png"), ("quote", "other", "q")],
            assets=[],
        )
        (directory / "icon.png").unlink()
        (directory / "icon.jpg").write_bytes(b"jpg")
        snapshot = persona.reload()

        assert snapshot is persona.snapshot
        assert persona.snapshot.images_success == (f"{PREFIX}/new.png",)
        assert persona.snapshot.quotes_other == ("q",)
        assert persona.icon == f"{PREFIX}/icon.jpg"

    def test_failed_parse_leaves_state_unchanged(self, make_persona_dir) -> None:
        directory = make_persona_dir(
            entries=[("image", "success", "a.png"), ("quote", None, "hi")]
        )
        persona = Persona.create(_source(directory))
        before = persona.snapshot

        (directory / "persona.xml").write_text("<persona id='x'><image>")
        with pytest.raises(PersonaParseError):
            persona.reload()

        assert persona.snapshot is before
        assert persona.snapshot.images_success == (f"{PREFIX}/a.png",)
        assert persona.icon == f"{PREFIX}/icon.png"

    def test_missing_id_leaves_state_unchanged(self, make_persona_dir) -> None:
        directory = make_persona_dir(entries=[("image", "failure", "b.png")])
        persona = Persona.create(_source(directory))
        before = persona.snapshot

        make_persona_dir(None, dirname="x", entries=[("image", "failure", "c.png")])
        with pytest.raises(PersonaParseError):
            persona.reload()

        assert persona.snapshot is before

    def test_missing_icon_leaves_state_unchanged(self, make_persona_dir) -> None:
        directory = make_persona_dir(entries=[("image", "other", "o.png")])
        persona = Persona.create(_source(directory))
        before = persona.snapshot

        (directory / "icon.png").unlink()
        with pytest.raises(PersonaIOError):
            persona.reload()

        assert persona.snapshot is before
        assert persona.get_image(EnumOutcomeCategory.OTHER).image == f"{PREFIX}/o.png"

    def test_readers_never_see_mixed_state(self, make_persona_dir) -> None:
        """Concurrent readers see whole snapshots while reloads alternate."""
        directory = make_persona_dir(
            entries=[("image", "success", "a.png"), ("image", "failure", "a.png")]
        )
        persona = Persona.create(_source(directory), selector=PersonaSelector())
        document_a = (directory / "persona.xml").read_text()
        document_b = document_a.replace("a.png", "b.png")

        stop = threading.Event()
        mismatches: list[tuple[str | None, str | None]] = []

        def reader() -> None:
            while not stop.is_set():
                snapshot = persona.snapshot
                pair = (snapshot.images_success[0], snapshot.images_failure[0])
                if pair[0] != pair[1]:
                    mismatches.append(pair)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        try:
            for i in range(30):
                (directory / "persona.xml").write_text(
                    document_b if i % 2 == 0 else document_a
                )
                persona.reload()
        finally:
            stop.set()
            for thread in threads:
                thread.join()

        assert mismatches == []


def test_repr(make_persona_dir) -> None:
    persona = Persona.create(_source(make_persona_dir("chuck")))
    assert repr(persona) == "Persona('chuck')"


class TestHttpTimeout:
    def test_timeout_used_on_create_and_reload(self, mock_http_clients) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("persona.xml"):
                return httpx.Response(200, content=b'<persona id="chuck"/>')
            if request.url.path.endswith("icon.gif"):
                return httpx.Response(200, content=b"gif")
            return httpx.Response(404)

        clients = mock_http_clients(handler)
        source = ModelPersonaSource(
            document_location="https://personas.example/chuck/persona.xml",
            image_base="https://cdn.example/chuck",
            image_base_path=PREFIX,
        )

        persona = Persona.create(source, timeout=4.0)
        persona.reload()

        assert persona.timeout == 4.0
        assert persona.icon == f"{PREFIX}/icon.gif"
        assert clients.timeouts == [4.0, 4.0, 4.0, 4.0]
        assert all(client.is_closed for client in clients.clients)
