# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the build-persona CLI (Click runner)."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from build_persona.cli.commands import cli
from build_persona.runtime.persona_registry import PersonaRegistry

pytestmark = [pytest.mark.unit]


@pytest.fixture
def persona_root(make_persona_dir, tmp_path: Path) -> Path:
    root = tmp_path / "personas"
    make_persona_dir(
        "chuck",
        display_name="Chuck Norris",
        root=root,
        entries=[
            ("image", "success", "s.jpg"),
            ("image", "failure", "f.jpg"),
            ("quote", "failure", "Chuck Norris does not fail."),
            ("quote", None, "Roundhouse."),
        ],
    )
    make_persona_dir("plain", display_name=None, root=root)
    return root


class TestListCommand:
    def test_lists_personas(self, persona_root: Path) -> None:
        result = CliRunner().invoke(cli, ["list", str(persona_root)])

        assert result.exit_code == 0, result.output
        assert "chuck" in result.output
        assert "Chuck Norris" in result.output
        assert "plain" in result.output

    def test_empty_root(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["list", str(tmp_path)])

        assert result.exit_code == 0
        assert "No personas found" in result.output

    def test_root_from_env(
        self, persona_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERSONA_HOME", str(persona_root))

        result = CliRunner().invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "chuck" in result.output

    def test_http_timeout_from_env(
        self, persona_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        seen: list[PersonaRegistry] = []
        original = PersonaRegistry.discover

        def recording_discover(self, *args, **kwargs):
            seen.append(self)
            return original(self, *args, **kwargs)

        monkeypatch.setattr(PersonaRegistry, "discover", recording_discover)
        monkeypatch.setenv("PERSONA_HTTP_TIMEOUT", "2.5")

        result = CliRunner().invoke(cli, ["list", str(persona_root)])

        assert result.exit_code == 0, result.output
        assert seen[0].get("chuck").timeout == 2.5


class TestShowCommand:
    def test_failure_result(self, persona_root: Path) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "show",
                str(persona_root),
                "chuck",
                "--result",
                "failure",
                "--image-base-path",
                "/static",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Chuck Norris" in result.output
        assert "/static/chuck/icon.png" in result.output
        assert "/static/chuck/f.jpg" in result.output
        assert "Chuck Norris does not fail." in result.output

    def test_unstable_result_has_no_image(self, persona_root: Path) -> None:
        result = CliRunner().invoke(
            cli, ["show", str(persona_root), "chuck", "--result", "UNSTABLE"]
        )

        assert result.exit_code == 0, result.output
        assert "no image" in result.output
        assert "Roundhouse." in result.output

    def test_no_result_uses_success_images(self, persona_root: Path) -> None:
        result = CliRunner().invoke(
            cli,
            ["show", str(persona_root), "chuck", "--image-base-path", "/static"],
        )

        assert result.exit_code == 0, result.output
        assert "/static/chuck/s.jpg" in result.output

    def test_unknown_persona_exits_1(self, persona_root: Path) -> None:
        result = CliRunner().invoke(cli, ["show", str(persona_root), "nobody"])

        assert result.exit_code == 1
        assert "Error" in result.output
