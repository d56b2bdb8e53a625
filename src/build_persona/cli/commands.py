"""
Build Persona CLI Commands.

Provides a CLI for listing discovered personas and previewing the
decoration a persona would show for a build result.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from build_persona.enums import EnumBuildResult
from build_persona.errors import PersonaError
from build_persona.models import ModelPersonaSettings
from build_persona.runtime.persona_registry import PersonaRegistry

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Build persona decorations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _discover(root: Path | None, image_base_path: str | None) -> PersonaRegistry:
    settings = ModelPersonaSettings.from_env()
    registry = PersonaRegistry()
    registry.discover(
        root if root is not None else settings.persona_home,
        image_base_path if image_base_path is not None else settings.image_base_path,
        graceful_mode=True,
        timeout=settings.http_timeout_seconds,
    )
    return registry


@cli.command("list")
@click.argument("root", required=False, type=click.Path(path_type=Path))
@click.option(
    "--image-base-path",
    default=None,
    help="Serving prefix for images (default: PERSONA_IMAGE_BASE_PATH)",
)
def list_cmd(root: Path | None, image_base_path: str | None) -> None:
    """List personas discovered under ROOT (default: PERSONA_HOME)."""
    registry = _discover(root, image_base_path)

    if not len(registry):
        console.print("[yellow]No personas found[/yellow]")
        return

    table = Table(title="Personas")
    table.add_column("ID", style="cyan")
    table.add_column("Display Name")
    table.add_column("Images", justify="right")
    table.add_column("Quotes", justify="right")

    for persona in registry.list_personas():
        snapshot = persona.snapshot
        image_count = (
            len(snapshot.images_success)
            + len(snapshot.images_failure)
            + len(snapshot.images_other)
        )
        quote_count = (
            len(snapshot.quotes_success)
            + len(snapshot.quotes_failure)
            + len(snapshot.quotes_other)
            + len(snapshot.quotes_default)
        )
        table.add_row(
            snapshot.persona_id,
            snapshot.display_name or "-",
            str(image_count),
            str(quote_count),
        )

    console.print(table)


@cli.command("show")
@click.argument("root", type=click.Path(path_type=Path))
@click.argument("persona_id")
@click.option(
    "--result",
    "result",
    type=click.Choice([r.value for r in EnumBuildResult], case_sensitive=False),
    default=None,
    help="Build result to decorate (default: no result, success images)",
)
@click.option(
    "--image-base-path",
    default=None,
    help="Serving prefix for images (default: PERSONA_IMAGE_BASE_PATH)",
)
def show_cmd(
    root: Path,
    persona_id: str,
    result: str | None,
    image_base_path: str | None,
) -> None:
    """Show the decoration PERSONA_ID picks for a build result."""
    try:
        persona = _discover(root, image_base_path).get(persona_id)
    except PersonaError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if result is None:
        decoration = persona.get_default_image()
        quote = persona.get_quote(EnumBuildResult.SUCCESS)
    else:
        build_result = EnumBuildResult(result.upper())
        decoration = persona.get_image(build_result)
        quote = persona.get_quote(build_result)

    console.print(f"[bold]{persona.display_name or persona.persona_id}[/bold]")
    image = "[dim]no image[/dim]"
    if decoration.has_image:
        image = escape(str(decoration.image))
    console.print(f"Icon:  {escape(decoration.icon)}")
    console.print(f"Image: {image}")
    console.print(f"Quote: {escape(quote) if quote else '[dim]no quote[/dim]'}")


if __name__ == "__main__":
    cli()
