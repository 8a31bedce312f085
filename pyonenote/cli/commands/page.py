"""Page commands for the pyonenote CLI."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from pyonenote.exceptions import RenderError
from pyonenote.rendering.exporter import load_page, render_page_fragments, write_page
from pyonenote.rendering.options import RenderConfig
from pyonenote.rendering.renderer import Renderer

app = typer.Typer(help="Page commands")
console = Console()

logger = logging.getLogger(__name__)


@app.command("render")
def render(
    page_json: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON dump of the page nodes"
    ),
    output_dir: Path = typer.Option(
        Path("out"), "--output-dir", "-o", help="Directory for HTML and embedded files"
    ),
    full_page: bool = typer.Option(
        False, "--full-page", help="Wrap output in a full HTML page"
    ),
    autolink: bool = typer.Option(
        True, "--autolink/--no-autolink", help="Link paragraphs that are bare URLs"
    ),
    debug: bool = typer.Option(False, "--debug", help="Log resolved paragraph styles"),
):
    """Render every node of PAGE_JSON into one HTML file."""
    try:
        page = load_page(page_json)
        output_dir.mkdir(parents=True, exist_ok=True)
        renderer = Renderer(
            output_dir,
            config=RenderConfig(debug=debug, autolink_bare_urls=autolink),
        )
        fragments = render_page_fragments(page, renderer)
        path = write_page(
            page.title, "\n".join(fragments), output_dir, full_page=full_page
        )
    except (RenderError, ValidationError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    logger.info("Rendered %d nodes", len(fragments))
    console.print(f"[green]Wrote[/green] [bold]{path}[/bold]")
