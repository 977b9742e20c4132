"""CLI entry point for care-rhythm-server."""

import typer
import uvicorn

from care_rhythm_server import __version__
from care_rhythm_server.core.config import settings
from care_rhythm_server.models.activity import ActivityKind
from care_rhythm_server.models.heatmap import KIND_STYLES

app = typer.Typer(
    name="care-rhythm-server",
    help="24-hour activity heatmaps from infant-care logs",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind to (overrides config)"),
    port: int = typer.Option(None, help="Port to bind to (overrides config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the API server.

    Example:
        care-rhythm-server serve
        care-rhythm-server serve --host 127.0.0.1 --port 8080 --reload
    """
    uvicorn.run(
        "care_rhythm_server.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def palette() -> None:
    """List activity kinds with their display label and color."""
    for kind in ActivityKind:
        style = KIND_STYLES[kind]
        shape = "interval" if kind.is_interval else "instant"
        typer.echo(f"{kind.value:<8} {style.name:<8} {style.color}  ({shape})")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"care-rhythm-server v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
