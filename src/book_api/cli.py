"""Command line entry point: run the server or create the database."""

import typer
from rich.console import Console
from rich.panel import Panel

from src.book_api.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="Book API service commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command(name="serve")
def serve(
    host: str = typer.Option(None, help="Host to bind to (default: app.host from config)"),
    port: int = typer.Option(None, help="Port to bind to (default: app.port from config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(
        Panel.fit(
            f"[bold green]Servidor escuchando en el puerto {port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.book_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


@app.command(name="init-db")
def init_db() -> None:
    """Create the books table in the configured database."""
    from src.book_api.api.utils.app_startup import configure_logging
    from src.book_api.runtime.init_db import init_db as create_tables

    configure_logging()
    create_tables()
    console.print(
        f"[green]Database ready:[/green] {get_config().database.url}"
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
