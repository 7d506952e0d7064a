"""Command-line interface for running and configuring the user directory."""

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel

from user_directory.core.security import generate_secure_token
from user_directory.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="user-directory",
    help="User Directory CLI - run the API server and manage access tokens",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind; defaults to app.host"),
    port: int | None = typer.Option(None, help="Port to bind; defaults to app.port"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Uvicorn log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    Start the user directory API server.

    Users live in memory only and are lost when the server stops.
    """
    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting User Directory API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{bind_host}:{bind_port}")
    if not config.auth.tokens:
        console.print(
            "[yellow]No tokens configured: every /api request will be rejected. "
            "Set API_TOKENS or auth.tokens in config.yaml.[/yellow]"
        )

    uvicorn.run(
        "user_directory.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=log_level,
    )


@app.command(name="generate-token")
def generate_token(
    length: int = typer.Option(32, min=16, help="Random bytes in the token"),
) -> None:
    """
    Generate a bearer token for the auth.tokens allow-list.
    """
    token = generate_secure_token(length)
    console.print(token, highlight=False, soft_wrap=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
