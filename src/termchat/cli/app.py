"""Main CLI application using Typer."""
import asyncio
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..llm import PROVIDERS
from ..ui.config import LogLevel
from .providers import PROVIDER_ENV, get_gateway, provider_name

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="termchat",
    help="Terminal chat client for LLM completion services",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Seconds to wait for a reply (0 waits forever, default: TERMCHAT_TIMEOUT or 60)"
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Run without a completion service; messages get no reply"
    ),
):
    """Launch the interactive chat interface."""
    if log_level is not None and log_level.lower() not in LogLevel.choices():
        console.print(f"[red]Error: unknown log level '{log_level}'[/red]")
        console.print(f"[dim]Choose one of: {', '.join(LogLevel.choices())}[/dim]")
        raise typer.Exit(code=1)

    async def _tui():
        from ..ui import run_textual_tui

        gateway, label = get_gateway(console, timeout=timeout, offline=offline)
        await run_textual_tui(gateway=gateway, log_level=log_level, model_name=label)

    asyncio.run(_tui())


@app.command()
def providers():
    """Show supported LLM providers and which one is configured."""
    current = provider_name()

    table = Table(title="LLM Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("API key variable")
    table.add_column("Model", style="green")
    table.add_column("Status")

    for name, (key_var, model_var, default_model) in PROVIDER_ENV.items():
        model = os.getenv(model_var, default_model)
        has_key = bool(os.getenv(key_var))
        status = "[green]ready[/green]" if has_key else "[dim]no key[/dim]"
        if name == current:
            name = f"{name} (selected)"
        table.add_row(name, key_var, model, status)

    console.print(table)

    if current not in PROVIDER_ENV:
        console.print(f"[yellow]LLM_PROVIDER '{current}' is not supported[/yellow]")
    console.print(f"[dim]Aliases: {', '.join(sorted(set(PROVIDERS) - set(PROVIDER_ENV)))}[/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
