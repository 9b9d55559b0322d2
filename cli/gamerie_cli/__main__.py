"""Gamerie CLI - Entry Point."""

import asyncio
import sys

import click
import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gamerie_cli.components.results_panel import CATEGORY_ICONS, SECTION_TITLES, describe
from gamerie_cli.config import Settings
from gamerie_cli.logging_config import configure_logging
from gamerie_cli.providers import HttpSearchProvider, get_provider
from gamerie_cli.search import flatten, resolve, view_all_route

console = Console()


def _load_settings(**overrides) -> Settings:
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/]\n{escape(str(e))}")
        sys.exit(2)


@click.group(invoke_without_command=True)
@click.option(
    "--provider",
    type=click.Choice(["demo", "http"]),
    default=None,
    help="Search provider (default: from config or demo)",
)
@click.option("--api-url", default=None, help="Gamerie API base URL")
@click.pass_context
def main(ctx, provider: str, api_url: str):
    """Gamerie - Find games, teams and players from the terminal.

    Run without arguments to launch the interactive TUI.
    """
    settings = _load_settings(provider=provider, api_base_url=api_url)
    configure_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        # Launch TUI by default
        from gamerie_cli.app import run_app
        run_app(settings)


@main.command()
@click.pass_obj
def tui(settings: Settings):
    """Launch interactive TUI."""
    from gamerie_cli.app import run_app
    run_app(settings)


@main.command()
@click.argument("query")
@click.option("-n", "--limit", default=None, type=click.IntRange(1, 50), help="Results per category")
@click.pass_obj
def search(settings: Settings, query: str, limit: int):
    """Search games, teams and players.

    Example: gamerie search valorant
    """
    if limit is not None:
        settings = settings.model_copy(update={"result_limit": limit})
    provider = get_provider(settings)

    async def _search():
        if isinstance(provider, HttpSearchProvider) and not await provider.is_online():
            console.print("[red]Error:[/] Server is offline at " + settings.api_base_url)
            sys.exit(1)
        return await provider.search(query)

    try:
        result_set = asyncio.run(_search())
    except httpx.HTTPError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if result_set.is_empty:
        console.print(f"[yellow]No results found for:[/] {escape(query)}")
        return

    console.print(f"\n[bold]{result_set.total}[/] results for [cyan]\"{escape(query)}\"[/]\n")

    flat_index = flatten(result_set)
    for category, start, items in flat_index.sections():
        console.print(f"[bold]{SECTION_TITLES[category]}[/]")
        for offset, item in enumerate(items):
            index = start + offset

            title = Text()
            title.append(f"[{index + 1}] ", style="dim")
            title.append(f"{CATEGORY_ICONS[category]} ")
            title.append(item.display_name, style="bold")
            secondary = describe(item)
            if secondary:
                title.append(f"  {secondary}", style="dim")
            console.print(title)
            console.print(f"    [dim]{resolve(index, flat_index)}[/]")
        console.print()

    console.print(f"[dim]View all:[/] {view_all_route(query)}")


@main.command()
@click.pass_obj
def status(settings: Settings):
    """Show search provider status and configuration."""
    provider = get_provider(settings)

    is_online = asyncio.run(provider.is_online())
    if not is_online:
        console.print(Panel(
            f"[red]● Server Offline[/]\n\n"
            f"No response from {settings.api_base_url}/health",
            title="Gamerie",
        ))
        sys.exit(1)

    table = Table(title="Search Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Provider", settings.provider)
    if not settings.use_demo():
        table.add_row("API", settings.api_base_url)
    table.add_row("Results per category", str(settings.result_limit))
    table.add_row("Debounce", f"{settings.debounce_ms} ms")
    table.add_row("Signed in as", settings.current_user_id or "-")
    table.add_row("Log file", str(settings.log_file))

    console.print()
    console.print(f"[green]● {settings.provider.title()} search online[/]")
    console.print(table)


if __name__ == "__main__":
    main()
