"""Cache management commands."""

from pathlib import Path
from typing import Optional

import typer

from ..cache import FileListCache
from . import app
from ._common import console, resolve_config


def _open_cache(config: Optional[Path]) -> FileListCache:
    cfg = resolve_config(config)
    return FileListCache(
        cache_dir=cfg.cache_dir,
        ttl_hours=cfg.cache_ttl_hours,
        enabled=cfg.cache_enabled,
    )


@app.command()
def cache_info(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Path to a lintrun.toml file"),
):
    """Show cache information and statistics."""
    with _open_cache(config) as cache:
        stats = cache.stats()

    console.print("[bold cyan]lintrun Cache Info[/bold cyan]")
    console.print()

    if stats.get("enabled"):
        console.print("Status: [green]Enabled[/green]")
        console.print(f"Directory: [blue]{stats.get('directory', 'N/A')}[/blue]")
        console.print(f"Entries: [yellow]{stats.get('size', 0)}[/yellow]")
        console.print(f"Size: [yellow]{stats.get('volume', 0)} bytes[/yellow]")
    else:
        console.print("Status: [red]Disabled[/red]")


@app.command()
def cache_clear(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Path to a lintrun.toml file"),
):
    """Clear the scan cache."""
    with _open_cache(config) as cache:
        if not cache.enabled:
            console.print("[yellow]Cache is disabled[/yellow]")
            raise typer.Exit(0)
        cache.clear()

    console.print("[green]Cache cleared successfully[/green]")
