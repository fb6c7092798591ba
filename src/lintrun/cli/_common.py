"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import RunConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    no_cache: bool = False,
    **overrides,
) -> RunConfig:
    """Build the run configuration from CLI options."""
    if no_cache:
        overrides["cache_enabled"] = False
    return load_config(config_file=config, **overrides)
