"""CLI entry point. Registers all subcommands."""

import typer

app = typer.Typer(
    name="lintrun",
    help="lintrun - resolve, cache and analyse source trees",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyse import analyse as _analyse  # noqa: F401, E402
from .cache import cache_info as _cache_info, cache_clear as _cache_clear  # noqa: F401, E402


def main() -> None:
    app()
