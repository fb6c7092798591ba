"""The analyse command."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..application import AnalyseApplication
from ..cache import FileListCache
from ..engine import CompileCheckAnalyser
from ..exceptions import InternalContractError, LintrunError
from ..exclusion import FileExcluder
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..output import OutputStyle
from ..paths import NO_PATHS_MESSAGE
from ..watchdog import MemoryWatchdog
from . import app
from ._common import console, err_console, resolve_config

logger = get_logger(__name__)

EXIT_USAGE = 1
EXIT_INTERNAL = 2


@app.command()
def analyse(
    paths: Optional[List[str]] = typer.Argument(
        None, help="Files and directories to analyse", show_default=False
    ),
    error_format: Optional[str] = typer.Option(
        None, "--error-format", help="Report format: table, raw, json, github"
    ),
    level: Optional[int] = typer.Option(
        None, "-l", "--level", help="Strictness level (default level when omitted)"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Print each file as it is analysed instead of a progress bar"
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Do not read or write the scan cache"),
    clear_cache: bool = typer.Option(
        False, "--clear-cache", help="Rescan directories and refresh the scan cache"
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to a lintrun.toml file", dir_okay=False
    ),
    memory_limit_file: Optional[str] = typer.Option(
        None, "--memory-limit-file", help="File that receives the peak memory usage"
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also write the run log to this file"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
):
    """Analyse PATHS and exit with the formatter's exit code."""
    if not paths:
        # nothing on disk may be created for an empty run
        err_console.print(f"[red]Error:[/red] {escape(NO_PATHS_MESSAGE)}", highlight=False, soft_wrap=True)
        raise typer.Exit(EXIT_USAGE)

    try:
        cfg = resolve_config(
            config,
            no_cache=no_cache,
            error_format=error_format,
            level=level,
            memory_limit_file=memory_limit_file,
            log_file=log_file,
        )
        formatter = get_formatter(cfg.error_format)
    except (LintrunError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(EXIT_USAGE)

    setup_logging(verbose=verbose, quiet=quiet, log_file=cfg.log_file, console=err_console)

    cache = FileListCache(
        cache_dir=cfg.cache_dir,
        ttl_hours=cfg.cache_ttl_hours,
        enabled=cfg.cache_enabled,
    )
    application = AnalyseApplication(
        analyser=CompileCheckAnalyser(),
        watchdog=MemoryWatchdog(cfg.memory_limit_file),
        file_extensions=cfg.file_extensions,
        excluder=FileExcluder(cfg.exclude_patterns),
        cache=cache,
        memory_check_interval=cfg.memory_check_interval,
    )

    try:
        exit_code = application.analyse(
            list(paths),
            OutputStyle(console, status_console=err_console),
            formatter,
            default_level_used=cfg.default_level_used,
            debug=debug,
            enable_cache=cfg.cache_enabled,
            clear_cache=clear_cache,
        )
    except InternalContractError as e:
        logger.error(f"Internal error: {e}")
        err_console.print(f"[red]Internal error:[/red] {escape(e.message)}", highlight=False, soft_wrap=True)
        raise typer.Exit(EXIT_INTERNAL)
    except LintrunError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}", highlight=False, soft_wrap=True)
        raise typer.Exit(EXIT_USAGE)
    finally:
        cache.close()

    raise typer.Exit(exit_code)
