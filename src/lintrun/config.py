"""Configuration loading and management for lintrun.

Configuration sources are merged in priority order:
    1. Defaults (defined in RunConfig)
    2. Global config (~/.lintrun.toml)
    3. Project config (./lintrun.toml)
    4. Explicit config file
    5. Environment variables (LINTRUN_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(file_extensions=["py", "pyi"])
    >>> config.file_extensions
    ['py', 'pyi']
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

ERROR_FORMATS = ("table", "raw", "json", "github")


def _default_memory_limit_file() -> str:
    return os.path.join(tempfile.gettempdir(), "lintrun-memory-limit.txt")


@dataclass(frozen=True)
class RunConfig:
    """Settings for one analyse run.

    Attributes:
        file_extensions: Extensions (without dot) picked up when a directory
            is expanded. Matching is case-sensitive.
        exclude_patterns: Paths or globs dropped from analysis
        memory_limit_file: File overwritten with the peak memory ("<N> MB")
        memory_check_interval: Files between memory records in batch mode
        cache_enabled: Cache directory scans between runs
        cache_dir: Directory for cache storage
        cache_ttl_hours: Age after which a cached scan is ignored.
            None keeps entries until they are cleared or overwritten.
        error_format: Formatter name
        level: Strictness level; None means the default level is used
        log_file: File that also receives the run log; None logs to stderr only
    """

    file_extensions: list[str] = field(default_factory=lambda: ["py"])
    exclude_patterns: list[str] = field(default_factory=list)

    memory_limit_file: str = field(default_factory=_default_memory_limit_file)
    memory_check_interval: int = 100

    cache_enabled: bool = True
    cache_dir: str = ".lintrun-cache"
    cache_ttl_hours: Optional[float] = None

    error_format: str = "table"
    level: Optional[int] = None

    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.file_extensions, (list, tuple)):
            raise InvalidConfigError(
                "file_extensions", self.file_extensions, "must be a list of extensions"
            )
        if not self.file_extensions:
            raise InvalidConfigError(
                "file_extensions", self.file_extensions, "at least one extension is required"
            )
        for ext in self.file_extensions:
            if not ext or not isinstance(ext, str):
                raise InvalidConfigError("file_extensions", ext, "extensions must be non-empty strings")

        if not isinstance(self.exclude_patterns, (list, tuple)):
            raise InvalidConfigError(
                "exclude_patterns", self.exclude_patterns, "must be a list of patterns"
            )

        if self.memory_check_interval < 1:
            raise InvalidConfigError(
                "memory_check_interval", self.memory_check_interval, "must be at least 1"
            )

        if self.cache_ttl_hours is not None and self.cache_ttl_hours <= 0:
            raise InvalidConfigError("cache_ttl_hours", self.cache_ttl_hours, "must be positive")

        if self.error_format not in ERROR_FORMATS:
            raise InvalidConfigError(
                "error_format", self.error_format, f"choose from {', '.join(ERROR_FORMATS)}"
            )

        if self.level is not None and self.level < 0:
            raise InvalidConfigError("level", self.level, "must be non-negative")

    @property
    def default_level_used(self) -> bool:
        return self.level is None


def load_config(config_file: Optional[Path] = None, **overrides) -> RunConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None
            values are ignored so unset flags keep lower-priority values

    Returns:
        Validated RunConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".lintrun.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "lintrun.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return RunConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LINTRUN_* environment variables.

    List fields take comma-separated values, e.g.
    ``LINTRUN_FILE_EXTENSIONS=py,pyi``.
    """
    type_hints = get_type_hints(RunConfig)
    result: dict[str, Any] = {}

    for field_name in RunConfig.__dataclass_fields__:
        env_key = f"LINTRUN_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type."""
    origin = getattr(type_hint, "__origin__", None)
    args = getattr(type_hint, "__args__", ())

    # Optional[X] is Union[X, None]
    if type(None) in args:
        if value.strip().lower() in ("", "none", "null"):
            return None
        non_none = [t for t in args if t is not type(None)]
        type_hint = non_none[0]
        origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    return value


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file; settings may sit at top level or under [lintrun]."""
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("lintrun", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [lintrun] must be a table")
    return section
