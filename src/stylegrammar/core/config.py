"""
Engine configuration.

Limits that keep grammar expansion bounded. Loaded from ``stylegrammar.toml``
(``[engine]`` table) or from ``pyproject.toml`` (``[tool.stylegrammar]``).
"""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "stylegrammar.toml"


@dataclass(frozen=True)
class EngineConfig:
    """Expansion limits and cache sizing."""

    max_operands: int = 4  # operands allowed under "||" / "&&"
    max_repeat: int = 2  # repetitions generated for "+", "*", "#", "{m,}"
    max_variants: int = 4096  # variants kept per syntax after sorting
    cache_size: int = 256  # memoized syntax strings per context

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigError(f"{f.name} must be a positive integer, got {value!r}")


def _config_from_table(table: dict, source: Path) -> EngineConfig:
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown engine settings: {', '.join(unknown)}")
    return EngineConfig(**table)


def load_config(path: Path) -> EngineConfig:
    """
    Load engine configuration from a TOML file.

    ``pyproject.toml`` is read from ``[tool.stylegrammar]``; any other file
    from its ``[engine]`` table. A file without the table yields defaults.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if path.name == "pyproject.toml":
        table = data.get("tool", {}).get("stylegrammar", {})
    else:
        table = data.get("engine", {})

    config = _config_from_table(table, path)
    logger.debug("Loaded engine config from %s: %s", path, config)
    return config


def find_config(start: Path | None = None) -> EngineConfig:
    """
    Locate configuration by walking up from ``start`` (default: cwd).

    ``stylegrammar.toml`` wins over a ``pyproject.toml`` in the same directory;
    a ``pyproject.toml`` without a ``[tool.stylegrammar]`` table is skipped.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        own = candidate_dir / CONFIG_FILENAME
        if own.is_file():
            return load_config(own)
        pyproject = candidate_dir / "pyproject.toml"
        if pyproject.is_file():
            try:
                data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
            except (OSError, tomllib.TOMLDecodeError):
                continue
            if "stylegrammar" in data.get("tool", {}):
                return load_config(pyproject)
    return EngineConfig()
