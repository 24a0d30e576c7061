"""Tests for engine configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylegrammar.core.config import CONFIG_FILENAME, EngineConfig, find_config, load_config
from stylegrammar.core.errors import ConfigError


class TestEngineConfig:
    def test_defaults(self) -> None:
        config = EngineConfig()
        assert config.max_operands == 4
        assert config.max_repeat == 2
        assert config.max_variants == 4096
        assert config.cache_size == 256

    @pytest.mark.parametrize("value", [0, -1, True, "3"])
    def test_rejects_invalid_values(self, value) -> None:
        with pytest.raises(ConfigError):
            EngineConfig(max_repeat=value)


class TestLoadConfig:
    """Reading stylegrammar.toml and pyproject.toml."""

    def test_engine_table(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[engine]\nmax_repeat = 3\n")
        config = load_config(path)
        assert config.max_repeat == 3
        assert config.max_operands == 4

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.stylegrammar]\nmax_variants = 100\n")
        assert load_config(path).max_variants == 100

    def test_missing_table_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[other]\nx = 1\n")
        assert load_config(path) == EngineConfig()

    def test_unknown_setting(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[engine]\nmax_depth = 3\n")
        with pytest.raises(ConfigError, match="max_depth"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[engine\n")
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path / CONFIG_FILENAME)


class TestFindConfig:
    """Walking up from a start directory."""

    def test_found_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[engine]\ncache_size = 8\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert find_config(child).cache_size == 8

    def test_own_file_wins_over_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[engine]\ncache_size = 8\n")
        (tmp_path / "pyproject.toml").write_text("[tool.stylegrammar]\ncache_size = 9\n")
        assert find_config(tmp_path).cache_size == 8

    def test_pyproject_without_table_skipped(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[engine]\ncache_size = 8\n")
        child = tmp_path / "pkg"
        child.mkdir()
        (child / "pyproject.toml").write_text("[project]\nname = 'x'\n")
        assert find_config(child).cache_size == 8
