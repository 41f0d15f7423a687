import json
import logging
from pathlib import Path

import pytest
from floorgen import config as defaults
from floorgen.level.config_loader import (
    DEFAULT_CONFIG,
    GenerationConfig,
    load_generation_config,
    resolve_config
)

REPO_CONFIG = Path(__file__).resolve().parent.parent / "config" / "floorgen_config.json"


class TestGenerationConfig:
    """Test config defaults and validation."""

    def test_defaults_match_constants(self):
        config = GenerationConfig()

        assert config.grid_size == defaults.GRID_SIZE == 30
        assert config.border == 2
        assert config.room_world_size == 60
        assert config.min_rooms == 6
        assert config.max_rooms == 12
        assert config.center == 15
        assert config.tile_size == 2

    @pytest.mark.parametrize("overrides", [
        {"grid_size": 10},
        {"border": 0},
        {"border": 4},
        {"room_world_size": 0},
        {"min_rooms": 0},
        {"min_rooms": 8, "max_rooms": 7},
        {"placement_attempts": 0},
        {"loot_floor_divisor": 0},
    ])
    def test_invalid_values_raise(self, overrides):
        """Values the generators cannot use are rejected up front"""
        with pytest.raises(ValueError):
            GenerationConfig(**overrides)

    def test_dict_round_trip(self):
        config = GenerationConfig(min_rooms=4, enemy_floor_scale=2.0)
        assert GenerationConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self, caplog):
        """Unknown keys are dropped with a warning"""
        with caplog.at_level(logging.WARNING, logger="floorgen.level.config_loader"):
            config = GenerationConfig.from_dict({"max_rooms": 20, "room_colour": "red"})

        assert config.max_rooms == 20
        assert any("room_colour" in r.getMessage() for r in caplog.records)

    def test_resolve_config(self):
        custom = GenerationConfig(max_rooms=13)
        assert resolve_config(None) is DEFAULT_CONFIG
        assert resolve_config(custom) is custom


class TestLoadGenerationConfig:
    """Test loading configuration from JSON."""

    def test_loads_values(self, tmp_path):
        path = tmp_path / "floorgen.json"
        path.write_text(json.dumps({"min_rooms": 3, "max_rooms": 4, "grid_size": 32}))

        config = load_generation_config(str(path))

        assert config.min_rooms == 3
        assert config.max_rooms == 4
        assert config.grid_size == 32
        assert config.border == DEFAULT_CONFIG.border

    def test_missing_default_file_uses_defaults(self, tmp_path, monkeypatch):
        """Without a path, a missing default file means defaults"""
        monkeypatch.chdir(tmp_path)
        assert load_generation_config() == DEFAULT_CONFIG

    def test_missing_named_file_raises(self, tmp_path):
        """A path the caller named must exist"""
        with pytest.raises(FileNotFoundError):
            load_generation_config(str(tmp_path / "missing.json"))

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(ValueError):
            load_generation_config(str(path))

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"min_rooms": 9, "max_rooms": 2}))

        with pytest.raises(ValueError):
            load_generation_config(str(path))

    def test_repo_config_matches_defaults(self):
        """Shipped config file mirrors the built-in defaults"""
        assert load_generation_config(str(REPO_CONFIG)) == DEFAULT_CONFIG
