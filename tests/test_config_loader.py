"""
Tests for config/config_loader.py
"""

import json

import pytest
from config.config_loader import DEFAULT_CONFIG, load_config, save_config, validate_config


def write_config(path, **overrides):
    path.write_text(json.dumps(overrides))
    return path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "runtime_config.json"


class TestLoadConfig:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"))

    def test_defaults_fill_missing_keys(self, config_path, tmp_path):
        out_dir = tmp_path / "out"
        write_config(config_path, output_directory=str(out_dir))
        config = load_config(str(config_path))
        assert config["speed_ms"] == 500
        assert config["start_state"] == "q0"
        assert config["tape_window_width"] == 28
        assert out_dir.is_dir()

    def test_overrides(self, config_path, tmp_path):
        write_config(config_path, speed_ms=50, accept_state="yes", output_directory=str(tmp_path))
        config = load_config(str(config_path))
        assert config["speed_ms"] == 50
        assert config["accept_state"] == "yes"


class TestValidateConfig:

    def test_default_config_is_valid(self):
        validate_config(dict(DEFAULT_CONFIG))

    def test_missing_key(self):
        config = dict(DEFAULT_CONFIG)
        del config["reject_state"]
        with pytest.raises(ValueError):
            validate_config(config)

    @pytest.mark.parametrize("key,value", [("speed_ms", "fast"), ("log_steps", 1), ("speed_ms", True)])
    def test_wrong_type(self, key, value):
        config = dict(DEFAULT_CONFIG, **{key: value})
        with pytest.raises(TypeError):
            validate_config(config)

    @pytest.mark.parametrize("speed", [49, 2001])
    def test_speed_out_of_range(self, speed):
        with pytest.raises(ValueError):
            validate_config(dict(DEFAULT_CONFIG, speed_ms=speed))

    def test_empty_state_name(self):
        with pytest.raises(ValueError):
            validate_config(dict(DEFAULT_CONFIG, start_state="  "))

    def test_even_tape_cells(self):
        with pytest.raises(ValueError):
            validate_config(dict(DEFAULT_CONFIG, initial_tape_cells=100))


class TestSaveConfig:

    def test_save_and_load(self, config_path, tmp_path):
        config = dict(DEFAULT_CONFIG, speed_ms=1200, output_directory=str(tmp_path / "logs"))
        save_config(config, str(config_path))
        assert load_config(str(config_path))["speed_ms"] == 1200

    def test_invalid_config_not_written(self, config_path):
        with pytest.raises(ValueError):
            save_config(dict(DEFAULT_CONFIG, speed_ms=1), str(config_path))
        assert not config_path.exists()
