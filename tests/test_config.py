"""Tests for configuration loading."""

from csvlens_qt.config import (
    API_BASE_ENV,
    DEFAULT_API_BASE,
    load_config,
    resolve_api_base,
    resolve_log_level,
)


def test_missing_config_file(tmp_path):
    assert load_config(tmp_path / "config.yaml") == {}


def test_loads_yaml_mapping(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("API_BASE: http://analysis.local:9000/\nDEFAULT_DIR: ~/data\n")

    config = load_config(config_file)

    assert config == {"API_BASE": "http://analysis.local:9000/", "DEFAULT_DIR": "~/data"}


def test_invalid_yaml_is_ignored(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("API_BASE: [unclosed\n")

    assert load_config(config_file) == {}


def test_non_mapping_yaml_is_ignored(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- just\n- a list\n")

    assert load_config(config_file) == {}


def test_api_base_precedence():
    config = {"API_BASE": "http://from-file/"}

    assert resolve_api_base({}, {}) == DEFAULT_API_BASE
    assert resolve_api_base(config, {}) == "http://from-file"
    assert resolve_api_base(config, {API_BASE_ENV: "http://from-env"}) == "http://from-env"
    assert resolve_api_base(config, {API_BASE_ENV: ""}) == "http://from-file"


def test_log_level_from_config():
    assert resolve_log_level({}) == "INFO"
    assert resolve_log_level({"LOG_LEVEL": "debug"}) == "DEBUG"
    assert resolve_log_level({"LOG_LEVEL": "WARNING"}) == "WARNING"


def test_unknown_log_level_falls_back_to_info():
    assert resolve_log_level({"LOG_LEVEL": "VERBOSE"}) == "INFO"
    assert resolve_log_level({"LOG_LEVEL": 17}) == "INFO"
