"""Tests for dpumon configuration loading and validation."""

import json

import pytest
import yaml

from dpumon.configs import DEFAULT_CONFIG, Config, ConfigManager, simulation_forced_by_env
from dpumon.hardware.ranks import DPU_RANK_ROOT
from dpumon.utils.errors import ConfigError


def test_defaults() -> None:
    config = Config()
    assert config.get("dpu.root") == DPU_RANK_ROOT
    assert config.get("dpu.simulation") is False
    assert config.get("collection.interval_seconds") == 1.0
    assert config.get("logging.level") == "INFO"
    config.validate()


def test_update_merges_nested_sections() -> None:
    config = Config({"dpu": {"simulation": True}})
    assert config.get("dpu.simulation") is True
    assert config.get("dpu.root") == DPU_RANK_ROOT


def test_defaults_not_mutated() -> None:
    config = Config()
    config.config["dpu"]["root"] = "/tmp/other"
    assert DEFAULT_CONFIG["dpu"]["root"] == DPU_RANK_ROOT


def test_get_missing_key_returns_default() -> None:
    config = Config()
    assert config.get("dpu.nope", "fallback") == "fallback"
    assert config.get("dpu.root.deeper", "fallback") == "fallback"


@pytest.mark.parametrize(
    "overrides",
    [
        {"dpu": {"root": ""}},
        {"dpu": {"simulation": "yes"}},
        {"collection": {"interval_seconds": 0}},
        {"collection": {"interval_seconds": True}},
        {"collection": {"runtime_metrics": 1}},
        {"logging": {"level": "LOUD"}},
    ],
)
def test_validate_rejects_bad_values(overrides) -> None:
    with pytest.raises(ConfigError):
        Config(overrides).validate()


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "dpumon.yaml"
    path.write_text(yaml.safe_dump({"dpu": {"root": "/tmp/ranks"}, "logging": {"level": "DEBUG"}}), encoding="utf-8")
    config = ConfigManager.load_or_default(str(path))
    assert config.get("dpu.root") == "/tmp/ranks"
    assert config.get("logging.level") == "DEBUG"
    assert config.get("collection.interval_seconds") == 1.0


def test_load_json(tmp_path) -> None:
    path = tmp_path / "dpumon.json"
    path.write_text(json.dumps({"collection": {"interval_seconds": 0.5}}), encoding="utf-8")
    config = ConfigManager.load_or_default(str(path))
    assert config.get("collection.interval_seconds") == 0.5


def test_load_or_default_without_file() -> None:
    assert ConfigManager.load_or_default(None).to_dict() == DEFAULT_CONFIG


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError):
        ConfigManager.load_or_default(str(tmp_path / "missing.yaml"))


def test_load_unsupported_extension(tmp_path) -> None:
    path = tmp_path / "dpumon.toml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager.load_or_default(str(path))


def test_load_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "dpumon.yaml"
    path.write_text("dpu: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager.load_or_default(str(path))


def test_load_non_mapping(tmp_path) -> None:
    path = tmp_path / "dpumon.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager.load_or_default(str(path))


def test_save_roundtrip(tmp_path) -> None:
    config = Config({"dpu": {"simulation": True}})
    yaml_path = str(tmp_path / "out" / "dpumon.yaml")
    ConfigManager.save_yaml(config, yaml_path)
    assert ConfigManager.load_yaml(yaml_path).get("dpu.simulation") is True
    json_path = str(tmp_path / "out" / "dpumon.json")
    ConfigManager.save_json(config, json_path)
    assert ConfigManager.load_json(json_path).to_dict() == config.to_dict()


@pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("", False)])
def test_simulation_forced_by_env(monkeypatch, value, expected) -> None:
    monkeypatch.setenv("DPUMON_SIMULATION", value)
    assert simulation_forced_by_env() is expected
