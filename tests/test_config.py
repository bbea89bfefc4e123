import pytest

from passwright.config import (
    DEFAULTS,
    DEFAULT_POLICY,
    ConfigError,
    PasswordPolicy,
    config_path,
    load_config,
    policy_from_config,
    save_config,
)


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg == DEFAULTS
    assert policy_from_config(cfg) == DEFAULT_POLICY

def test_save_and_load_merges_defaults(tmp_path):
    path = str(tmp_path / "sub" / "config.json")
    save_config({"allowed_min": 16}, path)
    cfg = load_config(path)
    assert cfg["allowed_min"] == 16
    assert cfg["default_max"] == DEFAULTS["default_max"]

def test_corrupt_file_falls_back_to_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf-8")
    assert load_config(str(p)) == DEFAULTS

def test_non_object_json_falls_back_to_defaults(tmp_path):
    p = tmp_path / "config.json"
    for text in ("5", "[1, 2]", "\"ab\"", "null"):
        p.write_text(text, encoding="utf-8")
        assert load_config(str(p)) == DEFAULTS

def test_invalid_policies_raise():
    with pytest.raises(ConfigError):
        policy_from_config({"allowed_min": 0})
    with pytest.raises(ConfigError):
        policy_from_config({"default_min": 10})
    with pytest.raises(ConfigError):
        policy_from_config({"default_min": 30, "default_max": 25})
    with pytest.raises(ConfigError):
        policy_from_config({"allowed_min": "twelve"})

def test_policy_from_config_values():
    policy = policy_from_config({"allowed_min": 8, "default_min": 12, "default_max": 16})
    assert policy == PasswordPolicy(8, 12, 16)

def test_config_path_honours_appdata(monkeypatch, tmp_path):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert config_path() == str(tmp_path / "Passwright" / "config.json")
