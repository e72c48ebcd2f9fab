import json

import pytest

from guidepairing.constants import CONFIG_ENV_VAR, SEVERITY_COLORS
from guidepairing.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from guidepairing.models.config import EditorConfig


def test_defaults_without_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = EditorConfig.load()
    assert config == EditorConfig()
    assert config.sort_direction == "descending"
    assert config.include_maybe is True
    assert config.severity_colors == SEVERITY_COLORS


def test_load_from_env(tmp_path, monkeypatch):
    path = tmp_path / "editor.json"
    path.write_text(
        json.dumps(
            {
                "sort_direction": "ascending",
                "include_maybe": False,
                "severity_colors": {"slight": "#ffff00"},
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    config = EditorConfig.load()
    assert config.sort_direction == "ascending"
    assert not config.include_maybe
    assert config.severity_colors["slight"] == "#ffff00"
    assert config.severity_colors["significant"] == SEVERITY_COLORS["significant"]
    assert EditorConfig.from_dict(config.to_dict()) == config


def test_bad_config(tmp_path):
    with pytest.raises(MissingConfigurationException):
        EditorConfig.load(tmp_path / "absent.json")

    path = tmp_path / "editor.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        EditorConfig.load(path)

    path.write_text("{oops", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        EditorConfig.load(path)

    with pytest.raises(InvalidConfigurationException):
        EditorConfig(sort_direction="sideways")


@pytest.mark.parametrize(
    "data",
    [
        {"include_maybe": "false"},
        {"include_maybe": 0},
        {"severity_colors": "red"},
        {"severity_colors": ["slight", "#fff"]},
        {"severity_colors": {"slight": 7}},
    ],
)
def test_from_dict_rejects_wrong_types(data):
    with pytest.raises(InvalidConfigurationException):
        EditorConfig.from_dict(data)


def test_load_rejects_quoted_boolean(tmp_path):
    path = tmp_path / "editor.json"
    path.write_text(json.dumps({"include_maybe": "false"}), encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        EditorConfig.load(path)
