# tests/core/test_config_management.py
import json

import pytest

from markup_lint_cli.managers.config_manager import ConfigManager
from markup_lint_cli.utils.path_utils import PathUtils

MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "INFO"
    },
    "output": {
        "stream": "stdout",
        "progress": True
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Points the ConfigManager singleton at a temporary settings.json and
    restores the packaged settings afterwards.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, "get_settings_path", lambda: settings_file)

    manager = ConfigManager()
    manager.reset()
    yield manager, settings_file

    monkeypatch.undo()
    manager.reset()


def test_packaged_settings_exist():
    assert PathUtils.get_settings_path().is_file()


def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    manager, _ = config_env
    assert manager.get_nested("debug.level") == "INFO"
    assert manager.get_nested("output.stream") == "stdout"


def test_config_manager_get_nested_defaults(config_env):
    manager, _ = config_env
    assert manager.get_nested("output.progress") is True
    assert manager.get_nested("input.encoding", "utf-8") == "utf-8"
    assert manager.get_nested("debug.level.deeper", "x") == "x"


def test_config_manager_set_nested_casts_to_existing_type(config_env):
    manager, _ = config_env
    assert manager.set_nested("output.progress", 0)
    assert manager.get_nested("output.progress") is False
    assert manager.set_nested("input.encoding", "latin-1")
    assert manager.get_nested("input.encoding") == "latin-1"


def test_config_manager_reset_discards_overrides(config_env):
    manager, _ = config_env
    manager.set_nested("debug.level", "DEBUG")
    manager.reset()
    assert manager.get_nested("debug.level") == "INFO"


def test_config_manager_missing_file(config_env, tmp_path, monkeypatch):
    manager, _ = config_env
    monkeypatch.setattr(PathUtils, "get_settings_path", lambda: tmp_path / "nope.json")
    manager.reset()
    assert manager.get_nested("debug.level") is None
    assert manager.get_nested("output.stream", "stderr") == "stderr"


def test_config_manager_invalid_json(config_env):
    manager, settings_file = config_env
    settings_file.write_text("{not json")
    manager.reset()
    assert manager.get_nested("debug.level") is None
    assert manager.get_nested("output.stream", "stderr") == "stderr"
