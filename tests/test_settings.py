import json

import pytest

from readme_tree.exceptions import SettingsError
from readme_tree.settings import TreeSettings, default_output_name, load_settings, settings_from_mapping
from readme_tree.types import UNLIMITED_DEPTH


@pytest.fixture
def write_settings(tmp_path):
    def _write(data):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    return _write


def test_default_settings():
    settings = TreeSettings()
    assert settings.exclude_patterns == ["node_modules", ".git", ".vscode"]
    assert settings.max_depth == UNLIMITED_DEPTH
    assert settings.use_markdown_format is False


def test_default_patterns_are_not_shared():
    first = TreeSettings()
    first.exclude_patterns.append("dist")
    assert "dist" not in TreeSettings().exclude_patterns


def test_load_bare_keys(write_settings):
    path = write_settings({"excludePatterns": ["dist"], "maxDepth": 2, "useMarkdownFormat": True})
    settings = load_settings(path)
    assert settings.exclude_patterns == ["dist"]
    assert settings.max_depth == 2
    assert settings.use_markdown_format is True


def test_load_namespaced_keys(write_settings):
    path = write_settings(
        {
            "editor.tabSize": 4,
            "readmeTreeGenerator.excludePatterns": ["build"],
            "readmeTreeGenerator.maxDepth": 0,
        }
    )
    settings = load_settings(str(path))
    assert settings.exclude_patterns == ["build"]
    assert settings.max_depth == 0
    assert settings.use_markdown_format is False


def test_namespaced_key_wins():
    settings = settings_from_mapping({"maxDepth": 1, "readmeTreeGenerator.maxDepth": 3})
    assert settings.max_depth == 3


def test_missing_keys_keep_defaults(write_settings):
    assert load_settings(write_settings({})) == TreeSettings()


@pytest.mark.parametrize(
    "data,message",
    [
        ({"excludePatterns": "node_modules"}, "excludePatterns"),
        ({"excludePatterns": ["ok", 3]}, "excludePatterns"),
        ({"maxDepth": "2"}, "maxDepth"),
        ({"maxDepth": True}, "maxDepth"),
        ({"maxDepth": -5}, "maxDepth"),
        ({"useMarkdownFormat": "yes"}, "useMarkdownFormat"),
    ],
)
def test_invalid_values(data, message):
    with pytest.raises(SettingsError) as excinfo:
        settings_from_mapping(data)
    assert message in str(excinfo.value)


def test_invalid_json(write_settings):
    with pytest.raises(SettingsError) as excinfo:
        load_settings(write_settings("{not json"))
    assert "Invalid JSON" in str(excinfo.value)
    assert excinfo.value.__cause__ is not None


def test_non_object_json(write_settings):
    with pytest.raises(SettingsError) as excinfo:
        load_settings(write_settings(["a", "b"]))
    assert "JSON object" in str(excinfo.value)


def test_missing_settings_file(tmp_path):
    with pytest.raises(SettingsError) as excinfo:
        load_settings(tmp_path / "missing.json")
    assert "Cannot read settings file" in str(excinfo.value)


def test_default_output_name():
    assert default_output_name(".txt") == "folder-structure.txt"
    assert default_output_name(".md") == "folder-structure.md"
