"""Unit tests for the CLI main module."""

import errno
import json
from unittest.mock import patch

import pytest

from readme_tree.cli.main import build_config, format_counts, main
from readme_tree.cli.argparser import create_parser
from readme_tree.exclusion_rules.name_rules import NamePatternExclusionRules
from readme_tree.settings import TreeSettings
from readme_tree.types import TreeFormat


@pytest.fixture
def sample_project(tmp_path):
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "src" / "a.ts").touch()
    (root / "node_modules").mkdir()
    (root / "node_modules" / "dep.js").touch()
    (root / "README.md").touch()
    return root


def run_main(argv):
    with patch("sys.argv", ["readme-tree"] + [str(arg) for arg in argv]):
        main()


def parse(argv):
    rules = NamePatternExclusionRules()
    return create_parser(rules).parse_args(argv), rules


def test_format_counts():
    assert format_counts({"directories": 2, "files": 5, "lines": 8}) == "Directories: 2\nFiles: 5\nLines: 8"


def test_build_config_uses_settings(tmp_path):
    args, rules = parse([str(tmp_path)])
    settings = TreeSettings(exclude_patterns=["dist"], max_depth=3, use_markdown_format=True)
    config = build_config(args, settings, rules)
    assert config.exclude_patterns == ("dist",)
    assert config.max_depth == 3
    assert config.format is TreeFormat.MARKDOWN
    assert config.include_files


def test_build_config_arguments_override_settings(tmp_path):
    args, rules = parse([str(tmp_path), "-f", "ascii", "-d", "0", "-i", "build", "-D", "-n", "Root"])
    settings = TreeSettings(max_depth=3, use_markdown_format=True)
    config = build_config(args, settings, rules)
    assert config.format is TreeFormat.ASCII
    assert config.max_depth == 0
    assert config.exclude_patterns == ("node_modules", ".git", ".vscode", "build")
    assert not config.include_files
    assert config.root_label == "Root"


def test_build_config_fence_forces_ascii(tmp_path):
    args, rules = parse([str(tmp_path), "--fence"])
    config = build_config(args, TreeSettings(use_markdown_format=True), rules)
    assert config.format is TreeFormat.ASCII


def test_build_config_without_default_excludes(tmp_path):
    args, rules = parse([str(tmp_path), "--no-default-excludes", "-i", "tmp*"])
    config = build_config(args, TreeSettings(), rules)
    assert config.exclude_patterns == ("tmp*",)


def test_main_ascii_to_stdout(sample_project, capsys):
    run_main([sample_project])
    assert capsys.readouterr().out == "proj/\n├── src/\n│   └── a.ts\n└── README.md\n"


def test_main_markdown_to_stdout(sample_project, capsys):
    run_main([sample_project, "-f", "markdown"])
    assert capsys.readouterr().out == "- proj/\n  - src/\n    - a.ts\n  - README.md\n"


def test_main_no_default_excludes(sample_project, capsys):
    run_main([sample_project, "--no-default-excludes", "-d", "1"])
    assert capsys.readouterr().out == "proj/\n├── node_modules/\n├── src/\n└── README.md\n"


def test_main_fence(sample_project, capsys):
    run_main([sample_project, "--fence", "-d", "0"])
    assert capsys.readouterr().out == "```\nproj/\n```\n"


def test_main_settings_file(sample_project, tmp_path, capsys):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"readmeTreeGenerator.useMarkdownFormat": True, "maxDepth": 1}))
    run_main([sample_project, "-c", settings_file, "-D"])
    assert capsys.readouterr().out == "- proj/\n  - src/\n"


def test_main_settings_with_empty_pattern(sample_project, tmp_path, capsys):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"excludePatterns": ["", "node_modules"]}))
    run_main([sample_project, "-c", settings_file, "-D"])
    assert capsys.readouterr().out == "proj/\n└── src/\n"


def test_main_output_file(sample_project, tmp_path, capsys):
    destination = tmp_path / "tree.txt"
    run_main([sample_project, "-o", destination, "-i", "README.md"])
    assert destination.read_text(encoding="utf-8") == "proj/\n└── src/\n    └── a.ts\n"
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "extra_args,file_name",
    [
        ([], "folder-structure.txt"),
        (["-f", "markdown"], "folder-structure.md"),
        (["--fence"], "folder-structure.md"),
    ],
)
def test_main_write_default_file(sample_project, capsys, extra_args, file_name):
    run_main([sample_project, "-w"] + extra_args)
    destination = sample_project / file_name
    assert destination.exists()
    assert destination.read_text(encoding="utf-8").count("a.ts") == 1
    assert file_name in capsys.readouterr().err


def test_main_summary_stderr(sample_project, capsys):
    run_main([sample_project, "-s", "stderr"])
    captured = capsys.readouterr()
    assert captured.err == "Directories: 1\nFiles: 2\nLines: 4\n"
    assert "Directories" not in captured.out


def test_main_summary_stdout(sample_project, capsys):
    run_main([sample_project, "-s", "stdout"])
    assert capsys.readouterr().out.endswith("└── README.md\n\nDirectories: 1\nFiles: 2\nLines: 4\n")


def test_main_summary_file(sample_project, tmp_path):
    destination = tmp_path / "tree.txt"
    run_main([sample_project, "-s", "file", "-o", destination])
    assert destination.read_text(encoding="utf-8").endswith("\n\nDirectories: 1\nFiles: 2\nLines: 4\n")


def test_main_missing_directory(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main([tmp_path / "missing"])
    assert excinfo.value.code == 1
    assert "Error: Root path does not exist" in capsys.readouterr().err


def test_main_permission_denied_during_walk(sample_project, capsys):
    error = PermissionError(errno.EACCES, "Permission denied")
    with patch("readme_tree.file_system_tree.reader.FileSystemReader.list_directory", side_effect=error):
        with pytest.raises(SystemExit) as excinfo:
            run_main([sample_project])
    assert excinfo.value.code == 126
    captured = capsys.readouterr()
    assert "Error: Cannot read directory (Permission denied)" in captured.err
    assert captured.out == ""


def test_main_invalid_settings(sample_project, tmp_path, capsys):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text('{"maxDepth": "deep"}')
    with pytest.raises(SystemExit) as excinfo:
        run_main([sample_project, "-c", settings_file])
    assert excinfo.value.code == 1
    assert "Error: maxDepth must be an integer" in capsys.readouterr().err


def test_main_validation_error(sample_project, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main([sample_project, "-s", "file"])
    assert excinfo.value.code == 1
    assert "--summary=file requires" in capsys.readouterr().err


def test_main_missing_exclusion_file(sample_project, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main([sample_project, "-e", tmp_path / "missing"])
    assert excinfo.value.code == 1
    assert "Rules file not found" in capsys.readouterr().err


def test_main_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main(["--no-such-flag"])
    assert excinfo.value.code == 2


def test_main_broken_pipe(sample_project):
    with (
        patch("readme_tree.cli.main.write_output", side_effect=BrokenPipeError()),
        patch("readme_tree.cli.main.silence_stdout") as mock_silence,
    ):
        with pytest.raises(SystemExit) as excinfo:
            run_main([sample_project])
    assert excinfo.value.code == 141
    mock_silence.assert_called_once()


def test_main_keyboard_interrupt(sample_project):
    with patch("readme_tree.cli.main.build_tree", side_effect=KeyboardInterrupt()):
        with pytest.raises(SystemExit) as excinfo:
            run_main([sample_project])
    assert excinfo.value.code == 130
