"""Tests for the files CLI command."""

import json
import os

import pytest
from typer.testing import CliRunner

from logmanager.cli.main import app


runner = CliRunner()


def output_names(output: str) -> list[str]:
    return sorted(os.path.basename(line) for line in output.splitlines() if line.strip())


class TestFilesCommand:
    """Tests for 'logmanager files' command."""

    def test_lists_all_files_without_bounds(self, aged_files):
        result = runner.invoke(app, ["files", str(aged_files), "--date-type", "modified"])

        assert result.exit_code == 0
        assert output_names(result.stdout) == [
            "app_10d.log",
            "app_1d.log",
            "app_5d.log",
            "notes_30d.txt",
        ]

    def test_older_than(self, aged_files):
        result = runner.invoke(
            app, ["files", str(aged_files), "--date-type", "modified", "--older-than", "5"]
        )

        assert result.exit_code == 0
        assert output_names(result.stdout) == ["app_10d.log", "notes_30d.txt"]

    def test_window_and_pattern(self, aged_files):
        result = runner.invoke(
            app,
            [
                "files", str(aged_files),
                "-d", "modified",
                "--older-than", "1",
                "--younger-than", "30",
                "-p", "*.log",
            ],
        )

        assert result.exit_code == 0
        assert output_names(result.stdout) == ["app_10d.log", "app_5d.log"]

    def test_paths_are_rooted_at_search_directory(self, aged_files):
        result = runner.invoke(app, ["files", str(aged_files), "-p", "app_1d.log"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(aged_files / "app_1d.log")

    def test_created_is_default(self, aged_files):
        probe = os.stat(aged_files / "app_10d.log")
        if hasattr(probe, "st_birthtime") or os.name == "nt":
            pytest.skip("creation time cannot be backdated on this platform")

        result = runner.invoke(app, ["files", str(aged_files), "--older-than", "20"])

        assert result.exit_code == 0
        assert output_names(result.stdout) == ["notes_30d.txt"]

    def test_recurse(self, aged_files):
        nested = aged_files / "archive" / "old.log"
        nested.parent.mkdir()
        nested.write_text("x")
        pytest.set_file_date(nested, pytest.days_ago(100))

        flat = runner.invoke(app, ["files", str(aged_files), "-d", "modified", "--older-than", "50"])
        deep = runner.invoke(
            app, ["files", str(aged_files), "-d", "modified", "--older-than", "50", "--recurse"]
        )

        assert flat.exit_code == 0
        assert output_names(flat.stdout) == []
        assert output_names(deep.stdout) == ["old.log"]

    def test_json_format(self, aged_files):
        result = runner.invoke(
            app, ["files", str(aged_files), "-d", "modified", "--older-than", "20", "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 1
        assert data[0]["path"] == str(aged_files / "notes_30d.txt")
        assert data[0]["date"] == pytest.days_ago(30).isoformat()
        assert data[0]["type"] == "file"

    def test_table_format(self, aged_files):
        result = runner.invoke(
            app, ["files", str(aged_files), "-d", "modified", "--older-than", "7", "-f", "table"]
        )

        assert result.exit_code == 0
        assert "Files (2)" in result.stdout
        assert "notes_30d.txt" in result.stdout

    def test_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["files", str(tmp_path / "missing")])

        assert result.exit_code == 3
        assert "DirectoryNotFound" in result.output

    def test_missing_directory_wins_over_contradictory_window(self, tmp_path):
        result = runner.invoke(
            app, ["files", str(tmp_path / "nope"), "--older-than", "10", "--younger-than", "5"]
        )

        assert result.exit_code == 3
        assert "DirectoryNotFound" in result.output

    def test_contradictory_window(self, aged_files):
        result = runner.invoke(
            app, ["files", str(aged_files), "--older-than", "10", "--younger-than", "5"]
        )

        assert result.exit_code == 4
        assert "InvalidDateRange" in result.output

    def test_negative_offset_rejected(self, aged_files):
        result = runner.invoke(app, ["files", str(aged_files), "--older-than", "-1"])

        assert result.exit_code == 2

    def test_invalid_date_type_rejected(self, aged_files):
        result = runner.invoke(app, ["files", str(aged_files), "--date-type", "accessed"])

        assert result.exit_code == 2


class TestFilesCommandConfig:
    """Tests for config-driven defaults of the files command."""

    def test_config_format_and_date_type(self, aged_files, tmp_path):
        (tmp_path / "logmanager.yaml").write_text(
            "files:\n  date_type: modified\noutput:\n  format: json\n"
        )

        result = runner.invoke(app, ["files", str(aged_files), "--older-than", "20"])

        assert result.exit_code == 0
        assert [item["path"] for item in json.loads(result.stdout)] == [
            str(aged_files / "notes_30d.txt")
        ]

    def test_cli_overrides_config(self, aged_files, tmp_path):
        (tmp_path / "logmanager.yaml").write_text(
            "general:\n  pattern: '*.txt'\noutput:\n  format: json\n"
        )

        result = runner.invoke(
            app, ["files", str(aged_files), "-d", "modified", "-p", "*.log", "-f", "path"]
        )

        assert result.exit_code == 0
        assert output_names(result.stdout) == ["app_10d.log", "app_1d.log", "app_5d.log"]

    def test_config_recursive(self, aged_files, tmp_path):
        (aged_files / "sub").mkdir()
        (aged_files / "sub" / "inner.log").write_text("x")
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("general:\n  recursive: true\n")

        result = runner.invoke(
            app, ["files", str(aged_files), "-p", "inner.log", "--config", str(config_file)]
        )

        assert result.exit_code == 0
        assert output_names(result.stdout) == ["inner.log"]

    def test_hidden_files_included_when_configured(self, aged_files, tmp_path):
        (aged_files / ".hidden.log").write_text("x")
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("general:\n  ignore_hidden_files: false\n")

        shown = runner.invoke(app, ["files", str(aged_files), "-p", ".*", "-c", str(config_file)])
        hidden = runner.invoke(app, ["files", str(aged_files), "-p", ".*"])

        assert output_names(shown.stdout) == [".hidden.log"]
        assert output_names(hidden.stdout) == []

    def test_invalid_config_exits_with_config_code(self, aged_files, tmp_path):
        (tmp_path / "logmanager.yaml").write_text("output:\n  format: xml\n")

        result = runner.invoke(app, ["files", str(aged_files)])

        assert result.exit_code == 2
        assert "output.format" in result.output
