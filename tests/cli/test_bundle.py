"""
Unit Tests for Bundle Subcommand

Test suite for the 'bundle' subcommand of the code-bundler CLI.
Covers language filtering, annotations, sorting, empty-line removal,
response file replay and error handling.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from cli import main
from cli.bundle import bundle
from bundler.core.errors import BundleWriteError


def _bundle_text(project: Path, name: str) -> str:
    return (project / name).read_text(encoding="utf-8")


class TestBundleCommand:
    """Unit tests for the bundle command functionality."""

    def test_bundle_help_output(self, runner):
        result = runner.invoke(main, ["bundle", "--help"])

        assert result.exit_code == 0
        assert "Bundle code files to a single file" in result.output
        for option in ("--output", "--language", "--note", "--sort",
                       "--remove-empty-lines", "--author"):
            assert option in result.output

    def test_root_help_lists_subcommands(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "bundle" in result.output
        assert "create-rsp" in result.output

    def test_bundle_command_structure(self):
        assert bundle.name == "bundle"
        options = {param.name: param for param in bundle.params}
        assert options["output"].required is True
        assert "-o" in options["output"].opts
        assert "-l" in options["language"].opts
        assert options["note"].is_flag
        assert "-n" in options["note"].opts
        assert "-s" in options["sort"].opts
        assert options["remove_empty_lines"].is_flag
        assert "-r" in options["remove_empty_lines"].opts
        assert "-a" in options["author"].opts

    def test_missing_output_is_a_usage_error(self, runner, csharp_project):
        result = runner.invoke(main, ["bundle", "-l", "csharp"])

        assert result.exit_code == 2
        assert "Missing option" in result.output

    def test_bundles_csharp_files(self, runner, csharp_project):
        result = runner.invoke(main, ["bundle", "-o", "out.cs", "-l", "csharp"])

        assert result.exit_code == 0
        assert "Files bundled successfully" in result.output
        content = _bundle_text(csharp_project, "out.cs")
        assert f"// File: {csharp_project / 'a.cs'}\nint x=1;\n\nint y=2;\n" in content
        assert f"// File: {csharp_project / 'b.cs'}\n// hi\n" in content

    def test_remove_empty_lines(self, runner, csharp_project):
        result = runner.invoke(main, ["bundle", "-o", "out.cs", "-l", "csharp", "-r"])

        assert result.exit_code == 0
        content = _bundle_text(csharp_project, "out.cs")
        assert "int x=1;\nint y=2;\n" in content
        assert "int x=1;\n\n" not in content

    def test_existing_output_is_not_modified(self, runner, csharp_project):
        existing = csharp_project / "existing.txt"
        existing.write_text("original", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "existing.txt", "-l", "all"])

        assert result.exit_code == 0
        assert "Output file already exist" in result.output
        assert existing.read_text(encoding="utf-8") == "original"

    def test_no_matching_files(self, runner, csharp_project):
        result = runner.invoke(main, ["bundle", "-o", "out.sql", "-l", "sql"])

        assert result.exit_code == 0
        assert "No files to bundle" in result.output
        assert not (csharp_project / "out.sql").exists()

    def test_unmapped_language_is_used_as_extension(self, runner, project_dir):
        (project_dir / "app.ruby").write_text("puts 1\n", encoding="utf-8")
        (project_dir / "app.rb").write_text("puts 2\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.txt", "-l", "ruby"])

        assert result.exit_code == 0
        content = _bundle_text(project_dir, "out.txt")
        assert "app.ruby" in content
        assert "app.rb\n" not in content

    def test_invalid_output_directory(self, runner, csharp_project):
        result = runner.invoke(main, ["bundle", "-o", "nowhere/out.cs", "-l", "csharp"])

        assert result.exit_code == 0
        assert "file path invalid" in result.output

    def test_note_and_author(self, runner, csharp_project):
        result = runner.invoke(
            main, ["bundle", "-o", "out.cs", "-l", "csharp", "-n", "-a", "Ada Lovelace"]
        )

        assert result.exit_code == 0
        assert "Source code reference added to the bundle" in result.output
        lines = _bundle_text(csharp_project, "out.cs").split("\n")
        assert lines[0] == "// Source code reference: "
        assert lines[1].startswith("// File: ")
        assert lines[2] == ""
        assert lines[3] == "// Author: Ada Lovelace"
        assert lines[4] == ""

    def test_language_defaults_to_all(self, runner, csharp_project):
        (csharp_project / "notes.txt").write_text("note\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.txt"])

        assert result.exit_code == 0
        content = _bundle_text(csharp_project, "out.txt")
        assert "notes.txt" in content
        assert "a.cs" in content

    def test_sort_by_type_orders_written_files(self, runner, project_dir):
        (project_dir / "a.js").write_text("JS\n", encoding="utf-8")
        (project_dir / "b.cs").write_text("CS\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.txt", "-s", "type"])

        assert result.exit_code == 0
        content = _bundle_text(project_dir, "out.txt")
        assert content.index("CS") < content.index("JS")

    def test_sort_by_name_orders_written_files(self, runner, project_dir):
        (project_dir / "lib").mkdir()
        (project_dir / "lib" / "a.cs").write_text("FIRST\n", encoding="utf-8")
        (project_dir / "b.cs").write_text("SECOND\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.txt", "-l", "csharp", "-s", "name"])

        assert result.exit_code == 0
        content = _bundle_text(project_dir, "out.txt")
        assert content.index("FIRST") < content.index("SECOND")

    def test_build_directories_are_skipped(self, runner, project_dir):
        (project_dir / "bin" / "Debug").mkdir(parents=True)
        (project_dir / "bin" / "Debug" / "gen.cs").write_text("GENERATED\n", encoding="utf-8")
        (project_dir / "bindings.cs").write_text("BINDINGS\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.txt", "-l", "csharp"])

        assert result.exit_code == 0
        content = _bundle_text(project_dir, "out.txt")
        assert "BINDINGS" in content
        assert "GENERATED" not in content

    def test_write_failure_exits_with_error(self, runner, csharp_project):
        error = BundleWriteError("Failed to bundle b.cs: denied", output_path="out.cs")
        with patch("cli.bundle.BundleWriter.bundle", side_effect=error):
            result = runner.invoke(main, ["bundle", "-o", "out.cs", "-l", "csharp"])

        assert result.exit_code == 1
        assert "Cannot write bundle" in result.output

    def test_project_configuration_supplies_defaults(self, runner, csharp_project):
        config_dir = csharp_project / ".code-bundler"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("default_language: csharp\n", encoding="utf-8")
        (csharp_project / "notes.txt").write_text("note\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.cs"])

        assert result.exit_code == 0
        content = _bundle_text(csharp_project, "out.cs")
        assert "notes.txt" not in content
        assert "b.cs" in content

    def test_invalid_configuration_exits_with_code_3(self, runner, csharp_project, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("default_sort: size\n", encoding="utf-8")

        result = runner.invoke(main, ["bundle", "-o", "out.cs", "--config", str(bad)])

        assert result.exit_code == 3
        assert "Configuration Error" in result.output
        assert not (csharp_project / "out.cs").exists()


class TestResponseFileReplay:
    """Tests for replaying bundle options from @file arguments."""

    def test_bundle_from_response_file(self, runner, csharp_project):
        (csharp_project / "response.rsp").write_text(
            "--language csharp --output out.cs --note false --remove-empty-lines true",
            encoding="utf-8",
        )

        result = runner.invoke(main, ["bundle", "@response.rsp"])

        assert result.exit_code == 0
        content = _bundle_text(csharp_project, "out.cs")
        assert "// Source code reference" not in content
        assert "int x=1;\nint y=2;\n" in content

    def test_missing_response_file(self, runner, csharp_project):
        result = runner.invoke(main, ["bundle", "@missing.rsp"])

        assert result.exit_code == 2
        assert "Cannot read response file" in result.output
