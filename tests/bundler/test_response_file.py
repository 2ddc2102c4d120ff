"""Tests for response file building, reading and expansion."""

from pathlib import Path

import pytest

from bundler.response_file import (
    RESPONSE_FILE_NAME,
    ResponseFileAnswers,
    ResponseFileError,
    build_response_content,
    expand_response_files,
    is_boolean_answer,
    read_response_file,
    write_response_file,
)


class TestBooleanAnswers:

    @pytest.mark.parametrize("value", ["true", "false"])
    def test_accepted(self, value):
        assert is_boolean_answer(value)

    @pytest.mark.parametrize("value", ["True", "FALSE", "yes", "", " true", None])
    def test_rejected(self, value):
        assert not is_boolean_answer(value)


class TestBuildResponseContent:

    def test_all_fields(self):
        answers = ResponseFileAnswers(
            language="csharp", output="out.cs", note=True,
            sort="type", remove_empty_lines=False, author="Ada",
        )
        assert build_response_content(answers) == (
            "--language csharp --output out.cs --note true --sort type "
            "--remove-empty-lines false --author Ada"
        )

    def test_blank_fields_are_omitted(self):
        answers = ResponseFileAnswers(language="all", output="out.txt")
        assert build_response_content(answers) == (
            "--language all --output out.txt --note false --remove-empty-lines false"
        )

    def test_values_with_spaces_are_quoted(self):
        answers = ResponseFileAnswers(output="my bundle.txt", author="Ada Lovelace")
        content = build_response_content(answers)
        assert "--output 'my bundle.txt'" in content
        assert "--author 'Ada Lovelace'" in content


class TestWriteResponseFile:

    def test_writes_in_directory(self, tmp_path):
        path = write_response_file(ResponseFileAnswers(language="sql"), directory=tmp_path)
        assert path == tmp_path / RESPONSE_FILE_NAME
        assert path.read_text(encoding="utf-8").startswith("--language sql")

    def test_overwrites_existing_file(self, tmp_path):
        (tmp_path / RESPONSE_FILE_NAME).write_text("old content", encoding="utf-8")
        write_response_file(ResponseFileAnswers(language="css"), directory=tmp_path)
        assert "old content" not in (tmp_path / RESPONSE_FILE_NAME).read_text(encoding="utf-8")

    def test_defaults_to_current_directory(self, project_dir):
        path = write_response_file(ResponseFileAnswers(language="css"))
        assert path == Path.cwd() / RESPONSE_FILE_NAME


class TestReadResponseFile:

    def test_boolean_flags_become_switches(self, tmp_path):
        rsp = tmp_path / "a.rsp"
        rsp.write_text("--language cpp --note true --remove-empty-lines false -o out.cpp", encoding="utf-8")
        assert read_response_file(rsp) == ["--language", "cpp", "--note", "-o", "out.cpp"]

    def test_boolean_values_ignore_case(self, tmp_path):
        rsp = tmp_path / "a.rsp"
        rsp.write_text("--note True --remove-empty-lines TRUE", encoding="utf-8")
        assert read_response_file(rsp) == ["--note", "--remove-empty-lines"]

    def test_bare_flag_is_kept(self, tmp_path):
        rsp = tmp_path / "a.rsp"
        rsp.write_text("-n -l sql", encoding="utf-8")
        assert read_response_file(rsp) == ["-n", "-l", "sql"]

    def test_quoted_values(self, tmp_path):
        rsp = tmp_path / "a.rsp"
        rsp.write_text("--author 'Ada Lovelace'\n", encoding="utf-8")
        assert read_response_file(rsp) == ["--author", "Ada Lovelace"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResponseFileError) as exc_info:
            read_response_file(tmp_path / "nope.rsp")
        assert exc_info.value.path == str(tmp_path / "nope.rsp")

    def test_unbalanced_quotes(self, tmp_path):
        rsp = tmp_path / "a.rsp"
        rsp.write_text("--author 'Ada", encoding="utf-8")
        with pytest.raises(ResponseFileError):
            read_response_file(rsp)

    def test_round_trip_with_written_file(self, tmp_path):
        answers = ResponseFileAnswers(
            language="csharp", output="out dir/out.cs", note=False,
            sort="name", remove_empty_lines=True, author="Ada",
        )
        path = write_response_file(answers, directory=tmp_path)
        assert read_response_file(path) == [
            "--language", "csharp", "--output", "out dir/out.cs", "--sort", "name",
            "--remove-empty-lines", "--author", "Ada",
        ]


class TestExpandResponseFiles:

    def test_expands_at_arguments(self, tmp_path):
        rsp = tmp_path / "r.rsp"
        rsp.write_text("-l sql -o out.sql", encoding="utf-8")
        assert expand_response_files(["bundle", f"@{rsp}", "-n"]) == [
            "bundle", "-l", "sql", "-o", "out.sql", "-n",
        ]

    def test_leaves_other_arguments_alone(self):
        assert expand_response_files(["bundle", "-a", "me@example.com", "@"]) == [
            "bundle", "-a", "me@example.com", "@",
        ]
