"""Tests for the tagged error values and their formatting."""

import dataclasses

import pytest

from filelens_core.errors import (
    AppError,
    create_ai_error,
    create_file_error,
    create_network_error,
    create_validation_error,
    format_error,
    log_error,
    log_success,
)


class TestConstructors:
    def test_each_constructor_sets_its_kind(self):
        assert create_file_error("x") == AppError(kind="FileError", message="x")
        assert create_validation_error("v") == AppError(kind="ValidationError", message="v")
        assert create_ai_error("a") == AppError(kind="AIError", message="a")
        assert create_network_error("n") == AppError(kind="NetworkError", message="n")

    def test_empty_message_kept(self):
        assert create_file_error("").message == ""

    def test_errors_are_immutable(self):
        error = create_file_error("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            error.message = "changed"


class TestFormatError:
    def test_file_error(self):
        assert format_error(create_file_error("File not found")) == "❌ File Error: File not found"

    def test_validation_error(self):
        assert format_error(create_validation_error("Invalid input")) == "❌ Validation Error: Invalid input"

    def test_ai_error(self):
        assert format_error(create_ai_error("quota")) == "❌ AI Analysis Error: quota"

    def test_network_error(self):
        assert format_error(create_network_error("timeout")) == "❌ Network Error: timeout"

    def test_unknown_kind(self):
        assert format_error(AppError(kind="Other", message="m")) == "❌ Unknown Error: m"  # type: ignore[arg-type]

    @pytest.mark.parametrize("message", ["", "plain", "tab\there", "line\nbreak", 'quotes "\''])
    def test_message_not_escaped(self, message):
        assert format_error(create_file_error(message)) == "❌ File Error: " + message


class TestLogging:
    def test_log_error_writes_stderr_and_returns_same_error(self, capsys):
        error = create_ai_error("model not found")
        assert log_error(error) is error
        captured = capsys.readouterr()
        assert "Error: AIError - model not found" in captured.err
        assert captured.out == ""

    def test_log_success_writes_stdout_and_returns_message(self, capsys):
        assert log_success("done") == "done"
        assert "✅ done" in capsys.readouterr().out

    def test_log_error_output_is_exact(self, capsys):
        log_error(create_file_error("a\tb\r\nc"))
        assert capsys.readouterr().err == "Error: FileError - a\tb\r\nc\n"

    def test_log_success_output_is_exact(self, capsys):
        log_success("col1\tcol2")
        assert capsys.readouterr().out == "✅ col1\tcol2\n"

    def test_log_error_keeps_brackets_verbatim(self, capsys):
        # Bracketed text is not treated as markup.
        log_error(create_file_error("[bold]x[/bold]"))
        assert "[bold]x[/bold]" in capsys.readouterr().err
