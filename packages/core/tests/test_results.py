"""Tests for response builders and the console renderer."""

from datetime import datetime

from filelens_core.errors import create_file_error
from filelens_core.models import BatchReviewResult, ReviewError, ReviewResult
from filelens_core.results import SEPARATOR, create_error_result, create_review_result, format_review_output


def _result(**overrides):
    fields = dict(
        filename="src/x.py",
        language="Python",
        analysis="- **Issue Type:** none",
        timestamp="2024-01-01T00:00:00+00:00",
    )
    fields.update(overrides)
    return ReviewResult(**fields)


class TestBuilders:
    def test_review_result(self):
        result = create_review_result("a.go", "Go", "fine")
        assert result.success is True
        assert (result.filename, result.language, result.analysis) == ("a.go", "Go", "fine")
        assert datetime.fromisoformat(result.timestamp).tzinfo is not None

    def test_error_result_from_string(self):
        result = create_error_result("a.go", "File not found: a.go")
        assert result.success is False
        assert result.error == "File not found: a.go"
        datetime.fromisoformat(result.timestamp)

    def test_error_result_from_exception(self):
        assert create_error_result("a.go", OSError("disk gone")).error == "disk gone"

    def test_error_result_from_tagged_error(self):
        assert create_error_result("a.go", create_file_error("denied")).error == "denied"

    def test_error_result_keeps_empty_message(self):
        assert create_error_result("a.go", create_file_error("")).error == ""


class TestFormatReviewOutput:
    def test_failure(self):
        error = ReviewError(filename="a.rs", error="boom", timestamp="t")
        assert format_review_output(error) == "❌ Error reviewing a.rs:\nboom"

    def test_success_layout(self):
        expected = (
            "✅ Review complete: src/x.py\n"
            "📌 Code Review Results for src/x.py\n"
            "Language: Python\n"
            "Reviewed: 2024-01-01T00:00:00+00:00\n"
            "\n"
            f"{'=' * 60}\n"
            "- **Issue Type:** none\n"
            f"{'=' * 60}"
        )
        assert format_review_output(_result()) == expected

    def test_separator_width(self):
        assert SEPARATOR == "=" * 60

    def test_branches_on_success_flag(self):
        # An empty analysis is still a success, not an error.
        assert format_review_output(_result(analysis="")).startswith("✅ Review complete")


class TestBatchReviewResult:
    def test_defaults(self):
        batch = BatchReviewResult()
        assert batch.successful == [] and batch.failed == []
        assert batch.total == 0
        assert batch.success_rate == 0.0
