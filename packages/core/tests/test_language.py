"""Tests for extension-based language detection."""

import pytest

from filelens_core.utils.language import detect_language, get_file_extension, get_language_from_filename


class TestDetectLanguage:
    @pytest.mark.parametrize(
        "extension, language",
        [
            (".js", "JavaScript"),
            (".ts", "TypeScript"),
            (".jsx", "React JSX"),
            (".tsx", "React TSX"),
            (".py", "Python"),
            (".go", "Go"),
            (".rs", "Rust"),
            (".java", "Java"),
        ],
    )
    def test_mapped_extensions(self, extension, language):
        assert detect_language(extension) == language

    @pytest.mark.parametrize("extension", [".rb", ".c", ".md", ".pyc", "", "py"])
    def test_unmapped_extensions(self, extension):
        assert detect_language(extension) == "Unknown"

    def test_case_insensitive(self):
        assert detect_language(".PY") == "Python"


class TestGetFileExtension:
    def test_last_dot_of_final_segment(self):
        assert get_file_extension("src/app.test.ts") == ".ts"

    def test_dot_in_directory_ignored(self):
        assert get_file_extension("some.dir/Makefile") == ""

    def test_dotfile_has_no_extension(self):
        assert get_file_extension(".bashrc") == ""


class TestGetLanguageFromFilename:
    def test_full_path(self):
        assert get_language_from_filename("/tmp/x.ts") == "TypeScript"
        assert get_language_from_filename("src/components/Button.tsx") == "React TSX"

    def test_no_extension(self):
        assert get_language_from_filename("Dockerfile") == "Unknown"

    @pytest.mark.parametrize("value", ["", "   ", None, 123, ["a.py"]])
    def test_invalid_input_is_unknown(self, value):
        assert get_language_from_filename(value) == "Unknown"
