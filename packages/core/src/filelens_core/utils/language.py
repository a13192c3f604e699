import os
from typing import Any, Literal

SupportedLanguage = Literal[
    "JavaScript",
    "TypeScript",
    "React JSX",
    "React TSX",
    "Python",
    "Go",
    "Rust",
    "Java",
    "Unknown",
]

LANGUAGES: dict[str, SupportedLanguage] = {
    ".js": "JavaScript",
    ".ts": "TypeScript",
    ".jsx": "React JSX",
    ".tsx": "React TSX",
    ".py": "Python",
    ".go": "Go",
    ".rs": "Rust",
    ".java": "Java",
}


def detect_language(extension: str) -> SupportedLanguage:
    return LANGUAGES.get(extension.lower(), "Unknown")


def get_file_extension(filename: Any) -> str:
    """Return the extension of the final path segment, dot included, or ''."""
    if not isinstance(filename, str) or not filename.strip():
        return ""
    return os.path.splitext(os.path.basename(filename.strip()))[1]


def get_language_from_filename(filename: Any) -> SupportedLanguage:
    # Non-string and blank input is treated as "no extension", never as a fault.
    extension = get_file_extension(filename)
    if not extension:
        return "Unknown"
    return detect_language(extension)
