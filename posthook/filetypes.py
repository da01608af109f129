"""Classify files by extension."""

from pathlib import PurePath

RUST = "Rust"
WEB_SCRIPT = "JavaScript/TypeScript"
PYTHON = "Python"
JSON = "JSON"
TOML = "TOML"
MARKDOWN = "Markdown"
TEXT = "text"

# Extension (without the dot) -> file type. Matching is case-sensitive.
FILE_TYPES = {
    "rs": RUST,
    "js": WEB_SCRIPT,
    "ts": WEB_SCRIPT,
    "py": PYTHON,
    "json": JSON,
    "toml": TOML,
    "md": MARKDOWN,
}


def get_extension(file_path: str) -> str:
    """Return the final extension of a path without the leading dot.

    Dotfiles such as ``.bashrc`` and names like ``Makefile`` have no
    extension and yield an empty string.
    """
    return PurePath(file_path).suffix[1:]


def get_file_type(file_path: str) -> str:
    """Map a file path to its file type, defaulting to ``text``."""
    return FILE_TYPES.get(get_extension(file_path), TEXT)
