"""Read the hook inputs Claude Code passes through the environment."""

import os
from typing import Mapping, Optional

from .models import HookConfig

FILE_PATHS_VAR = "CLAUDE_FILE_PATHS"
TOOL_OUTPUT_VAR = "CLAUDE_TOOL_OUTPUT"
PROJECT_DIR_VAR = "CLAUDE_PROJECT_DIR"


def split_file_paths(raw: str) -> list:
    """Split a whitespace-separated path list, keeping input order."""
    return raw.split()


def read_environment(environ: Optional[Mapping[str, str]] = None) -> HookConfig:
    """Build a HookConfig from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        HookConfig with the file paths, tool output and project directory.

    Raises:
        OSError: The project directory is not set and the current working
            directory cannot be resolved.
    """
    if environ is None:
        environ = os.environ

    file_paths = environ.get(FILE_PATHS_VAR) or ""
    tool_output = environ.get(TOOL_OUTPUT_VAR) or ""
    project_dir = environ.get(PROJECT_DIR_VAR) or os.path.abspath(os.getcwd())

    return HookConfig(
        file_paths=tuple(split_file_paths(file_paths)),
        tool_output=tool_output,
        project_dir=project_dir,
    )


def display_text(value: str) -> str:
    """Render environment text for output, replacing undecodable bytes.

    Values read from the environment keep invalid bytes as lone surrogates,
    which cannot be written to a UTF-8 stream.
    """
    return os.fsencode(value).decode("utf-8", "replace")
