"""Best-effort cleanup of modified files using external tools."""

import platform
import subprocess
import sys
from typing import Optional, Protocol, Sequence

from .filetypes import JSON, RUST, get_file_type
from .models import CommandResult

# Strip trailing spaces and tabs from every line.
TRAILING_WHITESPACE_PATTERN = "s/[[:blank:]]*$//"

# File type -> (formatter name, command without the file path).
# "--" ends option parsing so paths starting with "-" stay file operands.
FORMATTERS = {
    RUST: ("rustfmt", ["rustfmt", "--"]),
}


class CommandRunner(Protocol):
    """Runs an external command and reports how it went.

    Implementations raise OSError when the executable cannot be launched.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        ...


class SubprocessRunner:
    """CommandRunner backed by subprocess.run.

    Output that is not valid UTF-8 is decoded with replacement characters.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        completed = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            errors="replace",
        )
        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


def sed_command(file_path: str, system: Optional[str] = None) -> list:
    """Build the in-place sed invocation for a file.

    BSD sed on macOS requires an explicit (empty) backup suffix after -i,
    GNU sed rejects it. "--" goes before the script: BSD getopt stops at
    the first operand, so it would read a later "--" as a file name.
    """
    system = system or platform.system()
    if system == "Darwin":
        return ["sed", "-i", "", "--", TRAILING_WHITESPACE_PATTERN, file_path]
    return ["sed", "-i", "--", TRAILING_WHITESPACE_PATTERN, file_path]


def _run_tool(runner: CommandRunner, name: str, args: list) -> bool:
    """Run a tool, reporting failures on stderr. Returns True on success."""
    try:
        result = runner.run(args)
    except OSError as e:
        print(f"Warning: Failed to run {name}: {e}", file=sys.stderr)
        return False

    if not result.ok:
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        print(f"Warning: {name} failed: {detail}", file=sys.stderr)
        return False

    return True


def strip_trailing_whitespace(file_path: str, runner: CommandRunner) -> bool:
    """Remove trailing whitespace from a file in place."""
    if _run_tool(runner, "sed", sed_command(file_path)):
        print("Removed trailing whitespace")
        return True
    return False


def apply_formatter(file_path: str, file_type: str, runner: CommandRunner) -> bool:
    """Run the formatter registered for a file type, if any.

    Returns:
        True if a formatter ran successfully, False otherwise.
    """
    if file_type not in FORMATTERS:
        return False

    name, command = FORMATTERS[file_type]
    if _run_tool(runner, name, command + [file_path]):
        print(f"Applied {name} formatting")
        return True
    return False


def apply_smart_cleanup(file_path: str, runner: CommandRunner, format_code: bool = True) -> str:
    """Clean up one file based on its type.

    Whitespace stripping always runs. Formatting follows the file type;
    JSON files only get a notice. No step raises on tool failure.

    Returns:
        The detected file type.
    """
    strip_trailing_whitespace(file_path, runner)

    file_type = get_file_type(file_path)
    if file_type in FORMATTERS:
        if format_code:
            apply_formatter(file_path, file_type, runner)
    elif file_type == JSON:
        print("JSON file detected")

    return file_type
