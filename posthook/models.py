"""Data models for the post-tool-use hook."""

from dataclasses import dataclass, field

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 1024


@dataclass(frozen=True)
class HookConfig:
    """Snapshot of the hook environment, read once at startup."""
    file_paths: tuple = field(default_factory=tuple)
    tool_output: str = ""
    project_dir: str = ""

    def __post_init__(self):
        object.__setattr__(self, "file_paths", tuple(self.file_paths))


@dataclass
class CommandResult:
    """Outcome of one external command invocation."""
    args: list
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class HookOptions:
    """Knobs the CLI can tune for a single run."""
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    analyze: bool = True
    format: bool = True
