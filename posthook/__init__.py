"""Posthook - Claude Code PostToolUse hook for changed files.

For every file a tool touched, posthook strips trailing whitespace,
runs a language formatter when one is known, and asks Claude for a
code-quality review of the change.

Hook usage:
    CLAUDE_FILE_PATHS="src/main.rs" CLAUDE_TOOL_OUTPUT="..." posthook

Library usage:
    from posthook import read_environment, run_hook

    config = read_environment()
    run_hook(config)  # Analysis requires ANTHROPIC_API_KEY
"""

__version__ = "0.1.0"

from .models import HookConfig, HookOptions, CommandResult
from .environment import read_environment, split_file_paths
from .filetypes import get_file_type
from .cleanup import (
    CommandRunner,
    SubprocessRunner,
    apply_smart_cleanup,
    strip_trailing_whitespace,
    apply_formatter,
)
from .analyzer import (
    AnalysisClient,
    AnalysisError,
    ClaudeClient,
    analyze_file,
    build_analysis_prompt,
)
from .hook import run_hook
from .cli import main

__all__ = [
    # Models
    "HookConfig",
    "HookOptions",
    "CommandResult",
    # Environment
    "read_environment",
    "split_file_paths",
    # File types
    "get_file_type",
    # Cleanup
    "CommandRunner",
    "SubprocessRunner",
    "apply_smart_cleanup",
    "strip_trailing_whitespace",
    "apply_formatter",
    # Analysis
    "AnalysisClient",
    "AnalysisError",
    "ClaudeClient",
    "analyze_file",
    "build_analysis_prompt",
    # Hook
    "run_hook",
    # CLI
    "main",
]
