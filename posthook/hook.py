"""Drive cleanup and analysis over the files a tool just touched."""

import sys
from typing import Optional

from .analyzer import AnalysisClient, ClaudeClient, analyze_file
from .cleanup import CommandRunner, SubprocessRunner, apply_smart_cleanup
from .environment import display_text
from .models import HookConfig, HookOptions


def run_hook(
    config: HookConfig,
    runner: Optional[CommandRunner] = None,
    client: Optional[AnalysisClient] = None,
    options: Optional[HookOptions] = None,
) -> int:
    """Process every file in the config, in order.

    Each file is cleaned up first, then analyzed if tool output is
    available. Files are handled one at a time so their output never
    interleaves. Per-file failures are reported and do not stop the run.

    Args:
        config: Hook inputs read from the environment.
        runner: Runs external tools. Defaults to SubprocessRunner.
        client: Analysis client shared across files. Defaults to a
            ClaudeClient built from the options.
        options: Run options. Defaults to HookOptions().

    Returns:
        Exit code, always 0.
    """
    options = options or HookOptions()
    runner = runner or SubprocessRunner()

    print("Claude Code PostToolUse Hook")
    print(f"Project Directory: {display_text(config.project_dir)}")

    if not config.file_paths:
        print("Warning: No file paths provided", file=sys.stderr)
        return 0

    analyze = bool(config.tool_output) and options.analyze
    if analyze and client is None:
        client = ClaudeClient(model=options.model, max_tokens=options.max_tokens)

    for file_path in config.file_paths:
        print(f"\nProcessing: {display_text(file_path)}")

        apply_smart_cleanup(file_path, runner, format_code=options.format)

        if analyze:
            analyze_file(client, file_path, config.tool_output)

    print("\nEnhanced hook processed successfully")
    return 0
