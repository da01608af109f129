"""Command-line interface for posthook."""

import argparse
import os
import sys

from .environment import FILE_PATHS_VAR, PROJECT_DIR_VAR, TOOL_OUTPUT_VAR, read_environment
from .filetypes import FILE_TYPES, TEXT
from .hook import run_hook
from .models import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, HookOptions

MODEL_VAR = "POSTHOOK_MODEL"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="posthook",
        description="Claude Code PostToolUse hook: clean up, format and review changed files",
        epilog=f"""
Environment:
  {FILE_PATHS_VAR}     Whitespace-separated files to process
  {TOOL_OUTPUT_VAR}    Output of the tool that changed them (enables analysis)
  {PROJECT_DIR_VAR}    Project root (default: current directory)
  ANTHROPIC_API_KEY     Required for analysis
  {MODEL_VAR}        Default for --model

Hook configuration (.claude/settings.json):
  "PostToolUse": [{{"matcher": "Edit|Write",
                   "hooks": [{{"type": "command", "command": "posthook"}}]}}]
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--model",
        default=os.environ.get(MODEL_VAR) or DEFAULT_MODEL,
        help="Claude model for analysis"
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=DEFAULT_MAX_TOKENS,
        metavar="N",
        help=f"Maximum tokens in the analysis response (default: {DEFAULT_MAX_TOKENS})"
    )
    parser.add_argument(
        "--no-analysis",
        action="store_true",
        help="Skip the Claude analysis step"
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip language formatters (whitespace cleanup still runs)"
    )
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="Show recognized file extensions and exit"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    if args.list_types:
        return cmd_list_types()

    try:
        config = read_environment()
    except OSError as e:
        print(f"Error: cannot resolve project directory: {e}", file=sys.stderr)
        return 1

    options = HookOptions(
        model=args.model,
        max_tokens=args.max_tokens,
        analyze=not args.no_analysis,
        format=not args.no_format,
    )
    return run_hook(config, options=options)


def cmd_list_types() -> int:
    """Print the extension to file type table."""
    print("Extensions:\n")
    for ext, file_type in FILE_TYPES.items():
        print(f"  .{ext:<6} {file_type}")
    print(f"  (other) {TEXT}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
