"""Ask Claude for a code-quality review of a changed file."""

import os
import sys
from typing import Optional, Protocol

import anthropic

from .environment import display_text
from .filetypes import get_file_type
from .models import DEFAULT_MAX_TOKENS, DEFAULT_MODEL

# Analysis prompt template
ANALYSIS_PROMPT = (
    "Analyze this {file_type} file change for code quality and suggest improvements:"
    "\n\nTool Output: {tool_output}\nFile: {file_path}"
)


class AnalysisError(RuntimeError):
    """Raised when an analysis request cannot produce a usable answer."""


class AnalysisClient(Protocol):
    """Submits a prompt and returns the text response, raising on failure."""

    def query(self, prompt: str) -> str:
        ...


class ClaudeClient:
    """AnalysisClient backed by the Anthropic Messages API.

    The underlying ``anthropic.Anthropic`` client is created on the first
    query and reused afterwards. It uses the SDK's default configuration,
    so the API key comes from ``ANTHROPIC_API_KEY`` unless one is passed.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        api_key: Optional[str] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self._api_key = api_key
        self._client = None

    def _get_client(self) -> "anthropic.Anthropic":
        if self._client is None:
            api_key = self._api_key or os.environ.get("ANTHROPIC_API_KEY")
            if not api_key:
                raise AnalysisError("ANTHROPIC_API_KEY environment variable not set")
            self._client = anthropic.Anthropic(api_key=api_key)
        return self._client

    def query(self, prompt: str) -> str:
        response = self._get_client().messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}]
        )

        parts = [
            block.text
            for block in (response.content or [])
            if getattr(block, "type", None) == "text"
        ]
        if not parts:
            raise AnalysisError("response did not contain any text")
        return "".join(parts)


def build_analysis_prompt(file_path: str, tool_output: str) -> str:
    """Build the review prompt for one file."""
    return ANALYSIS_PROMPT.format(
        file_type=get_file_type(file_path),
        tool_output=display_text(tool_output),
        file_path=display_text(file_path),
    )


def analyze_file(client: AnalysisClient, file_path: str, tool_output: str) -> Optional[str]:
    """Request and print a quality review for one file.

    Args:
        client: Shared client used for every file in the run.
        file_path: Path of the changed file.
        tool_output: Text describing the edit, passed through verbatim.

    Returns:
        The analysis text, or None if the request failed. Failures are
        reported on stderr and never raised.
    """
    prompt = build_analysis_prompt(file_path, tool_output)

    try:
        analysis = client.query(prompt)
    except Exception as e:
        print(f"Warning: Claude analysis failed: {e}", file=sys.stderr)
        return None

    print("Claude Analysis:")
    print(analysis)
    return analysis
