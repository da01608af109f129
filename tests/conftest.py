"""Shared fakes for hook tests."""

import pytest

from posthook.models import CommandResult


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self, results=None, missing=()):
        # executable -> CommandResult returned for it
        self.results = results or {}
        self.missing = set(missing)
        self.calls = []

    def run(self, args):
        args = list(args)
        self.calls.append(args)
        if args[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        result = self.results.get(args[0])
        if result is None:
            return CommandResult(args=args, returncode=0)
        return CommandResult(args=args, returncode=result.returncode,
                             stdout=result.stdout, stderr=result.stderr)

    def executables(self):
        return [call[0] for call in self.calls]

    def targets(self, executable):
        return [call[-1] for call in self.calls if call[0] == executable]


class FakeClient:
    """Returns canned responses and records prompts."""

    def __init__(self, response="Looks fine.", errors=None):
        self.response = response
        # file path -> exception raised when the prompt mentions it
        self.errors = errors or {}
        self.prompts = []

    def query(self, prompt):
        self.prompts.append(prompt)
        for path, error in self.errors.items():
            if f"File: {path}" in prompt:
                raise error
        return self.response


@pytest.fixture()
def runner():
    return FakeRunner()


@pytest.fixture()
def client():
    return FakeClient()
