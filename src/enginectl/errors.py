"""Error types raised by enginectl."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for enginectl errors."""


class ExternalCommandError(EngineError):
    """The engine binary exited with a non-zero status.

    ``stderr`` holds the engine's standard error exactly as captured; it is the
    only thing that tells "not found" apart from "permission denied".
    """

    def __init__(self, command: list[str], exit_code: int, stderr: str) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        binary = command[0] if command else "engine"
        detail = stderr.strip() or "no error output"
        super().__init__(f"{binary} exited with code {exit_code}: {detail}")


class OutputParseError(EngineError):
    """The engine's standard output was not the JSON we asked for."""
