"""CommandRunner runs one engine subcommand and collects its output."""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import Any

from enginectl.errors import ExternalCommandError
from enginectl.execution.output_parser import first_document, parse_json_documents
from enginectl.infrastructure.config import EngineConfig
from enginectl.infrastructure.logger import echo_logger, logger

# Shell convention for "command not found"
MISSING_BINARY_EXIT_CODE = 127


@dataclass
class CommandResult:
    stdout: str
    stderr: str
    exit_code: int


class CommandRunner:
    """Spawns the configured engine binary and waits for it to exit."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def command(self, args: list[str]) -> list[str]:
        """Full argument vector: binary, global flags, then the subcommand."""
        return [self._config.binary, *self._config.global_flags(), *args]

    def execute(self, args: list[str]) -> CommandResult:
        """Run a subcommand, raising ExternalCommandError on non-zero exit."""
        argv = self.command(args)

        if self._config.debug:
            echo_logger.info("Running engine command", command=shlex.join(argv))
        else:
            logger.debug("Running engine command", command=shlex.join(argv))

        try:
            proc = subprocess.run(argv, capture_output=True, text=True)
        except OSError as err:
            logger.debug("Engine binary could not be started", binary=argv[0], error=str(err))
            raise ExternalCommandError(argv, MISSING_BINARY_EXIT_CODE, str(err)) from err

        result = CommandResult(stdout=proc.stdout or "", stderr=proc.stderr or "", exit_code=proc.returncode)
        if result.exit_code != 0:
            logger.debug("Engine command failed", command=args[0] if args else "", code=result.exit_code)
            raise ExternalCommandError(argv, result.exit_code, result.stderr)

        return result

    def run_text(self, args: list[str]) -> str:
        return self.execute(args).stdout

    def run_trimmed(self, args: list[str]) -> str:
        """Run and strip trailing whitespace (ids printed by create/run -d)."""
        return self.execute(args).stdout.rstrip()

    def run_json(self, args: list[str]) -> list[Any]:
        return parse_json_documents(self.execute(args).stdout)

    def run_json_first(self, args: list[str]) -> Any:
        return first_document(self.execute(args).stdout)
