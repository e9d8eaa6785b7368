"""Engine-wide queries: system info, buildx version, availability probe."""

from __future__ import annotations

from enginectl.errors import ExternalCommandError
from enginectl.execution.output_parser import parse_json_object
from enginectl.execution.runner import CommandRunner
from enginectl.infrastructure.logger import logger
from enginectl.resources.types import SystemInfo


class SystemAPI:
    """Engine-wide information."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def info(self) -> SystemInfo:
        stdout = self._runner.run_text(["system", "info", "--format", "json"])
        return SystemInfo.from_document(parse_json_object(stdout))

    def buildx_version(self) -> str:
        return self._runner.run_trimmed(["buildx", "version"])

    def is_available(self) -> bool:
        """Check whether the engine binary runs and can reach its daemon."""
        try:
            self._runner.execute(["version"])
        except ExternalCommandError as err:
            logger.debug("Engine not available", binary=self._runner.config.binary, code=err.exit_code)
            return False
        return True
