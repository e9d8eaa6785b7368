"""Volume operations: volume ls, create, rm, inspect."""

from __future__ import annotations

from collections.abc import Mapping

from enginectl.execution.runner import CommandRunner
from enginectl.resources.args import pair_args, require_targets
from enginectl.resources.types import Volume


class VolumeAPI:
    """Named volumes: list, create, remove and inspect."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list(self) -> list[Volume]:
        return [Volume.from_document(doc) for doc in self._runner.run_json(["volume", "ls", "--format", "json"])]

    def create(
        self,
        name: str | None = None,
        *,
        driver: str | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> str:
        """Create a volume and return its name (generated when name is None)."""
        args = ["volume", "create"]
        if driver:
            args.extend(["--driver", driver])
        args.extend(pair_args("--label", labels))
        if name:
            args.append(name)
        return self._runner.run_trimmed(args)

    def remove(self, *names: str, force: bool = False) -> None:
        require_targets("volume rm", names)
        args = ["volume", "rm"]
        if force:
            args.append("--force")
        self._runner.execute([*args, *names])

    def inspect(self, name: str) -> Volume:
        return Volume.from_document(self._runner.run_json_first(["volume", "inspect", "--format", "json", name]))
