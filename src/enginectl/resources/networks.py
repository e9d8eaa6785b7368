"""Network operations: network ls, create, rm, inspect, connect, disconnect."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from enginectl.execution.runner import CommandRunner
from enginectl.resources.args import pair_args, require_targets
from enginectl.resources.types import Network


class NetworkAPI:
    """Networks and container attachment."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list(self) -> list[Network]:
        return [Network.from_document(doc) for doc in self._runner.run_json(["network", "ls", "--format", "json"])]

    def create(
        self,
        name: str,
        *,
        driver: str | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> str:
        """Create a network and return the id the engine prints."""
        args = ["network", "create"]
        if driver:
            args.extend(["--driver", driver])
        args.extend(pair_args("--label", labels))
        args.append(name)
        return self._runner.run_trimmed(args)

    def remove(self, *names: str) -> None:
        require_targets("network rm", names)
        self._runner.execute(["network", "rm", *names])

    def inspect(self, name: str) -> Network:
        return Network.from_document(self._runner.run_json_first(["network", "inspect", "--format", "json", name]))

    def connect(self, network: str, container: str, *, aliases: Sequence[str] = ()) -> None:
        args = ["network", "connect"]
        for alias in aliases:
            args.extend(["--alias", alias])
        self._runner.execute([*args, network, container])

    def disconnect(self, network: str, container: str, *, force: bool = False) -> None:
        args = ["network", "disconnect"]
        if force:
            args.append("--force")
        self._runner.execute([*args, network, container])
