"""Container operations: run, ps, stop, rm, logs, exec, inspect."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from enginectl.execution.runner import CommandRunner
from enginectl.resources.args import pair_args, require_targets
from enginectl.resources.types import Container, ContainerDetails, RunOptions


class ContainerAPI:
    """Containers: run, list, stop, remove, logs, exec and inspect."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def run(
        self,
        image: str,
        command: Sequence[str] = (),
        *,
        detach: bool = False,
        remove: bool = False,
        name: str | None = None,
        env: Mapping[str, object] | None = None,
        ports: Sequence[str] = (),
        volumes: Sequence[str] = (),
        network: str | None = None,
        workdir: str | None = None,
        user: str | None = None,
        labels: Mapping[str, object] | None = None,
    ) -> str:
        """Start a container.

        Returns the container id when detached, otherwise whatever the
        container printed, with trailing whitespace trimmed either way.
        """
        options = RunOptions(
            image=image,
            command=list(command),
            detach=detach,
            remove=remove,
            name=name,
            env=dict(env or {}),
            ports=list(ports),
            volumes=list(volumes),
            network=network,
            workdir=workdir,
            user=user,
            labels=dict(labels or {}),
        )
        return self._runner.run_trimmed(options.to_args())

    def ps(self, all: bool = False) -> list[Container]:
        args = ["ps"]
        if all:
            args.append("--all")
        args.extend(["--format", "json"])
        return [Container.from_document(doc) for doc in self._runner.run_json(args)]

    def stop(self, *containers: str, time: int | None = None) -> None:
        require_targets("stop", containers)
        args = ["stop"]
        if time is not None:
            args.extend(["--time", str(time)])
        self._runner.execute([*args, *containers])

    def remove(self, *containers: str, force: bool = False, volumes: bool = False) -> None:
        require_targets("rm", containers)
        args = ["rm"]
        if force:
            args.append("--force")
        if volumes:
            args.append("--volumes")
        self._runner.execute([*args, *containers])

    def logs(self, container: str, *, tail: int | None = None, timestamps: bool = False) -> str:
        args = ["logs"]
        if tail is not None:
            args.extend(["--tail", str(tail)])
        if timestamps:
            args.append("--timestamps")
        args.append(container)
        return self._runner.run_text(args)

    def exec(
        self,
        container: str,
        command: Sequence[str],
        *,
        env: Mapping[str, object] | None = None,
        workdir: str | None = None,
        user: str | None = None,
    ) -> str:
        """Run a command inside a running container and return its output."""
        require_targets("exec", command)
        args = ["exec"]
        args.extend(pair_args("-e", env))
        if workdir:
            args.extend(["-w", workdir])
        if user:
            args.extend(["--user", user])
        args.append(container)
        args.extend(command)
        return self._runner.run_text(args)

    def inspect(self, container: str) -> ContainerDetails:
        doc = self._runner.run_json_first(["container", "inspect", "--format", "json", container])
        return ContainerDetails.from_document(doc)
