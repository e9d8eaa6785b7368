"""Client: one engine configuration shared by every resource API."""

from __future__ import annotations

from enginectl.execution.runner import CommandRunner
from enginectl.infrastructure.config import EngineConfig
from enginectl.resources.containers import ContainerAPI
from enginectl.resources.images import ImageAPI
from enginectl.resources.networks import NetworkAPI
from enginectl.resources.system import SystemAPI
from enginectl.resources.volumes import VolumeAPI


class Client:
    """Entry point for driving a container engine binary.

    ``Client()`` talks to ``docker`` with no global flags. Pass an
    EngineConfig (or use ``Client.from_env()``) to pick podman or nerdctl,
    a context, a remote host, a log level or debug mode.
    """

    def __init__(self, config: EngineConfig | None = None, runner: CommandRunner | None = None) -> None:
        self._runner = runner or CommandRunner(config)
        self.containers = ContainerAPI(self._runner)
        self.images = ImageAPI(self._runner)
        self.volumes = VolumeAPI(self._runner)
        self.networks = NetworkAPI(self._runner)
        self.system = SystemAPI(self._runner)

    @classmethod
    def from_env(cls) -> Client:
        return cls(EngineConfig.from_env())

    @property
    def config(self) -> EngineConfig:
        return self._runner.config

    @property
    def runner(self) -> CommandRunner:
        return self._runner
