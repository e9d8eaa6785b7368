"""Engine configuration and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_BINARY = "docker"

ENV_KEYS = [
    "ENGINECTL_BINARY",
    "ENGINECTL_CONTEXT",
    "ENGINECTL_HOST",
    "ENGINECTL_LOG_LEVEL",
    "ENGINECTL_DEBUG",
]


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ. Values read here are only turned into
    engine flags, never passed on to the spawned engine's environment.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


class EngineConfig(BaseModel):
    """Which engine binary to invoke and the global flags to pass it."""

    model_config = ConfigDict(frozen=True)

    binary: str = DEFAULT_BINARY
    context: str | None = None
    host: str | None = None  # e.g. unix:///run/user/1000/podman/podman.sock
    log_level: str | None = None
    debug: bool = False

    def global_flags(self) -> list[str]:
        """Flags prepended to every subcommand: debug, log level, host, context."""
        flags: list[str] = []
        if self.debug:
            flags.append("--debug")
        if self.log_level:
            flags.extend(["--log-level", self.log_level])
        if self.host:
            flags.extend(["--host", self.host])
        if self.context:
            flags.extend(["--context", self.context])
        return flags

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from ENGINECTL_* variables, falling back to .env."""
        env_config = read_env_file(ENV_KEYS)

        def lookup(key: str) -> str | None:
            return os.environ.get(key) or env_config.get(key)

        return cls(
            binary=lookup("ENGINECTL_BINARY") or DEFAULT_BINARY,
            context=lookup("ENGINECTL_CONTEXT"),
            host=lookup("ENGINECTL_HOST"),
            log_level=lookup("ENGINECTL_LOG_LEVEL"),
            debug=(lookup("ENGINECTL_DEBUG") or "").lower() in ("1", "true", "yes"),
        )
