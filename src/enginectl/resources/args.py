"""Small helpers shared by the resource APIs for assembling arguments."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def require_targets(operation: str, targets: Sequence[str]) -> None:
    if not targets:
        raise ValueError(f"{operation} needs at least one target")


def pair_args(flag: str, pairs: Mapping[str, object] | None) -> list[str]:
    """Expand a mapping into repeated ``flag K=V`` tokens, in mapping order."""
    args: list[str] = []
    for key, value in (pairs or {}).items():
        args.extend([flag, f"{key}={value}"])
    return args
