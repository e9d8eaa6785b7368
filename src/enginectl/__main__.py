"""Entry point: python -m enginectl"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from pydantic import BaseModel

from enginectl.client import Client
from enginectl.errors import EngineError, ExternalCommandError
from enginectl.infrastructure.config import EngineConfig
from enginectl.infrastructure.logger import install_exception_hooks, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="enginectl", description="Drive docker, podman or nerdctl")
    parser.add_argument("--binary", help="Engine executable (default: docker, or $ENGINECTL_BINARY)")
    parser.add_argument("--context", help="Engine context to use")
    parser.add_argument("--host", help="Engine daemon address")
    parser.add_argument("--log-level", help="Log level passed to the engine")
    parser.add_argument("--debug", action="store_true", help="Enable engine debug output and echo commands")

    sub = parser.add_subparsers(dest="command", required=True)

    ps = sub.add_parser("ps", help="List containers")
    ps.add_argument("-a", "--all", action="store_true", help="Include stopped containers")

    images = sub.add_parser("images", help="List images")
    images.add_argument("-a", "--all", action="store_true", help="Include intermediate images")

    sub.add_parser("volumes", help="List volumes")
    sub.add_parser("networks", help="List networks")
    sub.add_parser("info", help="Show engine system info")

    logs = sub.add_parser("logs", help="Print container logs")
    logs.add_argument("container")
    logs.add_argument("--tail", type=int)
    logs.add_argument("-t", "--timestamps", action="store_true")

    pull = sub.add_parser("pull", help="Pull an image")
    pull.add_argument("image")
    pull.add_argument("--platform")

    stop = sub.add_parser("stop", help="Stop containers")
    stop.add_argument("containers", nargs="+")
    stop.add_argument("--time", type=int)

    rm = sub.add_parser("rm", help="Remove containers")
    rm.add_argument("containers", nargs="+")
    rm.add_argument("-f", "--force", action="store_true")

    return parser


def config_from_args(args: argparse.Namespace) -> EngineConfig:
    """Command-line options override ENGINECTL_* environment settings."""
    base = EngineConfig.from_env()
    overrides: dict[str, Any] = {
        "binary": args.binary,
        "context": args.context,
        "host": args.host,
        "log_level": args.log_level,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    if args.debug:
        updates["debug"] = True
    return base.model_copy(update=updates)


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def dispatch(client: Client, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "ps":
        return client.containers.ps(all=args.all)
    if command == "images":
        return client.images.list(all=args.all)
    if command == "volumes":
        return client.volumes.list()
    if command == "networks":
        return client.networks.list()
    if command == "info":
        return client.system.info()
    if command == "logs":
        return client.containers.logs(args.container, tail=args.tail, timestamps=args.timestamps)
    if command == "pull":
        return client.images.pull(args.image, platform=args.platform)
    if command == "stop":
        client.containers.stop(*args.containers, time=args.time)
        return None
    if command == "rm":
        client.containers.remove(*args.containers, force=args.force)
        return None
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    client = Client(config_from_args(args))

    try:
        result = dispatch(client, args)
    except ExternalCommandError as err:
        sys.stderr.write(err.stderr)
        return err.exit_code
    except EngineError as err:
        logger.error("Engine output could not be handled", error=str(err))
        return 1

    if isinstance(result, str):
        sys.stdout.write(result)
    elif result is not None:
        print(json.dumps(_dump(result), indent=2))
    return 0


def run() -> None:
    install_exception_hooks()
    sys.exit(main())


if __name__ == "__main__":
    run()
