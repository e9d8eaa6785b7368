"""Object-oriented facade over the docker, podman and nerdctl command-line tools."""

from __future__ import annotations

from .client import Client
from .errors import EngineError, ExternalCommandError, OutputParseError
from .execution.output_parser import first_document, parse_json_documents
from .execution.runner import CommandResult, CommandRunner
from .infrastructure.config import EngineConfig
from .resources.types import (
    Container,
    ContainerDetails,
    Image,
    ImageDetails,
    Network,
    RunOptions,
    SystemInfo,
    Volume,
)

__all__ = [
    "Client",
    "CommandResult",
    "CommandRunner",
    "Container",
    "ContainerDetails",
    "EngineConfig",
    "EngineError",
    "ExternalCommandError",
    "Image",
    "ImageDetails",
    "Network",
    "OutputParseError",
    "RunOptions",
    "SystemInfo",
    "Volume",
    "first_document",
    "parse_json_documents",
]
