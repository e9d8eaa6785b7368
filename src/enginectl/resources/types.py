"""Resource types parsed from engine JSON output.

Only the fields enginectl itself relies on are declared. Everything else the
engine prints is kept as extra data (``model_extra``) and never rejected, so
docker, podman and nerdctl output all validate.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from enginectl.errors import OutputParseError
from enginectl.resources.args import pair_args


class EngineObject(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    def from_document(cls, document: Any) -> Self:
        """Validate one parsed JSON document, raising OutputParseError on a bad shape."""
        try:
            return cls.model_validate(document)
        except ValidationError as err:
            raise OutputParseError(
                f"Unexpected {cls.__name__} output from engine ({err.error_count()} validation errors)"
            ) from err


class Container(EngineObject):
    id: str = Field(validation_alias=AliasChoices("ID", "Id", "id"))
    names: list[str] = Field(default_factory=list, validation_alias=AliasChoices("Names", "names"))
    image: str | None = Field(default=None, validation_alias=AliasChoices("Image", "image"))
    command: Any = Field(default=None, validation_alias=AliasChoices("Command", "command"))
    state: str | None = Field(default=None, validation_alias=AliasChoices("State", "state"))
    status: str | None = Field(default=None, validation_alias=AliasChoices("Status", "status"))
    created: Any = Field(default=None, validation_alias=AliasChoices("CreatedAt", "Created", "created"))

    @field_validator("names", mode="before")
    @classmethod
    def _split_names(cls, value: Any) -> Any:
        # docker joins names with commas, podman sends a list
        if isinstance(value, str):
            return [name for name in value.split(",") if name]
        return value


class ContainerDetails(EngineObject):
    id: str = Field(validation_alias=AliasChoices("Id", "ID", "id"))
    name: str | None = Field(default=None, validation_alias=AliasChoices("Name", "name"))
    image: str | None = Field(default=None, validation_alias=AliasChoices("Image", "ImageName", "image"))
    state: dict[str, Any] = Field(default_factory=dict, validation_alias=AliasChoices("State", "state"))
    config: dict[str, Any] = Field(default_factory=dict, validation_alias=AliasChoices("Config", "config"))

    @field_validator("name", mode="before")
    @classmethod
    def _strip_slash(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lstrip("/")
        return value


class Image(EngineObject):
    id: str = Field(validation_alias=AliasChoices("ID", "Id", "id"))
    repository: str | None = Field(default=None, validation_alias=AliasChoices("Repository", "repository"))
    tag: str | None = Field(default=None, validation_alias=AliasChoices("Tag", "tag"))
    size: Any = Field(default=None, validation_alias=AliasChoices("Size", "size"))
    created: Any = Field(default=None, validation_alias=AliasChoices("CreatedAt", "Created", "created"))


class ImageDetails(EngineObject):
    id: str = Field(validation_alias=AliasChoices("Id", "ID", "id"))
    repo_tags: list[str] = Field(default_factory=list, validation_alias=AliasChoices("RepoTags", "repo_tags"))
    architecture: str | None = Field(default=None, validation_alias=AliasChoices("Architecture", "architecture"))
    os: str | None = Field(default=None, validation_alias=AliasChoices("Os", "os"))
    size: int | None = Field(default=None, validation_alias=AliasChoices("Size", "size"))

    @field_validator("repo_tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return [] if value is None else value


class Volume(EngineObject):
    name: str = Field(validation_alias=AliasChoices("Name", "name"))
    driver: str | None = Field(default=None, validation_alias=AliasChoices("Driver", "driver"))
    mountpoint: str | None = Field(default=None, validation_alias=AliasChoices("Mountpoint", "mountpoint"))
    scope: str | None = Field(default=None, validation_alias=AliasChoices("Scope", "scope"))
    labels: Any = Field(default=None, validation_alias=AliasChoices("Labels", "labels"))  # str from ls, dict from inspect


class Network(EngineObject):
    id: str | None = Field(default=None, validation_alias=AliasChoices("ID", "Id", "id"))
    name: str = Field(validation_alias=AliasChoices("Name", "name"))
    driver: str | None = Field(default=None, validation_alias=AliasChoices("Driver", "driver"))
    scope: str | None = Field(default=None, validation_alias=AliasChoices("Scope", "scope"))


class SystemInfo(EngineObject):
    id: str | None = Field(default=None, validation_alias=AliasChoices("ID", "id"))
    name: str | None = Field(default=None, validation_alias=AliasChoices("Name", "name"))
    server_version: str | None = Field(default=None, validation_alias=AliasChoices("ServerVersion", "server_version"))
    operating_system: str | None = Field(
        default=None, validation_alias=AliasChoices("OperatingSystem", "operating_system")
    )
    containers: int | None = Field(default=None, validation_alias=AliasChoices("Containers", "containers"))
    images: int | None = Field(default=None, validation_alias=AliasChoices("Images", "images"))
    ncpu: int | None = Field(default=None, validation_alias=AliasChoices("NCPU", "ncpu"))
    mem_total: int | None = Field(default=None, validation_alias=AliasChoices("MemTotal", "mem_total"))


class RunOptions(BaseModel):
    """Typed parameters of ``run``."""

    image: str
    command: list[str] = Field(default_factory=list)
    detach: bool = False
    remove: bool = False
    name: str | None = None
    env: dict[str, str] = Field(default_factory=dict)
    ports: list[str] = Field(default_factory=list)  # "8080:80", "127.0.0.1:5432:5432/tcp"
    volumes: list[str] = Field(default_factory=list)  # "/host:/ctr:ro", "named:/data"
    network: str | None = None
    workdir: str | None = None
    user: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)

    @field_validator("env", "labels", mode="before")
    @classmethod
    def _stringify_values(cls, value: Any) -> Any:
        # rendered as K=V text, so 8080 and "8080" mean the same
        if isinstance(value, dict):
            return {str(key): str(item) for key, item in value.items()}
        return value

    def to_args(self) -> list[str]:
        args = ["run"]
        if self.detach:
            args.append("--detach")
        if self.remove:
            args.append("--rm")
        if self.name:
            args.extend(["--name", self.name])
        args.extend(pair_args("-e", self.env))
        for port in self.ports:
            args.extend(["-p", port])
        for volume in self.volumes:
            args.extend(["-v", volume])
        if self.network:
            args.extend(["--network", self.network])
        if self.workdir:
            args.extend(["-w", self.workdir])
        if self.user:
            args.extend(["--user", self.user])
        args.extend(pair_args("-l", self.labels))
        args.append(self.image)
        args.extend(self.command)
        return args
