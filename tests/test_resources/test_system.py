"""Tests for system queries."""

import json

import pytest

from enginectl.errors import OutputParseError


class TestSystem:
    def test_info(self, client, engine):
        engine.reply(
            stdout=json.dumps(
                {
                    "ID": "f00d",
                    "Name": "buildhost",
                    "ServerVersion": "27.1.1",
                    "OperatingSystem": "Debian GNU/Linux 12 (bookworm)",
                    "Containers": 4,
                    "Images": 12,
                    "NCPU": 8,
                    "MemTotal": 16777216000,
                    "Driver": "overlay2",
                }
            )
        )
        info = client.system.info()

        assert engine.last_args == ["system", "info", "--format", "json"]
        assert info.server_version == "27.1.1"
        assert info.ncpu == 8
        assert info.containers == 4
        assert info.model_extra["Driver"] == "overlay2"

    def test_podman_info_keeps_unknown_shape(self, client, engine):
        engine.reply(stdout=json.dumps({"host": {"arch": "amd64"}, "version": {"Version": "5.2.0"}}))
        info = client.system.info()
        assert info.server_version is None
        assert info.model_extra["version"]["Version"] == "5.2.0"

    def test_info_rejects_non_json(self, client, engine):
        engine.reply(stdout="Client: Docker Engine\n")
        with pytest.raises(OutputParseError):
            client.system.info()

    def test_buildx_version(self, client, engine):
        engine.reply(stdout="github.com/docker/buildx v0.16.2 2e6ba3c\n")
        assert client.system.buildx_version() == "github.com/docker/buildx v0.16.2 2e6ba3c"
        assert engine.last_args == ["buildx", "version"]

    def test_is_available(self, client, engine):
        assert client.system.is_available() is True
        assert engine.last_args == ["version"]

    def test_is_not_available(self, client, engine):
        engine.reply(stderr="Cannot connect to the Docker daemon\n", exit_code=1)
        assert client.system.is_available() is False
