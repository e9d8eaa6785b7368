"""Tests for network operations."""

import json

import pytest


class TestNetworks:
    def test_list_docker(self, client, engine):
        engine.reply(stdout='{"ID":"a1b2","Name":"bridge","Driver":"bridge","Scope":"local"}\n')
        networks = client.networks.list()

        assert engine.last_args == ["network", "ls", "--format", "json"]
        assert networks[0].id == "a1b2"
        assert networks[0].name == "bridge"

    def test_list_podman_lowercase_keys(self, client, engine):
        engine.reply(stdout=json.dumps([{"name": "podman", "id": "2f25", "driver": "bridge", "dns_enabled": False}]))
        network = client.networks.list()[0]
        assert network.name == "podman"
        assert network.id == "2f25"
        assert network.model_extra["dns_enabled"] is False

    def test_create_trims_identifier(self, client, engine):
        engine.reply(stdout="9e3d1c0b\n")
        assert client.networks.create("backend", driver="bridge", labels={"env": "dev"}) == "9e3d1c0b"
        assert engine.last_args == ["network", "create", "--driver", "bridge", "--label", "env=dev", "backend"]

    def test_remove(self, client, engine):
        client.networks.remove("backend", "frontend")
        assert engine.last_args == ["network", "rm", "backend", "frontend"]

    def test_remove_requires_target(self, client):
        with pytest.raises(ValueError):
            client.networks.remove()

    def test_inspect_first_element(self, client, engine):
        engine.reply(stdout=json.dumps([{"Id": "9e3d", "Name": "backend", "Driver": "bridge", "Containers": {}}]))
        network = client.networks.inspect("backend")
        assert engine.last_args == ["network", "inspect", "--format", "json", "backend"]
        assert network.id == "9e3d"
        assert network.driver == "bridge"

    def test_connect(self, client, engine):
        client.networks.connect("backend", "web", aliases=["api", "api-v2"])
        assert engine.last_args == ["network", "connect", "--alias", "api", "--alias", "api-v2", "backend", "web"]

    def test_disconnect(self, client, engine):
        client.networks.disconnect("backend", "web", force=True)
        assert engine.last_args == ["network", "disconnect", "--force", "backend", "web"]
