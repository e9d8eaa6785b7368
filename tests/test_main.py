"""Tests for the enginectl command-line front end."""

import json

import pytest

from enginectl.__main__ import build_parser, config_from_args, main


@pytest.fixture(autouse=True)
def _no_engine_env(monkeypatch, tmp_path):
    for key in ["ENGINECTL_BINARY", "ENGINECTL_CONTEXT", "ENGINECTL_HOST", "ENGINECTL_LOG_LEVEL", "ENGINECTL_DEBUG"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfigFromArgs:
    def test_options_override_environment(self, monkeypatch):
        monkeypatch.setenv("ENGINECTL_BINARY", "podman")
        monkeypatch.setenv("ENGINECTL_CONTEXT", "from-env")
        args = build_parser().parse_args(["--context", "cli", "--debug", "ps"])

        config = config_from_args(args)
        assert config.binary == "podman"
        assert config.context == "cli"
        assert config.debug is True

    def test_defaults(self):
        config = config_from_args(build_parser().parse_args(["info"]))
        assert config.binary == "docker"
        assert config.debug is False


class TestMain:
    def test_ps_prints_json(self, engine, capsys):
        engine.reply(stdout='{"ID":"abc","Names":"web","State":"running"}\n')

        assert main(["--binary", "podman", "ps", "-a"]) == 0

        assert engine.calls == [["podman", "ps", "--all", "--format", "json"]]
        printed = json.loads(capsys.readouterr().out)
        assert printed[0]["id"] == "abc"
        assert printed[0]["names"] == ["web"]

    def test_logs_written_verbatim(self, engine, capsys):
        engine.reply(stdout="line1\nline2\n")
        assert main(["logs", "--tail", "2", "web"]) == 0
        assert capsys.readouterr().out == "line1\nline2\n"
        assert engine.last_args == ["logs", "--tail", "2", "web"]

    def test_stop_prints_nothing(self, engine, capsys):
        assert main(["stop", "a", "b"]) == 0
        assert engine.last_args == ["stop", "a", "b"]
        assert capsys.readouterr().out == ""

    def test_engine_failure_exit_code_and_stderr(self, engine, capsys):
        engine.reply(stderr="Error: no such container ghost\n", exit_code=125)

        assert main(["rm", "-f", "ghost"]) == 125

        assert engine.last_args == ["rm", "--force", "ghost"]
        assert capsys.readouterr().err == "Error: no such container ghost\n"

    def test_global_flags_passed_through(self, engine):
        main(["--host", "ssh://box", "--log-level", "error", "volumes"])
        assert engine.calls[0] == ["docker", "--log-level", "error", "--host", "ssh://box", "volume", "ls", "--format", "json"]

    def test_unexpected_output_shape_exits_with_one(self, engine, capsys):
        engine.reply(stdout="null\n")

        assert main(["ps"]) == 1
        assert capsys.readouterr().out == ""
