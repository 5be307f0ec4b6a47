"""Integration tests for the CLI against a mocked directory API."""

import json
import logging
import os
from pathlib import Path

import httpx
import pytest
import yaml
from typer.testing import CliRunner

from podcastdir.catalog.http import HttpxClient
from podcastdir.cli import app
from podcastdir.config.manager import ConfigManager

# Disable Rich formatting in tests for consistent output across environments
os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"

runner = CliRunner()


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch, requests_seen, top_podcasts_payload, lookup_payload):
    """Point the CLI at a temp config/cache and a fake iTunes API."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(
        yaml.safe_dump({"cache": {"backend": "file", "directory": str(tmp_path / "cache")}})
    )
    monkeypatch.setattr(
        "podcastdir.cli.ConfigManager", lambda: ConfigManager(config_dir=config_dir)
    )

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        if request.url.path.endswith("/json"):
            return httpx.Response(200, json=top_podcasts_payload)
        if request.url.params.get("id") == "123456":
            return httpx.Response(200, json=lookup_payload)
        if request.url.params.get("id") == "500":
            return httpx.Response(500)
        return httpx.Response(200, json={"resultCount": 0, "results": []})

    monkeypatch.setattr(
        "podcastdir.container.HttpxClient",
        lambda timeout: HttpxClient(
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
        ),
    )
    return tmp_path


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "podcastdir" in result.stdout


class TestTop:
    """Tests for `podcastdir top`."""

    def test_table(self, cli_env) -> None:
        result = runner.invoke(app, ["top"])

        assert result.exit_code == 0
        assert "The Joe Budden Podcast" in result.stdout
        assert "Broken Record" in result.stdout
        assert "Total: 2 podcast(s)" in result.stdout

    def test_search(self, cli_env) -> None:
        result = runner.invoke(app, ["top", "--search", "PUSHKIN", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [p["title"] for p in data] == ["Broken Record"]

    def test_search_without_match(self, cli_env) -> None:
        result = runner.invoke(app, ["top", "--search", "nomatch"])

        assert result.exit_code == 0
        assert "No podcasts match" in result.stdout

    def test_second_run_uses_cache(self, cli_env, requests_seen) -> None:
        runner.invoke(app, ["top"])
        runner.invoke(app, ["top"])

        assert len(requests_seen) == 1


class TestPodcast:
    """Tests for `podcastdir podcast`."""

    def test_json(self, cli_env) -> None:
        result = runner.invoke(app, ["podcast", "123456", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["title"] == "Test Podcast"
        assert data["episode_count"] == 2
        assert data["episodes"][0]["duration"] == "1:00:00"
        assert data["episodes"][0]["published_at"] == "15/01/2024"

    def test_table(self, cli_env) -> None:
        result = runner.invoke(app, ["podcast", "123456"])

        assert result.exit_code == 0
        assert "Episodes: 2" in result.stdout
        assert "Episode 2" in result.stdout

    def test_not_found(self, cli_env) -> None:
        result = runner.invoke(app, ["podcast", "999"])

        assert result.exit_code == 1
        assert "Not found" in result.stdout
        assert "999" in result.stdout

    def test_invalid_id(self, cli_env) -> None:
        result = runner.invoke(app, ["podcast", "abc"])

        assert result.exit_code == 1
        assert "must be numeric" in result.stdout

    def test_http_error(self, cli_env) -> None:
        result = runner.invoke(app, ["podcast", "500"])

        assert result.exit_code == 1
        assert "status: 500" in result.stdout


class TestEpisode:
    """Tests for `podcastdir episode`."""

    def test_shows_audio_url(self, cli_env) -> None:
        result = runner.invoke(app, ["episode", "123456", "789"])

        assert result.exit_code == 0
        assert "Episode 1" in result.stdout
        assert "https://example.com/ep1.mp3" in result.stdout

    def test_episode_not_found(self, cli_env) -> None:
        result = runner.invoke(app, ["episode", "123456", "1"])

        assert result.exit_code == 1
        assert "Not found" in result.stdout


class TestCache:
    """Tests for `podcastdir cache`."""

    def test_stats_and_clear(self, cli_env) -> None:
        runner.invoke(app, ["top"])

        stats = runner.invoke(app, ["cache", "stats", "--json"])
        assert stats.exit_code == 0
        assert json.loads(stats.stdout)["total"] == 1

        cleared = runner.invoke(app, ["cache", "clear"])
        assert cleared.exit_code == 0
        assert "Cleared 1 cache entry" in cleared.stdout


class TestConfig:
    def test_show(self, cli_env) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert '"ttl_hours": 24' in result.stdout


class TestLogLevel:
    """The configured log level reaches the root logger."""

    def _set_log_level(self, cli_env: Path, level: str) -> None:
        config_file = cli_env / "config" / "config.yaml"
        data = yaml.safe_load(config_file.read_text())
        data["log_level"] = level
        config_file.write_text(yaml.safe_dump(data))

    def test_config_log_level_is_applied(self, cli_env) -> None:
        self._set_log_level(cli_env, "DEBUG")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_default_is_warning(self, cli_env) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_overrides_config(self, cli_env) -> None:
        self._set_log_level(cli_env, "ERROR")

        result = runner.invoke(app, ["--verbose", "config", "show"])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG
