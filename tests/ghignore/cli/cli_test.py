"""Tests for the ghignore command line interface."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from ghignore import __version__
from ghignore.cli import cli
from ghignore.ghremote import Blob

_ENV = {"GH_TOKEN": "", "PAGER": "", "NO_COLOR": "1"}


@pytest.fixture
def client_cls(fake_client):
    """Patch the GitHubClient used by the driver with fake_client."""
    with patch("ghignore.driver.GitHubClient") as cls:
        cls.return_value = fake_client
        yield cls


class TestCliVersionFlag:
    """-version prints the program name and version."""

    @pytest.mark.parametrize("flag", ["-version", "--version"])
    def test_prints_version(self, flag: str, client_cls: MagicMock):
        runner = CliRunner()
        result = runner.invoke(cli, [flag], env=_ENV)
        assert result.exit_code == 0
        assert f"version {__version__}" in result.output
        client_cls.assert_not_called()


class TestCliUsage:
    """Missing language is a usage error."""

    def test_missing_language(self, client_cls: MagicMock, caplog: pytest.LogCaptureFixture):
        runner = CliRunner()
        result = runner.invoke(cli, [], env=_ENV)
        assert result.exit_code == 1
        assert "Usage:" in result.output
        assert "please specify a language" in caplog.text
        client_cls.assert_not_called()

    def test_empty_language(self, client_cls: MagicMock):
        runner = CliRunner()
        result = runner.invoke(cli, [""], env=_ENV)
        assert result.exit_code == 1
        client_cls.assert_not_called()

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["-h"], env=_ENV)
        assert result.exit_code == 0
        assert "-filename" in result.output
        assert "-directory" in result.output
        assert "-list" in result.output


class TestCliDownload:
    """Downloading a template."""

    def test_writes_file(self, client_cls: MagicMock, fake_client, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["Go", "-directory", str(tmp_path)], env=_ENV)

        assert result.exit_code == 0, result.output
        target = tmp_path / ".gitignore"
        assert target.read_bytes() == b"*.log\n"
        assert f"file successfully written to {target}" in result.output
        fake_client.get_blob.assert_called_once_with("github", "gitignore", "sha-go")

    def test_double_dash_flags(self, client_cls: MagicMock, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["go", "--directory", str(tmp_path), "--filename", "go.ignore"],
            env=_ENV,
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "go.ignore").read_bytes() == b"*.log\n"

    def test_token_flag(self, client_cls: MagicMock, tmp_path: Path):
        runner = CliRunner()
        runner.invoke(cli, ["go", "-directory", str(tmp_path), "-token", "tok"], env=_ENV)
        assert client_cls.call_args.kwargs["token"] == "tok"

    def test_token_from_env(self, client_cls: MagicMock, tmp_path: Path):
        runner = CliRunner()
        runner.invoke(
            cli, ["go", "-directory", str(tmp_path)], env={**_ENV, "GH_TOKEN": "env-tok"}
        )
        assert client_cls.call_args.kwargs["token"] == "env-tok"

    def test_unknown_language(
        self,
        client_cls: MagicMock,
        fake_client,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ):
        runner = CliRunner()
        result = runner.invoke(cli, ["nosuchlang", "-directory", str(tmp_path)], env=_ENV)

        assert result.exit_code == 1
        assert "language 'nosuchlang' not found" in caplog.text
        fake_client.get_blob.assert_not_called()

    def test_unsupported_encoding(
        self,
        client_cls: MagicMock,
        fake_client,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ):
        fake_client.get_blob.return_value = Blob(sha="sha-go", encoding="none", content="")
        runner = CliRunner()
        result = runner.invoke(cli, ["go", "-directory", str(tmp_path)], env=_ENV)

        assert result.exit_code == 1
        assert "encoding 'none' is not supported" in caplog.text

    def test_write_failure(self, client_cls: MagicMock, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["go", "-directory", str(tmp_path / "missing")], env=_ENV)
        assert result.exit_code == 1


class TestCliList:
    """Listing the available languages."""

    def test_lists_languages(self, client_cls: MagicMock, fake_client):
        runner = CliRunner()
        result = runner.invoke(cli, ["-list"], env=_ENV)

        assert result.exit_code == 0, result.output
        assert "Available languages:" in result.output
        assert result.output.count("\ngo\n") == 1
        assert result.output.count("\npython\n") == 1
        fake_client.get_blob.assert_not_called()

    def test_list_ignores_language(self, client_cls: MagicMock, fake_client):
        runner = CliRunner()
        result = runner.invoke(cli, ["go", "--list"], env=_ENV)

        assert result.exit_code == 0
        fake_client.get_blob.assert_not_called()
