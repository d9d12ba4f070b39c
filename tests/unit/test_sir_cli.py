"""Unit tests for the sirc command line."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from sir import __version__
from sir.cli import main
from sir.cli._create_app import _create_app
from tests.unit.conftest import write_vault_file

pytestmark = pytest.mark.cli

runner = CliRunner()


@pytest.fixture
def app():
    return _create_app()


@pytest.fixture
def trip_vault(vault_dir):
    write_vault_file(vault_dir, "Trip.md", "![[Pasted image 1.png|Beach]]\n")
    write_vault_file(vault_dir, "Pasted image 1.png", b"one")
    write_vault_file(vault_dir, "stray.png", b"stray")
    return vault_dir


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"sirc {__version__}"


def test_no_command_shows_help(app):
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "config" in result.stdout


def test_invalid_display(app, sir_home):
    result = runner.invoke(app, ["--display", "xml", "config", "show"])
    assert result.exit_code == 1
    assert "--display must be" in result.stderr


class TestConfigCli:
    def test_show_json(self, app, sir_home):
        result = runner.invoke(app, ["--display", "json", "config", "show", "tracker"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["content"]["debounce_ms"] == 300

    def test_show_yaml(self, app, sir_home):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["content"]["sections"][0] == "vault"

    def test_show_unknown_section_fails(self, app, sir_home):
        result = runner.invoke(app, ["config", "show", "nope"])
        assert result.exit_code == 1


class TestLinkCli:
    def test_show(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["--display", "json", "link", "show", "Trip.md"])
        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["count"] == 1
        assert output["links"][0]["caption"] == "Beach"

    def test_caption(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["link", "caption", "Trip.md", "Pasted image 1.png", "--text", "Shore"])
        assert result.exit_code == 0
        assert (trip_vault / "Trip.md").read_text() == "![[Pasted image 1.png|Shore]]\n"

    def test_caption_without_text_or_remove(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["link", "caption", "Trip.md", "Pasted image 1.png"])
        assert result.exit_code == 1


class TestRenameCli:
    def test_preview(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["--display", "json", "rename", "preview", "--scope", "note", "--note", "Trip.md"])
        assert result.exit_code == 0
        assert [item["new_name"] for item in json.loads(result.stdout)["items"]] == ["Trip 1"]

    def test_run(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["rename", "run", "--mode", "replace"])
        assert result.exit_code == 0
        assert (trip_vault / "Trip 1.png").exists()

    def test_invalid_mode(self, app, sir_home):
        result = runner.invoke(app, ["rename", "preview", "--mode", "shuffle"])
        assert result.exit_code == 2
        assert "--mode must be one of" in result.stderr

    def test_image(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["rename", "image", "stray.png", "Kept"])
        assert result.exit_code == 0
        assert (trip_vault / "Kept.png").exists()


class TestOrphanCli:
    def test_scan(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["--display", "json", "orphan", "scan"])
        assert result.exit_code == 0
        assert [image["path"] for image in json.loads(result.stdout)["orphaned"]] == ["stray.png"]

    def test_clean_requires_one_action(self, app, sir_home):
        assert runner.invoke(app, ["orphan", "clean"]).exit_code == 2
        assert runner.invoke(app, ["orphan", "clean", "--delete", "--move-to", "x"]).exit_code == 2

    def test_clean_move(self, app, sir_home, trip_vault):
        result = runner.invoke(app, ["orphan", "clean", "--move-to", "Archive"])
        assert result.exit_code == 0
        assert (trip_vault / "Archive" / "stray.png").exists()


class TestPasteCli:
    def test_paste(self, app, sir_home, trip_vault, tmp_path):
        image = tmp_path / "shot.png"
        image.write_bytes(b"pixels")
        result = runner.invoke(app, ["--display", "json", "paste", "Trip.md", str(image), "--offset", "0"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["file_name"] == "Trip 1.png"
        assert (trip_vault / "Trip.md").read_text().startswith("![[Trip 1.png]]")

    def test_missing_arguments(self, app, sir_home):
        assert runner.invoke(app, ["paste"]).exit_code == 2
