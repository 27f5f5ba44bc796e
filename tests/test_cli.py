"""Tests for the command-line entry point."""

import zipfile

import pytest

from factorio_modhelper import __version__
from factorio_modhelper.localization import get_language, set_language
from factorio_modhelper.main import main
from factorio_modhelper.utils.platform import MODS_DIR_ENV


@pytest.fixture
def repo(tmp_path, monkeypatch):
    path = tmp_path / "repo"
    path.mkdir()
    monkeypatch.chdir(path)
    monkeypatch.setenv(MODS_DIR_ENV, str(tmp_path / "mods"))
    yield path
    set_language("en")


class TestInstallCommand:
    """`install` subcommand exit codes and outputs."""

    def test_success(self, repo, tmp_path, make_mod):
        make_mod(repo)
        assert main(["install"]) == 0
        assert (repo / "build" / "foo_1.0.0.zip").is_file()
        assert (tmp_path / "mods" / "foo_1.0.0.zip").is_file()

    def test_options(self, repo, tmp_path, make_mod):
        make_mod(repo / "sub", name="sub", version="3.0.0")
        (tmp_path / "thumb.png").write_bytes(b"thumb")

        code = main([
            "install",
            "sub",
            "--out-dir", "dist",
            "--default-thumbnail", str(tmp_path / "thumb.png"),
            "--verbose",
        ])

        assert code == 0
        with zipfile.ZipFile(repo / "dist" / "sub_3.0.0.zip") as zf:
            assert zf.read("sub_3.0.0/thumbnail.png") == b"thumb"

    def test_no_mods_exit_code(self, repo):
        assert main(["install"]) == 1

    def test_not_a_mod_exit_code(self, repo):
        (repo / "empty").mkdir()
        assert main(["install", "empty"]) == 1

    def test_parse_error_exit_code(self, repo):
        (repo / "info.json").write_text("not json")
        assert main(["install"]) == 1

    def test_mods_dir_from_env_file(self, repo, tmp_path, monkeypatch, make_mod):
        make_mod(repo)
        monkeypatch.setenv(MODS_DIR_ENV, "")
        monkeypatch.delenv(MODS_DIR_ENV)
        (repo / ".env").write_text(f"{MODS_DIR_ENV}={tmp_path / 'env_mods'}\n")

        assert main(["install"]) == 0
        assert (tmp_path / "env_mods" / "foo_1.0.0.zip").is_file()

    def test_language_option(self, repo, make_mod):
        make_mod(repo)
        assert main(["--lang", "ko", "install"]) == 0
        assert get_language() == "ko"


class TestParser:
    """Argument parsing."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_subcommand_required(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2
