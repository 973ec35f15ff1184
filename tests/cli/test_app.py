from __future__ import annotations

import os
from pathlib import Path

import pytest
from result import Ok

from dircollection.cli import app as cli_app
from dircollection.config.defaults import default_config
from dircollection.config.loader import load_config
from dircollection.services.fs import OsFileSystem


@pytest.fixture(autouse=True)
def _default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_app, "load_config", lambda path=None: Ok(default_config()))


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.txt").write_bytes(b"alpha")
    (tmp_path / "sub" / "inner.txt").write_bytes(b"inner bytes")
    return tmp_path


def test_sample_config_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(cli_app.typer.Exit) as exc_info:
        cli_app.run(sample_config=True)

    assert exc_info.value.exit_code == 0
    assert '"matchMode"' in capsys.readouterr().out


def test_listing_shows_entries(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli_app.run(path=str(tree))

    out = capsys.readouterr().out
    assert "a.txt" in out
    assert "sub/inner.txt" in out
    assert "2 dirs, 2 files" in out


def test_listing_non_recursive(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli_app.run(path=str(tree), recursive=False)

    out = capsys.readouterr().out
    assert "sub/inner.txt" not in out
    assert "2 dirs, 1 files" in out


def test_not_a_directory_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(cli_app.typer.Exit) as exc_info:
        cli_app.run(path=os.path.join(str(tmp_path), "missing"))

    assert exc_info.value.exit_code == 1
    assert "Not a directory" in capsys.readouterr().err


def test_cat_writes_bytes(tree: Path, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    cli_app.run(path=str(tree), cat="sub/inner.txt")

    assert capsysbinary.readouterr().out == b"inner bytes"


def test_cat_ignore_path(tree: Path, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    cli_app.run(path=str(tree), cat="inner.txt", ignore_path=True)

    assert capsysbinary.readouterr().out == b"inner bytes"


def test_cat_directory_exits(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(cli_app.typer.Exit) as exc_info:
        cli_app.run(path=str(tree), cat="sub")

    assert exc_info.value.exit_code == 1
    assert "No file entry named sub" in capsys.readouterr().err


def test_cat_unopenable_file_exits(
    tree: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    def refuse(self: OsFileSystem, path: str) -> None:
        raise PermissionError(f"Permission denied: '{path}'")

    monkeypatch.setattr(OsFileSystem, "open_binary", refuse)

    with pytest.raises(cli_app.typer.Exit) as exc_info:
        cli_app.run(path=str(tree), cat="a.txt")

    assert exc_info.value.exit_code == 1
    assert "Cannot open a.txt" in capsys.readouterr().err


def test_cat_file_removed_after_scan_exits(
    tree: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    original = cli_app.DirectoryCollection.open

    def remove_then_open(self: cli_app.DirectoryCollection, name: str, match: cli_app.MatchPath) -> object:
        self.ensure_loaded()
        (tree / "a.txt").unlink()
        return original(self, name, match)

    monkeypatch.setattr(cli_app.DirectoryCollection, "open", remove_then_open)

    with pytest.raises(cli_app.typer.Exit) as exc_info:
        cli_app.run(path=str(tree), cat="a.txt")

    assert exc_info.value.exit_code == 1
    assert "Cannot open a.txt" in capsys.readouterr().err


def test_config_option_is_used(
    tree: Path, tmp_path_factory: pytest.TempPathFactory, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(cli_app, "load_config", load_config)
    config_file = tmp_path_factory.mktemp("cfg") / "config.json"
    config_file.write_text('{"recursive": false}')

    cli_app.run(path=str(tree), config_path=str(config_file))

    out = capsys.readouterr().out
    assert "sub/inner.txt" not in out
    assert "2 dirs, 1 files" in out


def test_missing_config_option_warns_and_uses_defaults(
    tree: Path, tmp_path_factory: pytest.TempPathFactory, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(cli_app, "load_config", load_config)
    missing = tmp_path_factory.mktemp("cfg") / "absent.json"

    cli_app.run(path=str(tree), config_path=str(missing))

    captured = capsys.readouterr()
    assert "does not exist" in " ".join(captured.err.split())
    assert "sub/inner.txt" in captured.out
