"""Tests for the folio command line."""

from pathlib import Path

import pytest

from folio.cli.cli import VERSION, main
from folio.core.load.config import load_config
from folio.core.shapes import GalleryConfig


def test_build_in_directory(gallery_dir: Path, capsys):
    exit_code = main(["--directory", str(gallery_dir)])

    assert exit_code == 0
    assert (gallery_dir / "data.js").is_file()
    assert "Wrote data.js with 2 image(s) and 2 caption(s)" in capsys.readouterr().out


def test_build_in_current_directory(gallery_dir: Path, monkeypatch):
    monkeypatch.chdir(gallery_dir)

    assert main([]) == 0
    assert (gallery_dir / "data.js").is_file()


def test_write_default_config(tmp_path: Path, capsys):
    exit_code = main(["-c", "-d", str(tmp_path)])

    assert exit_code == 0
    assert load_config(tmp_path / "config.yaml") == GalleryConfig()
    assert not (tmp_path / "data.js").exists()
    assert "Default configuration file written to" in capsys.readouterr().out


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])

    assert exc_info.value.code == 0
    output: str = capsys.readouterr().out
    assert "--config" in output
    assert "--directory" in output


def test_broken_config_fails(gallery_dir: Path, capsys):
    (gallery_dir / "config.yaml").write_text("file_extensions: [\n")

    exit_code = main(["-d", str(gallery_dir)])

    assert exit_code == 1
    assert "Error parsing configuration file" in capsys.readouterr().err
    assert not (gallery_dir / "data.js").exists()


def test_missing_directory_fails(tmp_path: Path, capsys):
    exit_code = main(["-d", str(tmp_path / "nope")])

    assert exit_code == 1
    assert "Unable to read directory" in capsys.readouterr().err


def test_config_write_failure(tmp_path: Path, capsys):
    exit_code = main(["--config", "-d", str(tmp_path / "nope")])

    assert exit_code == 1
    assert "Error writing default configuration file" in capsys.readouterr().err


def test_empty_gallery_warns(tmp_path: Path, capsys):
    exit_code = main(["-d", str(tmp_path)])

    assert exit_code == 0
    assert "No images found" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"folio {VERSION}"
