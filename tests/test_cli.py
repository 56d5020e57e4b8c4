"""Tests for the command line front-end."""

import logging
from pathlib import Path

import pytest

from gdasset import __version__, commands
from gdasset.cli import LOG_LEVEL_ENV, configure_logging, main


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from wrapping table cells and long lines."""
    monkeypatch.setattr(commands.console, "width", 200)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestOutline:
    """Tests for gdasset outline."""

    def test_prints_tree(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["outline", str(scene_file)])
        out = capsys.readouterr().out
        assert "$/root/Main" in out
        assert "is_editable_instance($Enemy)" in out
        assert "tags[0]" in out
        assert "11 sections, 6 strings, 1 comments" in out

    def test_depth(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["outline", str(scene_file), "--depth", "1"])
        out = capsys.readouterr().out
        assert "$Sprite/Shape" in out
        assert "tags[0]" not in out
        assert "greeting" not in out

    def test_ranges(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["outline", str(scene_file), "--ranges"])
        assert "10:1-15:1" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["outline", str(tmp_path / "missing.tscn")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().out


class TestResources:
    """Tests for gdasset resources."""

    def test_lists_both_tables(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resources", str(scene_file)])
        out = capsys.readouterr().out
        assert "res://player.gd" in out
        assert "main.tscn::RectangleShape2D_1" in out
        assert "SubResource" in out
        assert "4 resources" in out

    def test_path_filter(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resources", str(scene_file), "--path", "res://icon.svg"])
        out = capsys.readouterr().out
        assert "Texture2D" in out
        assert "res://player.gd" not in out
        assert "1 resources" in out

    def test_no_match(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resources", str(scene_file), "-p", "res://nothing.png"])
        assert "No resources found." in capsys.readouterr().out

    def test_type_printed_verbatim(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "odd.tscn"
        path.write_text('[ext_resource type="[red]Mesh" path="res://a.mesh" id="1"]\n', encoding="utf-8")
        main(["resources", str(path)])
        assert "[red]Mesh" in capsys.readouterr().out


class TestResolve:
    """Tests for gdasset resolve."""

    def test_ext_resource(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", str(scene_file), "ExtResource", "2"])
        out = capsys.readouterr().out
        assert "res://icon.svg" in out
        assert "line: 4" in out
        assert 'preload("res://icon.svg") as Texture2D' in out

    def test_quoted_id(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", str(scene_file), "ExtResource", '"1_abc"'])
        assert 'preload("res://player.gd") as Script' in capsys.readouterr().out

    def test_sub_resource(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", str(scene_file), "SubResource", "RectangleShape2D_1"])
        out = capsys.readouterr().out
        assert 'load("main.tscn::RectangleShape2D_1") as RectangleShape2D' in out

    def test_unresolved(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", str(scene_file), "ExtResource", "9"])
        assert exc_info.value.code == 1
        assert "Unresolved: ExtResource(9)" in capsys.readouterr().out

    def test_bad_keyword(self, scene_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", str(scene_file), "Resource", "1"])
        assert exc_info.value.code == 2


class TestColors:
    """Tests for gdasset colors."""

    def test_lists_colors(self, resource_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["colors", str(resource_file)])
        out = capsys.readouterr().out
        assert "#333333FF" in out
        assert "0.2, 0.2, 0.2, 1" in out
        assert "6:12" in out
        assert "1 colors" in out

    def test_no_colors(self, scene_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["colors", str(scene_file)])
        assert "No colors found." in capsys.readouterr().out


class TestMain:
    """Tests for global options."""

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert f"gdasset {__version__}" in capsys.readouterr().out

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


class TestConfigureLogging:
    """Tests for log level selection."""

    def test_default_is_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_invalid_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING
