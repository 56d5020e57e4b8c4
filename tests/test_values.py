"""Tests for value helpers."""

import math

import pytest

from gdasset.values import (
    FileName,
    color_args,
    color_components,
    color_label,
    filename,
    float16_code,
    float_value,
    is_path_word,
    load_code,
)


class TestFloatValue:
    """Tests for reading float literals."""

    @pytest.mark.parametrize(("code", "expected"), [("1.5", 1.5), ("-2", -2.0), ("1e3", 1000.0)])
    def test_numbers(self, code: str, expected: float) -> None:
        assert float_value(code) == expected

    def test_special_codes(self) -> None:
        assert math.isnan(float_value("nan"))
        assert float_value("inf") == math.inf
        assert float_value("inf_neg") == -math.inf

    def test_not_a_number(self) -> None:
        assert float_value("Vector2") is None


class TestFloat16Code:
    """Tests for writing floats."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, "0.5"),
            (1.0, "1"),
            (-2.5, "-2.5"),
            (0.123456789, "0.123457"),
            (math.nan, "nan"),
            (math.inf, "inf"),
            (-math.inf, "inf_neg"),
        ],
    )
    def test_codes(self, value: float, expected: str) -> None:
        assert float16_code(value) == expected


class TestFilename:
    """Tests for splitting resource paths."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("res://scenes/main.tscn", FileName("main", ".tscn", None)),
            ("main.tscn::Shape_1", FileName("main", ".tscn", "::Shape_1")),
            ("res://README", FileName("README", None, None)),
            ("C:\\art\\icon.png", FileName("icon", ".png", None)),
            ("res://archive.tar.gz", FileName("archive.tar", ".gz", None)),
        ],
    )
    def test_split(self, path: str, expected: FileName) -> None:
        assert filename(path) == expected


class TestIsPathWord:
    """Tests for recognizing resource URLs."""

    @pytest.mark.parametrize("word", ["res://a.png", "user://save.dat", "uid://b1x", "file:///tmp/x"])
    def test_path_words(self, word: str) -> None:
        assert is_path_word(word)

    @pytest.mark.parametrize("word", ["http://example.com", "a.png", 'res://a"b'])
    def test_other_words(self, word: str) -> None:
        assert not is_path_word(word)

    EXT_LINE = '[ext_resource type="Script" path="player.gd" id="1"]'

    def test_ext_resource_path(self) -> None:
        assert is_path_word("player.gd", self.EXT_LINE, 34)

    def test_other_ext_resource_attribute(self) -> None:
        assert not is_path_word("Script", self.EXT_LINE, 20)

    def test_relative_path_without_line(self) -> None:
        assert not is_path_word("player.gd")

    def test_quoted_word_outside_ext_resource(self) -> None:
        assert not is_path_word("player.gd", 'x = "player.gd"', 5)


class TestLoadCode:
    """Tests for generating load code."""

    def test_preload_with_type(self) -> None:
        assert load_code("res://icon.svg", type="Texture2D") == 'preload("res://icon.svg") as Texture2D'

    def test_preload_uid(self) -> None:
        assert load_code("uid://b1x") == 'preload("uid://b1x")'

    def test_sub_resource(self) -> None:
        code = load_code("main.tscn", "Shape_1", "RectangleShape2D")
        assert code == 'load("main.tscn::Shape_1") as RectangleShape2D'

    def test_plain_file(self) -> None:
        assert load_code("/tmp/data.json") == 'FileAccess.open("/tmp/data.json", FileAccess.READ)'

    def test_file_uri(self) -> None:
        code = load_code("file:///tmp/My%20Data.json")
        assert code == 'FileAccess.open("/tmp/My Data.json", FileAccess.READ)'

    def test_escapes_backslashes(self) -> None:
        code = load_code("C:\\data\\a.txt")
        assert code == 'FileAccess.open("C:\\\\data\\\\a.txt", FileAccess.READ)'


class TestColors:
    """Tests for color constructor arguments."""

    def test_components(self) -> None:
        assert color_components("0.2, 0.4, 0.6, 0.8") == (0.2, 0.4, 0.6, 0.8)

    def test_missing_alpha(self) -> None:
        assert color_components("1, 0.5, 0") == (1.0, 0.5, 0.0, 1.0)
        assert color_components("1, 0.5, 0", alpha=0.25)[3] == 0.25

    def test_unreadable_channel(self) -> None:
        red, green, _, _ = color_components("x, 1, 1, 1")
        assert math.isnan(red)
        assert green == 1.0

    def test_extra_arguments_ignored(self) -> None:
        assert color_components("0, 0, 0, 1, 9") == (0.0, 0.0, 0.0, 1.0)

    def test_args(self) -> None:
        assert color_args(0.2, 0.2, 0.2) == "0.2, 0.2, 0.2, 1"
        assert color_args(math.nan, 1.0, math.inf, 0.123456789) == "nan, 1, inf, 0.123457"

    @pytest.mark.parametrize(
        ("rgba", "expected"),
        [
            ((0.2, 0.2, 0.2, 1.0), "#333333FF"),
            ((1.0, 0.0, 0.5, 0.0), "#FF008000"),
            ((1.5, 0.0, 0.0, 1.0), "Color(1.5, 0, 0, 1)"),
            ((math.nan, 0.0, 0.0, 1.0), "Color(nan, 0, 0, 1)"),
        ],
    )
    def test_label(self, rgba: tuple[float, float, float, float], expected: str) -> None:
        assert color_label(*rgba) == expected
