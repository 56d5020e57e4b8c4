"""Pytest fixtures for gdasset tests."""

from pathlib import Path

import pytest

from gdasset import TextDocument

SCENE_URI = "file:///project/main.tscn"

SCENE_TEXT = """\
[gd_scene load_steps=4 format=3 uid="uid://b1x"]

[ext_resource type="Script" path="res://player.gd" id="1_abc"]
[ext_resource type="Texture2D" path="res://icon.svg" id="2"]
[ext_resource type="PackedScene" path="res://enemy.tscn" id="3"]

[sub_resource type="RectangleShape2D" id="RectangleShape2D_1"]
size = Vector2(32, 32)

[node name="Main" type="Node2D"]
script = ExtResource("1_abc")
; the player's greeting
greeting = "Hello
world"

[node name="Sprite" type="Sprite2D" parent="."]
texture = ExtResource("2")

[node name="Enemy" parent="." instance=ExtResource("3")]

[node name="Shape" type="CollisionShape2D" parent="Sprite"]
shape = SubResource("RectangleShape2D_1")
tags[0] = "a"
tags[1] = "b"

[connection signal="ready" from="." to="Sprite" method="_on_ready"]

[editable path="Enemy"]
"""

RESOURCE_TEXT = """\
[gd_resource type="Theme" load_steps=2 format=3]

[ext_resource type="FontFile" path="res://fonts/main.ttf" id="1"]

[sub_resource type="StyleBoxFlat" id=1]
bg_color = Color(0.2, 0.2, 0.2, 1)

[resource]
default_font = ExtResource("1")
Button/styles/normal = SubResource(1)
"""


@pytest.fixture
def scene_document() -> TextDocument:
    """A small scene with resources, nodes, a connection and an editable."""
    return TextDocument(SCENE_URI, SCENE_TEXT)


@pytest.fixture
def resource_document() -> TextDocument:
    """A theme resource using integer ids."""
    return TextDocument("file:///project/theme.tres", RESOURCE_TEXT)


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    """Write the sample scene to disk."""
    path = tmp_path / "main.tscn"
    path.write_text(SCENE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def resource_file(tmp_path: Path) -> Path:
    """Write the sample theme resource to disk."""
    path = tmp_path / "theme.tres"
    path.write_text(RESOURCE_TEXT, encoding="utf-8")
    return path
