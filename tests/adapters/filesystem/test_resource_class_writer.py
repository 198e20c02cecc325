from __future__ import annotations

from typing import TYPE_CHECKING

from resmerger.adapters.filesystem import ResourceClassWriter
from resmerger.adapters.filesystem.resource_class import field_name
from resmerger.domain import FullyQualifiedName, ResourceType

if TYPE_CHECKING:
    from pathlib import Path


def test_ids_follow_sorted_types_and_names(tmp_path: Path) -> None:
    writer = ResourceClassWriter(package="com.example.app", output_dir=tmp_path)
    writer.write_simple_resource(ResourceType.STRING, "title")
    writer.write_simple_resource(ResourceType.DRAWABLE, "icon")
    writer.write_simple_resource(ResourceType.STRING, "app_name")

    writer.flush()

    assert writer.path == tmp_path / "com" / "example" / "app" / "R.java"
    source = writer.path.read_text(encoding="utf-8")
    assert "package com.example.app;" in source
    assert "public static final int icon=0x7f010000;" in source
    assert "public static final int app_name=0x7f020000;" in source
    assert "public static final int title=0x7f020001;" in source


def test_output_does_not_depend_on_write_order(tmp_path: Path) -> None:
    first = ResourceClassWriter(package="app", output_dir=tmp_path / "first")
    second = ResourceClassWriter(package="app", output_dir=tmp_path / "second")
    symbols = [(ResourceType.ID, "button"), (ResourceType.COLOR, "accent"), (ResourceType.ID, "a")]

    for resource_type, name in symbols:
        first.write_simple_resource(resource_type, name)
    for resource_type, name in reversed(symbols):
        second.write_simple_resource(resource_type, name)
    first.flush()
    second.flush()

    assert first.path.read_bytes() == second.path.read_bytes()


def test_styleables_reference_their_own_attrs(tmp_path: Path) -> None:
    writer = ResourceClassWriter(package="app", output_dir=tmp_path)
    writer.write_styleable_resource(
        FullyQualifiedName.parse("styleable/Card"), ("radius", "android:textColor", "elevation")
    )

    writer.flush()

    source = writer.path.read_text(encoding="utf-8")
    assert "public static final int elevation=0x7f010000;" in source
    assert "public static final int radius=0x7f010001;" in source
    assert "public static final int[] Card = { 0x7f010000, 0x7f010001 };" in source
    assert "public static final int Card_elevation = 0;" in source
    assert "public static final int Card_radius = 1;" in source
    assert "textColor" not in source


def test_styleable_written_as_simple_symbol_renders_one_styleable_class(tmp_path: Path) -> None:
    writer = ResourceClassWriter(package="app", output_dir=tmp_path)
    writer.write_simple_resource(ResourceType.STYLEABLE, "Empty")
    writer.write_styleable_resource(FullyQualifiedName.parse("styleable/Card"), ("radius",))

    writer.flush()

    source = writer.path.read_text(encoding="utf-8")
    assert source.count("class styleable") == 1
    assert "public static final int[] Empty = {  };" in source
    assert "public static final int[] Card = { 0x7f010000 };" in source


def test_field_names_are_sanitised() -> None:
    assert field_name("Theme.App.Dark") == "Theme_App_Dark"
