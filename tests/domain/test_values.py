from __future__ import annotations

from pathlib import Path

import pytest

from resmerger.domain import FullyQualifiedName, ResourceFile, XmlResource
from tests.helpers.merged_data import RecordingClassWriter, RecordingDataWriter


def test_resource_file_keeps_compound_extension() -> None:
    writer = RecordingDataWriter()
    key = FullyQualifiedName.parse("drawable-xhdpi/button")

    ResourceFile(source=Path("/src/drawable-xhdpi/button.9.png")).write_resource(key, writer)

    assert writer.calls == [("copy_resource", "drawable-xhdpi/button.9.png")]


def test_xml_resource_defines_its_value() -> None:
    writer = RecordingDataWriter()
    key = FullyQualifiedName.parse("color/accent")

    value = XmlResource(
        source=Path("/src/values/colors.xml"), xml='<color name="accent">#f00</color>'
    )

    value.write_resource(key, writer)

    assert writer.calls == [("define_value", "color/accent", '<color name="accent">#f00</color>')]


def test_xml_resource_writes_styleables_with_attrs() -> None:
    class_writer = RecordingClassWriter()
    styleable = FullyQualifiedName.parse("styleable/Card")
    value = XmlResource(
        source=Path("/src/values/attrs.xml"),
        xml='<declare-styleable name="Card"/>',
        attrs=("radius",),
    )

    value.write_resource_to_class(styleable, class_writer)
    value.write_resource_to_class(FullyQualifiedName.parse("attr/radius"), class_writer)

    assert class_writer.calls == [("styleable", "Card", "radius"), ("simple", "attr", "radius")]


@pytest.mark.parametrize("xml", ["", "  \n"])
def test_xml_resource_requires_a_declaration(xml: str) -> None:
    with pytest.raises(ValueError, match="Empty value declaration"):
        XmlResource(source=Path("/src/values/strings.xml"), xml=xml)
