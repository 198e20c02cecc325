"""Generates the ``R.java`` resource class for merged resources."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from resmerger.domain.keys import ResourceType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from resmerger.domain.keys import FullyQualifiedName

log = logging.getLogger(__name__)

PACKAGE_ID: Final[int] = 0x7F
CLASS_FILENAME: Final[str] = "R.java"
_FIELD_UNSAFE: Final[re.Pattern[str]] = re.compile(r"[.:\-]")


def field_name(resource_name: str) -> str:
    """Return the Java field name used for a resource name."""

    return _FIELD_UNSAFE.sub("_", resource_name)


class ResourceClassWriter:
    """Collects resource symbols and writes them as a Java ``R`` class.

    Ids are assigned on ``flush`` from the sorted symbol set, so the output
    does not depend on the order symbols were written in.
    """

    def __init__(self, *, package: str, output_dir: Path) -> None:
        self._package = package
        self._output_dir = output_dir
        self._symbols: dict[ResourceType, set[str]] = {}
        self._styleables: dict[str, tuple[str, ...]] = {}

    @property
    def path(self) -> Path:
        return self._output_dir.joinpath(*self._package.split(".")) / CLASS_FILENAME

    def write_simple_resource(self, resource_type: ResourceType, name: str) -> None:
        if resource_type is ResourceType.STYLEABLE:
            # styleables only render inside the styleable class
            self._styleables.setdefault(field_name(name), ())
            return
        self._symbols.setdefault(resource_type, set()).add(field_name(name))

    def write_styleable_resource(self, key: FullyQualifiedName, attrs: Sequence[str]) -> None:
        name = field_name(key.name)
        known = self._styleables.get(name, ())
        self._styleables[name] = tuple(dict.fromkeys((*known, *attrs)))
        for attr in attrs:
            # framework attrs ("android:textColor") have no id in this package
            if ":" not in attr:
                self.write_simple_resource(ResourceType.ATTR, attr)

    def flush(self) -> None:
        ids = self._assign_ids()
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self._render(ids), encoding="utf-8")
        log.info("Wrote resource class %s (%s symbols)", path, sum(map(len, ids.values())))

    def _assign_ids(self) -> dict[ResourceType, dict[str, int]]:
        assigned: dict[ResourceType, dict[str, int]] = {}
        for type_id, resource_type in enumerate(sorted(self._symbols), start=1):
            names = sorted(self._symbols[resource_type])
            assigned[resource_type] = {
                name: (PACKAGE_ID << 24) | (type_id << 16) | entry_id
                for entry_id, name in enumerate(names)
            }
        return assigned

    def _render(self, ids: dict[ResourceType, dict[str, int]]) -> str:
        lines = [
            "/* AUTO-GENERATED FILE.  DO NOT MODIFY. */",
            f"package {self._package};",
            "",
            "public final class R {",
        ]
        for resource_type, entries in ids.items():
            lines.append(f"  public static final class {resource_type.value} {{")
            lines.extend(
                f"    public static final int {name}=0x{value:08x};"
                for name, value in entries.items()
            )
            lines.append("  }")
        if self._styleables:
            lines.extend(self._render_styleables(ids.get(ResourceType.ATTR, {})))
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _render_styleables(self, attr_ids: dict[str, int]) -> list[str]:
        lines = ["  public static final class styleable {"]
        for name in sorted(self._styleables):
            # array slots and index constants follow attr id order
            declared = [field_name(attr) for attr in self._styleables[name]]
            own_attrs = sorted(
                (attr for attr in declared if attr in attr_ids), key=attr_ids.__getitem__
            )
            skipped = len(self._styleables[name]) - len(own_attrs)
            if skipped:
                log.debug("Styleable %s: %s attrs have no id in this package", name, skipped)
            values = ", ".join(f"0x{attr_ids[attr]:08x}" for attr in own_attrs)
            lines.append(f"    public static final int[] {name} = {{ {values} }};")
            lines.extend(
                f"    public static final int {name}_{attr} = {index};"
                for index, attr in enumerate(own_attrs)
            )
        lines.append("  }")
        return lines
