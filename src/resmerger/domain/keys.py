"""Keys identifying merged assets and typed resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePosixPath
from typing import Final

DEFAULT_PACKAGE: Final[str] = "res-auto"


class ResourceType(StrEnum):
    ANIM = "anim"
    ANIMATOR = "animator"
    ARRAY = "array"
    ATTR = "attr"
    BOOL = "bool"
    COLOR = "color"
    DIMEN = "dimen"
    DRAWABLE = "drawable"
    FONT = "font"
    FRACTION = "fraction"
    ID = "id"
    INTEGER = "integer"
    INTERPOLATOR = "interpolator"
    LAYOUT = "layout"
    MENU = "menu"
    MIPMAP = "mipmap"
    PLURALS = "plurals"
    RAW = "raw"
    STRING = "string"
    STYLE = "style"
    STYLEABLE = "styleable"
    TRANSITION = "transition"
    XML = "xml"


# Types that are declared inside values files rather than as standalone files.
VALUE_TYPES: Final[frozenset[ResourceType]] = frozenset(
    {
        ResourceType.ARRAY,
        ResourceType.ATTR,
        ResourceType.BOOL,
        ResourceType.DIMEN,
        ResourceType.FRACTION,
        ResourceType.ID,
        ResourceType.INTEGER,
        ResourceType.PLURALS,
        ResourceType.STRING,
        ResourceType.STYLE,
        ResourceType.STYLEABLE,
    }
)

VALUES_DIR: Final[str] = "values"


@dataclass(frozen=True, slots=True, order=True)
class FullyQualifiedName:
    """Key of a typed resource, unique per package, type, name and qualifiers."""

    package: str
    resource_type: ResourceType
    name: str
    qualifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Resource name must not be empty")
        if not self.package:
            raise ValueError("Resource package must not be empty")
        # "en-rUS" and ("en", "rUS") name the same configuration
        qualifiers = tuple(part for qualifier in self.qualifiers for part in qualifier.split("-"))
        if not all(qualifiers):
            raise ValueError(f"Empty qualifier in {self.qualifiers!r}")
        object.__setattr__(self, "qualifiers", qualifiers)

    @classmethod
    def of(
        cls,
        resource_type: ResourceType | str,
        name: str,
        *,
        qualifiers: tuple[str, ...] = (),
        package: str = DEFAULT_PACKAGE,
    ) -> FullyQualifiedName:
        return cls(
            package=package,
            resource_type=ResourceType(resource_type),
            name=name,
            qualifiers=tuple(qualifiers),
        )

    @classmethod
    def parse(cls, text: str) -> FullyQualifiedName:
        """Parse ``[package:]type[-qualifier...]/name``."""

        package = DEFAULT_PACKAGE
        remainder = text.strip()
        if ":" in remainder.split("/", 1)[0]:
            package, remainder = remainder.split(":", 1)
        type_part, sep, name = remainder.partition("/")
        if not sep or not name:
            raise ValueError(f"Invalid resource name: {text!r}")
        type_name, *qualifiers = type_part.split("-")
        try:
            resource_type = ResourceType(type_name)
        except ValueError as exc:
            raise ValueError(f"Unknown resource type {type_name!r} in {text!r}") from exc
        return cls(
            package=package,
            resource_type=resource_type,
            name=name,
            qualifiers=tuple(qualifiers),
        )

    @property
    def is_value(self) -> bool:
        return self.resource_type in VALUE_TYPES

    def directory_name(self) -> str:
        base = VALUES_DIR if self.is_value else self.resource_type.value
        return "-".join((base, *self.qualifiers))

    def to_pretty_string(self) -> str:
        type_part = "-".join((self.resource_type.value, *self.qualifiers))
        prefix = "" if self.package == DEFAULT_PACKAGE else f"{self.package}:"
        return f"{prefix}{type_part}/{self.name}"

    def __str__(self) -> str:
        return self.to_pretty_string()


@dataclass(frozen=True, slots=True, order=True)
class RelativeAssetPath:
    """Key of an asset: its path relative to the asset root."""

    path: str

    def __post_init__(self) -> None:
        pure = PurePosixPath(self.path)
        if not pure.parts or pure.is_absolute():
            raise ValueError(f"Asset path must be relative: {self.path!r}")
        if ".." in pure.parts:
            raise ValueError(f"Asset path must not leave the asset root: {self.path!r}")
        # normalise "a//b" and "./a" so equal paths compare equal
        object.__setattr__(self, "path", pure.as_posix())

    def __str__(self) -> str:
        return self.path


type DataKey = FullyQualifiedName | RelativeAssetPath
