from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from resmerger.app import (
    cache_primary_data,
    load_cached_data,
    write_merged_data,
    write_resource_class,
)
from resmerger.config import OutputLayout
from resmerger.domain import (
    AssetFile,
    FullyQualifiedName,
    ParsedData,
    RelativeAssetPath,
    UnwrittenMergedData,
    XmlResource,
)
from tests.helpers.merged_data import string_resource

if TYPE_CHECKING:
    from collections.abc import Callable

    import pytest

    from resmerger.adapters.sqlalchemy import SqlAlchemyCacheUnitOfWork


def _data(source_dir: Path) -> UnwrittenMergedData:
    readme = source_dir / "readme.txt"
    readme.write_text("read me", encoding="utf-8")
    primary = ParsedData.of(
        assets=[(RelativeAssetPath("readme.txt"), AssetFile(readme))],
        resources=[string_resource("app_name", "App")],
    )
    transitive = ParsedData.of(
        resources=[
            (
                FullyQualifiedName.parse("com.lib:string/lib_name"),
                XmlResource(Path("/lib/strings.xml"), '<string name="lib_name">Lib</string>'),
            )
        ]
    )
    return UnwrittenMergedData.of(None, primary, transitive)


def test_write_merged_data_uses_output_dir_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, source_dir: Path
) -> None:
    monkeypatch.setenv("RESMERGER_OUTPUT_DIR", str(tmp_path / "out"))

    merged = write_merged_data(_data(source_dir))

    assert merged.asset_dir == (tmp_path / "out").resolve() / "assets"
    assert (merged.asset_dir / "readme.txt").read_text(encoding="utf-8") == "read me"
    assert "lib_name" in (merged.resource_dir / "values" / "values.xml").read_text(
        encoding="utf-8"
    )


def test_write_merged_data_with_explicit_layout(tmp_path: Path, source_dir: Path) -> None:
    layout = OutputLayout(
        resource_dir=tmp_path / "merged-res",
        asset_dir=tmp_path / "merged-assets",
        manifest_dir=tmp_path,
    )

    merged = write_merged_data(_data(source_dir), layout=layout)

    assert merged.resource_dir == tmp_path / "merged-res"
    assert merged.manifest is None


def test_write_resource_class_returns_generated_path(tmp_path: Path, source_dir: Path) -> None:
    path = write_resource_class(_data(source_dir), package="com.app", output_dir=tmp_path)

    source = path.read_text(encoding="utf-8")
    assert path == tmp_path / "com" / "app" / "R.java"
    assert "app_name" in source
    assert "lib_name" in source


def test_cache_round_trip_keeps_primary_only(
    source_dir: Path,
    cache_unit_of_work: Callable[[], SqlAlchemyCacheUnitOfWork],
) -> None:
    data = _data(source_dir)

    stored = cache_primary_data(data, cache_key="app", unit_of_work_factory=cache_unit_of_work)
    restored = load_cached_data("app", unit_of_work_factory=cache_unit_of_work)

    assert stored == 2
    assert restored == data.primary
