"""Unit tests for upgradepath.core.catalog."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import pytest

from upgradepath.core.catalog import load_catalog, parse_catalog
from upgradepath.exceptions import CatalogError
from upgradepath.models import Classification, ExpirableVersion, MachineImage

CATALOG_TOML = """\
[kubernetes]
versions = [
  { version = "1.12.3" },
  { version = "1.12.4", classification = "preview" },
  { version = "1.11.9", expiration_date = 2020-01-01T00:00:00Z },
  "1.10.0",
]

[[machine_images]]
name = "gardenlinux"
versions = [
  { version = "934.8.0", classification = "supported" },
  { version = "318.9.0", expiration_date = 2021-06-30 },
]
"""


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.toml"
    path.write_text(CATALOG_TOML, encoding="utf-8")
    return path


@pytest.mark.unit
class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_loads_kubernetes_versions(self, catalog_file: Path) -> None:
        catalog = load_catalog(catalog_file)

        assert [v.version for v in catalog.kubernetes] == [
            "1.12.3",
            "1.12.4",
            "1.11.9",
            "1.10.0",
        ]
        assert catalog.kubernetes[1].classification is Classification.PREVIEW
        assert catalog.kubernetes[2].expiration_date == datetime(
            2020, 1, 1, tzinfo=timezone.utc
        )

    def test_bare_string_is_plain_version(self, catalog_file: Path) -> None:
        catalog = load_catalog(catalog_file)

        assert catalog.kubernetes[3] == ExpirableVersion("1.10.0")

    def test_loads_machine_images(self, catalog_file: Path) -> None:
        catalog = load_catalog(catalog_file)

        assert len(catalog.machine_images) == 1
        image = catalog.machine_images[0]
        assert image.name == "gardenlinux"
        assert image.versions[0].classification is Classification.SUPPORTED
        # TOML dates become midnight UTC
        assert image.versions[1].expiration_date == datetime(
            2021, 6, 30, tzinfo=timezone.utc
        )

    def test_source_path_recorded(self, catalog_file: Path) -> None:
        catalog = load_catalog(str(catalog_file))

        assert catalog.source_path == catalog_file.resolve()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(tmp_path / "missing.toml")

        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.catalog_path == str(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[kubernetes\n", encoding="utf-8")

        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)

        assert "Invalid TOML" in str(exc_info.value)

    def test_empty_file_is_empty_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("", encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.kubernetes == ()
        assert catalog.machine_images == ()

    def test_malformed_versions_are_kept(self, tmp_path: Path) -> None:
        """Test version strings are validated by the resolver, not the loader."""
        path = tmp_path / "catalog.toml"
        path.write_text('[kubernetes]\nversions = ["1.x"]\n', encoding="utf-8")

        assert load_catalog(path).kubernetes == (ExpirableVersion("1.x"),)


@pytest.mark.unit
class TestParseCatalog:
    """Tests for parse_catalog validation."""

    @pytest.mark.parametrize(
        "raw, entry",
        [
            ({"kubernetes": []}, "kubernetes"),
            ({"kubernetes": {"versions": {}}}, "kubernetes.versions"),
            ({"kubernetes": {"versions": [1]}}, "kubernetes.versions[0]"),
            ({"kubernetes": {"versions": [{"version": 1}]}}, "kubernetes.versions[0]"),
            ({"kubernetes": {"versions": [{}]}}, "kubernetes.versions[0]"),
            (
                {"kubernetes": {"versions": ["1.0.0", {"version": "1.0.1", "extra": 1}]}},
                "kubernetes.versions[1]",
            ),
            (
                {"kubernetes": {"versions": [{"version": "1.0.0", "classification": "beta"}]}},
                "kubernetes.versions[0]",
            ),
            (
                {"kubernetes": {"versions": [{"version": "1.0.0", "expiration_date": 5}]}},
                "kubernetes.versions[0]",
            ),
            (
                {"kubernetes": {"versions": [{"version": "1.0.0", "expiration_date": "soon"}]}},
                "kubernetes.versions[0]",
            ),
            ({"kubernetes": {"images": []}}, "kubernetes"),
            ({"machine_images": {}}, "machine_images"),
            ({"machine_images": ["x"]}, "machine_images[0]"),
            ({"machine_images": [{"versions": []}]}, "machine_images[0]"),
            ({"machine_images": [{"name": "x", "owner": "y"}]}, "machine_images[0]"),
            (
                {"machine_images": [{"name": "x", "versions": [2]}]},
                "machine_images[0].versions[0]",
            ),
        ],
    )
    def test_invalid_layout(self, raw: Dict[str, Any], entry: str) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog(raw, catalog_path="catalog.toml")

        assert exc_info.value.entry == entry
        assert exc_info.value.catalog_path == "catalog.toml"

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog({"openstack": {}})

        assert "openstack" in str(exc_info.value)

    def test_iso_string_expiration(self) -> None:
        catalog = parse_catalog(
            {
                "kubernetes": {
                    "versions": [
                        {"version": "1.0.0", "expiration_date": "2020-01-01T00:00:00+00:00"}
                    ]
                }
            }
        )

        assert catalog.kubernetes[0].expiration_date == datetime(
            2020, 1, 1, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "value", ["2020-01-01T00:00:00Z", "2020-01-01T00:00:00z"]
    )
    def test_zulu_string_expiration(self, value: str) -> None:
        catalog = parse_catalog(
            {"kubernetes": {"versions": [{"version": "1.0.0", "expiration_date": value}]}}
        )

        assert catalog.kubernetes[0].expiration_date == datetime(
            2020, 1, 1, tzinfo=timezone.utc
        )

    def test_zulu_string_in_toml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.toml"
        path.write_text(
            '[kubernetes]\nversions = [{ version = "1.0.0", '
            'expiration_date = "2020-01-01T00:00:00Z" }]\n',
            encoding="utf-8",
        )

        version = load_catalog(path).kubernetes[0]
        assert version.expiration_date == datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_bare_zulu_is_rejected(self) -> None:
        with pytest.raises(CatalogError):
            parse_catalog(
                {"kubernetes": {"versions": [{"version": "1.0.0", "expiration_date": "Z"}]}}
            )

    def test_machine_image_without_versions(self) -> None:
        catalog = parse_catalog({"machine_images": [{"name": "coreos"}]})

        assert catalog.machine_images == (MachineImage(name="coreos"),)
