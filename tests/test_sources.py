"""Tests for the data source catalog."""

import pytest

from rainfall.sources import DataSource, SourceCatalog


def test_discover_lists_csv_files_sorted(tmp_path):
    for name in ["rainfall_2023.csv", "rainfall_2021.csv", "notes.txt"]:
        (tmp_path / name).write_text("District\n")

    catalog = SourceCatalog.discover(tmp_path)

    assert catalog.labels == ["rainfall_2021", "rainfall_2023"]
    assert catalog.get("rainfall_2021").location == str(tmp_path / "rainfall_2021.csv")


def test_discover_missing_dir(tmp_path):
    assert len(SourceCatalog.discover(tmp_path / "absent")) == 0


def test_resolve_label_or_location():
    catalog = SourceCatalog([DataSource("2022", "data/raw/rainfall_2022.csv")])

    assert catalog.resolve("2022").location == "data/raw/rainfall_2022.csv"
    assert catalog.resolve("other/dir/normals.csv") == DataSource("normals", "other/dir/normals.csv")
    assert catalog.resolve("https://example.org/data/belize.csv?v=2").label == "belize"


def test_duplicate_labels_rejected():
    with pytest.raises(ValueError):
        SourceCatalog([DataSource("a", "x.csv"), DataSource("a", "y.csv")])


def test_bundled_sample_data_is_discoverable():
    from pathlib import Path

    root = Path(__file__).resolve().parent.parent
    catalog = SourceCatalog.discover(root / "data" / "raw")
    assert "rainfall_2023" in catalog.labels
