"""Shared fixtures: small district rainfall CSVs written to a temp dir."""

from pathlib import Path

import pytest

from rainfall.config import ChartSettings

HEADER = "District,Jan,Feb,Mar,Apr,May,Jun,Jul,Aug,Sep,Oct,Nov,Dec\n"


def write_csv(path: Path, body: str, header: str = HEADER) -> Path:
    path.write_text(header + body, encoding="utf-8")
    return path


@pytest.fixture
def settings() -> ChartSettings:
    return ChartSettings()


@pytest.fixture
def two_district_csv(tmp_path) -> Path:
    """Corozal averages 55.0; Orange Walk is all zeros."""
    return write_csv(
        tmp_path / "two_districts.csv",
        "Orange Walk,0,0,0,0,0,0,0,0,0,0,0,0\n"
        "Corozal,10,20,30,40,50,60,70,80,90,100,110,0\n",
    )


@pytest.fixture
def six_district_csv(tmp_path) -> Path:
    return write_csv(
        tmp_path / "rainfall_2023.csv",
        "Corozal,82.1,44.6,31.8,,79.4,183.5,151.2,144.9,205.7,198.3,121.6,91.4\n"
        "Orange Walk,88.5,47.9,35.4,40.3,93.1,201.8,168.7,150.4,218.2,207.9,126.8,97.2\n"
        "Belize,141.8,73.6,51.9,57.4,108.3,254.7,249.1,212.5,262.4,314.8,231.5,180.6\n"
        "Cayo,109.4,61.2,44.7,51.8,119.6,228.4,207.3,175.1,233.9,264.5,176.4,137.8\n"
        "Stann Creek,211.5,120.8,76.9,84.6,154.2,341.7,386.4,321.3,327.5,381.2,301.7,254.9\n"
        "Toledo,246.9,149.3,89.6,103.5,198.7,489.4,621.5,503.8,441.6,427.3,355.1,302.7\n",
    )


@pytest.fixture
def empty_csv(tmp_path) -> Path:
    return write_csv(tmp_path / "empty.csv", "")
