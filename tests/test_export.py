"""Tests for SVG and JPEG export."""

from io import BytesIO

import pytest
from PIL import Image, UnidentifiedImageError

import rainfall.export as export_module
from rainfall.analysis import AggregatedEntry
from rainfall.errors import DataLoadError, RasterizationError
from rainfall.export import draw_figure, export_raster, export_vector
from rainfall.render import build_error_surface, build_surface
from rainfall.utils import export_filename, safe_label


@pytest.fixture
def surface(settings):
    entries = [AggregatedEntry("Toledo", 334.3), AggregatedEntry("Cayo", 150.0), AggregatedEntry("Belize", 0.0)]
    return build_surface(entries, settings, "rainfall_2023")


class TestVectorExport:
    def test_svg_is_self_contained(self, surface, settings):
        artifact = export_vector(surface, settings, "rainfall_2023")

        assert artifact.filename == "belize-rainfall-rainfall_2023.svg"
        assert artifact.mime == "image/svg+xml"
        svg = artifact.data.decode("utf-8")
        assert "<svg" in svg
        assert "stylesheet" not in svg
        assert "Toledo" in svg
        assert settings.title in svg

    def test_error_surface_exports(self, settings):
        surface = build_error_surface(DataLoadError("gone.csv", "file not found"), settings, "gone")

        artifact = export_vector(surface, settings, "gone")

        assert "gone.csv" in artifact.data.decode("utf-8")


class TestRasterExport:
    def test_jpeg_at_double_density_on_white(self, surface, settings):
        artifact = export_raster(surface, settings, "rainfall_2023")

        assert artifact.filename == "belize-rainfall-rainfall_2023.jpg"
        assert artifact.mime == "image/jpeg"
        with Image.open(BytesIO(artifact.data)) as img:
            assert img.format == "JPEG"
            assert img.mode == "RGB"
            assert img.size == (1800, 1000)
            r, g, b = img.getpixel((3, 3))
            assert min(r, g, b) > 240

    def test_decode_failure_raises_and_releases_buffers(self, surface, settings, monkeypatch):
        opened = []

        class TrackingBytesIO(BytesIO):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                opened.append(self)

        def broken_open(*args, **kwargs):
            raise UnidentifiedImageError("cannot identify image file")

        monkeypatch.setattr(export_module, "BytesIO", TrackingBytesIO)
        monkeypatch.setattr(export_module.Image, "open", broken_open)

        with pytest.raises(RasterizationError) as info:
            export_raster(surface, settings, "rainfall_2023")

        assert info.value.label == "rainfall_2023"
        assert opened and all(buf.closed for buf in opened)


def test_figure_matches_logical_canvas(surface):
    fig = draw_figure(surface)
    width, height = fig.get_size_inches() * fig.dpi
    assert (round(width), round(height)) == (900, 500)


def test_zero_height_bars_are_skipped(surface):
    fig = draw_figure(surface)
    assert len(fig.axes[0].patches) == 2


@pytest.mark.parametrize("label,expected", [
    ("rainfall_2023", "rainfall_2023"),
    ("Wet season 2023", "Wet-season-2023"),
    ("a/b", "a-b"),
    ("   ", "chart"),
])
def test_safe_label(label, expected):
    assert safe_label(label) == expected


def test_export_filename():
    assert export_filename("belize-rainfall", "rainfall 2021", "jpg") == "belize-rainfall-rainfall-2021.jpg"
