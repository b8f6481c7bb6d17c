"""Static image export of a rendered chart surface."""

import logging
from dataclasses import dataclass
from io import BytesIO

import matplotlib
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import FancyBboxPatch, Rectangle
from PIL import Image

from rainfall.config import ChartSettings
from rainfall.errors import RasterizationError
from rainfall.render import RenderedSurface, Text, Line
from rainfall.utils import export_filename

logger = logging.getLogger(__name__)

# One logical canvas unit is one pixel at this resolution
BASE_DPI = 100

_HA = {"start": "left", "middle": "center", "end": "right"}
_VA = {"alphabetic": "baseline", "middle": "center", "hanging": "top"}


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    mime: str
    data: bytes


def _pt(px: float) -> float:
    return px * 72 / BASE_DPI


def _draw_text(ax, text: Text, ox: float, oy: float, zorder: int = 4) -> None:
    ax.text(
        ox + text.x,
        oy + text.y,
        text.text,
        fontsize=_pt(text.size),
        fontweight=text.weight,
        color=text.color,
        ha=_HA[text.anchor],
        va=_VA[text.baseline],
        rotation=-text.rotation,
        rotation_mode="anchor",
        zorder=zorder,
    )


def _draw_line(ax, line: Line, ox: float, oy: float, zorder: int = 1) -> None:
    ax.add_line(Line2D(
        [ox + line.x1, ox + line.x2],
        [oy + line.y1, oy + line.y2],
        color=line.color,
        linewidth=_pt(line.width),
        zorder=zorder,
    ))


def draw_figure(surface: RenderedSurface) -> Figure:
    """
    Paint a surface onto a matplotlib Figure sized to its logical canvas.

    The axes fill the whole figure with an inverted y-axis, so surface
    coordinates (top-left origin) are used unchanged.
    """
    fig = Figure(figsize=(surface.width / BASE_DPI, surface.height / BASE_DPI), dpi=BASE_DPI)
    fig.patch.set_facecolor("white")
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, surface.width)
    ax.set_ylim(surface.height, 0)
    ax.set_axis_off()

    ox, oy = surface.origin

    for line in surface.gridlines:
        _draw_line(ax, line, ox, oy, zorder=0)

    for bar in surface.bars:
        if bar.height <= 0:
            continue
        radius = min(bar.radius, bar.width / 2, bar.height / 2)
        if radius > 0:
            patch = FancyBboxPatch(
                (ox + bar.x, oy + bar.y), bar.width, bar.height,
                boxstyle=f"round,pad=0,rounding_size={radius}",
            )
        else:
            patch = Rectangle((ox + bar.x, oy + bar.y), bar.width, bar.height)
        patch.set_facecolor(bar.fill)
        patch.set_alpha(bar.opacity)
        patch.set_edgecolor("none")
        patch.set_zorder(2)
        ax.add_patch(patch)

    for axis in (surface.value_axis, surface.category_axis):
        if axis is None:
            continue
        _draw_line(ax, axis.domain_line, ox, oy, zorder=3)
        size = axis.tick_size
        for tick in axis.ticks:
            if axis.orientation == "left":
                _draw_line(ax, Line(-size, tick.position, 0, tick.position), ox, oy, zorder=3)
                label = Text(tick.label, x=-size - 3, y=tick.position, size=10,
                             color="#000000", anchor="end", baseline="middle")
            else:
                y = axis.domain_line.y1
                _draw_line(ax, Line(tick.position, y, tick.position, y + size), ox, oy, zorder=3)
                label = Text(tick.label, x=tick.position, y=y + size + 6, baseline="hanging")
            _draw_text(ax, label, ox, oy)

    for text in surface.value_labels + surface.captions:
        _draw_text(ax, text, ox, oy)
    if surface.message is not None:
        _draw_text(ax, surface.message, ox, oy)

    return fig


def export_vector(surface: RenderedSurface, settings: ChartSettings, label: str) -> ExportArtifact:
    """Standalone SVG of the surface; every style is written inline."""
    fig = draw_figure(surface)
    # Keep text as <text> elements instead of glyph paths
    with matplotlib.rc_context({"svg.fonttype": "none"}):
        with BytesIO() as buffer:
            fig.savefig(buffer, format="svg", facecolor="white")
            data = buffer.getvalue()

    filename = export_filename(settings.export_prefix, label, "svg")
    logger.info(f"Exported {filename} ({len(data)} bytes)")
    return ExportArtifact(filename=filename, mime="image/svg+xml", data=data)


def export_raster(surface: RenderedSurface, settings: ChartSettings, label: str) -> ExportArtifact:
    """
    JPEG of the surface at ``raster_scale`` times the logical pixel size.

    The chart is rendered to an intermediate PNG, decoded with Pillow and
    flattened onto an opaque white background before JPEG encoding. Any
    failure along the way raises RasterizationError; the temporary buffers
    are closed either way.
    """
    fig = draw_figure(surface)
    try:
        with BytesIO() as png_buffer:
            fig.savefig(png_buffer, format="png", dpi=BASE_DPI * settings.raster_scale, facecolor="white")
            png_buffer.seek(0)
            with Image.open(png_buffer) as rendered:
                rgba = rendered.convert("RGBA")
        flattened = Image.new("RGB", rgba.size, (255, 255, 255))
        flattened.paste(rgba, mask=rgba.getchannel("A"))

        with BytesIO() as jpeg_buffer:
            flattened.save(jpeg_buffer, format="JPEG", quality=settings.raster_quality)
            data = jpeg_buffer.getvalue()
    except (OSError, ValueError, RuntimeError) as exc:
        logger.error(f"Rasterization failed for {label}: {exc}")
        raise RasterizationError(str(exc), label) from exc

    filename = export_filename(settings.export_prefix, label, "jpg")
    logger.info(f"Exported {filename} ({len(data)} bytes, {flattened.size[0]}x{flattened.size[1]})")
    return ExportArtifact(filename=filename, mime="image/jpeg", data=data)
