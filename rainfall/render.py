"""
Chart surface construction.

A RenderedSurface is a complete, immutable description of one drawn chart:
bars, value labels, axes, gridlines and captions, each carrying its own
explicit style. Coordinates of chart content are in drawable-area units with
a top-left origin; ``origin`` gives the offset of the drawable area inside the
full canvas. Surfaces are rebuilt from scratch for every render.
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from rainfall.analysis import AggregatedEntry
from rainfall.config import ChartSettings
from rainfall.errors import DataLoadError
from rainfall.scales import BandScale, LinearScale, value_domain_max


TEXT_COLOR = "#4a5568"
TITLE_COLOR = "#2d3748"
AXIS_COLOR = "#000000"
GRID_COLOR = "#e2e8f0"
ERROR_COLOR = "#c53030"


@dataclass(frozen=True)
class Bar:
    category: str
    value: float
    x: float
    y: float
    width: float
    height: float
    fill: str
    opacity: float
    radius: float


@dataclass(frozen=True)
class Text:
    text: str
    x: float
    y: float
    size: float = 12.0
    weight: str = "normal"
    color: str = TEXT_COLOR
    anchor: str = "middle"  # start | middle | end
    baseline: str = "alphabetic"  # alphabetic | middle | hanging
    rotation: float = 0.0


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str = AXIS_COLOR
    width: float = 1.0


@dataclass(frozen=True)
class Tick:
    position: float
    label: str
    value: Optional[float] = None


@dataclass(frozen=True)
class Axis:
    orientation: str  # "left" | "bottom"
    ticks: Tuple[Tick, ...]
    domain_line: Line
    tick_size: float = 6.0


@dataclass(frozen=True)
class RenderedSurface:
    width: int
    height: int
    origin: Tuple[float, float]
    source_label: str
    bars: Tuple[Bar, ...] = ()
    value_labels: Tuple[Text, ...] = ()
    gridlines: Tuple[Line, ...] = ()
    value_axis: Optional[Axis] = None
    category_axis: Optional[Axis] = None
    captions: Tuple[Text, ...] = ()
    message: Optional[Text] = None
    value_max: float = 0.0

    @property
    def is_error(self) -> bool:
        return self.message is not None and not self.captions

    def bar_for(self, category: str) -> Optional[Bar]:
        return next((b for b in self.bars if b.category == category), None)


def _captions(settings: ChartSettings) -> Tuple[Text, ...]:
    w, h = settings.drawable_width, settings.drawable_height
    m = settings.margins
    return (
        Text(settings.title, x=w / 2, y=-20, size=18, weight="bold", color=TITLE_COLOR),
        Text(settings.value_caption, x=-m.left + 15, y=h / 2, baseline="hanging", rotation=-90),
        Text(settings.category_caption, x=w / 2, y=h + m.bottom - 20),
    )


def _message(text: str, settings: ChartSettings, color: str = TEXT_COLOR) -> Text:
    return Text(
        text,
        x=settings.drawable_width / 2,
        y=settings.drawable_height / 2,
        size=14,
        color=color,
        baseline="middle",
    )


def build_surface(
    entries: Sequence[AggregatedEntry],
    settings: ChartSettings,
    source_label: str,
) -> RenderedSurface:
    """
    Lay out one bar per entry, in the order given, with axes and gridlines.

    An empty ``entries`` still produces axes, title and captions, plus a
    centred "No data" message naming the source.
    """
    w, h = settings.drawable_width, settings.drawable_height

    band = BandScale([e.category for e in entries], (0, w), padding=settings.band_padding)
    upper = value_domain_max((e.value for e in entries), settings.headroom)
    linear = LinearScale((0, upper), (h, 0))

    palette = settings.palette
    bars = []
    labels = []
    for i, entry in enumerate(entries):
        x = band(entry.category)
        y = linear(entry.value)
        bars.append(Bar(
            category=entry.category,
            value=entry.value,
            x=x,
            y=y,
            width=band.bandwidth,
            height=h - y,
            fill=palette[i % len(palette)],
            opacity=settings.bar_opacity,
            radius=settings.bar_radius,
        ))
        labels.append(Text(
            f"{entry.value:.1f}{settings.unit}",
            x=x + band.bandwidth / 2,
            y=y - settings.value_label_gap,
            weight="medium",
        ))

    fmt = linear.tick_format(settings.value_ticks)
    value_ticks = tuple(Tick(linear(v), fmt(v), v) for v in linear.ticks(settings.value_ticks))
    gridlines = tuple(Line(0, t.position, w, t.position, color=GRID_COLOR) for t in value_ticks)
    value_axis = Axis("left", value_ticks, Line(0, 0, 0, h))
    category_axis = Axis(
        "bottom",
        tuple(Tick(band.center(e.category), e.category) for e in entries),
        Line(0, h, w, h),
    )

    message = None
    if not entries:
        message = _message(f"No data in {source_label}", settings)

    return RenderedSurface(
        width=settings.width,
        height=settings.height,
        origin=(settings.margins.left, settings.margins.top),
        source_label=source_label,
        bars=tuple(bars),
        value_labels=tuple(labels),
        gridlines=gridlines,
        value_axis=value_axis,
        category_axis=category_axis,
        captions=_captions(settings),
        message=message,
        value_max=upper,
    )


def build_error_surface(error: DataLoadError, settings: ChartSettings, source_label: str) -> RenderedSurface:
    """A surface holding nothing but a centred message naming the failed source."""
    return RenderedSurface(
        width=settings.width,
        height=settings.height,
        origin=(settings.margins.left, settings.margins.top),
        source_label=source_label,
        message=_message(f"Error loading data from {error.source}", settings, color=ERROR_COLOR),
    )


@dataclass(frozen=True)
class Tooltip:
    visible: bool = False
    title: str = ""
    body: str = ""
    x: float = 0.0
    y: float = 0.0


class HoverController:
    """
    Presentational hover state for the bars of one surface.

    Tracks at most one emphasized bar and the floating tooltip. Bars and the
    underlying entries are never modified; ``bar_style`` derives the effective
    look of a bar from the current state.
    """

    def __init__(self, settings: ChartSettings):
        self.settings = settings
        self.active: Optional[str] = None
        self.tooltip = Tooltip()

    def _anchor(self, x: float, y: float) -> Tuple[float, float]:
        dx, dy = self.settings.tooltip_offset
        return x + dx, y + dy

    def pointer_enter(self, bar: Bar, x: float, y: float) -> None:
        self.active = bar.category
        tx, ty = self._anchor(x, y)
        self.tooltip = Tooltip(
            visible=True,
            title=bar.category,
            body=f"{bar.value:.1f} {self.settings.unit}",
            x=tx,
            y=ty,
        )

    def pointer_move(self, bar: Bar, x: float, y: float) -> None:
        if self.active != bar.category:
            return
        tx, ty = self._anchor(x, y)
        self.tooltip = replace(self.tooltip, x=tx, y=ty)

    def pointer_leave(self, bar: Bar) -> None:
        if self.active == bar.category:
            self.active = None
        self.tooltip = replace(self.tooltip, visible=False)

    def bar_style(self, bar: Bar) -> dict:
        if bar.category == self.active:
            return {
                "opacity": self.settings.hover_opacity,
                "stroke": self.settings.hover_stroke,
                "stroke_width": self.settings.hover_stroke_width,
            }
        return {"opacity": bar.opacity, "stroke": None, "stroke_width": 0.0}
