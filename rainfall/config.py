from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

MONTHS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
CATEGORY_COLUMN = "District"


@dataclass(frozen=True)
class Paths:
    raw: Path = Path("data/raw")
    outputs: Path = Path("outputs")


@dataclass(frozen=True)
class Margins:
    top: int = 60
    right: int = 30
    bottom: int = 80
    left: int = 80


@dataclass(frozen=True)
class ChartSettings:
    # Logical canvas; the drawable area is what remains inside the margins
    width: int = 900
    height: int = 500
    margins: Margins = field(default_factory=Margins)

    band_padding: float = 0.3
    headroom: float = 1.15
    value_ticks: int = 8

    palette: Tuple[str, ...] = (
        "#a7c7e7",  # soft blue
        "#ffd8b1",  # soft orange
        "#ffb7b2",  # soft red
        "#c1e1c1",  # soft green
        "#fdfd96",  # soft yellow
        "#d4a5d4",  # soft purple
        "#ffb347",  # soft orange-yellow
        "#b5ead7",  # soft mint
    )
    bar_opacity: float = 0.9
    hover_opacity: float = 1.0
    hover_stroke: str = "#2c3e50"
    hover_stroke_width: float = 2.0
    bar_radius: float = 4.0
    value_label_gap: float = 10.0
    tooltip_offset: Tuple[float, float] = (10.0, -28.0)

    title: str = "Average Monthly Rainfall by District in Belize"
    value_caption: str = "Average Monthly Rainfall (mm)"
    category_caption: str = "Districts of Belize"
    unit: str = "mm"

    export_prefix: str = "belize-rainfall"
    raster_scale: int = 2
    raster_quality: int = 95
    log_level: str = "INFO"

    @property
    def drawable_width(self) -> int:
        return self.width - self.margins.left - self.margins.right

    @property
    def drawable_height(self) -> int:
        return self.height - self.margins.top - self.margins.bottom
