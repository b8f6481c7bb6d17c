"""Error taxonomy for the rainfall chart pipeline."""

from typing import Optional


class RainfallChartError(Exception):
    """Base class for all chart pipeline errors."""


class DataLoadError(RainfallChartError):
    """Fetching, parsing or validating a data source failed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load {source}: {reason}")


class EmptyDataset(RainfallChartError):
    """The data source loaded but holds no data rows."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No data rows in {source}")


class RasterizationError(RainfallChartError):
    """Rendering or encoding the raster export failed."""

    def __init__(self, reason: str, label: Optional[str] = None):
        self.reason = reason
        self.label = label
        super().__init__(f"Raster export failed: {reason}")


class ExportTargetMissing(RainfallChartError):
    """An export was requested before any chart was rendered."""

    def __init__(self) -> None:
        super().__init__("Nothing to export yet: render a data source first")
