"""
The chart pipeline and its three entry points.

``render`` runs load, aggregate, scale and build for one data source and
swaps the finished surface in. ``export_vector`` and ``export_raster`` turn
the current surface into a downloadable artifact. Errors are recovered here:
load failures become an in-chart message, export failures go to ``notify``.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from rainfall.analysis import AggregatedEntry, aggregate_monthly_means
from rainfall.config import ChartSettings
from rainfall.errors import DataLoadError, EmptyDataset, ExportTargetMissing, RasterizationError
from rainfall.export import ExportArtifact, export_raster, export_vector
from rainfall.ingest import RawRecord, fetch_records
from rainfall.render import RenderedSurface, build_error_surface, build_surface
from rainfall.sources import DataSource, SourceCatalog

logger = logging.getLogger(__name__)

Loader = Callable[[str], Awaitable[List[RawRecord]]]
Notifier = Callable[[str], None]


def _log_notice(message: str) -> None:
    logger.warning(message)


class ChartPipeline:
    """Owns the current surface and the generation counter guarding it."""

    def __init__(
        self,
        catalog: Optional[SourceCatalog] = None,
        settings: Optional[ChartSettings] = None,
        loader: Loader = fetch_records,
        notify: Notifier = _log_notice,
    ):
        self.catalog = catalog or SourceCatalog()
        self.settings = settings or ChartSettings()
        self.loader = loader
        self.notify = notify

        self.surface: Optional[RenderedSurface] = None
        self.entries: List[AggregatedEntry] = []
        self.selected: Optional[DataSource] = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def render(self, source_id: str) -> Optional[RenderedSurface]:
        """
        Rebuild the chart for ``source_id``.

        Returns the new surface, or None when a later render was requested
        while this one was loading; that stale result is dropped.
        """
        self._generation += 1
        generation = self._generation
        source = self.catalog.resolve(source_id)

        entries: List[AggregatedEntry] = []
        try:
            records = await self.loader(source.location)
            entries = aggregate_monthly_means(records)
            surface = build_surface(entries, self.settings, source.label)
        except EmptyDataset:
            logger.info(f"Rendering empty chart for {source.label}")
            surface = build_surface([], self.settings, source.label)
        except DataLoadError as exc:
            logger.error(f"Data load failed for {source.label}: {exc.reason}")
            surface = build_error_surface(exc, self.settings, source.label)

        if generation != self._generation:
            logger.info(
                f"Discarding stale render of {source.label} "
                f"(generation {generation}, latest {self._generation})"
            )
            return None

        self.surface = surface
        self.entries = entries
        self.selected = source
        return surface

    def _snapshot(self) -> RenderedSurface:
        if self.surface is None:
            raise ExportTargetMissing()
        return self.surface

    def export_vector(self) -> Optional[ExportArtifact]:
        try:
            surface = self._snapshot()
        except ExportTargetMissing as exc:
            self.notify(str(exc))
            return None
        return export_vector(surface, self.settings, surface.source_label)

    def export_raster(self) -> Optional[ExportArtifact]:
        try:
            surface = self._snapshot()
            return export_raster(surface, self.settings, surface.source_label)
        except (ExportTargetMissing, RasterizationError) as exc:
            self.notify(str(exc))
            return None
