import asyncio
import sys

from rainfall.analysis import entries_to_frame
from rainfall.config import ChartSettings, Paths
from rainfall.pipeline import ChartPipeline
from rainfall.sources import DataSource, SourceCatalog
from rainfall.utils import setup_logging


def process_source(pipeline: ChartPipeline, paths: Paths, source: DataSource) -> bool:
    tables_dir = paths.outputs / "tables"
    figures_dir = paths.outputs / "figures"
    tables_dir.mkdir(parents=True, exist_ok=True)
    figures_dir.mkdir(parents=True, exist_ok=True)

    surface = asyncio.run(pipeline.render(source.location))
    if surface is None or surface.is_error:
        print(f"Skipping exports ({surface.message.text if surface else 'render superseded'}).")
        return False

    # Ranking table
    ranking_df = entries_to_frame(pipeline.entries)
    ranking_out = tables_dir / f"ranking_{source.label}.csv"
    ranking_df.to_csv(ranking_out, index=False)
    print(f"Saved: {ranking_out}")

    # Chart exports
    for artifact in (pipeline.export_vector(), pipeline.export_raster()):
        if artifact is None:
            continue
        out_path = figures_dir / artifact.filename
        out_path.write_bytes(artifact.data)
        print(f"Saved: {out_path}")

    return True


def main() -> int:
    paths = Paths()
    settings = ChartSettings()
    setup_logging(settings.log_level)

    # Extra arguments are treated as additional CSV paths or URLs
    catalog = SourceCatalog.discover(paths.raw)
    extra = [catalog.resolve(arg) for arg in sys.argv[1:]]
    sources = list(catalog) + [s for s in extra if catalog.get(s.label) is None]

    if not sources:
        print(f"No CSV files found in {paths.raw}")
        return 1

    pipeline = ChartPipeline(catalog, settings)
    failures = 0
    for source in sources:
        print("\n" + "=" * 80)
        print(f"Processing: {source.label} ({source.location})")
        if not process_source(pipeline, paths, source):
            failures += 1

    print(f"\nDone ✅ ({len(sources) - failures}/{len(sources)} sources rendered)")
    return 0 if failures == 0 else 2


if __name__ == "__main__":
    sys.exit(main())
