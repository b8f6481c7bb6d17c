from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class DataSource:
    label: str
    location: str


def _label_for(location: str) -> str:
    path = urlparse(location).path or location
    return Path(path).stem or location


class SourceCatalog:
    """The data sources offered by the selector, keyed by label."""

    def __init__(self, sources: Iterable[DataSource] = ()):
        self._sources: List[DataSource] = []
        for source in sources:
            if self.get(source.label) is not None:
                raise ValueError(f"Duplicate source label: {source.label}")
            self._sources.append(source)

    @classmethod
    def discover(cls, raw_dir: Path) -> "SourceCatalog":
        """One source per CSV file in ``raw_dir``, labelled by file stem."""
        if not raw_dir.exists():
            return cls()
        return cls(DataSource(p.stem, str(p)) for p in sorted(raw_dir.glob("*.csv")))

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self._sources]

    def __iter__(self):
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    def get(self, label: str) -> Optional[DataSource]:
        return next((s for s in self._sources if s.label == label), None)

    def resolve(self, source_id: str) -> DataSource:
        """Look up a label, or treat an unknown id as a path or URL to load directly."""
        return self.get(source_id) or DataSource(_label_for(source_id), source_id)
