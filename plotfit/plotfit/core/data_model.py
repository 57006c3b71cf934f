"""Core data model abstraction.

The Dataset wraps the pandas DataFrame parsed from an upload, adding:
 - Source name and content fingerprint (to skip re-parsing the same upload)
 - Load timestamp
 - Positional access to the first two columns used for plotting and fitting
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

import pandas as pd

from ..utils import (
    DatasetError,
    fingerprint,
    parse_csv,
    read_source,
    to_numeric_safe,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class Dataset:
    df: pd.DataFrame
    source: str = "unnamed"
    fingerprint: Optional[str] = None
    loaded_at: str = field(
        default_factory=lambda: datetime.now().isoformat(timespec="seconds")
    )

    @property
    def rows(self) -> int:
        return int(len(self.df))

    @property
    def columns(self) -> List[str]:
        return [str(c) for c in self.df.columns]

    def require_columns(self, n: int = 2):
        if len(self.df.columns) < n:
            raise DatasetError(
                f"'{self.source}' has {len(self.df.columns)} column(s); "
                f"at least {n} are required for plotting"
            )

    def axis_titles(self) -> Tuple[str, str]:
        self.require_columns(2)
        return self.columns[0], self.columns[1]

    def xy(self) -> Tuple[pd.Series, pd.Series]:
        """Return the first two columns (x, y) positionally."""
        self.require_columns(2)
        return self.df.iloc[:, 0], self.df.iloc[:, 1]

    def xy_numeric(self) -> Tuple[pd.Series, pd.Series]:
        """First two columns as numbers, dropping rows missing either value."""
        x, y = self.xy()
        x = to_numeric_safe(x)
        y = to_numeric_safe(y)
        mask = x.notna() & y.notna()
        return x[mask].astype(float), y[mask].astype(float)


def load_dataset(source) -> Optional[Dataset]:
    """Read *source* (path or uploaded file) into a Dataset.

    Returns ``None`` when there is nothing to load. Malformed CSV raises
    ``DatasetError``.
    """
    found = read_source(source)
    if found is None:
        return None
    name, raw = found
    df = parse_csv(name, raw)
    ds = Dataset(df, source=name, fingerprint=fingerprint(raw))
    LOGGER.info(
        "Loaded %s: %d rows x %d columns", name, ds.rows, len(ds.columns)
    )
    return ds


def table_view(dataset: Dataset) -> pd.DataFrame:
    """All rows and columns, unmodified, as a copy safe to hand to the UI."""
    return dataset.df.copy()


__all__ = ["Dataset", "DatasetError", "load_dataset", "table_view"]
