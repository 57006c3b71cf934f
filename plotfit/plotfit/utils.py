import hashlib
import io
import logging
from pathlib import Path
from typing import Optional, Tuple

import pandas as pd

LOGGER = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when an uploaded file cannot be used as a dataset."""
    pass


def to_numeric_safe(series: pd.Series):
    return pd.to_numeric(series, errors="coerce")


def fingerprint(raw: bytes) -> str:
    return hashlib.md5(raw).hexdigest()


def read_source(source) -> Optional[Tuple[str, bytes]]:
    """Return ``(name, raw_bytes)`` for a path or an uploaded file.

    ``None`` and paths that do not exist yield ``None``: no file yet is not
    an error, the dependent outputs simply render nothing.
    """
    if source is None:
        return None
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            LOGGER.warning("CSV source not found: %s", path)
            return None
        return path.name, path.read_bytes()
    # Reset pointer (Streamlit UploadedFile persists across reruns)
    if hasattr(source, "seek"):
        source.seek(0)
    raw = (
        source.getvalue()
        if hasattr(source, "getvalue")
        else source.read()
    )
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return getattr(source, "name", "upload.csv"), raw


def df_from_upload(source) -> Optional[pd.DataFrame]:
    """Parse a CSV path or uploaded file into a DataFrame (header in row 1)."""
    found = read_source(source)
    if found is None:
        return None
    name, raw = found
    return parse_csv(name, raw)


def parse_csv(name: str, raw: bytes) -> pd.DataFrame:
    try:
        return pd.read_csv(io.BytesIO(raw))
    except (
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
        UnicodeDecodeError,
    ) as exc:
        LOGGER.error("Could not parse %s as CSV: %s", name, exc)
        raise DatasetError(f"Could not parse '{name}' as CSV: {exc}") from exc


__all__ = [
    "DatasetError",
    "to_numeric_safe",
    "fingerprint",
    "read_source",
    "df_from_upload",
    "parse_csv",
]
