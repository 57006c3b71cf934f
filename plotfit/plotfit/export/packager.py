"""Chart export: PNG rendering bundled into a dated zip archive.

Every export works inside its own ``tempfile.TemporaryDirectory``; the images
are rendered there, zipped, and the directory is removed on every exit path.
Failures are re-raised as ``ExportError`` and never touch the displayed charts.
"""
from __future__ import annotations

import io
import logging
import tempfile
import zipfile
from datetime import date
from pathlib import Path
from typing import Callable, Dict, Optional

import plotly.graph_objects as go
import plotly.io as pio

from ..constants import (
    ARCHIVE_PATTERN,
    EXPORT_CHARTS,
    IMAGE_FORMAT,
    IMAGE_HEIGHT,
    IMAGE_SCALE,
    IMAGE_WIDTH,
)

LOGGER = logging.getLogger(__name__)

Renderer = Callable[[go.Figure, Path], None]


class ExportError(RuntimeError):
    """Raised when charts cannot be rendered or archived."""
    pass


def archive_name(day: Optional[date] = None) -> str:
    day = day or date.today()
    return ARCHIVE_PATTERN.format(day=day.isoformat())


def write_png(fig: go.Figure, path: Path):
    """Render *fig* to a PNG file through kaleido."""
    pio.write_image(
        fig,
        str(path),
        format=IMAGE_FORMAT,
        width=IMAGE_WIDTH,
        height=IMAGE_HEIGHT,
        scale=IMAGE_SCALE,
        engine="kaleido",
    )


def export_charts(
    charts: Dict[str, go.Figure],
    render: Renderer = write_png,
) -> bytes:
    """Render each chart to ``<name>.png`` and return a zip of the images."""
    if not charts:
        raise ExportError("No charts to export")
    with tempfile.TemporaryDirectory(prefix="plotfit_export_") as tmp:
        tmp_dir = Path(tmp)
        LOGGER.debug("Exporting %d chart(s) via %s", len(charts), tmp_dir)
        try:
            paths = []
            for name, fig in charts.items():
                out = tmp_dir / f"{name}.{IMAGE_FORMAT}"
                render(fig, out)
                paths.append(out)
            buf = io.BytesIO()
            with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as z:
                for p in paths:
                    z.write(p, arcname=p.name)
        except Exception as exc:
            LOGGER.error("Chart export failed: %s", exc)
            raise ExportError(f"Chart export failed: {exc}") from exc
    data = buf.getvalue()
    LOGGER.info(
        "Exported %s (%.1f KB)", ", ".join(charts), len(data) / 1024
    )
    return data


def collect_charts(session) -> Dict[str, go.Figure]:
    """Charts available for export in the session's current state.

    The base scatter chart once data is loaded; the linear-model chart only
    after the model has been run.
    """
    charts = {}
    for entry, key in EXPORT_CHARTS.items():
        fig = session.value(key)
        if fig is not None:
            charts[entry] = fig
    return charts


__all__ = [
    "ExportError",
    "archive_name",
    "write_png",
    "export_charts",
    "collect_charts",
]
