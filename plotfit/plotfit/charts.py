import plotly.express as px
import plotly.graph_objects as go

from .analysis.fits import FitResult
from .constants import (
    LINE_COLOR,
    LINE_WIDTH,
    MARKER_COLOR,
    OVERLAY_TITLE,
    SCATTER_TITLE,
)
from .core.data_model import Dataset
from .themes import register_theme


def make_scatter(dataset: Dataset, title: str = SCATTER_TITLE) -> go.Figure:
    """Markers of column 1 (x) against column 2 (y) in the dark theme."""
    x, y = dataset.xy()
    x_title, y_title = dataset.axis_titles()
    fig = px.scatter(
        x=x.to_numpy(),
        y=y.to_numpy(),
        template=register_theme(),
    )
    fig.update_traces(
        mode="markers",
        marker=dict(color=MARKER_COLOR),
        name="data",
    )
    fig.update_layout(
        title=title,
        xaxis_title=x_title,
        yaxis_title=y_title,
    )
    return fig


def make_fit_overlay(dataset: Dataset, fit: FitResult) -> go.Figure:
    """A fresh scatter figure with ``slope*x + intercept`` drawn over it."""
    fig = make_scatter(dataset, title=OVERLAY_TITLE)
    x, _ = dataset.xy_numeric()
    fig.add_trace(
        go.Scatter(
            x=x.to_numpy(),
            y=fit.predict(x),
            mode="lines",
            line=dict(color=LINE_COLOR, width=LINE_WIDTH),
            name=fit.equation,
        )
    )
    return fig


__all__ = ["make_scatter", "make_fit_overlay"]
