import plotly.graph_objects as go
import plotly.io as pio

from .constants import TEMPLATE_NAME


def _dark_template() -> go.layout.Template:
    tmpl = go.layout.Template(pio.templates["plotly_dark"])
    axis = dict(
        showline=True,
        linecolor="white",
        tickfont=dict(color="white"),
        title=dict(font=dict(color="white")),
        zeroline=False,
    )
    tmpl.layout.update(
        plot_bgcolor="black",
        paper_bgcolor="black",
        font=dict(color="white"),
        legend=dict(font=dict(color="white")),
        xaxis=axis,
        yaxis=axis,
    )
    return tmpl


def register_theme(name: str = TEMPLATE_NAME) -> str:
    """Register the dark chart template under *name* (idempotent)."""
    if name not in pio.templates:
        pio.templates[name] = _dark_template()
    return name
