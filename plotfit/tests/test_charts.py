import numpy as np
import pandas as pd
import pytest

from plotfit.analysis.fits import fit_dataset
from plotfit.charts import make_fit_overlay, make_scatter
from plotfit.constants import LINE_COLOR, MARKER_COLOR, TEMPLATE_NAME
from plotfit.core.data_model import Dataset
from plotfit.utils import DatasetError


def test_scatter_uses_first_two_columns(noisy_df):
    fig = make_scatter(Dataset(noisy_df))
    assert len(fig.data) == 1
    tr = fig.data[0]
    assert tr.mode == "markers"
    assert tr.marker.color == MARKER_COLOR
    assert list(tr.x) == list(noisy_df["height"])
    assert list(tr.y) == list(noisy_df["weight"])
    assert fig.layout.xaxis.title.text == "height"
    assert fig.layout.yaxis.title.text == "weight"


def test_scatter_dark_theme(noisy_df):
    import plotly.io as pio

    fig = make_scatter(Dataset(noisy_df))
    assert TEMPLATE_NAME in pio.templates
    assert fig.layout.template.layout.plot_bgcolor == "black"
    assert fig.layout.template.layout.paper_bgcolor == "black"


def test_scatter_rejects_single_column():
    with pytest.raises(DatasetError):
        make_scatter(Dataset(pd.DataFrame({"x": [1, 2]})))


def test_overlay_line_matches_fit(noisy_df):
    ds = Dataset(noisy_df)
    fit = fit_dataset(ds)
    fig = make_fit_overlay(ds, fit)
    assert len(fig.data) == 2
    line = fig.data[1]
    assert line.mode == "lines"
    assert line.line.color == LINE_COLOR
    expected = fit.slope * noisy_df["height"].to_numpy() + fit.intercept
    np.testing.assert_allclose(np.asarray(line.x), noisy_df["height"])
    np.testing.assert_allclose(np.asarray(line.y), expected)


def test_overlay_does_not_touch_base_chart(noisy_df):
    ds = Dataset(noisy_df)
    base = make_scatter(ds)
    make_fit_overlay(ds, fit_dataset(ds))
    assert len(base.data) == 1
