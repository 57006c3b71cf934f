import math

import numpy as np
import pandas as pd
import pytest

from plotfit.analysis.fits import DegenerateFitError, fit_dataset, fit_linear
from plotfit.analysis.summary import format_fit_summary
from plotfit.core.data_model import Dataset


def test_exact_line():
    res = fit_linear(pd.Series([1, 2, 3]), pd.Series([2, 4, 6]))
    assert res.slope == pytest.approx(2.0)
    assert res.intercept == pytest.approx(0.0, abs=1e-12)
    assert res.correlation == pytest.approx(1.0)
    assert res.n == 3


def test_normal_equations_hold():
    rng = np.random.default_rng(7)
    x = rng.uniform(-5, 5, 40)
    y = 1.5 * x - 2 + rng.normal(0, 0.8, 40)
    res = fit_linear(x, y)
    resid = y - (res.slope * x + res.intercept)
    # sum(r) = 0 and sum(x*r) = 0
    assert resid.sum() == pytest.approx(0.0, abs=1e-9)
    assert (x * resid).sum() == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("ax,bx,ay,by", [
    (2.0, 10.0, 1.0, 0.0),
    (0.5, -3.0, 7.0, 100.0),
])
def test_correlation_affine_invariant(ax, bx, ay, by):
    x = np.array([1.0, 2.0, 4.0, 5.0, 7.0])
    y = np.array([3.0, 2.5, 6.0, 5.5, 9.0])
    base = fit_linear(x, y).correlation
    scaled = fit_linear(ax * x + bx, ay * y + by).correlation
    assert scaled == pytest.approx(base, rel=1e-9)


def test_deterministic(noisy_df):
    ds = Dataset(noisy_df)
    assert fit_dataset(ds) == fit_dataset(ds)


@pytest.mark.parametrize("x,y", [
    ([1.0], [2.0]),
    ([], []),
    ([3.0, 3.0, 3.0], [1.0, 2.0, 3.0]),
])
def test_degenerate_inputs_rejected(x, y):
    with pytest.raises(DegenerateFitError):
        fit_linear(x, y)


def test_constant_y_gives_flat_line():
    res = fit_linear([1.0, 2.0, 3.0], [4.0, 4.0, 4.0])
    assert res.slope == 0.0
    assert res.intercept == 4.0
    assert math.isnan(res.correlation)


def test_fit_dataset_single_column():
    ds = Dataset(pd.DataFrame({"x": [1, 2, 3]}))
    with pytest.raises(DegenerateFitError, match="1 column"):
        fit_dataset(ds)


def test_predict_and_equation():
    res = fit_linear([0, 1, 2, 3], [1, 3, 5, 7])
    assert list(res.predict([10])) == pytest.approx([21.0])
    assert res.equation == "y = 2x + 1"


def test_summary_text():
    res = fit_linear([1, 2, 3], [2, 4, 6])
    text = format_fit_summary(res)
    lines = text.splitlines()
    assert lines[0] == "Slope: 2"
    assert lines[1].startswith("Intercept: ")
    assert lines[2] == "Correlation Coefficient: 1"


def test_summary_reports_undefined_correlation():
    res = fit_linear([1, 2, 3], [5, 5, 5])
    assert "Correlation Coefficient: NA" in format_fit_summary(res)
