"""Simple linear regression of the second column on the first."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
from scipy import stats

LOGGER = logging.getLogger(__name__)


class DegenerateFitError(ValueError):
    """Raised when the data cannot support a least-squares line."""
    pass


@dataclass(frozen=True)
class FitResult:
    slope: float
    intercept: float
    correlation: float
    n: int
    r2: float
    stderr: float

    @property
    def equation(self) -> str:
        return f"y = {self.slope:.4g}x + {self.intercept:.4g}"

    def predict(self, x):
        return self.slope * np.asarray(x, dtype=float) + self.intercept


def fit_linear(x: pd.Series, y: pd.Series) -> FitResult:
    """Ordinary least squares of *y* on *x* plus the Pearson correlation.

    Raises ``DegenerateFitError`` for fewer than two points or a constant x.
    A constant y gives a flat line with an undefined (NaN) correlation.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if len(x_arr) != len(y_arr):
        raise DegenerateFitError("x and y must have the same length")
    n = len(x_arr)
    if n < 2:
        raise DegenerateFitError(
            f"At least 2 numeric rows are needed to fit a line (got {n})"
        )
    if not (np.isfinite(x_arr).all() and np.isfinite(y_arr).all()):
        raise DegenerateFitError("x and y must be finite numbers")
    if np.ptp(x_arr) == 0:
        raise DegenerateFitError(
            "x has zero variance; the slope is undefined"
        )
    if np.ptp(y_arr) == 0:
        # linregress divides by var(y) for r; the line itself is well defined
        return FitResult(
            slope=0.0,
            intercept=float(y_arr[0]),
            correlation=float("nan"),
            n=n,
            r2=float("nan"),
            stderr=0.0,
        )
    res = stats.linregress(x_arr, y_arr)
    r = float(res.rvalue)
    fit = FitResult(
        slope=float(res.slope),
        intercept=float(res.intercept),
        correlation=r,
        n=n,
        r2=r * r,
        stderr=float(res.stderr),
    )
    LOGGER.info("Linear fit on %d rows: %s (r=%.4g)", n, fit.equation, r)
    return fit


def fit_dataset(dataset) -> FitResult:
    """Fit the Dataset's first two columns (non-numeric cells are dropped)."""
    if len(dataset.df.columns) < 2:
        raise DegenerateFitError(
            f"'{dataset.source}' has {len(dataset.df.columns)} column(s); "
            "a line needs an x and a y column"
        )
    x, y = dataset.xy_numeric()
    return fit_linear(x, y)


__all__ = ["FitResult", "DegenerateFitError", "fit_linear", "fit_dataset"]
