"""Text rendering of fit statistics."""
from __future__ import annotations

import math

from ..constants import SUMMARY_DIGITS
from .fits import FitResult


def _fmt(value: float, digits: int) -> str:
    if value is None or math.isnan(value):
        return "NA"
    return f"{value:.{digits}g}"


def format_fit_summary(fit: FitResult, digits: int = SUMMARY_DIGITS) -> str:
    return "\n".join([
        f"Slope: {_fmt(fit.slope, digits)}",
        f"Intercept: {_fmt(fit.intercept, digits)}",
        f"Correlation Coefficient: {_fmt(fit.correlation, digits)}",
    ])


__all__ = ["format_fit_summary"]
