from .fits import DegenerateFitError, FitResult, fit_dataset, fit_linear  # noqa: F401
from .summary import format_fit_summary  # noqa: F401
