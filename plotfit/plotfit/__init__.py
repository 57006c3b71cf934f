"""plotfit package root.

Exposes high-level API surface for convenience.
"""
from .core import Dataset, Session, Stage, load_dataset  # noqa: F401
from .analysis import FitResult, fit_linear, format_fit_summary  # noqa: F401
from .charts import make_scatter, make_fit_overlay  # noqa: F401
from .export import archive_name, export_charts  # noqa: F401
