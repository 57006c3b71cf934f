from .data_model import Dataset, DatasetError, load_dataset, table_view  # noqa: F401
from .reactive import Missing, ReactiveGraph, require  # noqa: F401
from .session import Session, Stage  # noqa: F401
