"""Per-session state: the current Dataset, the model trigger and everything
derived from them.

One ``Session`` lives in each browser session's ``st.session_state``; handlers
receive it explicitly. Wiring of derived values:

    dataset ──► table
            ├─► scatter
            └─► fit ◄── model_trigger
                 ├─► overlay ◄── dataset
                 └─► summary

Uploading a new file resets ``model_trigger`` in the same assignment, so a fit
computed on the previous data is cleared rather than shown next to new data.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from ..analysis.fits import fit_dataset
from ..analysis.summary import format_fit_summary
from ..charts import make_fit_overlay, make_scatter
from .data_model import Dataset, table_view
from .reactive import ReactiveGraph, require

LOGGER = logging.getLogger(__name__)


class Stage(Enum):
    NO_DATA = "no_data"
    DATA_LOADED = "data_loaded"
    MODELED = "modeled"


def build_graph() -> ReactiveGraph:
    g = ReactiveGraph()
    g.input("dataset")
    g.input("model_trigger")

    @g.derived("table", ["dataset"])
    def _table(dataset):
        return table_view(require(dataset))

    @g.derived("scatter", ["dataset"])
    def _scatter(dataset):
        return make_scatter(require(dataset))

    @g.derived("fit", ["dataset", "model_trigger"])
    def _fit(dataset, model_trigger):
        require(model_trigger)
        return fit_dataset(require(dataset))

    @g.derived("overlay", ["dataset", "fit"])
    def _overlay(dataset, fit):
        return make_fit_overlay(require(dataset), require(fit))

    @g.derived("summary", ["fit"])
    def _summary(fit):
        return format_fit_summary(require(fit))

    return g


class Session:
    def __init__(self):
        self.graph = build_graph()

    @property
    def dataset(self) -> Optional[Dataset]:
        return self.graph.get("dataset")

    @property
    def stage(self) -> Stage:
        if self.dataset is None:
            return Stage.NO_DATA
        if self.value("fit") is not None:
            return Stage.MODELED
        return Stage.DATA_LOADED

    def upload(self, dataset: Dataset) -> bool:
        """Replace the Dataset; returns False if it is the one already loaded."""
        current = self.dataset
        if (
            current is not None
            and dataset.fingerprint is not None
            and current.fingerprint == dataset.fingerprint
        ):
            LOGGER.debug("Upload %s unchanged; keeping dataset", dataset.source)
            return False
        self.graph.set(dataset=dataset, model_trigger=None)
        LOGGER.info("Dataset replaced with %s", dataset.source)
        return True

    def run_model(self):
        """Model trigger: refit the current Dataset and redraw the overlay."""
        presses = self.graph.get("model_trigger") or 0
        self.graph.set(model_trigger=presses + 1)
        return self.graph.get("fit")

    def clear(self):
        self.graph.set(dataset=None, model_trigger=None)

    def get(self, name: str) -> Any:
        """Current value of *name*; re-raises the error that produced it."""
        return self.graph.get(name)

    def value(self, name: str) -> Any:
        """Current value of *name*, or ``None`` if computing it failed."""
        if self.graph.error(name) is not None:
            return None
        return self.graph.get(name)

    def error(self, name: str) -> Optional[BaseException]:
        return self.graph.error(name)


__all__ = ["Session", "Stage", "build_graph"]
