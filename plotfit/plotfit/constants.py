"""Central constants & enumerations."""

APP_TITLE = "CSV Data Viewer"
APP_VERSION = "0.1.0"

TEMPLATE_NAME = "plotfit_dark"
MARKER_COLOR = "deeppink"
LINE_COLOR = "pink"
LINE_WIDTH = 2

SCATTER_TITLE = "Scatter Plot"
OVERLAY_TITLE = "Scatter Plot with Linear Model"

# Archive entry stem -> chart key in the session graph
EXPORT_CHARTS = {
    "scatter_plot": "scatter",
    "linear_model_plot": "overlay",
}
ARCHIVE_PATTERN = "plots_{day}.zip"
IMAGE_FORMAT = "png"
IMAGE_WIDTH = 1000
IMAGE_HEIGHT = 600
IMAGE_SCALE = 2

SUMMARY_DIGITS = 6

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_LEVEL = "INFO"

__all__ = [
    "APP_TITLE",
    "APP_VERSION",
    "TEMPLATE_NAME",
    "MARKER_COLOR",
    "LINE_COLOR",
    "LINE_WIDTH",
    "SCATTER_TITLE",
    "OVERLAY_TITLE",
    "EXPORT_CHARTS",
    "ARCHIVE_PATTERN",
    "IMAGE_FORMAT",
    "IMAGE_WIDTH",
    "IMAGE_HEIGHT",
    "IMAGE_SCALE",
    "SUMMARY_DIGITS",
    "LOG_FORMAT",
    "LOG_LEVEL",
]
