from .packager import (  # noqa: F401
    ExportError,
    archive_name,
    collect_charts,
    export_charts,
    write_png,
)
