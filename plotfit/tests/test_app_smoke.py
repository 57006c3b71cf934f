from pathlib import Path

import pytest


def test_compile_app():
    # Only compile (syntax check) without executing the Streamlit script
    app_path = Path(__file__).resolve().parents[1] / "app.py"
    source = app_path.read_text(encoding="utf-8")
    compile(source, str(app_path), "exec")


def test_ui_modules_import():
    pytest.importorskip("streamlit")
    from plotfit.ui import helpers, sections  # noqa: F401

    assert helpers.SESSION_KEY == "plotfit_session"
