import sys
from pathlib import Path

import pandas as pd
import pytest

# Put the project directory (containing the 'plotfit' package and app.py) on sys.path
TEST_FILE = Path(__file__).resolve()
PROJECT_DIR = TEST_FILE.parents[1]
sp = str(PROJECT_DIR)
if sp not in sys.path:
    sys.path.insert(0, sp)


@pytest.fixture
def line_csv(tmp_path):
    path = tmp_path / "line.csv"
    pd.DataFrame({"x": [1, 2, 3], "y": [2, 4, 6]}).to_csv(path, index=False)
    return path


@pytest.fixture
def noisy_df():
    return pd.DataFrame({
        "height": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
        "weight": [2.1, 3.9, 6.2, 7.8, 10.1, 12.3],
        "label": ["a", "b", "c", "d", "e", "f"],
    })
