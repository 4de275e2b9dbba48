import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from utils import logging as app_logging


@pytest.fixture(autouse=True)
def _isolated_error_log(tmp_path, monkeypatch):
    """Keep error.log writes out of the source tree."""
    monkeypatch.setattr(app_logging, "_log_file", str(tmp_path / "error.log"))
    yield
