import os

# Qt widgets are created without a display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import gc

import pytest


@pytest.fixture(autouse=True)
def _collect_qt_garbage():
    # Release widgets left over from a test before the next one runs.
    yield
    gc.collect()
