import os
import sys

import pytest

# Ensure the repo root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import FakeWindow, FakeClock, ScriptedKeyboard


@pytest.fixture
def clock():
    return FakeClock()


__all__ = ["FakeWindow", "FakeClock", "ScriptedKeyboard"]
