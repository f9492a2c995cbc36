import os
import sys

import pytest

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from connect_four.debug import debug, DebugLevel
from connect_four.game.rules import ConnectFourGame


@pytest.fixture(autouse=True)
def restore_debug_level():
    level = debug.level
    debug.configure(level=DebugLevel.WARNING)
    yield
    debug.configure(level=level, components=[])


@pytest.fixture
def game():
    return ConnectFourGame()
