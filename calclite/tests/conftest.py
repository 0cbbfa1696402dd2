import sys
from pathlib import Path

import pytest

# Put the project directory (holding the 'calclite' package dir) on sys.path
TEST_FILE = Path(__file__).resolve()
PROJECT_DIR = TEST_FILE.parents[1]
sp = str(PROJECT_DIR)
if sp not in sys.path:
    sys.path.insert(0, sp)


@pytest.fixture
def calculator():
    from calclite import Calculator
    return Calculator()
