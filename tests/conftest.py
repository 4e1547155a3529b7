"""
Shared fixtures for the game tests.
"""

import os
import tempfile

# Keep test logs out of the working directory; must run before the package is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="console_wordle_logs_"))

import random

import pytest

from console_wordle.services.word_source import WordSource


ANSWERS = ["CRANE", "ABIDE", "ALGAE", "SPEED", "LEVEL", "ALLOW", "SCOOP"]
EXTRAS = ["TRAIN", "BELLE", "EERIE", "LOLLY", "RAISE", "COOLS", "BOBBY"]


@pytest.fixture
def word_source():
    return WordSource(ANSWERS, EXTRAS)


@pytest.fixture
def crane_only_source():
    """A source whose only possible secret is CRANE."""
    return WordSource(["CRANE"], ANSWERS + EXTRAS)


@pytest.fixture
def rng():
    return random.Random(1234)
