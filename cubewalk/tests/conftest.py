"""Pytest configuration for cube walk tests."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandom:
    """Random source replaying fixed draws so exact paths can be asserted."""

    def __init__(self, randoms: Sequence[float] = (), choices: Sequence[int] = ()) -> None:
        self._randoms: List[float] = list(randoms)
        self._choices: List[int] = list(choices)

    def random(self) -> float:
        return self._randoms.pop(0)

    def choice(self, seq):
        return seq[self._choices.pop(0)]

    @property
    def exhausted(self) -> bool:
        return not self._randoms and not self._choices


# //2.- Expose the scripted generator class to tests that need deterministic draws.
@pytest.fixture
def scripted_random():
    return ScriptedRandom
