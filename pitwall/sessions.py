"""The sessions of a race weekend: practice, qualifying and the race."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .engineering import TestType

if TYPE_CHECKING:
    from .team import Team

GRID_SIZE = 20


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class FinishPosition:
    """Where each of the team's two cars finished a session."""

    car1: int
    car2: int


class RaceSession(ABC):
    """One session of a race weekend."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self._rng: _RandomSource = rng if rng is not None else random.Random()

    @abstractmethod
    def run_session(self, team: Team) -> FinishPosition:
        """Simulate the session and return both cars' positions."""

    def _positions(self) -> FinishPosition:
        while True:
            car1 = self._rng.randint(1, GRID_SIZE)
            car2 = self._rng.randint(1, GRID_SIZE)
            if car1 != car2:
                return FinishPosition(car1, car2)


class Practice(RaceSession):
    """Free practice, during which the current components are tested."""

    def run_session(self, team: Team) -> FinishPosition:
        team.test(TestType.PRACTICE, team.engineers.current)
        return self._positions()


class Qualifying(RaceSession):
    """Each car sets a lap to decide the starting grid."""

    def run_session(self, team: Team) -> FinishPosition:
        return self._positions()


class Race(RaceSession):
    """The race that decides the finishing positions."""

    def run_session(self, team: Team) -> FinishPosition:
        return self._positions()