"""A chain of component testers that report results to engineering."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol

from .car import ComponentType
from .engineering import Engineering, TestResult, TestType


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Testing(ABC):
    """A link in a chain of responsibility that handles one type of test."""

    __test__ = False

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self.next: Testing | None = None
        self._rng: _RandomSource = rng if rng is not None else random.Random()

    def add_next(self, next_tester: Testing | None) -> None:
        """Append a tester to the end of the chain."""
        if self.next is not None:
            self.next.add_next(next_tester)
        else:
            self.next = next_tester

    @abstractmethod
    def test(self, engineering: Engineering, test_type: TestType) -> None:
        """Run the test if it is of this tester's type, else pass it along."""

    def notify(
        self,
        engineering: Engineering,
        result: TestResult,
        component: ComponentType,
    ) -> None:
        """Tell engineering the result for one component."""
        engineering.upgrade(result, component)

    def _pass_on(self, engineering: Engineering, test_type: TestType) -> None:
        if self.next is not None:
            self.next.test(engineering, test_type)

    def _test_components(self, engineering: Engineering) -> None:
        result = TestResult(self._rng.randrange(3))
        for component in list(engineering.components):
            self.notify(engineering, result, component.component_type)


class WindTunnel(Testing):
    """Handles wind tunnel tests while the shared run allowance lasts."""

    def test(self, engineering: Engineering, test_type: TestType) -> None:
        if test_type == TestType.WINDTUNNEL and engineering.wind_tunnel_runs > 0:
            self._test_components(engineering)
            engineering.wind_tunnel_runs -= 1
        else:
            self._pass_on(engineering, test_type)


class Simulation(Testing):
    """Handles simulation tests."""

    def test(self, engineering: Engineering, test_type: TestType) -> None:
        if test_type == TestType.SIMULATION:
            self._test_components(engineering)
        else:
            self._pass_on(engineering, test_type)


class PracticeTest(Testing):
    """Handles tests run during practice sessions."""

    def test(self, engineering: Engineering, test_type: TestType) -> None:
        if test_type == TestType.PRACTICE:
            print("Practice Test: Start...")
            self._test_components(engineering)
            print("All parts tested")
            print("Practice Test: End")
        else:
            self._pass_on(engineering, test_type)