"""Engineering teams that build, upgrade, fit and service car components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

from .car import BaseCar, Car, Component, ComponentType
from .departments import (
    AerodynamicsDepartment,
    ChassisDepartment,
    ElectronicsDepartment,
    EngineDepartment,
    EngineeringDepartment,
)


class TestResult(IntEnum):
    """Outcome of a component test."""

    __test__ = False

    NOCHANGE = 0
    UPGRADE = 1
    DOWNGRADE = 2


class TestType(IntEnum):
    """Kinds of test a component can go through."""

    __test__ = False

    WINDTUNNEL = 0
    SIMULATION = 1
    PRACTICE = 2


class Engineering(ABC):
    """An engineering team with one department per component type."""

    _wind_tunnel_runs: ClassVar[int] = 400

    def __init__(self) -> None:
        self.departments: dict[ComponentType, EngineeringDepartment] = {
            ComponentType.AERODYNAMICS: AerodynamicsDepartment(),
            ComponentType.CHASSIS: ChassisDepartment(),
            ComponentType.ELECTRONICS: ElectronicsDepartment(),
            ComponentType.ENGINE: EngineDepartment(),
        }
        self.components: list[Component] = []

    @property
    def wind_tunnel_runs(self) -> int:
        """Wind tunnel runs left, shared by every engineering team."""
        return Engineering._wind_tunnel_runs

    @wind_tunnel_runs.setter
    def wind_tunnel_runs(self, runs: int) -> None:
        Engineering._wind_tunnel_runs = runs

    def upgrade(self, result: TestResult, component: ComponentType) -> None:
        """Raise or lower a component's performance by one according to a test result."""
        department = self.departments[component]
        current = department.component.performance
        if result == TestResult.UPGRADE:
            department.produce(current + 1)
        elif result == TestResult.DOWNGRADE:
            department.produce(current - 1)

    def build_cars(self, car1: Car, car2: Car) -> None:
        """Fit a copy of every component to each of the two cars."""
        for component in self.components:
            for car in (car1, car2):
                part = component.clone()
                part.base_car = car
                part.add(part)

    def disassemble(self, car1: BaseCar, car2: BaseCar) -> None:
        """Strip both cars of their components and tyres."""
        car1.clear_components()
        car2.clear_components()

    @abstractmethod
    def build_components(self) -> None:
        """Have the departments produce the components this team works on."""

    def _produce_all(self) -> None:
        for kind in (
            ComponentType.AERODYNAMICS,
            ComponentType.ENGINE,
            ComponentType.ELECTRONICS,
            ComponentType.CHASSIS,
        ):
            self.components.append(self.departments[kind].produce())

    def service(self, car1: Car, car2: Car) -> None:
        """Repair every component and both cars."""
        print(
            "Both cars are currently being serviced. "
            "All parts are being tested and repaired."
        )
        for component in self.components:
            component.repair()
        car1.repair()
        car2.repair()

    def view_component_performance(self) -> None:
        """Print the performance of each component, one per line."""
        for component in self.components:
            print(component.performance)


class CurrentEngineering(Engineering):
    """Works on the components raced this season."""

    def build_components(self) -> None:
        self._produce_all()


class NextEngineering(Engineering):
    """Works on the components for next season."""

    def build_components(self) -> None:
        self._produce_all()