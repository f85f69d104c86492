"""Race cars and the components bolted onto them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

from .tyres import Tyre

FULL_RELIABILITY = 100


class Car(ABC):
    """Anything that contributes performance to a race car."""

    def __init__(self, performance: int = 0) -> None:
        self.performance = performance
        self.reliability = FULL_RELIABILITY

    @abstractmethod
    def add(self, component: Car) -> None:
        """Fit a component to the car."""

    @abstractmethod
    def clone(self) -> Car:
        """Return a new object of the same kind."""

    def repair(self) -> None:
        """Restore full reliability."""
        self.reliability = FULL_RELIABILITY


class BaseCar(Car):
    """A bare chassis that collects components and tyres."""

    def __init__(self) -> None:
        super().__init__(0)
        self.components: list[Car] = []
        self.tyres: list[Tyre] = []

    def add(self, component: Car) -> None:
        self.components.append(component)
        self.performance += component.performance

    def clone(self) -> BaseCar:
        return BaseCar()

    def clear_components(self) -> None:
        """Strip all components and tyres and reset performance."""
        self.components.clear()
        self.tyres.clear()
        self.performance = 0


class ComponentType(IntEnum):
    AERODYNAMICS = 0
    CHASSIS = 1
    ELECTRONICS = 2
    ENGINE = 3


class Component(Car):
    """A part that is fitted to a base car."""

    component_type: ClassVar[ComponentType]

    def __init__(self, performance: int = 0) -> None:
        super().__init__(performance)
        self.base_car: Car | None = None

    def add(self, component: Car) -> None:
        """Fit a component to the base car this part belongs to."""
        if self.base_car is None:
            raise RuntimeError("component is not attached to a car")
        self.base_car.add(component)

    def clone(self) -> Component:
        """Return a detached part of the same kind and performance."""
        return type(self)(self.performance)


class Aerodynamics(Component):
    component_type = ComponentType.AERODYNAMICS


class Chassis(Component):
    component_type = ComponentType.CHASSIS


class Electronics(Component):
    component_type = ComponentType.ELECTRONICS


class Engine(Component):
    component_type = ComponentType.ENGINE