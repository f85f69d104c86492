"""Engineering departments that each produce one kind of component."""

from __future__ import annotations

from typing import ClassVar

from .car import Aerodynamics, Chassis, Component, Electronics, Engine


class EngineeringDepartment:
    """Owns one component and sets its performance when producing it."""

    component_class: ClassVar[type[Component]]

    def __init__(self) -> None:
        self.component: Component = self.component_class()

    def produce(self, performance: int = 0) -> Component:
        """Return the department's component, set to a positive performance if given."""
        if performance > 0:
            self.component.performance = performance
        return self.component


class AerodynamicsDepartment(EngineeringDepartment):
    component_class = Aerodynamics


class ChassisDepartment(EngineeringDepartment):
    component_class = Chassis


class ElectronicsDepartment(EngineeringDepartment):
    component_class = Electronics


class EngineDepartment(EngineeringDepartment):
    component_class = Engine