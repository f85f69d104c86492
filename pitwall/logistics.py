"""Vehicles that move containers to race weekends, as a chain of responsibility."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from .equipment import Container, EquipmentType
from .location import LocationType

if TYPE_CHECKING:
    from .raceweekend import RaceWeekend


class Logistics(ABC):
    """A vehicle that either carries a container or hands it down the chain."""

    name: ClassVar[str]

    def __init__(self) -> None:
        self.next: Logistics | None = None

    def add_next(self, vehicle: Logistics | None) -> None:
        """Append a vehicle to the end of the chain."""
        if self.next is not None:
            self.next.add_next(vehicle)
        else:
            self.next = vehicle

    def remove_next(self) -> None:
        """Detach everything after this vehicle."""
        self.next = None

    @abstractmethod
    def transport(self, race: RaceWeekend | None, container: Container) -> None:
        """Carry the container to the race, or back to the factory if no race."""


class Truck(Logistics):
    """Carries equipment other than cars to European races."""

    name = "Truck"

    def transport(self, race: RaceWeekend | None, container: Container) -> None:
        if race is None:
            print("The container is transported back to the factory")
            return
        if (
            race.location.location_type == LocationType.EUROPEAN
            and container.equipment.equipment_type != EquipmentType.CAR
        ):
            print(
                "The Truck transports equipment to the race track of the "
                "European race"
            )
            return
        if self.next is not None:
            self.next.transport(race, container)


class Ship(Logistics):
    """Carries equipment other than cars to non-European races."""

    name = "Ship"

    def transport(self, race: RaceWeekend | None, container: Container) -> None:
        if race is None:
            print(
                "None of the vehicles in the chain of responsibility are able to "
                "transport the container! Please purchase a Truck"
            )
            return
        if (
            race.location.location_type == LocationType.NONEUROPEAN
            and container.equipment.equipment_type != EquipmentType.CAR
        ):
            print("The ship transports the equipment as this is a NON European race!")
            return
        if self.next is not None:
            self.next.transport(race, container)


class Plane(Logistics):
    """Carries the cars."""

    name = "Plane"

    def transport(self, race: RaceWeekend | None, container: Container) -> None:
        if race is None:
            print("The container is transported back to the factory")
            return
        if container.equipment.equipment_type == EquipmentType.CAR:
            print("The Car is transported by a plane with extreme caution!")
            return
        if self.next is None:
            raise RuntimeError("no vehicle in the chain can transport the container")
        self.next.transport(race, container)