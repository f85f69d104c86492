"""Equipment a team ships to race weekends, and the containers that hold it."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .car import Car


class EquipmentType(IntEnum):
    GARAGE = 0
    CATERING = 1
    CAR = 2


class Equipment(ABC):
    """Something that can be packed into a container and transported."""

    equipment_type: ClassVar[EquipmentType]


class GarageEquipment(Equipment):
    equipment_type = EquipmentType.GARAGE


class CateringEquipment(Equipment):
    equipment_type = EquipmentType.CATERING


@dataclass(eq=False)
class CarAdapter(Equipment):
    """Lets a race car be packed and transported like any other equipment."""

    equipment_type: ClassVar[EquipmentType] = EquipmentType.CAR

    car: Car


@dataclass
class Container:
    """A shipping container holding one piece of equipment."""

    equipment: Equipment


@dataclass
class Storage:
    """A storage slot holding one container."""

    container: Container