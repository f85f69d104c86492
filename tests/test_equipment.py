from pitwall.car import BaseCar
from pitwall.equipment import (
    CarAdapter,
    CateringEquipment,
    Container,
    EquipmentType,
    GarageEquipment,
    Storage,
)


def test_garage_equipment_type():
    assert GarageEquipment().equipment_type is EquipmentType.GARAGE


def test_catering_equipment_type():
    assert CateringEquipment().equipment_type is EquipmentType.CATERING


def test_car_adapter_wraps_car():
    car = BaseCar()
    adapter = CarAdapter(car)
    assert adapter.car is car
    assert adapter.equipment_type is EquipmentType.CAR


def test_equipment_types_are_distinct():
    kinds = {
        GarageEquipment().equipment_type,
        CateringEquipment().equipment_type,
        CarAdapter(BaseCar()).equipment_type,
    }
    assert kinds == set(EquipmentType)


def test_container_and_storage_round_trip():
    garage = GarageEquipment()
    container = Container(garage)
    storage = Storage(container)
    assert storage.container is container
    assert storage.container.equipment is garage