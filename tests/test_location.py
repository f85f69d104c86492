import dataclasses

import pytest

from pitwall.location import Location, LocationType


def test_location_keeps_type_and_venue():
    location = Location(LocationType.EUROPEAN, "Monaco")
    assert location.location_type is LocationType.EUROPEAN
    assert location.venue == "Monaco"


def test_location_non_european():
    location = Location(LocationType.NONEUROPEAN, "Japan")
    assert location.location_type is LocationType.NONEUROPEAN
    assert location.venue == "Japan"


def test_location_is_immutable():
    location = Location(LocationType.FACTORY, "Base")
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.venue = "Elsewhere"
    assert location.venue == "Base"
    assert location.location_type is LocationType.FACTORY


def test_locations_compare_by_value():
    first = Location(LocationType.EUROPEAN, "Spain")
    second = Location(LocationType.EUROPEAN, "Spain")
    other = Location(LocationType.EUROPEAN, "Italy")
    assert first == second
    assert (first == other) is False
    assert second.venue == "Spain"