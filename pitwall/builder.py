"""Assembles a fully equipped team."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .car import BaseCar
from .engineering import CurrentEngineering, NextEngineering
from .equipment import CateringEquipment, GarageEquipment
from .logistics import Plane, Ship, Truck
from .strategist import Strategist
from .team import Team
from .testing import PracticeTest, Simulation, WindTunnel, _RandomSource


class Builder(ABC):
    """Builds a team from its parts."""

    @abstractmethod
    def build(self, name: str) -> Team:
        """Return a new team with the given name."""


class TeamBuilder(Builder):
    """Builds a team with cars, engineers, equipment, logistics and testers."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self._rng = rng

    def build(self, name: str) -> Team:
        team = Team(name)
        team.set_car(BaseCar())
        team.set_engineers(CurrentEngineering(), NextEngineering())
        team.strategist = Strategist()
        team.garage = GarageEquipment()
        team.catering = CateringEquipment()

        truck = Truck()
        truck.add_next(Ship())
        truck.add_next(Plane())
        team.logistics = truck

        wind_tunnel = WindTunnel(self._rng)
        wind_tunnel.add_next(Simulation(self._rng))
        wind_tunnel.add_next(PracticeTest(self._rng))
        team.testing = wind_tunnel

        return team


class Director:
    """Directs a team builder to produce a team."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self._rng = rng

    def build_team(self, name: str) -> Team:
        """Build and return a fully equipped team."""
        return TeamBuilder(self._rng).build(name)