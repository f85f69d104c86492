"""Tyre compounds and the tyre strategies that choose a race's allocation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Tyre:
    """A set of dry tyres; durability is how long the set lasts."""

    durability: int

    def clone(self) -> Tyre:
        """Return a fresh set of the same compound."""
        return type(self)()


@dataclass
class SoftTyre(Tyre):
    """Most grip and speed, lowest durability."""

    durability: int = 10


@dataclass
class MediumTyre(Tyre):
    """A balance between grip, speed and durability."""

    durability: int = 20


@dataclass
class HardTyre(Tyre):
    """Least grip and speed, highest durability."""

    durability: int = 30


class TyreStrategy(ABC):
    """Chooses the five sets of tyres a car takes to a race weekend."""

    def strategy(self) -> list[Tyre]:
        """Return the allocation this strategy prescribes."""
        return self.tyres()

    @abstractmethod
    def tyres(self) -> list[Tyre]:
        """Build a new list of tyre sets."""


class AggressiveStrategy(TyreStrategy):
    """Three sets of soft tyres and two sets of medium tyres."""

    def tyres(self) -> list[Tyre]:
        return [SoftTyre() for _ in range(3)] + [MediumTyre() for _ in range(2)]


class BalancedStrategy(TyreStrategy):
    """Two soft sets, two medium sets and one hard set."""

    def tyres(self) -> list[Tyre]:
        return (
            [SoftTyre() for _ in range(2)]
            + [MediumTyre() for _ in range(2)]
            + [HardTyre()]
        )


class ConservativeStrategy(TyreStrategy):
    """One soft set, three medium sets and one hard set."""

    def tyres(self) -> list[Tyre]:
        return [SoftTyre()] + [MediumTyre() for _ in range(3)] + [HardTyre()]