"""Chooses tyres for both cars from a race weekend's recommended strategy."""

from __future__ import annotations

from .car import BaseCar
from .raceweekend import RaceWeekend, RecommendedStrategy
from .tyres import (
    AggressiveStrategy,
    BalancedStrategy,
    ConservativeStrategy,
    TyreStrategy,
)

_STRATEGIES: dict[RecommendedStrategy, type[TyreStrategy]] = {
    RecommendedStrategy.AGGRESSIVE: AggressiveStrategy,
    RecommendedStrategy.BALANCED: BalancedStrategy,
    RecommendedStrategy.CONSERVATIVE: ConservativeStrategy,
}


class Strategist:
    """Sets each car's tyres according to the race's recommended strategy."""

    def strategy(self, car1: BaseCar, car2: BaseCar, race: RaceWeekend) -> None:
        """Give each car its own set of tyres for the race."""
        tyre_strategy = _STRATEGIES[race.strategy]()
        car1.tyres = tyre_strategy.strategy()
        car2.tyres = tyre_strategy.strategy()