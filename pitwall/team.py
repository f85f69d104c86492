"""A racing team: its cars, engineers, strategist, logistics and points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from .car import BaseCar
from .engineering import Engineering, TestType
from .equipment import CarAdapter, Container, Equipment, Storage

if TYPE_CHECKING:
    from .logistics import Logistics
    from .raceweekend import RaceWeekend
    from .strategist import Strategist
    from .testing import Testing

_T = TypeVar("_T")

_SEASON_SEPARATOR = "---------End of season results---------"


@dataclass(frozen=True)
class Cars:
    """The team's two race cars."""

    car1: BaseCar
    car2: BaseCar


@dataclass(frozen=True)
class Engineers:
    """The team's two engineering groups."""

    current: Engineering
    next: Engineering


def _require(value: _T | None, what: str) -> _T:
    if value is None:
        raise RuntimeError(f"team has no {what}")
    return value


class Team:
    """Holds everything a team takes through a season and keeps its points."""

    def __init__(self, name: str) -> None:
        self.team_name = name
        self.team_points = 0
        self.car1_points = 0
        self.car2_points = 0

        self.current: Engineering | None = None
        self.next_engineering: Engineering | None = None
        self.testing: Testing | None = None

        self.car1: BaseCar | None = None
        self.car2: BaseCar | None = None

        self.strategist: Strategist | None = None
        self.logistics: Logistics | None = None

        self.garage: Equipment | None = None
        self.catering: Equipment | None = None

    @property
    def cars(self) -> Cars:
        """Both race cars."""
        return Cars(_require(self.car1, "car"), _require(self.car2, "car"))

    @property
    def engineers(self) -> Engineers:
        """The current and next engineering groups."""
        return Engineers(
            _require(self.current, "current engineering"),
            _require(self.next_engineering, "next engineering"),
        )

    def add_points(self, d1_points: int, d2_points: int) -> None:
        """Add each driver's points, and their sum to the constructor total."""
        self.car1_points += d1_points
        self.car2_points += d2_points
        self.team_points += d1_points + d2_points

    def print_season_results(self) -> None:
        """Print constructor and driver points."""
        print()
        print(_SEASON_SEPARATOR)
        print(f"CONSTRUCTOR POINTS \n{self.team_name}\t{self.team_points}")
        print(
            f"DRIVER POINTS \nCar 1\t{self.car1_points}\n"
            f"Car 2\t{self.car2_points}\n"
        )

    def set_car(self, car: BaseCar) -> None:
        """Use the car as the first car and a clone of it as the second."""
        self.car1 = car
        self.car2 = car.clone()

    def set_engineers(
        self, current: Engineering, next_engineering: Engineering
    ) -> None:
        """Install both engineering groups and have them build their components."""
        self.current = current
        current.build_components()
        self.next_engineering = next_engineering
        next_engineering.build_components()

    def race_preparations(self, race: RaceWeekend) -> None:
        """Fit components to both cars and choose their tyres."""
        cars = self.cars
        _require(self.current, "current engineering").build_cars(cars.car1, cars.car2)
        _require(self.strategist, "strategist").strategy(cars.car1, cars.car2, race)

    def race_end(self) -> None:
        """Strip both cars after the race."""
        cars = self.cars
        _require(self.current, "current engineering").disassemble(cars.car1, cars.car2)

    def run_tests(self) -> None:
        """Run wind tunnel and simulation tests for both engineering groups."""
        print("Wind Tunnel Tests and Simulation Tests will be performed on all components")
        testing = _require(self.testing, "testing")
        engineers = self.engineers
        for _ in range(9):
            testing.test(engineers.current, TestType.WINDTUNNEL)
            testing.test(engineers.current, TestType.SIMULATION)
            testing.test(engineers.next, TestType.WINDTUNNEL)
            testing.test(engineers.next, TestType.SIMULATION)

    def test(self, test_type: TestType, engineering: Engineering) -> None:
        """Run one test of the given type for one engineering group."""
        _require(self.testing, "testing").test(engineering, test_type)

    def transport(self, race: RaceWeekend | None) -> None:
        """Pack all equipment and both cars and send them to the race.

        With no race the containers go back to the factory and the cars are
        serviced.
        """
        print(f"{self.team_name} prepares containers to ship all their equipment")
        cars = self.cars
        logistics = _require(self.logistics, "logistics")
        storage = [
            Storage(Container(_require(self.garage, "garage equipment"))),
            Storage(Container(_require(self.catering, "catering equipment"))),
            Storage(Container(CarAdapter(cars.car1))),
            Storage(Container(CarAdapter(cars.car2))),
        ]
        for slot in storage:
            logistics.transport(race, slot.container)

        if race is None:
            _require(self.current, "current engineering").service(cars.car1, cars.car2)

    def season_end(self) -> None:
        """Print the results and hand next season's components to current engineering."""
        self.print_season_results()
        engineers = self.engineers
        for current, upcoming in zip(
            engineers.current.components, engineers.next.components
        ):
            current.performance = upcoming.performance
            upcoming.performance = 0
        print(
            "Next Engineering transfers its components to Current Engineering "
            "and begins its work on new components"
        )