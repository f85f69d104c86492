"""A race weekend: practice, qualifying and race at one venue."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from .location import Location
from .sessions import Practice, Qualifying, Race, _RandomSource

if TYPE_CHECKING:
    from .team import Team

_POINTS = {1: 25, 2: 18, 3: 15, 4: 12, 5: 10, 6: 8, 7: 6, 8: 4, 9: 2, 10: 1}


class RecommendedStrategy(IntEnum):
    AGGRESSIVE = 0
    BALANCED = 1
    CONSERVATIVE = 2


class RaceWeekend:
    """Runs the sessions of one Grand Prix and awards points."""

    def __init__(
        self,
        location: Location,
        strategy: RecommendedStrategy,
        rng: _RandomSource | None = None,
    ) -> None:
        self.location = location
        self.strategy = strategy
        self.practice = Practice(rng)
        self.qualifying = Qualifying(rng)
        self.race = Race(rng)

    def determine_driver_points(self, position: int) -> int:
        """Championship points for a finishing position."""
        return _POINTS.get(position, 0)

    def run_sessions(self, team: Team) -> None:
        """Run practice, qualifying and the race, then award points."""
        team.race_preparations(self)
        print(
            f"Welcome to FORMULA 1 Grand Prix where {team.team_name} will be "
            f"racing, along with others, here at {self.location.venue}"
        )

        practice = self.practice.run_session(team)
        print(
            f"#####Practice#### \n{team.team_name} have completed their practice "
            f"laps with car 1 finishing in position {practice.car1} and car 2 "
            f"finishing in position {practice.car2}\n"
        )

        qualifying = self.qualifying.run_session(team)
        print(
            "#####Qualifying### \nAfter completing the qualifying lap, car 1 "
            f"finished in position {qualifying.car1} and car 2 finshed in "
            f"position {qualifying.car2}\n"
        )

        race = self.race.run_session(team)
        print(
            "#####Race#### \nIts lights out and away we go! \nWith the final "
            f"race completed, car 1 finished in position {race.car1} and car 2 "
            f"finshed in position {race.car2}\n"
        )

        team.add_points(
            self.determine_driver_points(race.car1),
            self.determine_driver_points(race.car2),
        )
        team.race_end()

        print(
            f"Season so far... \n{team.team_name} \t{team.team_points} points\n"
            f"Driver 1 \t{team.car1_points} points \n"
            f"Driver 2 \t{team.car2_points} points"
        )
        print("Thanks for joining us this weekend and we hope to see you next time!\n")