"""Runs a full championship season for one team."""

from __future__ import annotations

import argparse

from .builder import Director
from .location import Location, LocationType
from .raceweekend import RaceWeekend, RecommendedStrategy

_EUROPEAN_RACES = 9

_CALENDAR: tuple[tuple[str, RecommendedStrategy], ...] = (
    ("Netherlands", RecommendedStrategy.AGGRESSIVE),
    ("Spain", RecommendedStrategy.AGGRESSIVE),
    ("Monaco", RecommendedStrategy.CONSERVATIVE),
    ("France", RecommendedStrategy.BALANCED),
    ("Austria", RecommendedStrategy.BALANCED),
    ("Great Britain", RecommendedStrategy.CONSERVATIVE),
    ("Hungary", RecommendedStrategy.AGGRESSIVE),
    ("Belguim", RecommendedStrategy.BALANCED),
    ("Italy", RecommendedStrategy.CONSERVATIVE),
    ("Austrailia", RecommendedStrategy.BALANCED),
    ("Bahrain", RecommendedStrategy.AGGRESSIVE),
    ("Vietnam", RecommendedStrategy.BALANCED),
    ("China", RecommendedStrategy.CONSERVATIVE),
    ("Azerbaijan", RecommendedStrategy.BALANCED),
    ("Canada", RecommendedStrategy.CONSERVATIVE),
    ("Singapore", RecommendedStrategy.AGGRESSIVE),
    ("Russia", RecommendedStrategy.CONSERVATIVE),
    ("Japan", RecommendedStrategy.AGGRESSIVE),
    ("United States", RecommendedStrategy.AGGRESSIVE),
    ("Mexico", RecommendedStrategy.CONSERVATIVE),
    ("Brazil", RecommendedStrategy.BALANCED),
    ("Abu Dhabi", RecommendedStrategy.BALANCED),
)

_INTRO = (
    "Welcome to the 2020 Formula One Championship.",
    "The championship will require all teams to perform the following "
    "procedures before racing:",
    "1. All teams should test and validate all components before transporting "
    "them to the race weekend's location.",
    "2. All teams must either transport their equipment by truck (European race "
    "weekend) or ship (non-european race weekend).",
    "3. All race cars are to be transported by plane.\n",
    "Once all procedures have been completed, may a team participate in a race "
    "weekend.",
    "Good luck to all racers!\n",
)

_RULE = "---------------------------------------------"


def build_races() -> list[RaceWeekend]:
    """Return the season's race weekends in calendar order."""
    return [
        RaceWeekend(
            Location(
                LocationType.EUROPEAN
                if index < _EUROPEAN_RACES
                else LocationType.NONEUROPEAN,
                venue,
            ),
            strategy,
        )
        for index, (venue, strategy) in enumerate(_CALENDAR)
    ]


def main(argv: list[str] | None = None) -> int:
    """Simulate a season of racing and print its progress."""
    parser = argparse.ArgumentParser(
        prog="pitwall", description="Simulate a Formula One season for one team."
    )
    parser.parse_args(argv)

    races = build_races()
    team = Director().build_team("Hangar-6")

    for line in _INTRO:
        print(line)

    for number, race in enumerate(races, start=1):
        print(f"Testing Components {_RULE}\n")
        team.run_tests()
        print("\n\n")

        print(f"Transporting Equipment {_RULE}\n")
        team.transport(race)
        print("\n\n")

        print(f"Race Weekend: {number} {_RULE}\n")
        race.run_sessions(team)
        team.transport(None)
        print("\n\n")

    team.season_end()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())