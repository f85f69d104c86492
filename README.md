# pitwall

pitwall simulates one season for a single Formula One team. The season has
22 race weekends. Before each weekend the team tests its components and
moves its equipment to the venue. Then it races and collects championship
points. All output goes to standard output.

## Running a season

Install the package and run the simulator:

```
pip install .
pitwall
```

The command has no options apart from `--help`. It runs the whole season and
exits with status 0. You can also start it with `python -m pitwall.main`.

The same steps run at every race weekend:

1. **Testing.** `Team.run_tests` runs nine rounds of wind tunnel and
   simulation tests. It does this for both the current and the next season's
   engineering groups. Each test upgrades, downgrades or leaves unchanged
   every component, with a random result. All engineering groups share one
   allowance of 400 wind tunnel runs. When it is used up, wind tunnel tests
   are passed down the tester chain and do nothing more.
2. **Transport.** `Team.transport(race)` packs the garage equipment, the
   catering equipment and both cars into containers. Each container goes
   down a chain of vehicles: `Truck`, then `Ship`, then `Plane`.
   - Trucks carry equipment to European races.
   - Ships carry equipment to non-European races.
   - Planes carry the cars.
3. **Race weekend.** `RaceWeekend.run_sessions` first builds both cars from
   the current components. It fits each car with tyres for the venue's
   recommended strategy. Then it runs practice, qualifying and the race:
   - Practice also runs a practice test on the current components.
   - Each session puts the two cars in two different random positions from
     1 to 20.
   - The race positions score 25, 18, 15, 12, 10, 8, 6, 4, 2 and 1 points
     for places 1 to 10, and nothing below that.
   - After the race the cars are stripped of their components and tyres.
4. **Return.** `Team.transport(None)` sends the containers back to the
   factory. It also services the cars and the current components.

At the end of the season `Team.season_end` prints the constructor and driver
points. Each next-season component then passes its performance to the
matching current component, and the next-season component is reset to 0.

## Using the library

Build a team with `Director` from `pitwall.builder` and race it over the
calendar from `pitwall.main.build_races`:

```python
from pitwall.builder import Director
from pitwall.main import build_races

team = Director().build_team("Hangar-6")
for race in build_races():
    team.run_tests()
    team.transport(race)
    race.run_sessions(team)
    team.transport(None)
team.season_end()
print(team.team_points, team.car1_points, team.car2_points)
```

You can make results repeatable by passing a seeded `random.Random`:

- `Director(rng)` passes it to the testers.
- `RaceWeekend(location, strategy, rng)` passes it to its sessions.

`build_races` always uses unseeded generators. Build your own
`RaceWeekend` objects if the sessions must be repeatable too.

### Modules

- `pitwall.tyres`: `SoftTyre` (durability 10), `MediumTyre` (20) and
  `HardTyre` (30), and these tyre strategies:
  - `AggressiveStrategy`: three soft and two medium sets.
  - `BalancedStrategy`: two soft, two medium and one hard set.
  - `ConservativeStrategy`: one soft, three medium and one hard set.
- `pitwall.car`: `BaseCar` and the components `Aerodynamics`, `Chassis`,
  `Electronics` and `Engine`.
- `pitwall.departments`: one engineering department for each component
  type.
- `pitwall.engineering`: `CurrentEngineering` and `NextEngineering`, plus the
  `TestResult` and `TestType` enums.
- `pitwall.testing`: the tester chain `WindTunnel`, `Simulation` and
  `PracticeTest`.
- `pitwall.equipment`: `GarageEquipment`, `CateringEquipment`, `CarAdapter`,
  `Container` and `Storage`.
- `pitwall.location`: `Location` and `LocationType`.
- `pitwall.logistics`: the vehicle chain `Truck`, `Ship` and `Plane`.
- `pitwall.sessions`: `Practice`, `Qualifying`, `Race` and `FinishPosition`.
- `pitwall.raceweekend`: `RaceWeekend` and `RecommendedStrategy`.
- `pitwall.strategist`: `Strategist`, which picks tyres for both cars.
- `pitwall.team`: `Team`.
- `pitwall.builder`: `Builder`, `TeamBuilder` and `Director`.

## What it does not do

- It simulates one team only. Other teams are not modelled, so the positions
  are random draws and not the result of a contest.
- Component performance, tyres and reliability do not affect the results.
- Results are printed only. Nothing is saved between runs.
- The command cannot change the calendar, the team name or the random seed.

## Running the tests

```
pip install ".[test]"
pytest
```