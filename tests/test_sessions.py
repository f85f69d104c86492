import random
from types import SimpleNamespace

import pytest

from pitwall.engineering import TestType
from pitwall.sessions import FinishPosition, Practice, Qualifying, Race


class ScriptedRandom:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


def make_team():
    team = SimpleNamespace(
        engineers=SimpleNamespace(current=object(), next=object()),
        tests=[],
    )

    def record(test_type, engineering):
        team.tests.append((test_type, engineering))

    team.test = record
    return team


@pytest.mark.parametrize("session_class", [Practice, Qualifying, Race])
def test_positions_are_distinct_and_on_the_grid(session_class):
    session = session_class(random.Random(7))
    team = make_team()
    for _ in range(200):
        result = session.run_session(team)
        assert 1 <= result.car1 <= 20
        assert 1 <= result.car2 <= 20
        assert result.car1 != result.car2


@pytest.mark.parametrize("session_class", [Qualifying, Race])
def test_equal_positions_are_redrawn(session_class):
    rng = ScriptedRandom([5, 5, 3, 7])
    result = session_class(rng).run_session(make_team())
    assert result == FinishPosition(3, 7)
    assert rng.calls == [(1, 20)] * 4


def test_practice_runs_a_practice_test_on_current_engineering():
    team = make_team()
    rng = ScriptedRandom([2, 9])
    result = Practice(rng).run_session(team)
    assert result == FinishPosition(2, 9)
    assert team.tests == [(TestType.PRACTICE, team.engineers.current)]


def test_qualifying_does_not_test_components():
    team = make_team()
    Qualifying(ScriptedRandom([1, 2])).run_session(team)
    assert team.tests == []