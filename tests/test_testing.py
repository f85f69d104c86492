import pytest

from pitwall.car import ComponentType
from pitwall.engineering import (
    CurrentEngineering,
    TestResult,
    TestType,
)
from pitwall.testing import PracticeTest, Simulation, Testing, WindTunnel


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def randrange(self, stop):
        assert stop == 3
        self.calls += 1
        return self.value


@pytest.fixture(autouse=True)
def restore_runs():
    saved = CurrentEngineering().wind_tunnel_runs
    yield
    CurrentEngineering().wind_tunnel_runs = saved


@pytest.fixture
def engineering():
    eng = CurrentEngineering()
    eng.build_components()
    for kind in ComponentType:
        eng.upgrade(TestResult.UPGRADE, kind)
        eng.upgrade(TestResult.UPGRADE, kind)
    return eng


def _performances(eng):
    return [c.performance for c in eng.components]


def test_testing_is_abstract():
    with pytest.raises(TypeError):
        Testing()


def test_wind_tunnel_upgrade_and_decrement(engineering):
    engineering.wind_tunnel_runs = 5
    before = _performances(engineering)
    WindTunnel(_FixedRng(TestResult.UPGRADE)).test(engineering, TestType.WINDTUNNEL)
    assert _performances(engineering) == [p + 1 for p in before]
    assert engineering.wind_tunnel_runs == 4


def test_wind_tunnel_downgrade(engineering):
    before = _performances(engineering)
    WindTunnel(_FixedRng(TestResult.DOWNGRADE)).test(engineering, TestType.WINDTUNNEL)
    assert _performances(engineering) == [p - 1 for p in before]


def test_wind_tunnel_without_runs_passes_on(engineering):
    engineering.wind_tunnel_runs = 0
    tunnel_rng = _FixedRng(TestResult.UPGRADE)
    tunnel = WindTunnel(tunnel_rng)
    follower_rng = _FixedRng(TestResult.UPGRADE)
    follower = WindTunnel(follower_rng)
    tunnel.add_next(follower)
    before = _performances(engineering)
    tunnel.test(engineering, TestType.WINDTUNNEL)
    assert _performances(engineering) == before
    assert tunnel_rng.calls == 0
    assert follower_rng.calls == 0
    assert engineering.wind_tunnel_runs == 0


def test_simulation_handles_own_type(engineering):
    before = _performances(engineering)
    Simulation(_FixedRng(TestResult.UPGRADE)).test(engineering, TestType.SIMULATION)
    assert _performances(engineering) == [p + 1 for p in before]


def test_unhandled_type_without_next_does_nothing(engineering):
    rng = _FixedRng(TestResult.UPGRADE)
    before = _performances(engineering)
    Simulation(rng).test(engineering, TestType.PRACTICE)
    assert _performances(engineering) == before
    assert rng.calls == 0


def test_chain_routes_to_matching_tester(engineering):
    wind_rng = _FixedRng(TestResult.UPGRADE)
    sim_rng = _FixedRng(TestResult.DOWNGRADE)
    practice_rng = _FixedRng(TestResult.UPGRADE)
    chain = WindTunnel(wind_rng)
    chain.add_next(Simulation(sim_rng))
    chain.add_next(PracticeTest(practice_rng))
    chain.add_next(None)
    runs = engineering.wind_tunnel_runs
    before = _performances(engineering)
    chain.test(engineering, TestType.SIMULATION)
    assert _performances(engineering) == [p - 1 for p in before]
    assert (wind_rng.calls, sim_rng.calls, practice_rng.calls) == (0, 1, 0)
    assert engineering.wind_tunnel_runs == runs


def test_add_next_appends_to_end():
    first, second, third = WindTunnel(), Simulation(), PracticeTest()
    first.add_next(second)
    first.add_next(third)
    assert first.next is second
    assert second.next is third
    assert third.next is None


def test_practice_test_prints_and_upgrades(engineering, capsys):
    before = _performances(engineering)
    PracticeTest(_FixedRng(TestResult.UPGRADE)).test(engineering, TestType.PRACTICE)
    out = capsys.readouterr().out
    assert "Practice Test: Start..." in out
    assert "Practice Test: End" in out
    assert _performances(engineering) == [p + 1 for p in before]


def test_nochange_result_keeps_performance(engineering):
    before = _performances(engineering)
    PracticeTest(_FixedRng(TestResult.NOCHANGE)).test(engineering, TestType.PRACTICE)
    assert _performances(engineering) == before


def test_notify_upgrades_one_component(engineering):
    before = engineering.departments[ComponentType.ENGINE].component.performance
    Simulation().notify(engineering, TestResult.UPGRADE, ComponentType.ENGINE)
    after = engineering.departments[ComponentType.ENGINE].component.performance
    assert after == before + 1
    chassis = engineering.departments[ComponentType.CHASSIS].component.performance
    assert chassis == before