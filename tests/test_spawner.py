from __future__ import annotations

import random

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from skybomber.core.entities import Tank
from skybomber.core.input import DirectionalState, InputState
from skybomber.core.session import GameSession
from skybomber.core.settings import WorldSettings
from skybomber.core.spawner import EntitySpawner
from skybomber.core.terrain import TerrainPoint, TerrainProfile


def test_populate_fills_empty_world(make_state):
    state = make_state(ground_y=300)
    spawner = EntitySpawner(random.Random(3))

    report = spawner.populate(state)

    assert report.tanks == 4
    assert report.fuel_cans == 2
    assert len(state.tanks) == 4
    assert len(state.fuel_cans) == 2


def test_spawned_entities_sit_on_the_terrain(make_state):
    state = make_state()
    state.terrain = TerrainProfile(
        [TerrainPoint(0, 250), TerrainPoint(200, 350), TerrainPoint(400, 280)],
        world_height=400,
    )
    spawner = EntitySpawner(random.Random(11))

    spawner.populate(state)

    for tank in state.tanks:
        assert 40 <= tank.x <= 360
        assert tank.y == pytest.approx(state.terrain.height_at(tank.x) - 26)
    for can in state.fuel_cans:
        assert 60 <= can.x <= 340
        assert can.y == pytest.approx(state.terrain.height_at(can.x) - 16)


def test_populate_only_replaces_missing_entities(make_state):
    state = make_state()
    survivor = Tank(x=100, y=274)
    state.tanks = [survivor, Tank(x=150, y=274)]
    spawner = EntitySpawner(random.Random(4))

    report = spawner.populate(state)

    assert report.tanks == 2
    assert state.tanks[0] is survivor
    assert len(state.tanks) == 4


def test_full_population_spawns_nothing(make_state):
    state = make_state()
    spawner = EntitySpawner(random.Random(4))
    spawner.populate(state)

    report = spawner.populate(state)

    assert report.total == 0


@pytest.mark.property
@settings(max_examples=20, deadline=None)
@given(
    seed=st.integers(min_value=0, max_value=10_000),
    actions=st.lists(
        st.tuples(st.booleans(), st.sampled_from([-1, 0, 1]), st.sampled_from([-1, 0, 1])),
        max_size=120,
    ),
)
def test_population_targets_hold_after_every_tick(seed: int, actions: list) -> None:
    """Tank and fuel can counts are back on target after each spawn phase."""

    session = GameSession(WorldSettings(seed=seed))
    assert len(session.tanks) == 4
    assert len(session.fuel_cans) == 2

    for fire, dx, dy in actions:
        controls = InputState(
            directions=DirectionalState(
                up=dy < 0, down=dy > 0, left=dx < 0, right=dx > 0
            ),
            fire_requested=fire,
        )
        session.tick(controls)
        assert len(session.tanks) == 4
        assert len(session.fuel_cans) == 2
        assert all(tank.alive for tank in session.tanks)
        assert all(can.alive for can in session.fuel_cans)
