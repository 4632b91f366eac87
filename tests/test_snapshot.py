import dataclasses

import pytest

from skybomber.core.entities import Bomb, ControlMode, Explosion, Tank
from skybomber.core.snapshot import build_snapshot
from skybomber.core.state import SessionStatus


def test_snapshot_mirrors_state(make_state):
    state = make_state(ground_y=300, aircraft=(120.0, 60.0))
    state.bombs = [Bomb(x=120.0, y=74.0)]
    state.explosions = [Explosion(x=50.0, y=298.0, radius=7.0, remaining_ticks=16)]
    state.tanks = [Tank(x=200.0, y=274.0), Tank(x=210.0, y=274.0, alive=False)]
    state.aircraft.score = 150

    snapshot = build_snapshot(state)

    assert snapshot.terrain == ((0.0, 300.0), (400.0, 300.0))
    assert (snapshot.aircraft.x, snapshot.aircraft.y) == (120.0, 60.0)
    assert [(b.x, b.y) for b in snapshot.bombs] == [(120.0, 74.0)]
    assert snapshot.explosions[0].radius == 7.0
    assert [(t.x, t.y) for t in snapshot.tanks] == [(200.0, 274.0)]
    assert snapshot.score == 150
    assert snapshot.fuel == state.aircraft.fuel
    assert snapshot.control_mode is ControlMode.DIRECTIONAL
    assert snapshot.status is SessionStatus.FLYING
    assert not snapshot.game_over


def test_snapshot_is_immutable(make_state):
    snapshot = build_snapshot(make_state())

    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.score = 10  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.aircraft.x = 1.0  # type: ignore[misc]


def test_snapshot_is_detached_from_later_changes(make_state):
    state = make_state(aircraft=(120.0, 60.0))
    snapshot = build_snapshot(state)

    state.aircraft.x = 200.0
    state.bombs.append(Bomb(x=200.0, y=80.0))

    assert snapshot.aircraft.x == 120.0
    assert snapshot.bombs == ()
