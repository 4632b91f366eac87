import random

import pytest

from skybomber.core.settings import ConfigurationError, WorldSettings
from skybomber.core.terrain import TerrainPoint, TerrainProfile, generate_terrain


def test_generated_profile_spans_world(world_settings: WorldSettings):
    profile = generate_terrain(world_settings, random.Random(5))

    assert len(profile) == world_settings.segments + 1
    assert profile.points[0].x == 0
    assert profile.points[-1].x == pytest.approx(world_settings.width)


def test_generation_rejects_zero_segments():
    with pytest.raises(ConfigurationError):
        generate_terrain(WorldSettings(segments=0), random.Random(1))


def test_seeded_generation_is_repeatable():
    settings = WorldSettings(seed=99)

    first = generate_terrain(settings)
    second = generate_terrain(settings)

    assert first.as_tuples() == second.as_tuples()


def test_profile_needs_two_increasing_points():
    with pytest.raises(ConfigurationError):
        TerrainProfile([TerrainPoint(0, 10)], world_height=100)
    with pytest.raises(ConfigurationError):
        TerrainProfile([TerrainPoint(0, 10), TerrainPoint(0, 20)], world_height=100)


def test_height_interpolates_between_points():
    profile = TerrainProfile(
        [TerrainPoint(0, 100), TerrainPoint(10, 200), TerrainPoint(20, 100)],
        world_height=300,
    )

    assert profile.height_at(5) == pytest.approx(150)
    assert profile.height_at(15) == pytest.approx(150)
    assert profile.height_at(10) == pytest.approx(200)


def test_height_outside_profile_uses_fallback():
    profile = TerrainProfile([TerrainPoint(0, 100), TerrainPoint(10, 120)], world_height=300)

    assert profile.height_at(-0.5) == 250
    assert profile.height_at(10.001) == 250


def test_height_query_is_idempotent(world_settings: WorldSettings):
    profile = generate_terrain(world_settings)

    for x in (0.0, 13.7, 200.0, 399.9):
        assert profile.height_at(x) == profile.height_at(x)


def test_is_below_ground_is_strict():
    profile = TerrainProfile.flat(100, 300, 80)

    assert profile.is_below_ground(50, 80.5)
    assert not profile.is_below_ground(50, 80)
    assert not profile.is_below_ground(50, 79)
