import random

import pytest

from battle_city.core.entities import Archetype, WaveState
from battle_city.core.session import Session
from battle_city.core.waves import ADVANCE, SPAWNING, WAITING_FOR_CLEAR, WaveDirector


@pytest.mark.parametrize("wave, quota", [(1, 5), (2, 7), (4, 11)])
def test_quota_grows_by_two_per_wave(arena_settings, wave: int, quota: int) -> None:
    assert WaveDirector(arena_settings).quota(wave) == quota


def test_archetypes_unlock_one_per_wave(arena_settings) -> None:
    director = WaveDirector(arena_settings)
    assert director.unlocked_archetypes(1) == (Archetype.NORMAL,)
    assert director.unlocked_archetypes(2) == (Archetype.NORMAL, Archetype.FAST)
    everything = (Archetype.NORMAL, Archetype.FAST, Archetype.ARMORED)
    assert director.unlocked_archetypes(3) == everything
    assert director.unlocked_archetypes(9) == everything


def test_phase_reporting(arena_settings) -> None:
    director = WaveDirector(arena_settings, WaveState(wave=1, to_spawn=2, timer=1.0))
    assert director.phase(0) == SPAWNING
    director.state.to_spawn = 0
    assert director.phase(3) == WAITING_FOR_CLEAR
    assert director.phase(0) == ADVANCE


def test_first_wave_spawns_full_quota(open_session: Session) -> None:
    director = open_session.waves
    assert director.wave == 0

    assert director.update(open_session, 0.016) is None
    assert (director.wave, director.to_spawn) == (1, 5)
    assert director.state.timer == pytest.approx(3.0)

    assert director.update(open_session, 2.0) is None
    first = director.update(open_session, 1.0)
    assert first is not None
    assert open_session.enemies == [first]
    assert director.to_spawn == 4

    for expected in (2, 3, 4, 5):
        assert director.update(open_session, 1.0) is None
        assert director.update(open_session, 1.0) is not None
        assert len(open_session.enemies) == expected

    assert director.to_spawn == 0
    spawn_points = open_session.settings.spawn_points()
    assert all((enemy.x, enemy.y) in spawn_points for enemy in open_session.enemies)
    assert all(enemy.enemy.archetype is Archetype.NORMAL for enemy in open_session.enemies)


def test_next_wave_waits_for_clear_field(open_session: Session) -> None:
    director = open_session.waves
    director.state = WaveState(wave=1, to_spawn=0, timer=0.0)
    director.spawn(open_session)

    director.update(open_session, 5.0)
    assert director.wave == 1

    open_session.enemies[0].active = False
    director.update(open_session, 0.016)
    assert (director.wave, director.to_spawn) == (2, 7)
    assert director.state.timer == pytest.approx(3.0)


def test_spawned_archetypes_stay_within_unlocks(open_session: Session) -> None:
    open_session.rng = random.Random(3)
    director = open_session.waves

    director.state = WaveState(wave=2)
    second_wave = {director.spawn(open_session).enemy.archetype for _ in range(40)}
    assert second_wave <= {Archetype.NORMAL, Archetype.FAST}
    assert Archetype.FAST in second_wave

    director.state = WaveState(wave=3)
    third_wave = {director.spawn(open_session).enemy.archetype for _ in range(60)}
    assert Archetype.ARMORED in third_wave


def test_spawned_enemies_match_archetype_stats(open_session: Session) -> None:
    open_session.rng = random.Random(11)
    director = open_session.waves
    director.state = WaveState(wave=3)
    for _ in range(30):
        enemy = director.spawn(open_session)
        traits = enemy.enemy
        if traits.archetype is Archetype.FAST:
            assert enemy.speed == 170
            assert traits.health == 1
        elif traits.archetype is Archetype.ARMORED:
            assert enemy.speed == 130
            assert traits.health == 3
        else:
            assert (enemy.speed, traits.health) == (130, 1)


def test_hud_counts_pending_and_active_enemies(open_session: Session) -> None:
    director = open_session.waves
    director.state = WaveState(wave=2, to_spawn=4, timer=1.0)
    director.spawn(open_session)
    director.spawn(open_session)
    open_session.enemies[0].active = False

    hud = open_session.hud()
    assert hud.wave == 2
    assert hud.enemies_remaining == 5
