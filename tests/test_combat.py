import pytest

from battle_city.core.combat import (
    apply_power_up,
    collect_power_ups,
    damage_enemy,
    resolve_hits,
    spawn_power_up,
    tick_power_ups,
)
from battle_city.core.entities import Archetype, Heading, PowerUpKind, Projectile, Side, make_enemy
from battle_city.core.events import GameEvent
from battle_city.core.projectiles import advance_projectiles
from battle_city.core.session import GamePhase, Session


def _fire_at(session: Session, x: float, y: float, side: Side) -> Projectile:
    projectile = Projectile(x, y, Heading.UP, side)
    session.projectiles.append(projectile)
    return projectile


def test_player_projectile_destroys_normal_enemy(
    open_session: Session, recorded_events: list
) -> None:
    enemy = make_enemy(open_session.settings, Archetype.NORMAL, 200, 200)
    open_session.enemies.append(enemy)
    projectile = _fire_at(open_session, 216, 216, Side.PLAYER)

    resolve_hits(open_session)

    assert not projectile.active
    assert not enemy.active
    assert open_session.player.player.score == 100
    assert recorded_events == [GameEvent.EXPLOSION]
    assert open_session.power_ups == []


def test_armored_enemy_takes_three_hits(open_session: Session) -> None:
    enemy = make_enemy(open_session.settings, Archetype.ARMORED, 200, 200)
    open_session.enemies.append(enemy)

    for remaining in (2, 1):
        _fire_at(open_session, 216, 216, Side.PLAYER)
        resolve_hits(open_session)
        assert enemy.active
        assert enemy.enemy.health == remaining

    _fire_at(open_session, 216, 216, Side.PLAYER)
    resolve_hits(open_session)
    assert not enemy.active
    assert open_session.player.player.score == 100


def test_projectile_hits_only_first_overlapping_enemy(open_session: Session) -> None:
    first = make_enemy(open_session.settings, Archetype.NORMAL, 200, 200)
    second = make_enemy(open_session.settings, Archetype.NORMAL, 210, 200)
    open_session.enemies.extend([first, second])
    _fire_at(open_session, 222, 216, Side.PLAYER)

    resolve_hits(open_session)

    assert not first.active
    assert second.active


def test_enemy_projectiles_pass_through_enemies(open_session: Session) -> None:
    enemy = make_enemy(open_session.settings, Archetype.NORMAL, 200, 200)
    open_session.enemies.append(enemy)
    projectile = _fire_at(open_session, 216, 216, Side.ENEMY)

    resolve_hits(open_session)

    assert projectile.active
    assert enemy.active


def test_unshielded_player_loses_life_and_respawns(
    open_session: Session, recorded_events: list
) -> None:
    player = open_session.player
    player.player.shield_timer = 0.0
    player.x, player.y, player.heading = 300.0, 300.0, Heading.LEFT
    projectile = _fire_at(open_session, 316, 316, Side.ENEMY)

    resolve_hits(open_session)

    assert not projectile.active
    assert player.player.lives == 2
    assert (player.x, player.y) == open_session.spawn_point == (404, 444)
    assert player.heading is Heading.UP
    assert player.player.shield_timer == pytest.approx(3.0)
    assert recorded_events == [GameEvent.EXPLOSION]
    assert open_session.phase is GamePhase.PLAYING


def test_shielded_player_ignores_hits(open_session: Session) -> None:
    player = open_session.player
    assert player.player.shield_timer > 0
    projectile = _fire_at(open_session, *player.center, Side.ENEMY)

    resolve_hits(open_session)

    assert projectile.active
    assert player.player.lives == 3


def test_last_life_ends_the_game(open_session: Session, recorded_events: list) -> None:
    player = open_session.player
    player.player.lives = 1
    player.player.shield_timer = 0.0
    player.player.score = 700
    _fire_at(open_session, *player.center, Side.ENEMY)
    spare = _fire_at(open_session, *player.center, Side.ENEMY)

    resolve_hits(open_session)

    assert open_session.phase is GamePhase.GAME_OVER
    assert open_session.final_score == 700
    assert player.player.lives == 0
    assert recorded_events == [GameEvent.EXPLOSION, GameEvent.GAME_OVER]
    assert spare.active


def test_base_is_destroyed_exactly_once(open_session: Session, recorded_events: list) -> None:
    base = open_session.base
    first = Projectile(base.x + 20, base.y - 20, Heading.DOWN, Side.ENEMY)
    open_session.projectiles.append(first)

    advance_projectiles(open_session, 0.05)

    assert not first.active
    assert not base.alive
    assert open_session.phase is GamePhase.GAME_OVER
    assert recorded_events == [GameEvent.EXPLOSION, GameEvent.GAME_OVER]

    second = Projectile(base.x + 20, base.y - 20, Heading.DOWN, Side.PLAYER)
    open_session.projectiles.append(second)
    advance_projectiles(open_session, 0.05)
    open_session.destroy_base()

    assert recorded_events == [GameEvent.EXPLOSION, GameEvent.GAME_OVER]


def test_kill_can_drop_power_up(open_session: Session, scripted_random) -> None:
    open_session.rng = scripted_random([0.1])
    enemy = make_enemy(open_session.settings, Archetype.FAST, 120, 80)
    open_session.enemies.append(enemy)

    assert damage_enemy(open_session, enemy)

    assert len(open_session.power_ups) == 1
    power_up = open_session.power_ups[0]
    assert (power_up.x, power_up.y) == (120, 80)
    assert power_up.kind in PowerUpKind
    assert power_up.timer == pytest.approx(10.0)


@pytest.mark.parametrize(
    "kind, check",
    [
        (PowerUpKind.SHIELD, lambda s: s.player.player.shield_timer == pytest.approx(10.0)),
        (PowerUpKind.LIFE, lambda s: s.player.player.lives == 4),
        (
            PowerUpKind.RAPID_FIRE,
            lambda s: s.player.fire_cooldown == pytest.approx(0.25)
            and s.player.player.rapid_fire_timer == pytest.approx(10.0),
        ),
        (PowerUpKind.FREEZE, lambda s: s.frozen_timer == pytest.approx(5.0) and s.frozen),
    ],
)
def test_power_up_effects(open_session: Session, kind: PowerUpKind, check) -> None:
    apply_power_up(open_session, kind)
    assert check(open_session)


def test_freeze_restarts_rather_than_stacks(open_session: Session) -> None:
    apply_power_up(open_session, PowerUpKind.FREEZE)
    apply_power_up(open_session, PowerUpKind.FREEZE)
    assert open_session.frozen_timer == pytest.approx(5.0)

    open_session.frozen_timer = 1.5
    apply_power_up(open_session, PowerUpKind.FREEZE)
    assert open_session.frozen_timer == pytest.approx(5.0)


def test_player_collects_overlapping_power_up(
    open_session: Session, recorded_events: list
) -> None:
    player = open_session.player
    nearby = spawn_power_up(open_session, player.x + 10, player.y + 10, PowerUpKind.LIFE)
    far = spawn_power_up(open_session, 100, 100, PowerUpKind.SHIELD)

    assert collect_power_ups(open_session) is PowerUpKind.LIFE

    assert not nearby.active
    assert far.active
    assert player.player.lives == 4
    assert recorded_events == [GameEvent.POWER_UP_COLLECTED]


def test_power_ups_expire(open_session: Session) -> None:
    power_up = spawn_power_up(open_session, 100, 100, PowerUpKind.SHIELD)

    tick_power_ups(open_session, 9.9)
    assert power_up.active

    tick_power_ups(open_session, 0.1)
    assert not power_up.active
