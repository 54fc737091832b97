import pytest

from battle_city.core.ai import heading_towards, probe_ahead, reroll_state, update_enemy
from battle_city.core.entities import AIState, Archetype, Heading, Side, make_enemy
from battle_city.core.grid import Tile
from battle_city.core.session import Session


def _enemy(session: Session, x: float, y: float, heading: Heading = Heading.UP):
    enemy = make_enemy(session.settings, Archetype.NORMAL, x, y)
    enemy.heading = heading
    enemy.enemy.ai_state = AIState.ATTACK_BASE
    enemy.enemy.direction_timer = 5.0
    session.enemies.append(enemy)
    return enemy


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0.0, AIState.ATTACK_BASE),
        (0.69, AIState.ATTACK_BASE),
        (0.7, AIState.PATROL),
        (0.89, AIState.PATROL),
        (0.9, AIState.ATTACK_PLAYER),
    ],
)
def test_reroll_state_weights(scripted_random, roll: float, expected: AIState) -> None:
    assert reroll_state(scripted_random([roll])) is expected


def test_heading_follows_dominant_axis(open_session: Session) -> None:
    enemy = _enemy(open_session, 200, 200)
    assert heading_towards(enemy, 400, 250) is Heading.RIGHT
    assert heading_towards(enemy, 0, 150) is Heading.LEFT
    assert heading_towards(enemy, 250, 500) is Heading.DOWN
    assert heading_towards(enemy, 180, 0) is Heading.UP
    # Ties go to the vertical axis.
    assert heading_towards(enemy, 300, 300) is Heading.DOWN


def test_probe_reaches_past_front_edge(open_session: Session) -> None:
    enemy = _enemy(open_session, 100, 100, Heading.RIGHT)
    assert probe_ahead(enemy, 100, 100, 15) == (100 + 16 + 31, 116)
    enemy.heading = Heading.UP
    assert probe_ahead(enemy, 100, 100, 15) == (116, 116 - 31)


def test_attack_base_enemy_turns_towards_base(open_session: Session) -> None:
    enemy = _enemy(open_session, 404, 44, Heading.LEFT)
    enemy.enemy.direction_timer = 0.0

    update_enemy(open_session, enemy, 0.05)

    assert enemy.heading is Heading.DOWN
    assert enemy.y == pytest.approx(44 + 130 * 0.05)
    assert enemy.enemy.direction_timer == pytest.approx(1.5 + 0.99 * 2)


def test_attack_player_enemy_turns_towards_player(open_session: Session) -> None:
    enemy = _enemy(open_session, 44, 444, Heading.UP)
    enemy.enemy.ai_state = AIState.ATTACK_PLAYER
    enemy.enemy.direction_timer = 0.0

    update_enemy(open_session, enemy, 0.05)

    assert enemy.heading is Heading.RIGHT
    assert enemy.x > 44


def test_blocked_enemy_shoots_brick_ahead(open_session: Session) -> None:
    open_session.grid.set_tile(5, 5, Tile.BRICK)
    enemy = _enemy(open_session, 204, 236)

    update_enemy(open_session, enemy, 0.05)

    assert (enemy.x, enemy.y) == (204, 236)
    assert enemy.enemy.direction_timer == 0.0
    assert len(open_session.projectiles) == 1
    projectile = open_session.projectiles[0]
    assert projectile.side is Side.ENEMY
    assert projectile.heading is Heading.UP


def test_blocked_enemy_does_not_shoot_steel(open_session: Session) -> None:
    open_session.grid.set_tile(5, 5, Tile.STEEL)
    enemy = _enemy(open_session, 204, 236)

    update_enemy(open_session, enemy, 0.05)

    assert enemy.enemy.direction_timer == 0.0
    assert open_session.projectiles == []


def test_random_fire(open_session: Session, scripted_random) -> None:
    enemy = _enemy(open_session, 204, 236)
    # Reroll check misses, fire check hits.
    open_session.rng = scripted_random([0.99, 0.0])

    update_enemy(open_session, enemy, 0.05)

    assert len(open_session.projectiles) == 1


def test_frozen_enemy_only_cools_down(open_session: Session) -> None:
    enemy = _enemy(open_session, 204, 236)
    enemy.fire_timer = 0.5
    open_session.frozen_timer = 2.0
    open_session.rng = None  # a frozen enemy must not roll

    update_enemy(open_session, enemy, 0.1)

    assert (enemy.x, enemy.y) == (204, 236)
    assert enemy.enemy.direction_timer == 5.0
    assert enemy.fire_timer == pytest.approx(0.4)
    assert open_session.projectiles == []


def test_reroll_can_switch_state(open_session: Session, scripted_random) -> None:
    enemy = _enemy(open_session, 204, 236)
    open_session.rng = scripted_random([0.001, 0.95])

    update_enemy(open_session, enemy, 0.05)

    assert enemy.enemy.ai_state is AIState.ATTACK_PLAYER
