"""Pygame front-end for Battle City."""

from battle_city.pygame.app import BattleCityApp, run_pygame

__all__ = ["BattleCityApp", "run_pygame"]
