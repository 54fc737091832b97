"""Keybinding definitions for the Battle City pygame client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame

BINDING_LABELS = [
    ("Up", "up"),
    ("Down", "down"),
    ("Left", "left"),
    ("Right", "right"),
    ("Fire", "fire"),
]


@dataclass
class KeyBindings:
    up: Tuple[int, ...] = (pygame.K_UP, pygame.K_w)
    down: Tuple[int, ...] = (pygame.K_DOWN, pygame.K_s)
    left: Tuple[int, ...] = (pygame.K_LEFT, pygame.K_a)
    right: Tuple[int, ...] = (pygame.K_RIGHT, pygame.K_d)
    fire: Tuple[int, ...] = (pygame.K_SPACE,)
    start: Tuple[int, ...] = (pygame.K_RETURN, pygame.K_KP_ENTER)
    quit: Tuple[int, ...] = (pygame.K_ESCAPE,)

    def format_keys(self, action: str) -> str:
        keys = getattr(self, action)
        return "/".join(pygame.key.name(key).upper() for key in keys)

    def help_line(self) -> str:
        return "   ".join(
            f"{label}: {self.format_keys(action)}" for label, action in BINDING_LABELS
        )


__all__ = ["BINDING_LABELS", "KeyBindings"]
