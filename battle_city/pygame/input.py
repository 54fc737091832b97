"""Keyboard input for the pygame client."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame

from battle_city.core.events import InputState
from battle_city.pygame.keybindings import KeyBindings


class KeyboardInput:
    """Read the held keys once per frame and expose them as an InputState."""

    def __init__(self, bindings: Optional[KeyBindings] = None) -> None:
        self.bindings = bindings or KeyBindings()

    def snapshot(self, pressed: Optional[Sequence[bool]] = None) -> InputState:
        if pressed is None:
            pressed = pygame.key.get_pressed()
        bindings = self.bindings

        def held(keys: Sequence[int]) -> bool:
            return any(pressed[key] for key in keys)

        return InputState(
            up=held(bindings.up),
            down=held(bindings.down),
            left=held(bindings.left),
            right=held(bindings.right),
            fire=held(bindings.fire),
        )

    def is_start(self, event: pygame.event.Event) -> bool:
        return event.type == pygame.KEYDOWN and event.key in self.bindings.start

    def is_quit(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return True
        return event.type == pygame.KEYDOWN and event.key in self.bindings.quit


__all__ = ["KeyboardInput"]
