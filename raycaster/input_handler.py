"""
Input handling abstraction to decouple Pygame input from game logic.
"""

from __future__ import annotations
import pygame
from typing import List
from .player import Command

# Delay and interval (milliseconds) for repeated KEYDOWN events on held keys
KEY_REPEAT_DELAY_MS = 200
KEY_REPEAT_INTERVAL_MS = 30

KEY_COMMANDS = {
    pygame.K_UP: Command.FORWARD,
    pygame.K_w: Command.FORWARD,
    pygame.K_DOWN: Command.BACKWARD,
    pygame.K_s: Command.BACKWARD,
    # Ray 0 (smallest angle) is the leftmost column, so looking left on
    # screen lowers the angle
    pygame.K_LEFT: Command.ROTATE_RIGHT,
    pygame.K_a: Command.ROTATE_RIGHT,
    pygame.K_RIGHT: Command.ROTATE_LEFT,
    pygame.K_d: Command.ROTATE_LEFT,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_x)


class InputHandler:
    """
    Abstraction for gathering input. Turns Pygame key presses into discrete
    movement commands, in the order they arrived.
    """

    def __init__(self) -> None:
        self._quit = False
        self._commands: List[Command] = []

    @staticmethod
    def enable_key_repeat() -> None:
        """Make held keys emit repeated KEYDOWN events."""
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)

    def process_events(self) -> None:
        """Poll Pygame events and collect quit requests and movement commands."""
        self._quit = False
        self._commands = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    self._quit = True
                elif event.key in KEY_COMMANDS:
                    self._commands.append(KEY_COMMANDS[event.key])

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def get_commands(self) -> List[Command]:
        """Return the movement commands received since the last poll."""
        return list(self._commands)
