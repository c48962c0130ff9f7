from __future__ import annotations

import math

from pygame.math import Vector2


def heading_from_velocity(vector: Vector2) -> float:
    """Angle in radians a rocket sprite faces; the sprite's long axis points along +y."""
    return math.atan2(vector.y, vector.x) + math.pi / 2.0


def window_to_screen(position: Vector2 | tuple[float, float], screen_dimensions: int) -> tuple[float, float]:
    """Centre-origin, y-up window coordinates to pygame's top-left, y-down pixels."""
    half = screen_dimensions * 0.5
    return (position[0] + half, half - position[1])
