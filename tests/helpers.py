from __future__ import annotations

import pygame


def square(center: tuple[float, float], half: float) -> list[pygame.Vector2]:
    """Axis-aligned counter-clockwise square in world space."""
    cx, cy = center
    return [
        pygame.Vector2(cx - half, cy - half),
        pygame.Vector2(cx + half, cy - half),
        pygame.Vector2(cx + half, cy + half),
        pygame.Vector2(cx - half, cy + half),
    ]
