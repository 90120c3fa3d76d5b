from __future__ import annotations

import pygame
import pytest

from shadowcast.geometry import Pose
from tests.helpers import square


@pytest.fixture
def origin() -> pygame.Vector2:
    return pygame.Vector2(0, 0)


@pytest.fixture
def square_at_20() -> list[pygame.Vector2]:
    """Square centred at (20, 0) with half-extent 5."""
    return square((20, 0), 5)


@pytest.fixture
def square_record() -> tuple[Pose, list[tuple[float, float]]]:
    """The same square as a (pose, local points) occluder record."""
    return Pose((20, 0)), [(-5, -5), (5, -5), (5, 5), (-5, 5)]
