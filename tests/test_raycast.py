from __future__ import annotations

import math
import random

import pygame
import pytest

from shadowcast.errors import InvalidRay
from shadowcast.raycast import Ray, cast, cast_to_all, impact_point
from tests.helpers import square


def test_ray_normalizes_direction() -> None:
    ray = Ray((0, 0), (3, 4))
    assert ray.direction.x == pytest.approx(0.6)
    assert ray.direction.y == pytest.approx(0.8)


@pytest.mark.parametrize(
    "direction",
    [(0, 0), (float("nan"), 1), (float("inf"), 0)],
)
def test_invalid_direction_rejected(direction: tuple[float, float]) -> None:
    with pytest.raises(InvalidRay):
        Ray((0, 0), direction)


def test_from_angle() -> None:
    ray = Ray.from_angle((1, 1), math.pi / 2)
    assert ray.direction.x == pytest.approx(0, abs=1e-12)
    assert ray.direction.y == pytest.approx(1)
    assert ray.angle == pytest.approx(math.pi / 2)


def test_cast_hits_near_face(square_at_20: list[pygame.Vector2]) -> None:
    t = cast(Ray((0, 0), (1, 0)), square_at_20, 100)
    assert t == pytest.approx(15)


def test_cast_misses(square_at_20: list[pygame.Vector2]) -> None:
    assert cast(Ray((0, 0), (0, 1)), square_at_20, 100) is None
    assert cast(Ray((0, 0), (-1, 0)), square_at_20, 100) is None


def test_cast_respects_max_distance(square_at_20: list[pygame.Vector2]) -> None:
    ray = Ray((0, 0), (1, 0))
    assert cast(ray, square_at_20, 14.9) is None
    assert cast(ray, square_at_20, 15.0) == pytest.approx(15)


def test_cast_uses_ray_max_distance(square_at_20: list[pygame.Vector2]) -> None:
    assert cast(Ray((0, 0), (1, 0), max_distance=10), square_at_20) is None
    assert cast(Ray((0, 0), (1, 0), max_distance=50), square_at_20) == pytest.approx(15)


@pytest.mark.parametrize("limit", [0, -1, float("nan")])
def test_non_positive_max_distance_is_an_error(
    square_at_20: list[pygame.Vector2], limit: float
) -> None:
    with pytest.raises(ValueError):
        cast(Ray((0, 0), (1, 0)), square_at_20, limit)


def test_missing_max_distance_is_an_error(square_at_20: list[pygame.Vector2]) -> None:
    with pytest.raises(ValueError):
        cast(Ray((0, 0), (1, 0)), square_at_20)


def test_parallel_edges_contribute_nothing() -> None:
    # Ray runs along y = 5, collinear with the top edge of the square
    poly = square((20, 0), 5)
    assert cast(Ray((0, 5), (1, 0)), poly, 100) == pytest.approx(15)
    assert cast(Ray((0, 6), (1, 0)), poly, 100) is None


@pytest.mark.parametrize("vertex", [(15, 5), (15, -5)])
def test_ray_at_visible_vertex_hits_at_vertex_distance(
    square_at_20: list[pygame.Vector2], vertex: tuple[float, float]
) -> None:
    ray = Ray((0, 0), vertex)
    t = cast(ray, square_at_20, 100)
    assert t == pytest.approx(math.hypot(*vertex))


def test_ray_from_inside_hits_exit_edge(square_at_20: list[pygame.Vector2]) -> None:
    t = cast(Ray((20, 0), (1, 0)), square_at_20, 100)
    assert t == pytest.approx(5)


def test_smallest_t_across_edges() -> None:
    # y = 0.9x enters through the bottom edge and leaves through the right one
    poly = square((20, 20), 5)
    t = cast(Ray((0, 0), (1, 0.9)), poly, 100)
    assert t == pytest.approx(math.hypot(15 / 0.9, 15))


def test_cast_to_all_picks_nearer_occluder() -> None:
    far = square((40, 0), 5)
    near = square((20, 0), 5)
    ray = Ray((0, 0), (1, 0))
    assert cast_to_all(ray, [far, near], 100) == pytest.approx(15)
    assert cast_to_all(ray, [near, far], 100) == pytest.approx(15)


def test_cast_to_all_overlapping_occluders() -> None:
    a = square((20, 0), 5)
    b = square((23, 0), 5)
    assert cast_to_all(Ray((0, 0), (1, 0)), [b, a], 100) == pytest.approx(15)


def test_cast_to_all_empty_is_none() -> None:
    assert cast_to_all(Ray((0, 0), (1, 0)), [], 100) is None


def test_escape_point_is_exact() -> None:
    ray = Ray((2, 3), (0, -1))
    assert impact_point(ray, None, 250) == pygame.Vector2(2, -247)


def test_impact_point_for_hit(square_at_20: list[pygame.Vector2]) -> None:
    ray = Ray((0, 0), (1, 0))
    p = impact_point(ray, cast(ray, square_at_20, 100), 100)
    assert p.x == pytest.approx(15)
    assert p.y == pytest.approx(0)


def test_edge_through_ray_origin_is_ignored(square_at_20: list[pygame.Vector2]) -> None:
    # Origin on the bottom edge: up crosses to the top edge, down leaves at once
    assert cast(Ray((20, -5), (0, 1)), square_at_20, 100) == pytest.approx(10)
    assert cast(Ray((20, -5), (0, -1)), square_at_20, 100) is None


def test_ray_from_vertex_ignores_both_adjacent_edges(
    square_at_20: list[pygame.Vector2],
) -> None:
    assert cast(Ray((15, -5), (1, 1)), square_at_20, 100) == pytest.approx(math.hypot(10, 10))
    assert cast(Ray((15, -5), (-1, -1)), square_at_20, 100) is None


def _edge_crossings(origin, direction, polygon):
    """(t, u) for every non-parallel edge, solved as a 2x2 system by Cramer's rule."""
    crossings = []
    for a, b in zip(polygon, polygon[1:] + polygon[:1]):
        # origin + t * direction = a + u * (b - a)
        m00, m01 = direction.x, a.x - b.x
        m10, m11 = direction.y, a.y - b.y
        det = m00 * m11 - m01 * m10
        if abs(det) < 1e-6:
            continue
        rx, ry = a.x - origin.x, a.y - origin.y
        crossings.append(((rx * m11 - m01 * ry) / det, (m00 * ry - rx * m10) / det))
    return crossings


def _random_convex(rng: random.Random) -> tuple[pygame.Vector2, float, list[pygame.Vector2]]:
    center = pygame.Vector2(rng.uniform(-50, 50), rng.uniform(-50, 50))
    radius = rng.uniform(2, 15)
    count = rng.randint(3, 8)
    angles = sorted(rng.uniform(0, math.tau) for _ in range(count))
    points = [center + pygame.Vector2(radius, 0).rotate_rad(a) for a in angles]
    return center, radius, points


def test_cast_matches_edge_crossings_on_random_polygons() -> None:
    rng = random.Random(1234)
    checked = hits = 0

    while checked < 500:
        center, radius, polygon = _random_convex(rng)
        if len({(round(p.x, 6), round(p.y, 6)) for p in polygon}) < 3:
            continue

        origin = pygame.Vector2(rng.uniform(-70, 70), rng.uniform(-70, 70))
        if origin.distance_to(center) < radius + 0.5:
            continue
        if rng.random() < 0.6:
            direction = (center - origin).rotate_rad(rng.uniform(-0.15, 0.15))
        else:
            direction = pygame.Vector2(1, 0).rotate_rad(rng.uniform(0, math.tau))
        direction = direction.normalize()

        crossings = _edge_crossings(origin, direction, polygon)
        # Grazing a vertex is resolved by tolerances; keep to clear-cut cases
        if any(abs(u) < 1e-6 or abs(u - 1) < 1e-6 for _, u in crossings):
            continue
        expected = [t for t, u in crossings if 0 < u < 1 and t > 0]

        t = cast(Ray(origin, direction), polygon, 1000)
        if expected:
            assert t == pytest.approx(min(expected))
            hits += 1
        else:
            assert t is None
        checked += 1

    assert hits > 50
