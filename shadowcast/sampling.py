"""Ray sampling around occluder vertices.

Every vertex gets three rays: one aimed straight at it and two siblings
rotated by -epsilon and +epsilon. The siblings slip just past a silhouette
corner and land on whatever is behind it, which is what makes the outline
jump at occlusion boundaries. Two anchor rays (directly right and left of
the observer) bound the scene when nothing blocks those directions.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

import pygame

from shadowcast.errors import InvalidRay
from shadowcast.raycast import Ray, cast_to_all, impact_point

logger = logging.getLogger(__name__)

RAY_EPSILON = 0.001
MAX_DISTANCE = 1000.0

ANCHOR_DIRECTIONS = ((1.0, 0.0), (-1.0, 0.0))


class SampleKind(Enum):
    VERTEX = "vertex"
    BEFORE = "before"
    AFTER = "after"
    ANCHOR = "anchor"


@dataclass
class Sample:
    kind: SampleKind
    ray: Ray
    toi: float | None
    point: pygame.Vector2

    @property
    def hit(self):
        return self.toi is not None


def sample_rays(observer, polygons, epsilon=RAY_EPSILON, max_distance=MAX_DISTANCE):
    """Yield (kind, ray) for every vertex of every world polygon, then the anchors."""
    observer = pygame.Vector2(observer)

    for polygon in polygons:
        for vertex in polygon:
            d = vertex - observer
            if d.length_squared() == 0:
                logger.debug(f"Vertex {tuple(vertex)} sits on the observer; skipping")
                continue
            theta = math.atan2(d.y, d.x)
            for kind, angle in (
                (SampleKind.VERTEX, theta),
                (SampleKind.BEFORE, theta - epsilon),
                (SampleKind.AFTER, theta + epsilon),
            ):
                try:
                    yield kind, Ray.from_angle(observer, angle, max_distance)
                except InvalidRay as e:
                    logger.debug(f"Dropping {kind.value} sample at {angle:.4f}: {e}")

    for direction in ANCHOR_DIRECTIONS:
        yield SampleKind.ANCHOR, Ray(observer, direction, max_distance)


def cast_samples(observer, polygons, epsilon=RAY_EPSILON, max_distance=MAX_DISTANCE):
    """Cast every sampled ray against all polygons."""
    polygons = list(polygons)
    samples = []
    for kind, ray in sample_rays(observer, polygons, epsilon, max_distance):
        toi = cast_to_all(ray, polygons, max_distance)
        samples.append(Sample(kind, ray, toi, impact_point(ray, toi, max_distance)))
    return samples


def sample_points(observer, polygons, epsilon=RAY_EPSILON, max_distance=MAX_DISTANCE):
    """World points (impact or escape) for every sampled ray, in sampling order."""
    return [s.point for s in cast_samples(observer, polygons, epsilon, max_distance)]
