"""Ray vs convex polygon intersection.

Rays are parametrised by distance: ``origin + direction * t`` with a unit
direction, so a time of impact is also the distance from the ray origin.
"""

import math

import pygame

from shadowcast.errors import InvalidRay
from shadowcast.geometry import cross, polygon_edges

# Ray and edge closer to parallel than this never intersect
PARALLEL_TOLERANCE = 1e-10

# Slack on the edge parameter so a ray aimed exactly at a vertex still hits
EDGE_TOLERANCE = 1e-9


class Ray:
    def __init__(self, origin, direction, max_distance=None):
        origin = pygame.Vector2(origin)
        direction = pygame.Vector2(direction)

        if not (math.isfinite(direction.x) and math.isfinite(direction.y)):
            raise InvalidRay(f"non-finite ray direction {tuple(direction)}")
        if direction.length_squared() == 0:
            raise InvalidRay("ray direction has zero length")
        if not (math.isfinite(origin.x) and math.isfinite(origin.y)):
            raise InvalidRay(f"non-finite ray origin {tuple(origin)}")

        self.origin = origin
        self.direction = direction.normalize()
        self.max_distance = max_distance

    @classmethod
    def from_angle(cls, origin, angle, max_distance=None):
        """Build a ray pointing at a polar angle (radians, counter-clockwise from +x)."""
        return cls(origin, (math.cos(angle), math.sin(angle)), max_distance)

    @property
    def angle(self):
        return math.atan2(self.direction.y, self.direction.x)

    def at(self, t):
        """Point at distance t along the ray."""
        return self.origin + self.direction * t

    def __repr__(self):
        return (f"Ray(origin=({self.origin.x:.3f}, {self.origin.y:.3f}), "
                f"direction=({self.direction.x:.4f}, {self.direction.y:.4f}))")


def _resolve_limit(ray, max_distance):
    limit = ray.max_distance if max_distance is None else max_distance
    if limit is None:
        raise ValueError("no max_distance given and the ray has none")
    # NaN fails this comparison too
    if not limit > 0:
        raise ValueError(f"max_distance must be > 0, got {limit}")
    return limit


def _ray_edge_intersect(ray, a, b):
    """Distance along the ray to the segment a-b, or None if they don't cross."""
    edge = b - a
    denom = cross(ray.direction, edge)
    if abs(denom) < PARALLEL_TOLERANCE:
        return None

    to_a = a - ray.origin
    t = cross(to_a, edge) / denom
    u = cross(to_a, ray.direction) / denom

    # An edge through the ray origin (t == 0) never occludes its own ray
    if t > EDGE_TOLERANCE and -EDGE_TOLERANCE <= u <= 1 + EDGE_TOLERANCE:
        return t
    return None


def cast(ray, polygon, max_distance=None):
    """Closest time of impact of ray against a world-space convex polygon.

    Returns None when no edge is crossed within (0, max_distance]. Edges
    passing through the ray origin are ignored.
    max_distance falls back to ray.max_distance.
    """
    limit = _resolve_limit(ray, max_distance)

    closest = None
    for a, b in polygon_edges(polygon):
        t = _ray_edge_intersect(ray, a, b)
        if t is None or t > limit:
            continue
        if closest is None or t < closest:
            closest = t
    return closest


def cast_to_all(ray, polygons, max_distance=None):
    """Smallest time of impact over every polygon. Earlier polygons win exact ties."""
    limit = _resolve_limit(ray, max_distance)

    closest = None
    for polygon in polygons:
        t = cast(ray, polygon, limit)
        if t is not None and (closest is None or t < closest):
            closest = t
    return closest


def impact_point(ray, toi, max_distance=None):
    """World point for a cast result, or the escape point when nothing was hit."""
    if toi is None:
        return ray.at(_resolve_limit(ray, max_distance))
    return ray.at(toi)
