import math

import pygame

from shadowcast.geometry import Pose, to_world


class ShadowCaster:
    """A scene entity whose outline blocks rays from the observer.

    points: local-space outline, insertion order = winding order.
    The pose scale only shrinks or grows the filled sprite; bounds and
    occlusion always use scale 1.
    """

    def __init__(self, name, points, position=(0, 0), rotation=0.0,
                 scale=1.0, color=(200, 200, 200)):
        self.name = name
        self.points = [pygame.Vector2(p) for p in points]
        self.pose = Pose(position, rotation, scale)
        self.color = color

    @classmethod
    def from_stats(cls, name, stats, position=(0, 0), rotation=0.0, scale=1.0):
        return cls(name, stats["points"], position, rotation, scale, stats["color"])

    # =====================================================
    # DATA SOURCE
    # =====================================================

    def record(self):
        """(pose, local_points) as handed to the visibility pass."""
        return self.pose, list(self.points)

    def world_points(self):
        return to_world(self.pose, self.points)

    # =====================================================
    # MOVEMENT
    # =====================================================

    def move(self, delta):
        self.pose.position += pygame.Vector2(delta)

    def rotate(self, radians):
        self.pose.rotation = (self.pose.rotation + radians) % math.tau

    def face(self, target, dead_zone=0.0):
        """Turn so the local +x axis points at target (world space)."""
        direction = pygame.Vector2(target) - self.pose.position
        if direction.length() > dead_zone:
            self.pose.rotation = math.atan2(direction.y, direction.x)

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, camera):
        """Filled sprite, drawn at the pose's visual scale."""
        sprite_pose = Pose(self.pose.position, self.pose.rotation)
        scaled = [p * self.pose.scale for p in self.points]
        screen_points = [camera.apply(p) for p in to_world(sprite_pose, scaled)]
        if len(screen_points) >= 3:
            pygame.draw.polygon(screen, self.color, screen_points)

    def draw_bounds(self, lines, color=None):
        """Push the occlusion outline (scale 1) into the debug line buffer."""
        world = self.world_points()
        count = len(world)
        for i in range(count):
            lines.line(world[i], world[(i + 1) % count], color or self.color)
