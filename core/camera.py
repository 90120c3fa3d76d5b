import pygame

from settings import WIDTH, HEIGHT, ZOOM, ZOOM_MIN, ZOOM_MAX


class Camera:
    """Orthographic 2-D camera.

    World space is y-up with the origin at the screen centre (before any
    follow/pan); screen space is pygame's y-down pixels.
    """

    def __init__(self, zoom=ZOOM, screen_size=(WIDTH, HEIGHT)):
        self.center = pygame.Vector2(0, 0)   # world point shown at screen centre
        self.zoom = zoom
        self.screen_size = pygame.Vector2(screen_size)
        self.target = None

    # -------------------------
    # Public API
    # -------------------------

    def follow(self, target):
        """Set the target to follow. Target must have a .pose.position attribute.

        follow(None) stops following and re-centres on the world origin.
        """
        self.target = target
        if target is None:
            self.center.update(0, 0)

    def zoom_by(self, factor):
        self.zoom = max(ZOOM_MIN, min(ZOOM_MAX, self.zoom * factor))

    def update(self, dt):
        """
        Update camera each frame.
        """
        if self.target:
            self.center.update(self.target.pose.position)

    def apply(self, position):
        """
        World position -> screen position.
        """
        offset = (pygame.Vector2(position) - self.center) * self.zoom
        return pygame.Vector2(
            self.screen_size.x / 2 + offset.x,
            self.screen_size.y / 2 - offset.y,
        )

    def to_world(self, screen_position):
        """
        Screen position -> world position (inverse of apply).
        """
        sx, sy = screen_position
        return pygame.Vector2(
            (sx - self.screen_size.x / 2) / self.zoom,
            (self.screen_size.y / 2 - sy) / self.zoom,
        ) + self.center
