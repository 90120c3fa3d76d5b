import pygame


class DebugLines:
    """Buffered world-space line segments, drawn and cleared once per frame.

    Callers push segments with line() while the frame is being computed;
    flush() draws them all through the camera and empties the buffer.
    """

    def __init__(self, default_color=(255, 255, 255), width=1):
        self.default_color = default_color
        self.width = width
        self.segments = []

    def line(self, start, end, color=None):
        self.segments.append(
            (pygame.Vector2(start), pygame.Vector2(end), color or self.default_color)
        )

    def __len__(self):
        return len(self.segments)

    def flush(self, screen, camera):
        """Draw every buffered segment, then empty the buffer. Returns the count drawn."""
        drawn = 0
        for start, end, color in self.segments:
            pygame.draw.line(screen, color, camera.apply(start), camera.apply(end), self.width)
            drawn += 1
        self.segments.clear()
        return drawn
