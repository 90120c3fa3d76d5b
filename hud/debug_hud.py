import pygame

from settings import WIDTH


class HudPanel:
    """Translucent strip of text lines, each produced by a callable every frame.

    line_sources: callables returning the string for that row.
    bg_color:     (r, g, b, a) tuple; alpha controls the see-through.
    """

    def __init__(self, line_sources, position=(0, 0), width=WIDTH,
                 bg_color=(0, 0, 0, 140), color=(255, 255, 255),
                 font_size=22, line_height=20, padding=8):
        self.line_sources = list(line_sources)
        self.position = pygame.Vector2(position)
        self.bg_color = bg_color
        self.color = color
        self.line_height = line_height
        self.padding = padding
        self.size = (width, padding * 2 + line_height * len(self.line_sources))
        self.visible = True
        self._font = pygame.font.SysFont(None, font_size)

    def rows(self):
        return [source() for source in self.line_sources]

    def draw(self, screen):
        if not self.visible:
            return

        surf = pygame.Surface(self.size, pygame.SRCALPHA)
        surf.fill(self.bg_color)
        screen.blit(surf, self.position)

        for i, text in enumerate(self.rows()):
            rendered = self._font.render(text, True, self.color)
            pos = self.position + pygame.Vector2(
                self.padding, self.padding + i * self.line_height
            )
            screen.blit(rendered, pos)


class DebugHud(HudPanel):
    """Read-out of the last visibility pass and the demo toggles.

    stats: object with the attributes below, refreshed by the frame loop.
    """

    def __init__(self, stats):
        super().__init__([
            lambda: f"scene: {stats.scene_name}",
            lambda: f"occluders: {stats.occluders}  skipped: {stats.skipped}",
            lambda: f"rays: {stats.rays}  hits: {stats.hits}  outline: {stats.outline}",
            lambda: (f"observer: {stats.observer_mode} "
                     f"({stats.observer.x:.1f}, {stats.observer.y:.1f})"),
            lambda: f"cursor lit: {'yes' if stats.cursor_lit else 'no'}",
            lambda: ("WASD move  Q/E turn  M mouse-aim  R rays  B bounds  "
                     "O observer  F follow  H hud"),
        ])
