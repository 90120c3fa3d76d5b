import pygame

# Action → key bindings
KEYMAP = {
    "move_up": pygame.K_w,
    "move_down": pygame.K_s,
    "move_left": pygame.K_a,
    "move_right": pygame.K_d,
    "turn_left": pygame.K_q,
    "turn_right": pygame.K_e,
    "zoom_in": pygame.K_EQUALS,
    "zoom_out": pygame.K_MINUS,
    "toggle_rays": pygame.K_r,
    "toggle_bounds": pygame.K_b,
    "toggle_observer": pygame.K_o,
    "toggle_mouse_aim": pygame.K_m,
    "toggle_follow": pygame.K_f,
    "toggle_hud": pygame.K_h,
    "quit": pygame.K_ESCAPE,
}

# Opposing action pairs read as a signed axis: (positive, negative)
AXES = {
    "move_x": ("move_right", "move_left"),
    "move_y": ("move_up", "move_down"),   # world space is y-up
    "turn": ("turn_left", "turn_right"),  # counter-clockwise positive
}


class InputManager:
    """Keyboard and mouse state, sampled once per frame.

    Call update() before the scene reads anything; edge detection compares
    against the previous frame's snapshot.
    """

    def __init__(self, keymap=None):
        self.keymap = dict(KEYMAP if keymap is None else keymap)
        self.keys = self.prev_keys = pygame.key.get_pressed()
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())
        pygame.mouse.set_visible(True)

    def update(self):
        self.prev_keys, self.keys = self.keys, pygame.key.get_pressed()
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    def _state(self, action, keys):
        key = self.keymap.get(action)
        return bool(key is not None and keys[key])

    def is_down(self, action):
        return self._state(action, self.keys)

    def is_pressed(self, action):
        """Down this frame but not the last one."""
        return self.is_down(action) and not self._state(action, self.prev_keys)

    def axis(self, name):
        positive, negative = AXES[name]
        return int(self.is_down(positive)) - int(self.is_down(negative))

    def move_axis(self):
        """WASD as a world-space direction, not normalized."""
        return pygame.Vector2(self.axis("move_x"), self.axis("move_y"))

    def turn_axis(self):
        return self.axis("turn")

    def get_mouse_pos(self):
        return pygame.Vector2(self.mouse_pos)
