from hud.debug_hud import DebugHud
