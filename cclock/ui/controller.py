"""Glue between the host window, the clock state and the drawing surface.

Qt-free on purpose: the window forwards sizes, presses and key names, and hands
in a surface to draw on each frame. The time source is read only in ``_now``.
"""

import math
import time

from cclock.common.logger import log
from cclock.core.clock_state import Game, LEFT, RIGHT
from cclock.core.config import build_default_settings
from cclock.core.formatting import format_time
from cclock.core.urgency import progress_to_color
from cclock.ui.buttons import BUTTON_SPECS, ButtonKind
from cclock.ui.hit_test import hit_test
from cclock.ui.layout import compute_layout
from cclock.ui.theme import get_theme

FULL_TURN = 2 * math.pi
BUTTON_GLYPH_RATIO = 0.9


class ClockController:

    def __init__(self, initial_times, settings=None, clock=time.monotonic, on_fullscreen=None):
        self.initial_times = tuple(initial_times)
        self.settings = settings or build_default_settings()
        self.show_controls = bool(self.settings["show_controls"])
        self.theme = get_theme(self.settings["theme"])
        self._clock = clock
        # Called with exit_only=True/False; the host decides what fullscreen means.
        self._on_fullscreen = on_fullscreen

        self.game = Game(*self.initial_times)
        self.geometry = compute_layout(0, 0, self.show_controls)

        self._button_handlers = {
            ButtonKind.PAUSE: self.pause,
            ButtonKind.FULLSCREEN: self.toggle_fullscreen,
            ButtonKind.RESET: self.reset,
        }
        self._key_handlers = {
            "space": self._tap_active_side,
            "left": lambda: self.tap(LEFT),
            "right": lambda: self.tap(RIGHT),
            "p": self.pause,
            "f": self.toggle_fullscreen,
            "r": self.reset,
            "escape": lambda: self._request_fullscreen(exit_only=True),
        }

    def _now(self):
        return self._clock()

    # ------------------------------------------------------------------ #
    #  Viewport and frames                                                 #
    # ------------------------------------------------------------------ #

    def resize(self, width, height):
        self.geometry = compute_layout(width, height, self.show_controls)
        log.debug(f"Resized to {width}x{height}, clock radius {self.geometry.clock_radius:.1f}")

    def frame(self, surface):
        """One step of the render loop: project the running clock to now, then draw."""
        self.game.tick(self._now())
        self.render(surface)

    def render(self, surface):
        g = self.geometry
        surface.clear(self.theme["bg"])
        if g.clock_radius <= 0:
            return

        # The ring sits inside the face, so its centerline is half a stroke in from the edge
        ring_radius = g.clock_radius - g.arc_thickness * 0.5
        for i, player in enumerate(self.game.players):
            progress = min(1.0, max(0.0, self.game.progress(i)))
            color = progress_to_color(progress)
            center = g.clock_centers[i]
            used = progress * FULL_TURN
            surface.stroke_arc(center, ring_radius, 0.0, used, color, g.arc_thickness,
                               alpha=self.theme["track_alpha"])
            surface.stroke_arc(center, ring_radius, used, FULL_TURN, color, g.arc_thickness)
            surface.draw_text(format_time(player.remaining_seconds), center, g.font_size, color)

        for kind, center in g.button_centers.items():
            surface.fill_circle(center, g.button_radius, self.theme["button_bg"])
            surface.draw_text(BUTTON_SPECS[kind].glyph, center,
                              g.button_radius * BUTTON_GLYPH_RATIO, self.theme["button_fg"])

    # ------------------------------------------------------------------ #
    #  Input                                                               #
    # ------------------------------------------------------------------ #

    def press(self, x, y):
        target = hit_test(self.geometry, x, y)
        if target is None:
            log.debug(f"Press at ({x}, {y}) is outside the viewport, ignoring")
            return None
        if target.button is not None:
            log.debug(f"Press at ({x}, {y}) hit the {target.button.value} button")
            self._button_handlers[target.button]()
        else:
            self.tap(target.player)
        return target

    def key_press(self, key):
        handler = self._key_handlers.get(key)
        if handler is None:
            return False
        handler()
        return True

    # ------------------------------------------------------------------ #
    #  Actions                                                             #
    # ------------------------------------------------------------------ #

    def tap(self, index):
        outcome = self.game.tap(index, self._now())
        log.debug(f"Tap on player {index}: {outcome.value}")
        return outcome

    def _tap_active_side(self):
        running = self.game.running_index
        return self.tap(LEFT if running is None else running)

    def pause(self):
        return self.game.pause(self._now())

    def reset(self):
        self.game = Game(*self.initial_times)
        log.info("Clock reset")

    def toggle_fullscreen(self):
        self._request_fullscreen(exit_only=False)

    # Fullscreen is best effort; the host may refuse and that must never take the clock down.
    def _request_fullscreen(self, exit_only):
        if self._on_fullscreen is None:
            return
        try:
            self._on_fullscreen(exit_only=exit_only)
        except Exception:
            log.exception("Fullscreen request failed, ignoring")
