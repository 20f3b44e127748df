"""Keyboard, scroll and cursor handling for the simulation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import IntEnum

import numpy as np

from .camera import CameraRegistry
from .fighter_jet import FighterJet
from .moveable import Moveable
from .state import AppState


class Key(IntEnum):
    """Key codes used by the simulation."""

    SPACE = 32
    ONE = 49
    TWO = 50
    THREE = 51
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    N = 78
    Q = 81
    R = 82
    S = 83
    W = 87
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341


class KeyAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class InputsHandler:
    """Routes input events to the state, the cameras and the active entity."""

    def __init__(self, state: AppState, registry: CameraRegistry,
                 controlled_plane: FighterJet | None = None) -> None:
        self.state = state
        self.registry = registry
        self.controlled_plane = controlled_plane
        self.active_entity: Moveable | None = None
        self.mouse_pos = state.window_center()
        self.should_close = False

    def _plane(self) -> FighterJet:
        if self.controlled_plane is None:
            raise RuntimeError("no controlled plane set")
        return self.controlled_plane

    def _toggle_gui_focus(self) -> None:
        self.state.gui_focused = not self.state.gui_focused
        # Recentre so the view does not jump towards the released cursor.
        if not self.state.gui_focused:
            center = self.state.window_center()
            self.state.cursor_pos = (float(center[0]), float(center[1]))

    def _toggle_unfocused(self, attr: str) -> Callable[[], None]:
        def toggle() -> None:
            if not self.state.gui_focused:
                setattr(self.state, attr, not getattr(self.state, attr))
        return toggle

    def key_event(self, key: Key, action: KeyAction) -> None:
        """Handle a key press; releases and repeats are ignored."""
        if action != KeyAction.PRESS:
            return
        handlers: dict[Key, Callable[[], None]] = {
            Key.R: self._toggle_gui_focus,
            Key.E: self.state.toggle_config,
            Key.C: self.state.toggle_info,
            Key.B: lambda: self._plane().body.toggle_airbrake(),
            Key.F: lambda: self._plane().body.toggle_flaps(),
            Key.N: self.registry.next_active,
            Key.ONE: self._toggle_unfocused("draw_wireframe"),
            Key.TWO: self._toggle_unfocused("draw_global_axis"),
            Key.THREE: self._toggle_unfocused("draw_normals"),
        }
        handler = handlers.get(key)
        if handler is not None:
            handler()

    def scroll(self, xoffset: float, yoffset: float) -> None:
        if not self.state.gui_focused and self.active_entity is not None:
            self.active_entity.on_mouse_scroll((xoffset, yoffset))

    def cursor_pos(self, xpos: float, ypos: float) -> None:
        self.mouse_pos = np.array([xpos, ypos], dtype=float)
        self.state.cursor_pos = (float(xpos), float(ypos))

    def process(self, pressed_keys: Iterable[Key]) -> bool:
        """Apply held keys and mouse movement; return whether to close."""
        pressed = set(pressed_keys)
        if Key.Q in pressed:
            self.should_close = True

        entity = self.active_entity
        if not self.state.gui_focused and entity is not None:
            entity.on_mouse_move(self.mouse_pos)
            entity.accelerate(Key.LEFT_SHIFT in pressed)
            moves = (
                (Key.W, entity.move_forward),
                (Key.A, entity.move_left),
                (Key.S, entity.move_back),
                (Key.D, entity.move_right),
                (Key.SPACE, entity.move_up),
                (Key.LEFT_CONTROL, entity.move_down),
            )
            for key, move in moves:
                if key in pressed:
                    move()

        self.mouse_pos = self.state.window_center()
        return self.should_close