"""
Editor controller.

Owns the application state and the single active stroke, and is the only
place where state gets replaced. The tkinter widgets talk to this class and
re-sync from the state it hands to its listeners.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from pixel_editor.core.editor_tools import (
    ToolSession,
    ToolType,
    continue_stroke,
    parse_tool,
    start_stroke,
    tool_for_key,
)
from pixel_editor.core.history import Action, AppState, next_state
from pixel_editor.core.image_handler import load_picture, save_png
from pixel_editor.core.picture import Color, Picture, Point
from pixel_editor.utils.config import AppConfig
from pixel_editor.utils.helpers import normalize_hex

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]


class EditorController:
    def __init__(self, config: AppConfig | None = None, clock: Callable[[], float] = time.monotonic):
        self.config = config or AppConfig()
        self.clock = clock
        picture = Picture.empty(self.config.width, self.config.height, self.config.base_color)
        self._state = AppState(
            tool=parse_tool(self.config.default_tool),
            color=self.config.default_color,
            picture=picture,
        )
        self._session: Optional[ToolSession] = None
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def stroke_active(self) -> bool:
        return self._session is not None

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, action: Optional[Action]) -> AppState:
        if action is None:
            return self._state
        new_state = next_state(
            self._state,
            action,
            clock=self.clock,
            window=self.config.coalesce_window,
            limit=self.config.history_limit,
        )
        if new_state is self._state:
            return new_state
        logger.debug("Dispatched %s (history: %d)", _describe(action), len(new_state.history))
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    # ---------- Stroke handling ----------
    def pointer_down(self, pos: tuple[int, int]):
        if self._session is not None:
            self.pointer_up()
        session, action = start_stroke(self._state.tool, Point(*pos), self._state)
        self._session = session
        if session is not None:
            logger.debug("Stroke started: %s at %s", session.tool.value, session.anchor)
        self.dispatch(action)

    def pointer_move(self, pos: tuple[int, int]):
        if self._session is None:
            return
        self.dispatch(continue_stroke(self._session, Point(*pos), self._state))

    def pointer_up(self):
        if self._session is not None:
            logger.debug("Stroke ended: %s", self._session.tool.value)
        self._session = None

    # ---------- Controls ----------
    def set_tool(self, tool: ToolType | str):
        if not isinstance(tool, ToolType):
            tool = parse_tool(tool)
        self.dispatch(Action(tool=tool))

    def set_color(self, color: Color):
        self.dispatch(Action(color=normalize_hex(color)))

    def undo(self):
        self.dispatch(Action(undo=True))

    def key_pressed(self, key: str, ctrl: bool = False) -> bool:
        """Handle a keyboard shortcut; returns True when the key was used."""
        if ctrl:
            if key.lower() == "z":
                self.undo()
                return True
            return False
        tool = tool_for_key(key)
        if tool is None:
            return False
        self.set_tool(tool)
        return True

    def new_picture(self, width: int, height: int, color: Color | None = None):
        self.dispatch(Action(picture=Picture.empty(width, height, color or self.config.base_color)))

    def load_picture(self, path: str | Path | None) -> Optional[Picture]:
        if not path:
            return None
        picture = load_picture(path, self.config.max_import_dimension)
        self.dispatch(Action(picture=picture))
        self.config.add_recent(path)
        return picture

    def save_picture(self, path: str | Path | None = None) -> Path:
        return save_png(self._state.picture, path)


def _describe(action: Action) -> str:
    if action.undo:
        return "undo"
    parts = []
    if action.tool is not None:
        parts.append(f"tool={action.tool.value}")
    if action.color is not None:
        parts.append(f"color={action.color}")
    if action.picture is not None:
        parts.append(f"picture={action.picture.width}x{action.picture.height}")
    return ", ".join(parts) or "no-op"
