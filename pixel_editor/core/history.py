import time
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Optional

from pixel_editor.core.picture import Color, Picture

if TYPE_CHECKING:
    from pixel_editor.core.editor_tools import ToolType

COALESCE_WINDOW = 1.0
HISTORY_LIMIT = 100

Clock = Callable[[], float]


@dataclass(frozen=True)
class AppState:
    tool: "ToolType"
    color: Color
    picture: Picture
    history: tuple = ()
    history_timestamp: float = float("-inf")


@dataclass(frozen=True)
class Action:
    tool: Optional["ToolType"] = None
    color: Optional[Color] = None
    picture: Optional[Picture] = None
    undo: bool = False

    def fields(self) -> dict:
        out = {}
        if self.tool is not None:
            out["tool"] = self.tool
        if self.color is not None:
            out["color"] = self.color
        if self.picture is not None:
            out["picture"] = self.picture
        return out


def next_state(
    state: AppState,
    action: Action,
    clock: Clock = time.monotonic,
    window: float = COALESCE_WINDOW,
    limit: Optional[int] = HISTORY_LIMIT,
) -> AppState:
    """
    Fold one action into a new state.

    Picture edits arriving within `window` seconds of the last undo step
    are merged into it; the first edit after the window pushes the
    pre-edit picture onto the history. Undo on empty history is a no-op.
    """
    if action.undo:
        if not state.history:
            return state
        return replace(
            state,
            picture=state.history[0],
            history=state.history[1:],
            history_timestamp=clock(),
        )

    changes = action.fields()
    if action.picture is not None:
        now = clock()
        if now - state.history_timestamp >= window:
            history = (state.picture,) + state.history
            if limit is not None:
                history = history[:limit]
            changes.update(history=history, history_timestamp=now)
    if not changes:
        return state
    return replace(state, **changes)
