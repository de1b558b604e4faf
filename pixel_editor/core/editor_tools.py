from enum import Enum
from dataclasses import dataclass
from typing import Optional

from pixel_editor.core.history import Action, AppState
from pixel_editor.core.picture import Color, Edit, Picture, Point


class ToolType(Enum):
    DRAW = "draw"
    FILL = "fill"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    PICK = "pick"
    LINE = "line"


# Tools that keep following the pointer after the initial press
DRAG_TOOLS = (ToolType.DRAW, ToolType.RECTANGLE, ToolType.CIRCLE, ToolType.LINE)

AROUND = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class ToolSession:
    tool: ToolType
    anchor: Point
    base: Picture


def rectangle_edits(start: Point, end: Point, color: Color) -> list[Edit]:
    x0, x1 = min(start.x, end.x), max(start.x, end.x)
    y0, y1 = min(start.y, end.y), max(start.y, end.y)
    return [Edit(x, y, color) for y in range(y0, y1 + 1) for x in range(x0, x1 + 1)]


def circle_radius(center: Point, pos: Point) -> int:
    # Half-up rounding, Python's round() would send 2.5 to 2
    return int(((pos.x - center.x) ** 2 + (pos.y - center.y) ** 2) ** 0.5 + 0.5)


def circle_edits(center: Point, pos: Point, color: Color) -> list[Edit]:
    """Filled disk around `center` reaching out to `pos`."""
    radius = circle_radius(center, pos)
    edits = []
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= radius * radius:
                edits.append(Edit(center.x + dx, center.y + dy, color))
    return edits


def line_edits(start: Point, end: Point, color: Color) -> list[Edit]:
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    x, y = x0, y0
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    edits = []
    while True:
        edits.append(Edit(x, y, color))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return edits


def flood_fill_edits(picture: Picture, seed: Point, fill_color: Color) -> list[Edit]:
    """
    Breadth-first, 4-connected fill from `seed`.
    Every cell connected to the seed through cells of the seed's color
    gets an edit, even when `fill_color` already matches.
    """
    if not picture.contains(seed.x, seed.y):
        return []
    target = picture.pixel_at(seed.x, seed.y)
    discovered = [seed]
    seen = {seed}
    i = 0
    while i < len(discovered):
        x, y = discovered[i]
        i += 1
        for dx, dy in AROUND:
            nx, ny = x + dx, y + dy
            if not picture.contains(nx, ny):
                continue
            if picture.pixel_at(nx, ny) != target:
                continue
            neighbor = Point(nx, ny)
            if neighbor not in seen:
                seen.add(neighbor)
                discovered.append(neighbor)
    return [Edit(x, y, fill_color) for x, y in discovered]


def draw(session: ToolSession, pos: Point, state: AppState) -> Action:
    # Draws onto the live picture so a drag leaves a trail
    return Action(picture=state.picture.with_edits([Edit(pos.x, pos.y, state.color)]))


def rectangle(session: ToolSession, pos: Point, state: AppState) -> Action:
    return Action(picture=session.base.with_edits(rectangle_edits(session.anchor, pos, state.color)))


def circle(session: ToolSession, pos: Point, state: AppState) -> Action:
    return Action(picture=session.base.with_edits(circle_edits(session.anchor, pos, state.color)))


def line(session: ToolSession, pos: Point, state: AppState) -> Action:
    return Action(picture=session.base.with_edits(line_edits(session.anchor, pos, state.color)))


def fill(session: ToolSession, pos: Point, state: AppState) -> Optional[Action]:
    edits = flood_fill_edits(state.picture, pos, state.color)
    if not edits:
        return None
    return Action(picture=state.picture.with_edits(edits))


def pick(session: ToolSession, pos: Point, state: AppState) -> Optional[Action]:
    if not state.picture.contains(pos.x, pos.y):
        return None
    return Action(color=state.picture.pixel_at(pos.x, pos.y))


TOOLS = {
    ToolType.DRAW: draw,
    ToolType.FILL: fill,
    ToolType.RECTANGLE: rectangle,
    ToolType.CIRCLE: circle,
    ToolType.PICK: pick,
    ToolType.LINE: line,
}


def start_stroke(tool: ToolType, pos: Point, state: AppState) -> tuple[Optional[ToolSession], Optional[Action]]:
    """
    Begin a gesture at `pos`. Returns the session to feed later moves to
    (None for single-shot tools) and the action for the initial press.
    """
    pos = Point(*pos)
    session = ToolSession(tool, pos, state.picture)
    action = TOOLS[tool](session, pos, state)
    if tool not in DRAG_TOOLS:
        return None, action
    return session, action


def continue_stroke(session: ToolSession, pos: Point, state: AppState) -> Optional[Action]:
    return TOOLS[session.tool](session, Point(*pos), state)


def tool_for_key(key: str) -> Optional[ToolType]:
    """Tools are bound to the first letter of their name."""
    if not key or len(key) != 1:
        return None
    key = key.lower()
    for tool in ToolType:
        if tool.value[0] == key:
            return tool
    return None


def parse_tool(name: str) -> ToolType:
    try:
        return ToolType(str(name).lower())
    except ValueError:
        raise ValueError(f"Unknown tool: {name}") from None
