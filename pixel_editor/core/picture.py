from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Optional

Color = str


class Point(NamedTuple):
    x: int
    y: int


class Edit(NamedTuple):
    x: int
    y: int
    color: Color


class OutOfRangeError(IndexError):
    pass


@dataclass(frozen=True)
class Picture:
    """
    Immutable width x height grid of colors, stored row-major.
    Every edit produces a new Picture; old instances stay valid snapshots.
    """
    width: int
    height: int
    cells: tuple

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid picture size: {self.width}x{self.height}")
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, width: int, height: int, color: Color) -> "Picture":
        return cls(width, height, (color,) * (width * height))

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_at(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise OutOfRangeError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} picture")
        return self.cells[y * self.width + x]

    def with_edits(self, edits: Iterable[tuple]) -> "Picture":
        """
        Return a new Picture with the edits applied in order.
        Edits outside the grid are ignored; later edits to the same cell win.
        """
        copy = list(self.cells)
        for x, y, color in edits:
            if self.contains(x, y):
                copy[y * self.width + x] = color
        return Picture(self.width, self.height, tuple(copy))

    def changed_cells(self, previous: Optional["Picture"]) -> Iterator[Edit]:
        """Yield cells differing from `previous`; everything if sizes differ or there is none."""
        full = previous is None or (previous.width, previous.height) != (self.width, self.height)
        for i, color in enumerate(self.cells):
            if full or previous.cells[i] != color:
                yield Edit(i % self.width, i // self.width, color)
