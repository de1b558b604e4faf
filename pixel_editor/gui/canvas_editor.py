import tkinter as tk
from tkinter import ttk

from pixel_editor.core.controller import EditorController
from pixel_editor.core.history import AppState
from pixel_editor.core.picture import Picture
from pixel_editor.utils.helpers import clamp, screen_to_cell


class CanvasEditor(ttk.Frame):
    """Draws the picture one rectangle per cell and turns mouse drags into strokes."""

    def __init__(self, parent, controller: EditorController, scale: int = 10, on_cursor=None):
        super().__init__(parent)
        self.controller = controller
        self.scale = clamp(scale, 1, 64)
        self.on_cursor = on_cursor or (lambda x, y: None)

        self._shown = None            # Picture currently on screen
        self._cell_items = {}         # (x, y) -> canvas item id
        self._last_cell = None

        self._build_ui()
        self.controller.subscribe(self._on_state_change)
        self.sync(self.controller.state.picture)

    def _build_ui(self):
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self.canvas = tk.Canvas(self, bg="#3a3a3a", highlightthickness=0, cursor="cross")
        self.canvas.grid(row=0, column=0, sticky="nsew")

        self.hbar = ttk.Scrollbar(self, orient="horizontal", command=self.canvas.xview)
        self.vbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(xscrollcommand=self.hbar.set, yscrollcommand=self.vbar.set)
        self.hbar.grid(row=1, column=0, sticky="ew")
        self.vbar.grid(row=0, column=1, sticky="ns")

        self.canvas.bind("<Motion>", self._on_mouse_move)
        self.canvas.bind("<Leave>", lambda e: self.on_cursor(None, None))
        self.canvas.bind("<ButtonPress-1>", self._on_mouse_down)
        self.canvas.bind("<B1-Motion>", self._on_mouse_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_mouse_up)

    # ---------- Rendering ----------
    def _on_state_change(self, state: AppState):
        self.sync(state.picture)

    def sync(self, picture: Picture):
        if picture is self._shown:
            return
        previous = self._shown
        if previous is None or (previous.width, previous.height) != (picture.width, picture.height):
            self.canvas.delete("all")
            self._cell_items.clear()
            self.canvas.config(scrollregion=(0, 0, picture.width * self.scale, picture.height * self.scale))
            previous = None
        for x, y, color in picture.changed_cells(previous):
            item = self._cell_items.get((x, y))
            if item is None:
                x0, y0 = x * self.scale, y * self.scale
                self._cell_items[(x, y)] = self.canvas.create_rectangle(
                    x0, y0, x0 + self.scale, y0 + self.scale, fill=color, width=0
                )
            else:
                self.canvas.itemconfigure(item, fill=color)
        self._shown = picture

    # ---------- Events / Input ----------
    def _canvas_to_cell(self, event):
        origin = (-self.canvas.canvasx(0), -self.canvas.canvasy(0))
        return screen_to_cell(event.x, event.y, self.scale, origin)

    def _on_mouse_move(self, event):
        ix, iy = self._canvas_to_cell(event)
        if self._shown is not None and self._shown.contains(ix, iy):
            self.on_cursor(ix, iy)
        else:
            self.on_cursor(None, None)

    def _on_mouse_down(self, event):
        self.canvas.focus_set()
        cell = self._canvas_to_cell(event)
        self._last_cell = cell
        self.controller.pointer_down(cell)

    def _on_mouse_drag(self, event):
        cell = self._canvas_to_cell(event)
        self._on_mouse_move(event)
        if cell == self._last_cell:
            return
        self._last_cell = cell
        self.controller.pointer_move(cell)

    def _on_mouse_up(self, event):
        self._last_cell = None
        self.controller.pointer_up()
