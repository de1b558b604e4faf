import tkinter as tk
from tkinter import ttk, colorchooser

from pixel_editor.core.editor_tools import ToolType
from pixel_editor.core.history import AppState


class ToolBar(ttk.Frame):
    def __init__(self, parent, on_tool_change, on_color_change, on_save, on_load, on_undo):
        super().__init__(parent)
        self.on_tool_change = on_tool_change
        self.on_color_change = on_color_change
        self.on_save = on_save
        self.on_load = on_load
        self.on_undo = on_undo
        self.current_color = "#000000"
        self._build_ui()

    def _build_ui(self):
        tool_frame = ttk.Frame(self)
        tool_frame.grid(row=0, column=0, sticky="w", padx=8, pady=6)
        ttk.Label(tool_frame, text="Tool").pack(side="left", padx=(0, 6))
        self.tool_var = tk.StringVar(value=ToolType.DRAW.value)
        self.tool_combo = ttk.Combobox(tool_frame, textvariable=self.tool_var, state="readonly", width=10,
                                       values=[t.value for t in ToolType])
        self.tool_combo.pack(side="left")
        self.tool_combo.bind("<<ComboboxSelected>>", lambda e: self.on_tool_change(self.tool_var.get()))

        color_frame = ttk.Frame(self)
        color_frame.grid(row=0, column=1, sticky="w", padx=8, pady=6)
        ttk.Label(color_frame, text="Color").pack(side="left", padx=(0, 6))
        self.color_preview = tk.Canvas(color_frame, width=40, height=20, bg=self.current_color,
                                       highlightthickness=1, highlightbackground="#666")
        self.color_preview.pack(side="left")
        self.color_preview.bind("<Button-1>", self._choose_color)

        btns = ttk.Frame(self)
        btns.grid(row=0, column=2, sticky="w", padx=8, pady=6)
        ttk.Button(btns, text="Save", width=8, command=self.on_save).pack(side="left", padx=2)
        ttk.Button(btns, text="Load", width=8, command=self.on_load).pack(side="left", padx=2)
        self.undo_button = ttk.Button(btns, text="Undo", width=8, command=self.on_undo)
        self.undo_button.pack(side="left", padx=2)

    def _choose_color(self, event=None):
        color = colorchooser.askcolor(color=self.current_color, title="Choose Color")
        if color is None or color[1] is None:
            return
        self.on_color_change(color[1])

    def sync(self, state: AppState):
        if self.tool_var.get() != state.tool.value:
            self.tool_var.set(state.tool.value)
        if self.current_color != state.color:
            self.current_color = state.color
            self.color_preview.configure(bg=state.color)
        self.undo_button.state(["!disabled"] if state.history else ["disabled"])
