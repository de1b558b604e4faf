import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from pathlib import Path

from pixel_editor.core.controller import EditorController
from pixel_editor.core.history import AppState
from pixel_editor.core.image_handler import DEFAULT_FILENAME, PictureImportError
from pixel_editor.gui.canvas_editor import CanvasEditor
from pixel_editor.gui.toolbar import ToolBar
from pixel_editor.utils.config import AppConfig
from pixel_editor.utils.validators import validate_dimension

logger = logging.getLogger(__name__)


def open_image_dialog(parent) -> str | None:
    path = filedialog.askopenfilename(
        parent=parent,
        title="Load Image",
        filetypes=[
            ("All supported", "*.png;*.jpg;*.jpeg;*.bmp;*.gif"),
            ("PNG", "*.png"),
            ("JPEG", "*.jpg;*.jpeg"),
            ("Bitmap", "*.bmp"),
            ("GIF", "*.gif"),
            ("All files", "*.*"),
        ],
    )
    return path or None


def save_png_dialog(parent, initialfile: str | None = None) -> str | None:
    path = filedialog.asksaveasfilename(
        parent=parent,
        title="Save PNG",
        defaultextension=".png",
        initialfile=initialfile or DEFAULT_FILENAME,
        filetypes=[("PNG", "*.png")],
    )
    return path or None


class MainWindow(tk.Tk):
    def __init__(self, config: AppConfig | None = None):
        super().__init__()
        self.title("Pixel Editor")
        self.geometry("900x600")
        self.minsize(480, 320)

        self.config_mgr = config or AppConfig()
        self.controller = EditorController(self.config_mgr)

        self._build_menu()
        self._build_layout()
        self._build_statusbar()

        self.controller.subscribe(self._on_state_change)
        self._on_state_change(self.controller.state)
        self._update_status("Ready")

        self.bind_all("<Control-z>", lambda e: self.undo())
        self.bind_all("<Command-z>", lambda e: self.undo())
        self.bind_all("<Control-s>", lambda e: self.save_png())
        self.bind_all("<Control-o>", lambda e: self.open_image())
        self.bind_all("<Key>", self._on_key)

        self.protocol("WM_DELETE_WINDOW", self._on_exit)

    def _build_menu(self):
        menubar = tk.Menu(self)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="New...", command=self.new_canvas)
        file_menu.add_command(label="Load... (Ctrl+O)", command=self.open_image)

        self.recent_menu = tk.Menu(file_menu, tearoff=0)
        file_menu.add_cascade(label="Load Recent", menu=self.recent_menu)
        self._refresh_recent_menu()

        file_menu.add_separator()
        file_menu.add_command(label="Save PNG... (Ctrl+S)", command=self.save_png)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self._on_exit)
        menubar.add_cascade(label="File", menu=file_menu)

        edit_menu = tk.Menu(menubar, tearoff=0)
        edit_menu.add_command(label="Undo (Ctrl+Z)", command=self.undo)
        menubar.add_cascade(label="Edit", menu=edit_menu)
        self.config(menu=menubar)

    def _build_layout(self):
        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)

        self.toolbar = ToolBar(
            self,
            on_tool_change=self.controller.set_tool,
            on_color_change=self.controller.set_color,
            on_save=self.save_png,
            on_load=self.open_image,
            on_undo=self.undo,
        )
        self.toolbar.grid(row=0, column=0, sticky="ew")
        ttk.Separator(self, orient="horizontal").grid(row=1, column=0, sticky="ew")

        self.canvas_editor = CanvasEditor(
            self,
            self.controller,
            scale=self.config_mgr.scale,
            on_cursor=lambda x, y: self.after_idle(lambda: self._update_cursor(x, y)),
        )
        self.canvas_editor.grid(row=2, column=0, sticky="nsew", padx=8, pady=8)

    def _build_statusbar(self):
        self.statusbar = ttk.Frame(self)
        self.statusbar.grid(row=3, column=0, sticky="ew")
        self.statusbar.columnconfigure(0, weight=1)

        self.status_label = ttk.Label(self.statusbar, text="Status: Ready", anchor="w")
        self.status_label.grid(row=0, column=0, sticky="ew", padx=8)

        self.cursor_label = ttk.Label(self.statusbar, text="Cursor: -, -", width=20, anchor="e")
        self.cursor_label.grid(row=0, column=1, sticky="e", padx=8)

        self.dim_label = ttk.Label(self.statusbar, text="Canvas: 0x0", width=16, anchor="e")
        self.dim_label.grid(row=0, column=2, sticky="e", padx=8)

    # -------------------- Update handlers --------------------
    def _on_state_change(self, state: AppState):
        self.toolbar.sync(state)
        self.dim_label.config(text=f"Canvas: {state.picture.width}x{state.picture.height}")

    def _update_status(self, text):
        self.status_label.config(text=f"Status: {text}")

    def _update_cursor(self, x, y):
        if x is None or y is None:
            self.cursor_label.config(text="Cursor: -, -")
        else:
            self.cursor_label.config(text=f"Cursor: {x}, {y}")

    def _on_key(self, event):
        if isinstance(event.widget, (tk.Entry, ttk.Entry)):
            return
        # Ctrl/Cmd combinations are bound separately
        if event.state & 0x4 or event.state & 0x8:
            return
        if self.controller.key_pressed(event.char):
            self._update_status(f"Tool: {self.controller.state.tool.value}")

    # -------------------- Recent files --------------------
    def _refresh_recent_menu(self):
        self.recent_menu.delete(0, "end")
        if not self.config_mgr.recent_files:
            self.recent_menu.add_command(label="(Empty)", state="disabled")
            return
        for path_str in self.config_mgr.recent_files:
            p = Path(path_str)
            label = p.name if len(p.name) < 48 else "..." + p.name[-45:]
            self.recent_menu.add_command(label=label, command=lambda s=path_str: self.open_image(s))

    # -------------------- File ops --------------------
    def new_canvas(self):
        dialog = tk.Toplevel(self)
        dialog.title("New Picture")
        dialog.transient(self)
        dialog.resizable(False, False)
        ttk.Label(dialog, text="Width:").grid(row=0, column=0, padx=10, pady=8, sticky="e")
        ttk.Label(dialog, text="Height:").grid(row=1, column=0, padx=10, pady=8, sticky="e")
        state = self.controller.state
        w_var = tk.StringVar(value=str(state.picture.width))
        h_var = tk.StringVar(value=str(state.picture.height))
        ttk.Entry(dialog, textvariable=w_var, width=10).grid(row=0, column=1, padx=10, pady=8)
        ttk.Entry(dialog, textvariable=h_var, width=10).grid(row=1, column=1, padx=10, pady=8)

        def ok():
            w, h = validate_dimension(w_var.get()), validate_dimension(h_var.get())
            if w is None or h is None:
                messagebox.showerror("Invalid size", "Please enter sizes between 1 and 1024.")
                return
            self.controller.new_picture(w, h)
            self._update_status(f"New {w}x{h} picture")
            dialog.destroy()

        ttk.Button(dialog, text="Create", command=ok).grid(row=2, column=0, columnspan=2, pady=10)
        dialog.grab_set()
        self.wait_window(dialog)

    def open_image(self, path: str | None = None):
        if not path:
            path = open_image_dialog(self)
            if not path:
                return
        try:
            picture = self.controller.load_picture(path)
        except PictureImportError as e:
            logger.error("%s", e)
            messagebox.showerror("Error", f"Failed to load image:\n{e}")
            return
        self._refresh_recent_menu()
        self._update_status(f"Loaded: {Path(path).name} ({picture.width}x{picture.height})")

    def save_png(self):
        out = save_png_dialog(self)
        if not out:
            return
        try:
            written = self.controller.save_picture(out)
        except (OSError, ValueError) as e:
            logger.error("Failed to save %s: %s", out, e)
            messagebox.showerror("Error", f"Failed to save PNG:\n{e}")
            return
        self._update_status(f"Saved PNG: {written.name}")

    def undo(self):
        self.controller.undo()

    def _on_exit(self):
        self.config_mgr.save()
        self.destroy()


def run_app(config: AppConfig | None = None, open_path: str | None = None):
    app = MainWindow(config)
    if open_path:
        app.after_idle(lambda: app.open_image(open_path))
    app.mainloop()
