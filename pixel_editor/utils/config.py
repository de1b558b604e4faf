import json
import logging
from pathlib import Path

from pixel_editor.utils.validators import validate_color, validate_dimension

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".pixel_editor_config.json"

TOOL_NAMES = ("draw", "fill", "rectangle", "circle", "pick", "line")


class AppConfig:
    def __init__(self, path: Path | None = None):
        self.path = path or DEFAULT_PATH
        self.width: int = 60
        self.height: int = 30
        self.scale: int = 10
        self.base_color: str = "#f0f0f0"
        self.default_tool: str = "draw"
        self.default_color: str = "#000000"
        self.coalesce_window: float = 1.0
        self.history_limit: int | None = 100
        self.max_import_dimension: int = 100
        self.recent_files: list[str] = []
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self.path)
            return
        self.width = validate_dimension(data.get("width")) or self.width
        self.height = validate_dimension(data.get("height")) or self.height
        self.scale = validate_dimension(data.get("scale")) or self.scale
        self.base_color = validate_color(data.get("base_color", self.base_color)) or self.base_color
        self.default_color = validate_color(data.get("default_color", self.default_color)) or self.default_color
        self.max_import_dimension = validate_dimension(data.get("max_import_dimension")) or self.max_import_dimension
        tool = str(data.get("default_tool", self.default_tool)).lower()
        if tool in TOOL_NAMES:
            self.default_tool = tool
        try:
            window = float(data.get("coalesce_window", self.coalesce_window))
            if window >= 0:
                self.coalesce_window = window
        except (TypeError, ValueError):
            pass
        limit = data.get("history_limit", self.history_limit)
        if limit is None or (isinstance(limit, int) and not isinstance(limit, bool) and limit > 0):
            self.history_limit = limit
        recent = data.get("recent_files", [])
        if isinstance(recent, list):
            self.recent_files = [str(p) for p in recent][:5]
        else:
            logger.warning("Ignoring recent_files in %s: expected a list", self.path)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "scale": self.scale,
            "base_color": self.base_color,
            "default_tool": self.default_tool,
            "default_color": self.default_color,
            "coalesce_window": self.coalesce_window,
            "history_limit": self.history_limit,
            "max_import_dimension": self.max_import_dimension,
            "recent_files": self.recent_files[:5],
        }

    def add_recent(self, path: str | Path):
        s = str(Path(path).resolve())
        if s in self.recent_files:
            self.recent_files.remove(s)
        self.recent_files.insert(0, s)
        self.recent_files = self.recent_files[:5]

    def save(self):
        try:
            self.path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save config %s: %s", self.path, e)
