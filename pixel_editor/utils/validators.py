from pixel_editor.utils.helpers import normalize_hex

MAX_DIMENSION = 1024


def validate_color(color) -> str | None:
    try:
        return normalize_hex(str(color))
    except ValueError:
        return None


def validate_dimension(value) -> int | None:
    try:
        v = int(value)
    except (TypeError, ValueError):
        return None
    if 1 <= v <= MAX_DIMENSION:
        return v
    return None
