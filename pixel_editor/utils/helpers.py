import math


def clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, int(v)))


def normalize_hex(color: str) -> str:
    """Return `color` as lowercase "#rrggbb"; accepts "#rgb" shorthand."""
    s = (color or "").strip().lower()
    if not s.startswith("#"):
        raise ValueError(f"Not a hex color: {color!r}")
    digits = s[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a hex color: {color!r}")
    try:
        int(digits, 16)
    except ValueError:
        raise ValueError(f"Not a hex color: {color!r}") from None
    return "#" + digits


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    digits = normalize_hex(color)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(rgb) -> str:
    r, g, b = rgb[:3]
    return "#%02x%02x%02x" % (clamp(r, 0, 255), clamp(g, 0, 255), clamp(b, 0, 255))


def screen_to_cell(sx: float, sy: float, scale: int, origin: tuple[float, float] = (0, 0)) -> tuple[int, int]:
    ox, oy = origin
    return math.floor((sx - ox) / scale), math.floor((sy - oy) / scale)
