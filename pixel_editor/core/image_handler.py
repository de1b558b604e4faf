import logging
from pathlib import Path
from PIL import Image

from pixel_editor.core.picture import Picture
from pixel_editor.utils.helpers import hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "pixelart.png"
MAX_IMPORT_DIMENSION = 100


class PictureImportError(Exception):
    pass


def picture_to_image(picture: Picture) -> Image.Image:
    """One RGB pixel per cell."""
    img = Image.new("RGB", (picture.width, picture.height))
    img.putdata([hex_to_rgb(c) for c in picture.cells])
    return img


def picture_from_image(image: Image.Image, max_dimension: int = MAX_IMPORT_DIMENSION) -> Picture:
    """
    Build a Picture from the top-left corner of `image`, at most
    `max_dimension` cells on each side.
    """
    img = image.convert("RGB")
    width = min(max_dimension, img.width)
    height = min(max_dimension, img.height)
    if (width, height) != img.size:
        img = img.crop((0, 0, width, height))
    px = img.load()
    cells = [rgb_to_hex(px[x, y]) for y in range(height) for x in range(width)]
    return Picture(width, height, tuple(cells))


def load_picture(path: str | Path, max_dimension: int = MAX_IMPORT_DIMENSION) -> Picture:
    p = Path(path)
    try:
        with Image.open(p) as img:
            img.load()
            picture = picture_from_image(img, max_dimension)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise PictureImportError(f"Could not load image {p}: {e}") from e
    logger.info("Loaded %s as %dx%d picture", p, picture.width, picture.height)
    return picture


def save_png(picture: Picture, out_path: str | Path | None = None) -> Path:
    if picture.width == 0 or picture.height == 0:
        raise ValueError("Cannot export an empty picture.")
    p = Path(out_path) if out_path else Path(DEFAULT_FILENAME)
    if p.parent != Path("."):
        p.parent.mkdir(parents=True, exist_ok=True)
    picture_to_image(picture).save(p, format="PNG")
    logger.info("Saved %dx%d picture to %s", picture.width, picture.height, p)
    return p
