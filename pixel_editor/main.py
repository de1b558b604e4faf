import argparse
import logging
from pathlib import Path

from pixel_editor.utils.config import AppConfig
from pixel_editor.utils.validators import validate_dimension


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pixel Art Editor")
    parser.add_argument("--width", type=int, help="Width of the starting picture in cells")
    parser.add_argument("--height", type=int, help="Height of the starting picture in cells")
    parser.add_argument("--scale", type=int, help="Screen pixels per cell")
    parser.add_argument("--open", type=str, dest="open_path", help="Image to load at startup")
    parser.add_argument("--config", type=str, help="Path to the JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_config(args) -> AppConfig:
    config = AppConfig(Path(args.config) if args.config else None)
    for name in ("width", "height", "scale"):
        value = getattr(args, name)
        if value is None:
            continue
        valid = validate_dimension(value)
        if valid is None:
            raise SystemExit(f"Error: --{name} must be between 1 and 1024")
        setattr(config, name, valid)
    return config


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args)

    from pixel_editor.gui.main_window import run_app
    run_app(config, open_path=args.open_path)


if __name__ == "__main__":
    main()
