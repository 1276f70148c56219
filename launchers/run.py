import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from martians.app.loader import load_settings
from martians.app.loop import run_game

logger = logging.getLogger("martians")


def parse_size(text: str):
    try:
        w, h = map(int, text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, e.g. 800x600, got {text!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Martians: click them before they overrun you")
    parser.add_argument("--config", type=Path, default=None, help="Settings YAML (default: config/default.yaml)")
    parser.add_argument("--screen", type=parse_size, default=None, help="Canvas size WxH, e.g. 800x600")
    parser.add_argument("--seed", type=int, default=None, help="Seed for martian placement")
    parser.add_argument("--mirror", action="store_true", default=None, help="Mirror the canvas horizontally")
    parser.add_argument("--log-level", default="INFO", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    overrides = {"canvas_size": args.screen, "seed": args.seed, "mirror": args.mirror}
    try:
        cfg = load_settings(args.config, overrides)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 2

    run_game(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
