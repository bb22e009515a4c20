import argparse
import logging

from . import APP_NAME, __version__
from .demo import SCENES, run_scenes

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--scene",
        type=int,
        action="append",
        metavar="N",
        help=f"run only scene N (1-{len(SCENES)}), can be repeated",
    )
    parser.add_argument("--debug", action="store_true", help="show debug messages")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    for number in args.scene or []:
        if not 1 <= number <= len(SCENES):
            logger.warning("ignoring unknown scene %d", number)

    run_scenes(print, only=args.scene)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
