# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, sys
from datetime import datetime

from .api import GenImageError, generate_images
from .config.loader import load_meta_config
from .config.schema import MetaConfig
from .utils.logging import init_logging


def default_seed(now: datetime | None = None) -> int:
    now = now or datetime.now()
    return now.hour * 100 + now.minute


def cmd_generate(args) -> int:
    init_logging(args.log_level)
    seed = args.id if args.id is not None else default_seed()
    blur = args.blur or f"{args.output}.blur.png"
    meta = load_meta_config(*args.config) if args.config else MetaConfig()
    try:
        hash_ = generate_images(seed, args.output, blur, meta, time=args.time)
    except GenImageError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"blurhash is: {hash_}")
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="backgen", description="Generate a background image from a seed")
    p.add_argument("--id", type=int, default=None, help="seed (default: current time as hhmm)")
    p.add_argument("--output", default="output.png", help="image file, .svg or .png")
    p.add_argument("--blur", default=None, help="blurred preview (default: <output>.blur.png)")
    p.add_argument(
        "--config",
        action="append",
        default=[],
        help="TOML or YAML configuration; repeat to layer several files",
    )
    p.add_argument("--time", type=int, default=None, help="time of day as hhmm (default: derived from the seed)")
    p.add_argument("--log-level", dest="log_level", default="warning", help="none, error, warning, info or debug")
    p.set_defaults(func=cmd_generate)
    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
