"""Command-line tooling for inspecting, comparing and rendering stored hashes.

Usage:
  python -m hashmatch inspect a.json
  python -m hashmatch compare a.json b.json
  python -m hashmatch render a.json --out a.png --block-size 4
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from loguru import logger

from .config import AppConfig, load_config
from .contracts import load_hash_record
from .errors import HashRecordError, IncompatibleAlgorithmError
from .logging_utils import configure_logging
from .rendering import save_hash_image


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="hashmatch")
    p.add_argument(
        "--config",
        default=os.environ.get("HASHMATCH_CONFIG"),
        help="Path to config YAML (default: HASHMATCH_CONFIG or built-in defaults).",
    )
    p.add_argument("--log-level", default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    inspect = sub.add_parser("inspect", help="Print a stored hash and its byte payload.")
    inspect.add_argument("record", type=Path)

    compare = sub.add_parser("compare", help="Print the Hamming distance between two hashes.")
    compare.add_argument("first", type=Path)
    compare.add_argument("second", type=Path)

    render = sub.add_parser("render", help="Write the debug image of a stored hash.")
    render.add_argument("record", type=Path)
    render.add_argument("--out", type=Path, default=None)
    render.add_argument("--block-size", type=int, default=None)

    return p.parse_args(argv)


def _inspect(args: argparse.Namespace, config: AppConfig) -> int:
    value = load_hash_record(args.record).to_hash()
    print(str(value))
    print(f"bit_resolution: {value.bit_resolution}")
    print(f"algorithm_id: {value.algorithm_id}")
    print(f"payload: {value.to_byte_array().hex()}")
    return 0


def _compare(args: argparse.Namespace, config: AppConfig) -> int:
    first = load_hash_record(args.first).to_hash()
    second = load_hash_record(args.second).to_hash()
    if config.match.check_algorithm:
        try:
            distance = first.hamming_distance(second)
            normalized = first.normalized_hamming_distance(second)
        except IncompatibleAlgorithmError as exc:
            logger.error("{}", exc)
            return 2
    else:
        distance = first.hamming_distance_fast(second)
        normalized = first.normalized_hamming_distance_fast(second)

    is_match = normalized <= config.match.max_normalized_distance
    print(f"distance: {distance}")
    print(f"normalized: {normalized:.6f}")
    print(f"match: {'yes' if is_match else 'no'}")
    return 0


def _render(args: argparse.Namespace, config: AppConfig) -> int:
    value = load_hash_record(args.record).to_hash()
    block_size = args.block_size if args.block_size is not None else config.render.block_size
    out = args.out or (config.render.output_dir / f"{args.record.stem}.png")
    try:
        image = value.to_image(block_size)
    except ValueError as exc:
        logger.error("Cannot render {}: {}", args.record, exc)
        return 2
    path = save_hash_image(image, out)
    logger.info("Wrote {}x{} hash image to {}", image.width, image.height, path)
    return 0


_COMMANDS = {
    "inspect": _inspect,
    "compare": _compare,
    "render": _render,
}


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    config = load_config(args.config) if args.config else AppConfig()
    configure_logging(config.logging.log_dir, args.log_level or config.logging.level)

    try:
        return _COMMANDS[args.cmd](args, config)
    except (OSError, HashRecordError, ValueError) as exc:
        logger.error("{} failed: {}", args.cmd, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
