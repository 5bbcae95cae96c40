import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional

from . import config
from .config import RunConfig
from .core import ImageRandoApp
from .exceptions import ConfigError, ImageRandoError
from .reporting import print_summary
from .shuffling.rng import default_seed


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up console logging, plus a log file when one is requested."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        # Never defaults into the destination: it has to start empty.
        try:
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
        except OSError as e:
            raise ConfigError(f"cannot open log file {log_file}: {e}") from e

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def parse_positive_int(value: str, flag: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise ConfigError(f"{flag} must be an integer")
    if n <= 0:
        raise ConfigError(f"{flag} must be > 0")
    return n


def parse_size(value: str) -> int:
    """Parses '4294967296', '4GiB', '500MB' etc. Units are 1024-based."""
    match = re.match(r"^(\d+(?:\.\d+)?)\s*([A-Za-z]+)?$", value.strip())
    if not match:
        raise ConfigError(f"--max-bytes must be an integer or a size like 4GiB (got '{value}')")

    unit = (match.group(2) or "B").upper()
    if unit not in config.SIZE_UNITS:
        raise ConfigError(f"--max-bytes has an unknown unit: {match.group(2)}")

    number = match.group(1)
    if "." in number:
        size = int(float(number) * config.SIZE_UNITS[unit])
    else:
        size = int(number) * config.SIZE_UNITS[unit]

    if size <= 0:
        raise ConfigError("--max-bytes must be > 0")
    return size


def parse_seed(value: str) -> int:
    try:
        seed = int(value)
    except ValueError:
        raise ConfigError("--seed must be an integer")
    if not 0 <= seed <= config.U64_MASK:
        raise ConfigError("--seed must be between 0 and 2**64 - 1")
    return seed


def _arg_type(func, *extra):
    """Adapts a ConfigError-raising parser to argparse's error reporting."""
    def convert(value: str):
        try:
            return func(value, *extra)
        except ConfigError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    return convert


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="image-rando",
        description=(
            "Copies JPGs from a source folder into numbered destination folders (1..X), "
            f"at most {config.DEFAULT_MAX_FILES} photos and 4 GiB per folder by default."
        ),
    )

    p.add_argument("--src", type=Path, default=config.DEFAULT_SRC,
                   help=f"Source folder of JPEGs (default: {config.DEFAULT_SRC})")
    p.add_argument("--dst", type=Path, default=config.DEFAULT_DST,
                   help=f"Empty destination folder (default: {config.DEFAULT_DST})")
    p.add_argument("--max-files", type=_arg_type(parse_positive_int, "--max-files"),
                   default=config.DEFAULT_MAX_FILES,
                   help=f"Max photos per folder (default: {config.DEFAULT_MAX_FILES})")
    p.add_argument("--max-bytes", type=_arg_type(parse_size), default=config.DEFAULT_MAX_BYTES,
                   help=f"Max bytes per folder, e.g. 4GiB (default: {config.DEFAULT_MAX_BYTES})")
    p.add_argument("--seed", type=_arg_type(parse_seed), default=None,
                   help="Shuffle seed; reuse it to reproduce a run (default: time + pid)")

    p.add_argument("--dry-run", action="store_true", help="Plan folders without copying anything")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")

    return p.parse_args(argv)


def build_config(args) -> RunConfig:
    return RunConfig(
        src=args.src,
        dst=args.dst,
        max_files=args.max_files,
        max_bytes=args.max_bytes,
        seed=args.seed if args.seed is not None else default_seed(),
        dry_run=args.dry_run,
    )


def main(argv=None):
    args = parse_args(argv)
    try:
        setup_logging(args.verbose, args.log_file)
    except ConfigError as e:
        # Logging is not configured yet, so report straight to stderr.
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    run_config = build_config(args)

    logging.info("=== image-rando Started ===")
    logging.info(f"Source: {run_config.src}")
    logging.info(f"Dest:   {run_config.dst}")

    try:
        summary = ImageRandoApp(run_config).run()
    except ImageRandoError as e:
        logging.error(f"error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during redistribution.")
        sys.exit(1)

    print_summary(summary)


if __name__ == "__main__":
    main()
