import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import WillieConfig
from .facade import Willie
from .levels import Level
from .logutil import get_logger

LEVEL_CHOICES = [level.name.lower() for level in Level]


def _read_text(source: str) -> Optional[str]:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def build_willie(args: argparse.Namespace) -> Willie:
    level = Level.from_name(args.level)
    # Lines logged below INFO must still pass the logger and transports
    threshold = min(level, Level.INFO)
    config = WillieConfig(log_to_console=True, level=threshold, colorize=not args.no_color)
    log = Willie(get_logger("willie.cli", level=threshold), config)
    if args.file_prefix:
        log.log_to_file_with_timestamp(args.file_prefix)
    for _ in range(args.indent):
        log.indent()
    return log


def cmd_block(args: argparse.Namespace) -> int:
    text = _read_text(args.file)
    if text is None:
        print(f"[willie] file not found: {args.file}", file=sys.stderr)
        return 2
    log = build_willie(args)
    level = Level.from_name(args.level)
    try:
        if args.hr:
            log.hr()
        log.block(text, lambda line: log.log(level, "%s", line))
        if args.hr:
            log.hr()
    finally:
        log.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="willie", description="Log a block of text line by line, indented.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"willie {__version__}",
        help="Show version and exit",
    )
    parser.add_argument("file", help="Text file to log ('-' reads stdin)")
    parser.add_argument("--indent", type=int, default=0, help="Indent every line by N units")
    parser.add_argument("--level", choices=LEVEL_CHOICES, default="info", help="Level used for each line (default: info)")
    parser.add_argument("--file-prefix", help="Also write to <prefix>_<timestamp>.log")
    parser.add_argument("--hr", action="store_true", help="Draw a separator before and after the block")
    parser.add_argument("--no-color", action="store_true", help="Disable colorized output")
    parser.set_defaults(func=cmd_block)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
