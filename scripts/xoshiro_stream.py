"""Command line harness for printing deterministic xoshiro++ streams."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "stream_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xoshiro_engines import ENGINES, StreamConfig, run_stream


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed hex integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc


def _parse_count(value: str) -> int:
    count = _parse_int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Counts must be non-negative integers.")
    return count


def _resolve(path: Path) -> Path:
    if not path.is_absolute():
        path = (PROJECT_ROOT / path).resolve()
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print raw outputs from a xoshiro++ engine")
    parser.add_argument(
        "--engine",
        choices=sorted(ENGINES),
        default="xoshiro256++",
        help="Generator to run",
    )
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=None,
        help="Integer seed (decimal or 0x-prefixed hex). Omit to use the built-in default state",
    )
    parser.add_argument(
        "--seed32",
        action="store_true",
        help="Treat --seed as a 32-bit value copied into both seed halves (xoshiro128++ only)",
    )
    parser.add_argument("--count", type=_parse_count, default=10, help="Number of outputs to print")
    parser.add_argument("--skip", type=_parse_count, default=0, help="Outputs to discard first")
    parser.add_argument("--hex", action="store_true", help="Format outputs and state as hex strings")
    parser.add_argument(
        "--state-in",
        type=Path,
        help="Resume from a state file written by --state-out",
    )
    parser.add_argument(
        "--state-out",
        type=Path,
        help="Write the final engine state in binary form",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "stream_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Log seeding and state IO")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = StreamConfig(
        engine=args.engine,
        seed=args.seed,
        seed_bits=32 if args.seed32 else 64,
        count=args.count,
        skip=args.skip,
        state_in=_resolve(args.state_in).as_posix() if args.state_in else None,
        state_out=_resolve(args.state_out).as_posix() if args.state_out else None,
        hex_output=args.hex,
    )
    try:
        result = run_stream(cfg)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        log_path = _resolve(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
