"""Command-line demonstration for textcompare.

Examples:
    python -m textcompare align intention execution
    python -m textcompare distance kitten sitting
    python -m textcompare segment 他特别喜欢北京烤鸭 -w 他 -w 特别 -w 喜欢 -w 北京烤鸭
    python -m textcompare wer "we can only see" "we canon l y see"
"""

import argparse
import logging
import sys

from textcompare import (
    TextCompareError,
    alignment_strings,
    levenshtein_distance,
    max_match,
    word_accuracy,
    word_error_rate,
)
from textcompare._logging import configure_logging


def cmd_align(args: argparse.Namespace) -> None:
    top, bottom = alignment_strings(args.first, args.second, args.sub_cost, args.placeholder)
    print(top)
    print(bottom)


def cmd_distance(args: argparse.Namespace) -> None:
    print(levenshtein_distance(args.first, args.second, args.sub_cost))


def cmd_segment(args: argparse.Namespace) -> None:
    print(max_match(args.text, args.word))


def cmd_wer(args: argparse.Namespace) -> None:
    wer = word_error_rate(args.reference, args.hypothesis)
    accuracy = word_accuracy(args.reference, args.hypothesis)
    print(f"WER: {wer:.4f}")
    print(f"Accuracy: {accuracy:.4f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textcompare",
        description="Grapheme-aware edit distance, alignment and segmentation",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    align_parser = subparsers.add_parser("align", help="Print the alignment of two words")
    align_parser.add_argument("first", nargs="?", default="intention")
    align_parser.add_argument("second", nargs="?", default="execution")
    align_parser.add_argument("--sub-cost", type=int, default=None)
    align_parser.add_argument("--placeholder", default=None)
    align_parser.set_defaults(func=cmd_align)

    distance_parser = subparsers.add_parser("distance", help="Print the edit distance")
    distance_parser.add_argument("first")
    distance_parser.add_argument("second")
    distance_parser.add_argument("--sub-cost", type=int, default=None)
    distance_parser.set_defaults(func=cmd_distance)

    segment_parser = subparsers.add_parser("segment", help="Segment text with max-match")
    segment_parser.add_argument("text")
    segment_parser.add_argument(
        "-w", "--word", action="append", default=[], help="Dictionary word (repeatable)"
    )
    segment_parser.set_defaults(func=cmd_segment)

    wer_parser = subparsers.add_parser("wer", help="Print word error rate and accuracy")
    wer_parser.add_argument("reference")
    wer_parser.add_argument("hypothesis")
    wer_parser.set_defaults(func=cmd_wer)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(level=logging.DEBUG)

    if args.command is None:
        # Same as `align` with its defaults
        args = parser.parse_args(["align"])

    try:
        args.func(args)
    except TextCompareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
