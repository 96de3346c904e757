#!/usr/bin/env python
"""Inspect how a string is segmented, showing cascade fragments and tokens.

Usage:
    python scripts/inspect_segmentation.py "Androidを開発した"
    python scripts/inspect_segmentation.py "（例）" --trace      # Show state after each fragment
    python scripts/inspect_segmentation.py --file notes.txt       # Segment each line of a file
    python scripts/inspect_segmentation.py "ＡＢＣ" --normalize
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from yobreak.pipeline.merger import INITIAL_STATE, classify_fragment
from yobreak.segmenter import Segmenter


def print_fragments(fragments: tuple[str, ...]) -> None:
    """Print cascade fragments with their index."""
    print(f"Fragments ({len(fragments)}):")
    for i, fragment in enumerate(fragments):
        print(f"  {i:3d}  {fragment!r}")


def print_trace(fragments: tuple[str, ...]) -> None:
    """Replay the merger and print the state after each fragment."""
    print("Trace:")
    tokens: list[str] = []
    state = INITIAL_STATE
    for i, fragment in enumerate(fragments):
        state = classify_fragment(fragment, state, tokens)
        print(f"  {i:3d}  {fragment!r:<16} {state.word_class:<22} tokens={tokens!r}")


def print_tokens(tokens: tuple[str, ...]) -> None:
    """Print tokens separated by a visible boundary marker."""
    print(f"Tokens ({len(tokens)}):")
    print("  " + " | ".join(repr(token) for token in tokens))


def inspect_text(segmenter: Segmenter, text: str, trace: bool) -> None:
    result = segmenter.segment_with_metadata(text)

    print("=" * 80)
    print(f"Input: {text!r}")
    if result.normalized and result.text != text:
        print(f"Normalized: {result.text!r}")
    print("=" * 80)

    print_fragments(result.fragments)
    if trace:
        print_trace(result.fragments)
    print_tokens(result.tokens)

    if "".join(result.tokens) != result.text:
        print("  (tokens do not reconstruct the input: an opening bracket was dropped)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect word-break segmentation")
    parser.add_argument("text", nargs="?", help="Text to segment")
    parser.add_argument("--file", type=Path, help="Segment each line of a UTF-8 file")
    parser.add_argument("--trace", action="store_true", help="Show merger state per fragment")
    parser.add_argument("--normalize", action="store_true", help="Apply neologdn normalization first")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.text is None and args.file is None:
        parser.error("either text or --file is required")

    segmenter = Segmenter(normalize=args.normalize)

    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            for line in f:
                inspect_text(segmenter, line.rstrip("\n"), args.trace)
    else:
        inspect_text(segmenter, args.text, args.trace)


if __name__ == "__main__":
    main()
