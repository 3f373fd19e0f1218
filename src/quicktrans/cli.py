from __future__ import annotations

import argparse
from typing import Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quicktrans",
        description=(
            "Dictionary-driven whole-word text substitution with Unicode-aware word boundaries."
        ),
    )
    parser.add_argument(
        "--dictionary",
        help="Path to the translation map file (word1, word2: target per line).",
    )
    parser.add_argument(
        "--encoding",
        help="Encoding of the dictionary file and byte input. Defaults to utf-8.",
    )
    parser.add_argument(
        "--config",
        help="Optional YAML file providing dictionary, encoding and log_file defaults.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text",
        help="Text to translate. Standard input is read when neither --text nor --input is given.",
    )
    source.add_argument(
        "--input",
        help="Read the text to translate from this file.",
    )
    parser.add_argument(
        "--test-boundary",
        metavar="WORD",
        help="List whole-word matches of WORD instead of translating.",
    )
    parser.add_argument(
        "--sample",
        help="Sample text for --test-boundary. Defaults to the input text.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print dictionary statistics, then exit.",
    )
    parser.add_argument(
        "--show-dictionary",
        action="store_true",
        help="Print the loaded rules in application order, then exit.",
    )
    parser.add_argument(
        "--log-file",
        help="File where status messages are appended. Defaults to quicktrans.log; pass '' to disable.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging, including skipped dictionary lines.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)
