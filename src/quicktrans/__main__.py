from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence, Union

from rich.console import Console

from .cli import parse_args
from .config import AppConfig, build_config
from .encoding import ensure_text
from .errors import QuickTranslatorError
from .logging_utils import RichLogger, configure_logging
from .report import print_boundary_result, print_dictionary, print_stats
from .translator import QuickTranslator


def read_input(args) -> Union[str, bytes]:
    if args.text is not None:
        return args.text
    if args.input is not None:
        path = Path(args.input).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return path.read_bytes()
    return sys.stdin.buffer.read()


def build_translator(config: AppConfig, logger: RichLogger) -> QuickTranslator:
    translator = QuickTranslator(config.dictionary_path, encoding=config.encoding)
    logger.log_panel(
        f"Loaded {len(translator)} dictionary entries from {config.dictionary_path}",
        "INFO",
        "cyan",
    )
    return translator


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)
    logger = RichLogger()
    output = Console(highlight=False)

    try:
        config = build_config(args)
        logger.log_file = config.log_file
        translator = build_translator(config, logger)

        if args.stats:
            print_stats(output, translator.get_dictionary_stats())
            return 0
        if args.show_dictionary:
            print_dictionary(output, translator.get_dictionary())
            return 0
        if args.test_boundary:
            sample = args.sample
            if sample is None:
                sample = ensure_text(read_input(args), translator.encoding)
            print_boundary_result(output, args.test_boundary, translator.test_boundary(args.test_boundary, sample))
            return 0

        translated = translator.translate(read_input(args))
        sys.stdout.write(translated + "\n")
        logger.record(f"Translated: {translated}")
        return 0
    except (QuickTranslatorError, OSError) as error:
        logger.log_exception(error)
        return 1


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
