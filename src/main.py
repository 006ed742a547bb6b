#!/usr/bin/env python3
"""
WSJ Crossword Loader

Loads Wall Street Journal JSON crossword puzzles and either prints a
summary of each puzzle or exports it to YAML.

Usage:
    python main.py data.json
    python main.py --format yaml --output ./out puzzles/*.json
"""

import sys
from pathlib import Path
from typing import List, Optional

from config import (
    LoaderConfig, ConfigValidationError, create_argument_parser, load_config
)
from crossword_formatter import CrosswordError, get_formatter
from logging_config import setup_logging, get_logger
from models import Crossword, CrosswordBuilder
from yaml_exporter import YAMLExporter, YAMLExportError
import wsj_formatter  # noqa: F401  registers the "wsj" formatter


logger = get_logger(__name__)


def load_puzzle(path: str, config: LoaderConfig) -> Crossword:
    """
    Load one puzzle file using the configured formatter.

    Raises:
        CrosswordError: If the file cannot be parsed
        OSError: If the file cannot be opened
    """
    formatter = get_formatter(config.input.format)
    formatter.set_encoding(config.input.encoding)

    builder = CrosswordBuilder()
    with open(path, 'rb') as f:
        formatter.read(builder, f)
    return builder.build()


def format_summary(crossword: Crossword) -> str:
    """Render a plain-text summary of a puzzle."""
    lines = [
        f"Title:     {crossword.title}",
        f"Author:    {crossword.author}",
        f"Copyright: {crossword.copyright}",
    ]
    if crossword.release_date is not None:
        lines.append(f"Date:      {crossword.release_date:%Y-%m-%d %H:%M:%S}")
    lines.append(f"Size:      {crossword.width}x{crossword.height}")
    if crossword.description:
        lines.append(f"Notes:     {crossword.description}")

    for heading, words in (("ACROSS", crossword.words_across),
                           ("DOWN", crossword.words_down)):
        lines.append("")
        lines.append(heading)
        for word in words:
            lines.append(f"  {word.number:>3}. {word.hint} ({word.length})")

    return "\n".join(lines)


def run(config: LoaderConfig, files: List[str]) -> int:
    """
    Process every file and return the process exit code.

    A failing file is reported and the remaining files are still processed.
    """
    exporter = YAMLExporter()
    failures = 0

    for path in files:
        try:
            crossword = load_puzzle(path, config)
        except (CrosswordError, OSError) as e:
            logger.error(f"{path}: {e}")
            failures += 1
            continue

        logger.debug(f"{path}: loaded {len(crossword.words)} words")

        if config.output.format == "yaml":
            target = Path(config.output.directory) / f"{Path(path).stem}.yaml"
            try:
                exporter.save(crossword, str(target))
            except (YAMLExportError, OSError) as e:
                logger.error(f"{path}: {e}")
                failures += 1
        else:
            print(format_summary(crossword))
            print()

    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_level=config.logging.level,
        log_dir=config.logging.directory,
        enable_console=config.logging.enable_console,
    )

    return run(config, args.files)


if __name__ == "__main__":
    sys.exit(main())
