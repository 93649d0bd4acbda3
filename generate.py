#!/usr/bin/env python3
"""Chinese handwriting worksheet generator.

Renders the built-in vocabulary (plus optional CSV entries and one
AI-translated phrase) into an A4 PDF practice sheet:

    English phrase
    [pinyin cells]
    [grey trace-over character cells, padded with blank cells]

Usage:
    python generate.py                       # prompts for a phrase to translate
    python generate.py --phrase "thank you" --output thanks.pdf --verbose
    python generate.py --no-prompt --vocab words.csv --traditional

Environment:
    OPENROUTER_API_KEY   API key for translation (translation is skipped without it)
    OPENROUTER_MODEL     Model override
    WORKSHEET_FONT_DIR   Directory holding chinese.msyh.ttf and simsun.ttf
"""

import argparse
from pathlib import Path
from typing import List, Optional

from worksheet.common.config import load_config
from worksheet.common.errors import (
    AssetLoadError,
    ConfigurationError,
    LayoutError,
    OutputWriteError,
)
from worksheet.common.logging import log_error
from worksheet.common.utils import _load_env_file
from worksheet.output.canvas import PdfCanvas
from worksheet.output.processing import run


# Load .env on import
_load_env_file()


PROMPT = "Enter an English phrase to translate (or press Enter to skip): "


def prompt_for_phrase() -> str:
    """Read one optional phrase from stdin; EOF counts as skip."""
    try:
        return input(PROMPT).strip()
    except EOFError:
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a Chinese handwriting practice worksheet PDF"
    )
    parser.add_argument(
        "--phrase",
        help="English phrase to translate and append (skips the prompt)",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not prompt for a phrase",
    )
    parser.add_argument(
        "--output",
        help="Output PDF path (default: output.pdf)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON config file",
    )
    parser.add_argument(
        "--vocab",
        type=str,
        help="CSV file of extra entries (english,pinyin,chinese)",
    )
    parser.add_argument(
        "--no-calligraphy",
        action="store_true",
        help="Draw character guides in the default font",
    )
    parser.add_argument(
        "--traditional",
        action="store_true",
        help="Draw character guides in traditional form",
    )
    parser.add_argument(
        "--model",
        help="OpenRouter model name (overrides OPENROUTER_MODEL)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Translation request timeout in seconds",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.is_file():
        log_error(f"Config file does not exist: {config_path}")
        return 2
    vocab_path = Path(args.vocab) if args.vocab else None
    if vocab_path is not None and not vocab_path.is_file():
        log_error(f"Vocab file does not exist: {vocab_path}")
        return 2

    try:
        config = load_config(
            config_path,
            output_path=args.output,
            model=args.model,
            timeout=args.timeout,
            use_calligraphy=False if args.no_calligraphy else None,
            traditional=True if args.traditional else None,
        )
    except ConfigurationError as e:
        log_error(str(e))
        return 2

    phrase = args.phrase
    if phrase is None and not args.no_prompt:
        phrase = prompt_for_phrase()

    try:
        out_path = run(
            config,
            phrase=phrase,
            vocab_path=vocab_path,
            canvas_factory=PdfCanvas.from_config,
            verbose=args.verbose,
            debug=args.debug,
        )
    except ConfigurationError as e:
        # Unreadable vocab file
        log_error(str(e))
        return 2
    except (AssetLoadError, LayoutError, OutputWriteError) as e:
        log_error(str(e))
        return 1

    print(f"PDF created successfully: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
