"""Worksheet pipeline: collect entries, lay them out, write the PDF."""

from pathlib import Path
from typing import Any, Callable, List, Optional

from worksheet.common.config import WorksheetConfig
from worksheet.common.errors import ConfigurationError, TranslationError
from worksheet.common.logging import log_debug, log_verbose, log_warn
from worksheet.common.openai import OpenRouterClient
from worksheet.input.translation import translate_phrase
from worksheet.input.vocab import get_static_vocabulary, load_vocab_csv, to_traditional
from worksheet.output.canvas import PdfCanvas
from worksheet.output.layout import LayoutContext, layout_entries
from worksheet.schema.base import Entry


def collect_entries(
    config: WorksheetConfig,
    phrase: Optional[str] = None,
    vocab_path: Optional[Path] = None,
    client: Optional[OpenRouterClient] = None,
    verbose: bool = False,
    debug: bool = False,
) -> List[Entry]:
    """Static table, then CSV entries, then the translated phrase (if any).

    Translation failures are logged and skipped; the worksheet is still
    produced from the remaining entries.
    """
    entries = get_static_vocabulary()
    if vocab_path is not None:
        entries.extend(load_vocab_csv(vocab_path, verbose=verbose))

    if phrase and phrase.strip():
        print("Getting translation...")
        try:
            if client is None:
                client = OpenRouterClient(model=config.model, timeout=config.timeout, debug=debug)
            entries.append(translate_phrase(phrase, client=client, timeout=config.timeout, verbose=verbose))
            print("Translation successful!")
        except (ConfigurationError, TranslationError) as e:
            log_warn(f"Translation skipped: {e}")

    if config.traditional:
        entries = [to_traditional(e) for e in entries]
    log_debug(debug, f"Collected {len(entries)} entries")
    return entries


def render_worksheet(
    entries: List[Entry],
    config: WorksheetConfig,
    canvas: Any,
    verbose: bool = False,
) -> Path:
    """Lay out all entries on the canvas and write it to config.output_path."""
    ctx = LayoutContext.create(canvas, config)
    log_verbose(verbose, "layout", f"{ctx.capacity} cells per row, {len(entries)} entries")
    layout_entries(ctx, entries, verbose=verbose)
    out_path = canvas.save(Path(config.output_path))
    log_verbose(verbose, "file", f"Wrote {out_path} ({canvas.page_count} page(s))")
    return out_path


def run(
    config: WorksheetConfig,
    phrase: Optional[str] = None,
    vocab_path: Optional[Path] = None,
    canvas_factory: Callable[[WorksheetConfig], Any] = PdfCanvas.from_config,
    client: Optional[OpenRouterClient] = None,
    verbose: bool = False,
    debug: bool = False,
) -> Path:
    """Full run. Fonts load before any network call so asset errors fail fast."""
    canvas = canvas_factory(config)
    entries = collect_entries(config, phrase, vocab_path, client=client, verbose=verbose, debug=debug)
    return render_worksheet(entries, config, canvas, verbose=verbose)
