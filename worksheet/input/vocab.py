"""Vocabulary sources: the built-in table and CSV files."""

import csv
from pathlib import Path
from typing import List, Sequence

from worksheet.common.errors import ConfigurationError
from worksheet.common.logging import log_verbose
from worksheet.common.utils import simplified_to_traditional, split_characters
from worksheet.schema.base import Entry


STATIC_VOCABULARY: Sequence[Entry] = (
    Entry("hello", ("nǐ", "hǎo"), ("你", "好")),
    Entry("goodbye", ("zài", "jiàn"), ("再", "见")),
    Entry("Chinese, Chinese written language", ("zhōng", "wén"), ("中", "文")),
    Entry("to welcome", ("huān", "yíng"), ("欢", "迎")),
)


def get_static_vocabulary() -> List[Entry]:
    """Return the built-in entries in worksheet order."""
    return list(STATIC_VOCABULARY)


def load_vocab_csv(path: Path, verbose: bool = False) -> List[Entry]:
    """Read entries from a CSV file with columns english,pinyin,chinese.

    Pinyin is space-separated; Chinese is split per character. Blank lines
    and lines starting with '#' are skipped, as are rows missing the English
    or Chinese column. An unreadable or non-UTF-8 file raises
    ConfigurationError.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            records = list(csv.reader(f))
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Vocab file is not UTF-8: {path} ({e})") from e
    except (OSError, csv.Error) as e:
        raise ConfigurationError(f"Could not read vocab file {path}: {e}") from e

    entries: List[Entry] = []
    for line_no, rec in enumerate(records, 1):
        if not rec or not any(field.strip() for field in rec):
            continue
        if rec[0].lstrip().startswith("#"):
            continue
        eng = rec[0].strip()
        pin = rec[1].strip() if len(rec) > 1 else ""
        chi = rec[2].strip() if len(rec) > 2 else ""
        if not eng or not chi:
            log_verbose(verbose, "skip", f"{path.name}:{line_no} needs english and chinese columns")
            continue
        entries.append(Entry.create(eng, pin.split(), split_characters(chi)))
    log_verbose(verbose, "vocab", f"Loaded {len(entries)} entries from {path.name}")
    return entries


def to_traditional(entry: Entry) -> Entry:
    """Return a copy of the entry with traditional character guides.

    Conversion is per character so alignment with Pinyin is kept.
    """
    chars = tuple(simplified_to_traditional(ch) for ch in entry.chinese)
    return Entry(english=entry.english, pinyin=entry.pinyin, chinese=chars)
