"""Common utility functions shared across the library."""

import os
import unicodedata
from pathlib import Path
from typing import List

from hanziconv import HanziConv


_DEF_ENV_LOADED = False


def _load_env_file() -> None:
    """Load environment variables from .env file if present.

    Existing variables are never overridden.
    """
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    # Look for .env in worksheet/common/../.. (project root) or the cwd
    here = Path(__file__).parent
    candidates = [
        here.parent.parent / ".env",
        Path.cwd() / ".env",
    ]
    for p in candidates:
        if not p.is_file():
            continue
        for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):].strip()
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            key = k.strip()
            val = v.strip().strip('"').strip("'")
            if key and os.environ.get(key) is None:
                os.environ[key] = val


def split_characters(text: str) -> List[str]:
    """Split Chinese text into one element per code point.

    Whitespace and punctuation (ASCII or full-width) are dropped.
    """
    chars: List[str] = []
    for ch in text:
        if ch.isspace():
            continue
        if unicodedata.category(ch).startswith("P"):
            continue
        chars.append(ch)
    return chars


def simplified_to_traditional(text: str) -> str:
    """Convert simplified Chinese text to traditional Chinese."""
    if not text:
        return text
    return HanziConv.toTraditional(text)
