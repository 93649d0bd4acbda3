"""Worksheet configuration.

Defaults reproduce the classic worksheet: A4 portrait, 20mm character cells
with a 2mm gap, grey trace-over glyphs in the calligraphy font.

A JSON config file may override any field, e.g.::

    {
      "output_path": "hsk1.pdf",
      "font_dir": "./fonts",
      "cell_size": 18,
      "use_calligraphy": false
    }
"""

import json
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from worksheet.common.errors import ConfigurationError


DEFAULT_FONT_DIR = "/fonts"
DEFAULT_FONT_FILE = "chinese.msyh.ttf"
CALLIGRAPHY_FONT_FILE = "simsun.ttf"


def _default_font_dir() -> str:
    return os.environ.get("WORKSHEET_FONT_DIR", DEFAULT_FONT_DIR)


_STR_FIELDS = ("output_path", "font_dir", "default_font_file", "calligraphy_font_file")
_BOOL_FIELDS = ("use_calligraphy", "traditional")
_NUMBER_FIELDS = (
    "start_x", "start_y", "cell_size", "cell_gap", "row_gap", "entry_gap",
    "english_font_size", "pinyin_font_size", "character_font_size", "timeout",
)


@dataclass
class WorksheetConfig:
    """Settings for one worksheet run."""
    output_path: str = "output.pdf"
    font_dir: str = field(default_factory=_default_font_dir)
    default_font_file: str = DEFAULT_FONT_FILE
    calligraphy_font_file: str = CALLIGRAPHY_FONT_FILE
    use_calligraphy: bool = True
    traditional: bool = False  # Render character guides in traditional form

    # Geometry (mm)
    start_x: float = 20.0
    start_y: float = 20.0
    cell_size: float = 20.0
    cell_gap: float = 2.0
    row_gap: float = 2.0  # Between wrapped grid rows of one entry
    entry_gap: float = 13.0  # Below an entry's last grid row

    # Font sizes (pt)
    english_font_size: float = 12.0
    pinyin_font_size: float = 12.0
    character_font_size: float = 40.0

    # Translation
    model: Optional[str] = None
    timeout: float = 30.0

    def __post_init__(self):
        for name in _STR_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string, got {getattr(self, name)!r}")
        for name in _BOOL_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false, got {getattr(self, name)!r}")
        for name in _NUMBER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
        if self.model is not None and not isinstance(self.model, str):
            raise ConfigurationError(f"model must be a string, got {self.model!r}")
        for name in ("cell_size", "english_font_size", "pinyin_font_size", "character_font_size", "timeout"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("start_x", "start_y", "cell_gap", "row_gap", "entry_gap"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative, got {getattr(self, name)!r}")

    @property
    def default_font_path(self) -> Path:
        return Path(self.font_dir) / self.default_font_file

    @property
    def calligraphy_font_path(self) -> Path:
        return Path(self.font_dir) / self.calligraphy_font_file


def load_config(path: Optional[Path] = None, **overrides: Any) -> WorksheetConfig:
    """Build a config from an optional JSON file plus keyword overrides.

    Overrides whose value is None are ignored, so CLI flags that were not
    given leave the file (or default) value in place.
    """
    data: Dict[str, Any] = {}
    if path is not None:
        if not path.is_file():
            raise ConfigurationError(f"Config file does not exist: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file is not valid JSON: {path} ({e})") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Config file is not UTF-8: {path} ({e})") from e
        except OSError as e:
            raise ConfigurationError(f"Could not read config file {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file must contain a JSON object: {path}")
        data.update(loaded)

    data.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(WorksheetConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")

    try:
        return replace(WorksheetConfig(), **data)
    except TypeError as e:
        raise ConfigurationError(f"Invalid config values: {e}") from e
