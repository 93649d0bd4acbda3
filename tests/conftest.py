from dataclasses import dataclass
from pathlib import Path
from types import SimpleNamespace
from typing import List, Optional

import pytest

from worksheet.common.config import WorksheetConfig
from worksheet.output.canvas import CellStyle, ENGLISH_FAMILY


@dataclass
class DrawCall:
    page: int
    x: float
    y: float
    w: float
    h: float
    text: str
    style: CellStyle


class RecordingCanvas:
    """Stand-in for PdfCanvas that records draw calls on an A4 page."""

    page_width = 210.0
    page_height = 297.0
    margins = (10.0, 10.0, 10.0, 10.0)

    def __init__(self, config: Optional[WorksheetConfig] = None):
        self.calls: List[DrawCall] = []
        self.pages = 1
        self.saved_to: Optional[Path] = None

    @property
    def page_count(self) -> int:
        return self.pages

    def add_page(self) -> None:
        self.pages += 1

    def draw_cell(self, x, y, w, h, text, style):
        self.calls.append(DrawCall(self.pages, x, y, w, h, text, style))

    def save(self, path: Path) -> Path:
        self.saved_to = path
        return path

    def english_texts(self) -> List[str]:
        return [c.text for c in self.calls if c.style.family == ENGLISH_FAMILY]


class FakeCompletions:
    """Replays queued results for chat.completions.create."""

    def __init__(self, results):
        self.results = list(results)
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def make_response(content: Optional[str]):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def make_chat_client(*results):
    completions = FakeCompletions(results)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def config(tmp_path):
    return WorksheetConfig(font_dir=str(tmp_path / "fonts"), output_path=str(tmp_path / "out.pdf"))


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    monkeypatch.delenv("OPENROUTER_MODEL", raising=False)


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)


def build_test_font(path: Path, text: str) -> Path:
    """Write a small TrueType font drawing every character of text as a box."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    def box():
        pen = TTGlyphPen(None)
        pen.moveTo((100, -100))
        pen.lineTo((100, 800))
        pen.lineTo((900, 800))
        pen.lineTo((900, -100))
        pen.closePath()
        return pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "box", "space"])
    cmap = {ord(ch): "box" for ch in set(text) if not ch.isspace()}
    cmap[ord(" ")] = "space"
    fb.setupCharacterMap(cmap)
    fb.setupGlyf({".notdef": box(), "box": box(), "space": TTGlyphPen(None).glyph()})
    fb.setupHorizontalMetrics({".notdef": (1000, 100), "box": (1000, 100), "space": (500, 0)})
    fb.setupHorizontalHeader(ascent=880, descent=-120)
    fb.setupNameTable({
        "familyName": "WorksheetTest",
        "styleName": "Regular",
        "uniqueFontIdentifier": "WorksheetTest-Regular",
        "fullName": "WorksheetTest Regular",
        "psName": "WorksheetTest-Regular",
        "version": "Version 1.000",
    })
    fb.setupOS2(sTypoAscender=880, sTypoDescender=-120, usWinAscent=880, usWinDescent=120, fsType=0)
    fb.setupPost()
    fb.save(str(path))
    return path
