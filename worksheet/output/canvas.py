"""PDF canvas backed by fpdf2.

The layout engine only talks to the small interface below (page geometry,
add_page, draw_cell, save), so tests can swap in a recording canvas.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

from fpdf import FPDF

from worksheet.common.config import WorksheetConfig
from worksheet.common.errors import AssetLoadError, OutputWriteError


DEFAULT_FAMILY = "YaHei"
CALLIGRAPHY_FAMILY = "Calligraphy"
ENGLISH_FAMILY = "helvetica"  # Core font, Latin-1 only
BOTTOM_MARGIN = 10.0  # mm

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class CellStyle:
    """Font, ink and border for one drawn cell."""
    family: str
    size: float
    style: str = ""  # "" or "B"
    color: Color = (0, 0, 0)
    border: bool = False
    align: str = "L"  # "L" | "C"


def resolve_fonts(config: WorksheetConfig) -> Dict[str, Path]:
    """Map font family names to font files, failing fast on missing files."""
    fonts = {DEFAULT_FAMILY: config.default_font_path}
    if config.use_calligraphy:
        fonts[CALLIGRAPHY_FAMILY] = config.calligraphy_font_path
    for family, path in fonts.items():
        if not path.is_file():
            raise AssetLoadError(f"{family} font not found: {path}")
    return fonts


class PdfCanvas:
    """A4 portrait document in millimetres with the worksheet fonts registered."""

    def __init__(self, fonts: Dict[str, Path]) -> None:
        self.pdf = FPDF(orientation="P", unit="mm", format="A4")
        # Pagination is decided by the layout engine
        self.pdf.set_auto_page_break(auto=False, margin=BOTTOM_MARGIN)
        for family, path in fonts.items():
            try:
                self.pdf.add_font(family, "", str(path))
            except Exception as e:
                raise AssetLoadError(f"Could not load {family} font from {path}: {e}") from e
        self.pdf.add_page()

    @classmethod
    def from_config(cls, config: WorksheetConfig) -> "PdfCanvas":
        return cls(resolve_fonts(config))

    @property
    def page_width(self) -> float:
        return self.pdf.w

    @property
    def page_height(self) -> float:
        return self.pdf.h

    @property
    def margins(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) in mm."""
        return self.pdf.l_margin, self.pdf.t_margin, self.pdf.r_margin, self.pdf.b_margin

    @property
    def page_count(self) -> int:
        return self.pdf.page_no()

    def add_page(self) -> None:
        self.pdf.add_page()

    def draw_cell(self, x: float, y: float, w: float, h: float, text: str, style: CellStyle) -> None:
        family = style.family
        font_style = style.style
        if family == ENGLISH_FAMILY and not _is_latin1(text):
            # Core fonts cannot encode CJK or other non Latin-1 text
            family, font_style = DEFAULT_FAMILY, ""
        self.pdf.set_text_color(*style.color)
        self.pdf.set_font(family, font_style, style.size)
        self.pdf.set_xy(x, y)
        self.pdf.cell(w, h, text, border=1 if style.border else 0, align=style.align)

    def save(self, path: Path) -> Path:
        """Write the document to disk once."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self.pdf.output(str(path))
        except OSError as e:
            raise OutputWriteError(f"Could not write PDF to {path}: {e}") from e
        return path


def _is_latin1(text: str) -> bool:
    try:
        text.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return True
