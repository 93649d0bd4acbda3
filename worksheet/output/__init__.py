"""Output: PDF canvas, page layout and the worksheet pipeline."""

from worksheet.output.canvas import (
    CellStyle,
    PdfCanvas,
    resolve_fonts,
    DEFAULT_FAMILY,
    CALLIGRAPHY_FAMILY,
    ENGLISH_FAMILY,
)
from worksheet.output.layout import (
    DrawStats,
    LayoutContext,
    grid_rows,
    layout_entry,
    layout_entries,
    row_capacity,
)
from worksheet.output.processing import (
    collect_entries,
    render_worksheet,
    run,
)

__all__ = [
    # canvas
    "CellStyle",
    "PdfCanvas",
    "resolve_fonts",
    "DEFAULT_FAMILY",
    "CALLIGRAPHY_FAMILY",
    "ENGLISH_FAMILY",
    # layout
    "DrawStats",
    "LayoutContext",
    "grid_rows",
    "layout_entry",
    "layout_entries",
    "row_capacity",
    # processing
    "collect_entries",
    "render_worksheet",
    "run",
]
