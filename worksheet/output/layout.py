"""Page layout for handwriting worksheets.

Each entry is drawn as a block::

    English phrase                       (header band, 12mm)
    [pin][pin][   ][   ] ...             (Pinyin band, 10mm)
    [ 字 ][ 字 ][    ][    ] ...          (character band, cell_size)
    ...more rows when the entry wraps...

Every row is ruled to full width: cells beyond the entry's characters are
empty bordered placeholders for free practice. Entries longer than one row
wrap onto further rows, and blocks or rows that would cross the bottom
margin start a new page.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List

from worksheet.common.config import WorksheetConfig
from worksheet.common.errors import LayoutError, WorksheetError
from worksheet.common.logging import log_verbose
from worksheet.output.canvas import CALLIGRAPHY_FAMILY, DEFAULT_FAMILY, ENGLISH_FAMILY, CellStyle


HEADER_HEIGHT = 12.0
ENGLISH_LINE_HEIGHT = 10.0
PINYIN_HEIGHT = 10.0

BLACK = (0, 0, 0)
GUIDE_GREY = (200, 200, 200)


@dataclass
class LayoutContext:
    """Mutable layout state for one document run."""
    canvas: Any
    config: WorksheetConfig
    x: float
    y: float
    capacity: int
    calligraphy: bool

    @classmethod
    def create(cls, canvas: Any, config: WorksheetConfig) -> "LayoutContext":
        return cls(
            canvas=canvas,
            config=config,
            x=config.start_x,
            y=config.start_y,
            capacity=row_capacity(canvas, config.cell_size, config.cell_gap),
            calligraphy=config.use_calligraphy,
        )

    @property
    def row_height(self) -> float:
        return PINYIN_HEIGHT + self.config.cell_size

    @property
    def bottom(self) -> float:
        return self.canvas.page_height - self.canvas.margins[3]


@dataclass
class DrawStats:
    """What was drawn for one entry."""
    english: str
    page: int
    rows: int = 0
    pinyin_cells: int = 0
    character_cells: int = 0
    placeholder_cells: int = 0


def row_capacity(canvas: Any, cell_size: float, cell_gap: float) -> int:
    """Number of grid cells that fit between the left and right margins."""
    left, _, right, _ = canvas.margins
    usable_width = canvas.page_width - left - right
    capacity = math.floor(usable_width / (cell_size + cell_gap))
    if capacity < 1:
        raise LayoutError(
            f"cell_size {cell_size} + gap {cell_gap} does not fit in usable width {usable_width:.1f}mm"
        )
    return capacity


def grid_rows(cell_count: int, capacity: int) -> int:
    """Rows needed for cell_count cells (at least one ruled row)."""
    return max(1, math.ceil(cell_count / capacity))


def _draw(ctx: LayoutContext, x: float, y: float, w: float, h: float, text: str, style: CellStyle) -> None:
    try:
        ctx.canvas.draw_cell(x, y, w, h, text, style)
    except WorksheetError:
        raise
    except Exception as e:
        raise LayoutError(f"Failed to draw {text!r} at ({x:.1f}, {y:.1f}): {e}") from e


def _ensure_room(ctx: LayoutContext, height: float) -> bool:
    """Start a new page if height does not fit below the cursor.

    Never breaks when the cursor is already at the top of a page.
    """
    if ctx.y + height <= ctx.bottom or ctx.y <= ctx.config.start_y:
        return False
    ctx.canvas.add_page()
    ctx.y = ctx.config.start_y
    return True


def draw_english(ctx: LayoutContext, text: str) -> None:
    style = CellStyle(family=ENGLISH_FAMILY, style="B", size=ctx.config.english_font_size, color=BLACK)
    # Zero width extends the cell to the right margin
    _draw(ctx, ctx.x, ctx.y, 0, ENGLISH_LINE_HEIGHT, text, style)


def draw_grid_row(ctx: LayoutContext, pinyin, chinese, row: int, y: float, stats: DrawStats) -> None:
    """Draw one full-width row of Pinyin and character cells at y."""
    cfg = ctx.config
    pinyin_style = CellStyle(
        family=DEFAULT_FAMILY, size=cfg.pinyin_font_size, color=BLACK, border=True, align="C",
    )
    guide_style = CellStyle(
        family=CALLIGRAPHY_FAMILY if ctx.calligraphy else DEFAULT_FAMILY,
        size=cfg.character_font_size,
        color=GUIDE_GREY,
        border=True,
        align="C",
    )
    placeholder_style = CellStyle(
        family=DEFAULT_FAMILY, size=cfg.character_font_size, color=GUIDE_GREY, border=True, align="C",
    )
    char_y = y + PINYIN_HEIGHT

    for col in range(ctx.capacity):
        i = row * ctx.capacity + col
        x = ctx.x + col * (cfg.cell_size + cfg.cell_gap)

        if i < len(pinyin):
            _draw(ctx, x, y, cfg.cell_size, PINYIN_HEIGHT, pinyin[i], pinyin_style)
            stats.pinyin_cells += 1

        if i < len(chinese):
            _draw(ctx, x, char_y, cfg.cell_size, cfg.cell_size, chinese[i], guide_style)
            stats.character_cells += 1
        else:
            _draw(ctx, x, char_y, cfg.cell_size, cfg.cell_size, "", placeholder_style)
            stats.placeholder_cells += 1
    stats.rows += 1


def layout_entry(ctx: LayoutContext, entry) -> DrawStats:
    """Draw one entry at the cursor and advance the cursor past it."""
    rows = grid_rows(entry.cell_count, ctx.capacity)

    # Keep the header together with the first grid row
    _ensure_room(ctx, HEADER_HEIGHT + ctx.row_height)
    stats = DrawStats(english=entry.english, page=ctx.canvas.page_count)
    draw_english(ctx, entry.english)
    ctx.y += HEADER_HEIGHT

    for row in range(rows):
        if row > 0:
            ctx.y += ctx.config.row_gap
            _ensure_room(ctx, ctx.row_height)
        draw_grid_row(ctx, entry.pinyin, entry.chinese, row, ctx.y, stats)
        ctx.y += ctx.row_height

    ctx.y += ctx.config.entry_gap
    return stats


def layout_entries(ctx: LayoutContext, entries: Iterable, verbose: bool = False) -> List[DrawStats]:
    """Lay out entries in order, paginating as needed."""
    all_stats: List[DrawStats] = []
    for entry in entries:
        stats = layout_entry(ctx, entry)
        log_verbose(
            verbose,
            "layout",
            f"{stats.english!r}: page {stats.page}, {stats.rows} row(s), "
            f"{stats.character_cells} chars + {stats.placeholder_cells} blank",
        )
        all_stats.append(stats)
    return all_stats
