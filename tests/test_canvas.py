import os
from pathlib import Path

import pytest

from conftest import RecordingCanvas, build_test_font
from worksheet.common.config import WorksheetConfig
from worksheet.common.errors import AssetLoadError, OutputWriteError
from worksheet.input.vocab import get_static_vocabulary
from worksheet.output.canvas import (
    CALLIGRAPHY_FAMILY,
    DEFAULT_FAMILY,
    ENGLISH_FAMILY,
    CellStyle,
    PdfCanvas,
    resolve_fonts,
)
from worksheet.output.layout import row_capacity
from worksheet.output.processing import render_worksheet
from worksheet.schema.base import Entry


def _touch_fonts(font_dir: Path, *names: str) -> None:
    font_dir.mkdir(parents=True, exist_ok=True)
    for name in names:
        (font_dir / name).write_bytes(b"")


def test_resolve_fonts_missing_default(tmp_path):
    config = WorksheetConfig(font_dir=str(tmp_path))
    with pytest.raises(AssetLoadError) as excinfo:
        resolve_fonts(config)
    assert "chinese.msyh.ttf" in str(excinfo.value)


def test_resolve_fonts_missing_calligraphy(tmp_path):
    _touch_fonts(tmp_path, "chinese.msyh.ttf")
    config = WorksheetConfig(font_dir=str(tmp_path))
    with pytest.raises(AssetLoadError) as excinfo:
        resolve_fonts(config)
    assert "simsun.ttf" in str(excinfo.value)


def test_calligraphy_font_optional_when_disabled(tmp_path):
    _touch_fonts(tmp_path, "chinese.msyh.ttf")
    config = WorksheetConfig(font_dir=str(tmp_path), use_calligraphy=False)
    assert resolve_fonts(config) == {DEFAULT_FAMILY: tmp_path / "chinese.msyh.ttf"}


def test_unreadable_font_file(tmp_path):
    bad = tmp_path / "chinese.msyh.ttf"
    bad.write_bytes(b"not a font")
    with pytest.raises(AssetLoadError):
        PdfCanvas({DEFAULT_FAMILY: bad})


def test_a4_geometry():
    canvas = PdfCanvas({})
    assert canvas.page_width == pytest.approx(210.0, abs=0.01)
    assert canvas.page_height == pytest.approx(297.0, abs=0.01)
    left, top, right, bottom = canvas.margins
    assert left == pytest.approx(10.0, abs=0.01)
    assert right == pytest.approx(10.0, abs=0.01)
    assert bottom == pytest.approx(10.0)
    assert canvas.page_count == 1
    assert row_capacity(canvas, 20.0, 2.0) == 8


def test_save_writes_pdf(tmp_path):
    canvas = PdfCanvas({})
    canvas.draw_cell(20, 20, 0, 10, "hello", CellStyle(family=ENGLISH_FAMILY, style="B", size=12))
    canvas.add_page()
    out = canvas.save(tmp_path / "nested" / "sheet.pdf")

    assert out.read_bytes().startswith(b"%PDF")
    assert canvas.page_count == 2


def test_save_failure_is_output_write_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(OutputWriteError):
        PdfCanvas({}).save(blocker / "sheet.pdf")


@pytest.mark.skipif(
    not os.environ.get("WORKSHEET_TEST_FONT"),
    reason="set WORKSHEET_TEST_FONT to a CJK TrueType font to render a real worksheet",
)
def test_render_real_worksheet(tmp_path):
    font = Path(os.environ["WORKSHEET_TEST_FONT"])
    canvas = PdfCanvas({DEFAULT_FAMILY: font, CALLIGRAPHY_FAMILY: font})
    config = WorksheetConfig(font_dir=str(font.parent), output_path=str(tmp_path / "sheet.pdf"))

    out = render_worksheet(get_static_vocabulary(), config, canvas)
    assert out.read_bytes().startswith(b"%PDF")
    assert canvas.page_count == 1


def test_render_with_registered_fonts(tmp_path):
    entries = get_static_vocabulary() + [Entry.create("good morning", ["zǎo", "shang", "hǎo"], ["早", "上", "好"])]
    text = "".join(" ".join(e.pinyin) + "".join(e.chinese) for e in entries)
    font = build_test_font(tmp_path / "test.ttf", text + "你好")
    canvas = PdfCanvas({DEFAULT_FAMILY: font, CALLIGRAPHY_FAMILY: font})
    config = WorksheetConfig(font_dir=str(tmp_path), output_path=str(tmp_path / "sheet.pdf"))

    # Non Latin-1 English text is drawn with the default family
    canvas.draw_cell(20, 250, 0, 10, "你好", CellStyle(family=ENGLISH_FAMILY, style="B", size=12))
    out = render_worksheet(entries, config, canvas)

    data = out.read_bytes()
    assert data.startswith(b"%PDF")
    assert b"/FontFile2" in data
    assert b"WorksheetTest" in data
    assert canvas.page_count == 1


def test_recording_canvas_matches_pdf_geometry():
    pdf, recording = PdfCanvas({}), RecordingCanvas()
    assert row_capacity(pdf, 20.0, 2.0) == row_capacity(recording, 20.0, 2.0)
