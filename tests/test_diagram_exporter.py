"""Unit tests for DiagramExporter output formats."""

import pytest

from fretview.diagram_exporter import BOARD_COLOUR, DiagramExporter
from fretview.fretboard_models import DiagramConfig
from fretview.theory import ArpeggioNotFoundError


def test_unsupported_format_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        DiagramExporter(output_format="png")


def test_format_is_normalised() -> None:
    exporter = DiagramExporter(output_format=" HTML ")
    assert exporter.output_format == "html"
    assert exporter.default_extension == ".html"


def test_render_svg_document() -> None:
    content = DiagramExporter().render(DiagramConfig())
    assert content.startswith("<svg")
    assert content.count("<circle") == 6 + 6 * 7
    assert BOARD_COLOUR in content


def test_render_html_wraps_svg() -> None:
    content = DiagramExporter(title="E Major", output_format="html").render(DiagramConfig())
    assert content.startswith("<!DOCTYPE html>")
    assert "<title>E Major</title>" in content
    assert "<h1>E Major</h1>" in content
    assert '<div class="fretboard"><svg' in content


def test_build_html_empty_title_no_h1() -> None:
    html = DiagramExporter(output_format="html").build_html("<svg></svg>")
    assert "<h1>" not in html


def test_build_html_escapes_title() -> None:
    html = DiagramExporter(title="<Blues> & Roots", output_format="html").build_html("<svg></svg>")
    assert "&lt;Blues&gt; &amp; Roots" in html


def test_export_writes_file(tmp_path: pytest.TempPathFactory) -> None:
    out = tmp_path / "board.svg"  # type: ignore[operator]
    DiagramExporter().export(DiagramConfig(root_note="G"), str(out))
    assert out.read_text(encoding="utf-8").startswith("<svg")


def test_export_unknown_arpeggio_raises(tmp_path: pytest.TempPathFactory) -> None:
    out = tmp_path / "board.svg"  # type: ignore[operator]
    config = DiagramConfig(arpeggio="Nope", show_scale_mode=False)
    with pytest.raises(ArpeggioNotFoundError):
        DiagramExporter().export(config, str(out))
    assert not out.exists()
