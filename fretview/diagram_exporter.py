"""DiagramExporter: renders a fretboard configuration to SVG or HTML files."""

from __future__ import annotations

from typing import Final

from fretview.fretboard_models import STANDARD_TUNING, DiagramConfig, FretboardGeometry
from fretview.fretboard_renderer import FretboardDiagram
from fretview.surface import SvgSurface

SUPPORTED_FORMATS: Final[set[str]] = {"svg", "html"}

#: Rosewood-brown board behind the white strings and frets.
BOARD_COLOUR = "#4a2c1d"


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class DiagramExporter:
    """
    Render a diagram configuration into a file via an in-memory SVG surface.

    Supported formats:
    - ``svg``: the bare SVG document.
    - ``html``: a self-contained page with the SVG inlined under a title.
    """

    def __init__(self, title: str = "", output_format: str = "svg") -> None:
        self.title = title
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized

    @property
    def default_extension(self) -> str:
        return f".{self.output_format}"

    def render_svg(self, config: DiagramConfig) -> str:
        """
        Draw *config* on a fresh surface and return the SVG markup.

        Raises:
            ArpeggioNotFoundError: If arpeggio mode names an unknown arpeggio.
        """
        geometry = FretboardGeometry(string_count=len(STANDARD_TUNING))
        surface = SvgSurface(geometry.canvas_size, background=BOARD_COLOUR)
        FretboardDiagram(surface, config, geometry=geometry).render()
        return surface.tostring()

    def build_html(self, svg: str) -> str:
        """Wrap an SVG string in a self-contained HTML document."""
        title_safe = _escape_html(self.title)
        heading = f"  <h1>{title_safe}</h1>\n" if self.title else ""

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title_safe}</title>
  <style>
    body {{
      font-family: Helvetica, Arial, sans-serif;
      background: #f0f0f0;
      margin: 0;
      padding: 2rem;
    }}
    h1 {{
      text-align: center;
      font-size: 1.6rem;
      color: #222;
    }}
    .fretboard {{
      display: flex;
      justify-content: center;
    }}
  </style>
</head>
<body>
{heading}  <div class="fretboard">{svg}</div>
</body>
</html>"""

    def render(self, config: DiagramConfig) -> str:
        """Return the file content for *config* in the selected format."""
        svg = self.render_svg(config)
        if self.output_format == "html":
            return self.build_html(svg)
        return svg

    def export(self, config: DiagramConfig, output_path: str) -> None:
        """
        Render *config* and write it to disk.

        Raises:
            ArpeggioNotFoundError: If arpeggio mode names an unknown arpeggio.
            OSError: If the output file cannot be written.
        """
        content = self.render(config)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
