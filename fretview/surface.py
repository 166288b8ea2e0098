"""Drawing surfaces that fretboard diagrams render into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import svgwrite


class DrawingSurface(ABC):
    """Abstract drawing surface: the four primitives a diagram needs."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every element drawn so far."""

    @abstractmethod
    def line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        *,
        stroke: str,
        stroke_width: float,
    ) -> None:
        """Draw a straight line."""

    @abstractmethod
    def circle(
        self,
        center: tuple[float, float],
        radius: float,
        *,
        fill: str,
        stroke: str,
        stroke_width: float,
    ) -> None:
        """Draw a filled, stroked circle."""

    @abstractmethod
    def text(self, insert: tuple[float, float], content: str, **attributes: Any) -> None:
        """Draw a text label with its baseline starting at *insert*."""


class SvgSurface(DrawingSurface):
    """
    Drawing surface backed by an in-memory ``svgwrite.Drawing``.

    ``clear()`` swaps in a fresh drawing of the same size, so repeated redraws
    never accumulate elements. When *background* is set, every cleared drawing
    starts with a full-size rect in that colour.
    """

    def __init__(
        self,
        size: tuple[float, float],
        *,
        background: str | None = None,
    ) -> None:
        self.size = size
        self.background = background
        self.drawing = self._new_drawing()

    def _new_drawing(self) -> svgwrite.Drawing:
        drawing = svgwrite.Drawing(size=self.size)
        if self.background is not None:
            drawing.add(drawing.rect(insert=(0, 0), size=self.size, fill=self.background))
        return drawing

    def clear(self) -> None:
        self.drawing = self._new_drawing()

    def line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        *,
        stroke: str,
        stroke_width: float,
    ) -> None:
        self.drawing.add(
            self.drawing.line(start=start, end=end, stroke=stroke, stroke_width=stroke_width)
        )

    def circle(
        self,
        center: tuple[float, float],
        radius: float,
        *,
        fill: str,
        stroke: str,
        stroke_width: float,
    ) -> None:
        self.drawing.add(
            self.drawing.circle(
                center=center,
                r=radius,
                fill=fill,
                stroke=stroke,
                stroke_width=stroke_width,
            )
        )

    def text(self, insert: tuple[float, float], content: str, **attributes: Any) -> None:
        self.drawing.add(self.drawing.text(content, insert=insert, **attributes))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def elements(self, kind: str) -> list[Any]:
        """Return drawn elements of one SVG tag name, e.g. ``"circle"``, in draw order."""
        return [element for element in self.drawing.elements if element.elementname == kind]

    def tostring(self) -> str:
        """Serialise the current drawing to SVG markup."""
        return str(self.drawing.tostring())
