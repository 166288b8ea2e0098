"""Data models for fretboard diagram configuration, tuning and layout."""

from __future__ import annotations

from dataclasses import dataclass

from fretview.theory import SCALES, Interval


@dataclass(frozen=True)
class TuningString:
    """
    The open-string note of one guitar string.

    Attributes:
        note:          Open-string pitch class; the high E string is written ``"e"``.
        string_number: Conventional string number, 1 = highest-pitched string.
    """

    note: str
    string_number: int


#: Standard six-string tuning, ordered from the low E string to the high e string.
STANDARD_TUNING: tuple[TuningString, ...] = (
    TuningString("E", 6),
    TuningString("A", 5),
    TuningString("D", 4),
    TuningString("G", 3),
    TuningString("B", 2),
    TuningString("e", 1),
)


@dataclass
class DiagramConfig:
    """
    Live display settings of a fretboard diagram.

    ``show_scale_mode`` selects the scale (True) or the arpeggio (False) as the
    active interval sequence; the inactive one is kept but not drawn.
    """

    root_note: str = "E"
    scale: tuple[Interval, ...] = SCALES["major"]
    arpeggio: str = "Major"
    show_note_names: bool = True
    show_scale_mode: bool = True


@dataclass(frozen=True)
class FretboardGeometry:
    """Pixel layout of the diagram. Strings run vertically, frets horizontally."""

    string_count: int = len(STANDARD_TUNING)
    fret_count: int = 13
    string_start_x: float = 30
    string_start_y: float = 30
    string_spacing: float = 60
    string_width: float = 2
    fret_width: float = 6
    fret_spacing: float = 80

    @property
    def fret_start_x(self) -> float:
        return self.string_start_x

    @property
    def fret_start_y(self) -> float:
        return self.string_start_y + self.fret_width / 2

    @property
    def string_length(self) -> float:
        return self.fret_count * (self.fret_spacing + 1)

    @property
    def fret_end_x(self) -> float:
        """Right-hand end of every fret line."""
        return self.string_count * (self.string_spacing - 1) - 32

    @property
    def canvas_size(self) -> tuple[float, float]:
        """Width and height that fit every drawn element."""
        width = self.string_start_x * 2 + (self.string_count - 1) * self.string_spacing
        height = self.string_start_y * 2 + self.string_length
        return width, height

    def string_x(self, string_number: int) -> float:
        """Horizontal position of a string, the lowest-pitched string on the left."""
        return self.string_start_x + (self.string_count - string_number) * self.string_spacing

    def fret_y(self, fret: int) -> float:
        """Vertical position of a fret line; fret 0 is the nut."""
        return self.fret_start_y + fret * self.fret_spacing
