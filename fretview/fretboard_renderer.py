"""FretboardDiagram: draws strings, frets, inlay dots and note markers onto a surface."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Final, Sequence

from fretview.fretboard_models import (
    STANDARD_TUNING,
    DiagramConfig,
    FretboardGeometry,
    TuningString,
)
from fretview.surface import DrawingSurface
from fretview.theory import (
    ARPEGGIOS,
    Arpeggio,
    ArpeggioNotFoundError,
    Interval,
    SequenceNote,
    find_arpeggio,
    get_note_position,
    get_sequence_notes,
)

logger = logging.getLogger(__name__)

# ── Styling ─────────────────────────────────────────────────────────────────

STRING_COLOUR = "white"
FRET_COLOUR = "white"
OUTLINE_COLOUR = "#000"

STRING_LABEL_OFFSET = 7
STRING_LABEL_Y = 15

POSITION_MARKER_FRETS: Final[tuple[int, ...]] = (3, 5, 7, 9, 12)
DOUBLE_MARKER_FRET = 12
POSITION_MARKER_RADIUS = 4
POSITION_MARKER_Y_OFFSET = 7
NOTE_MARKER_RADIUS = 15
MARKER_STROKE_WIDTH = 3
NOTE_LABEL_BASELINE_OFFSET = 5

#: Marker fill by scale degree; any other degree is drawn white.
DEGREE_COLOURS: Final[dict[int, str]] = {
    1: "#ff7f7f",  # root - warm red
    3: "#7fbf7f",  # third - green
    5: "#bfbfbf",  # fifth - gray
    7: "#bf7fbf",  # seventh - purple
}
DEFAULT_MARKER_COLOUR = "#fff"

#: Leftward shift of a marker label so it sits centred in its circle.
#: Sharps render wider than naturals.
LABEL_X_OFFSETS: Final[dict[str, float]] = {
    "A": 5,
    "A#": 9,
    "B": 5,
    "C": 6,
    "C#": 10,
    "D": 5,
    "D#": 10,
    "E": 5,
    "F#": 9,
    "G": 6,
    "G#": 10.5,
}
DEFAULT_LABEL_X_OFFSET = 4.5


def marker_fill_colour(degree: int) -> str:
    """Return the note-marker fill colour for a scale degree."""
    return DEGREE_COLOURS.get(degree, DEFAULT_MARKER_COLOUR)


def marker_label_x(label: str, circle_x: float) -> float:
    """Return the x position that visually centres *label* on a marker at *circle_x*."""
    return circle_x - LABEL_X_OFFSETS.get(label, DEFAULT_LABEL_X_OFFSET)


class FretboardDiagram:
    """
    A fretboard diagram bound to one drawing surface.

    Every update method changes one piece of the configuration and then
    redraws the whole diagram: there is no incremental update. Construction
    does not draw; call ``render()`` for the first drawing.

    Redraw order
    ------------
    1. Strings, each labelled with its open-string note.
    2. Fret lines.
    3. Inlay dots at frets 3, 5, 7, 9 and a pair at fret 12.
    4. One marker per (string, note of the active scale or arpeggio).

    The configuration object is updated in place. If the active arpeggio is
    not in the catalog, or the root is not a note name, the redraw raises
    before the surface is cleared and the update method that triggered it
    restores the fields it changed.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        config: DiagramConfig,
        *,
        tuning: Sequence[TuningString] = STANDARD_TUNING,
        arpeggios: Sequence[Arpeggio] = ARPEGGIOS,
        geometry: FretboardGeometry | None = None,
    ) -> None:
        """
        Args:
            surface:   Surface the diagram draws into; owned by this diagram.
            config:    Initial display configuration.
            tuning:    Open-string notes, lowest-pitched string first.
            arpeggios: Catalog searched by exact name in arpeggio mode.
            geometry:  Pixel layout. Defaults to one sized for *tuning*.
        """
        self.surface = surface
        self.config = config
        self.tuning = tuple(tuning)
        self.arpeggios = tuple(arpeggios)
        self.geometry = geometry or FretboardGeometry(string_count=len(self.tuning))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_root(self, note: str) -> None:
        self._update(root_note=note)

    def set_scale(self, scale: Sequence[Interval]) -> None:
        self._update(scale=tuple(scale), show_scale_mode=True)

    def set_arpeggio(self, name: str) -> None:
        """
        Switch to arpeggio mode showing the named arpeggio.

        Raises:
            ArpeggioNotFoundError: If *name* is not in the arpeggio catalog.
                The configuration and the drawing are left unchanged.
        """
        self._update(arpeggio=name, show_scale_mode=False)

    def show_note_name_labels(self) -> None:
        self._update(show_note_names=True)

    def show_degree_labels(self) -> None:
        self._update(show_note_names=False)

    def render(self) -> None:
        """
        Clear the surface and draw the full diagram for the current configuration.

        Raises:
            ArpeggioNotFoundError: If arpeggio mode is active and the arpeggio
                name is not in the catalog. Nothing is cleared in that case.
            ValueError: If the root note is not a known note name. Nothing is
                cleared in that case.
        """
        config = self.config
        notes = get_sequence_notes(config.root_note, self._current_sequence())
        logger.debug(
            "Redrawing fretboard: root=%s mode=%s labels=%s",
            config.root_note,
            "scale" if config.show_scale_mode else f"arpeggio {config.arpeggio!r}",
            "notes" if config.show_note_names else "degrees",
        )

        self.surface.clear()
        self._draw_strings()
        self._draw_frets()
        self._draw_position_markers()
        self._draw_note_positions(notes)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _update(self, **changes: Any) -> None:
        previous = replace(self.config)
        for name, value in changes.items():
            setattr(self.config, name, value)
        try:
            self.render()
        except (ArpeggioNotFoundError, ValueError):
            for name in changes:
                setattr(self.config, name, getattr(previous, name))
            raise

    def _current_sequence(self) -> tuple[Interval, ...]:
        if self.config.show_scale_mode:
            return self.config.scale
        return find_arpeggio(self.config.arpeggio, self.arpeggios).intervals

    def _draw_strings(self) -> None:
        geo = self.geometry
        for index, tuning_string in enumerate(self.tuning):
            x = geo.string_start_x + index * geo.string_spacing
            self.surface.line(
                (x, geo.string_start_y),
                (x, geo.string_start_y + geo.string_length),
                stroke=STRING_COLOUR,
                stroke_width=geo.string_width,
            )
            self.surface.text(
                (x - STRING_LABEL_OFFSET, STRING_LABEL_Y),
                tuning_string.note,
                font_weight="bold",
                font_size="1.5em",
            )

    def _draw_frets(self) -> None:
        geo = self.geometry
        for fret in range(geo.fret_count):
            y = geo.fret_y(fret)
            self.surface.line(
                (geo.fret_start_x, y),
                (geo.fret_end_x, y),
                stroke=FRET_COLOUR,
                stroke_width=geo.fret_width,
            )

    def _draw_position_markers(self) -> None:
        geo = self.geometry
        width = geo.fret_end_x
        for fret in POSITION_MARKER_FRETS:
            y = fret * geo.fret_spacing - POSITION_MARKER_Y_OFFSET
            if fret == DOUBLE_MARKER_FRET:
                self._draw_position_marker(width / 3 + 2 * geo.string_width + 2, y)
                self._draw_position_marker(2 * width / 3 + 4 * geo.string_width + 4, y)
            else:
                self._draw_position_marker(width / 2 + 3 * geo.string_width + 2, y)

    def _draw_position_marker(self, x: float, y: float) -> None:
        self.surface.circle(
            (x, y),
            POSITION_MARKER_RADIUS,
            fill=OUTLINE_COLOUR,
            stroke=OUTLINE_COLOUR,
            stroke_width=MARKER_STROKE_WIDTH,
        )

    def _draw_note_positions(self, notes: Sequence[SequenceNote]) -> None:
        for tuning_string in self.tuning:
            for sequence_note in notes:
                fret = get_note_position(sequence_note.note, tuning_string.note)
                self._draw_note_marker(fret, tuning_string.string_number, sequence_note)

    def _draw_note_marker(self, fret: int, string_number: int, sequence_note: SequenceNote) -> None:
        x = self.geometry.string_x(string_number)
        y = self.geometry.fret_y(fret)

        self.surface.circle(
            (x, y),
            NOTE_MARKER_RADIUS,
            fill=marker_fill_colour(sequence_note.degree),
            stroke=OUTLINE_COLOUR,
            stroke_width=MARKER_STROKE_WIDTH,
        )

        label = sequence_note.note if self.config.show_note_names else str(sequence_note.degree)
        self.surface.text((marker_label_x(label, x), y + NOTE_LABEL_BASELINE_OFFSET), label)
