"""Music theory helpers: note names, intervals, scale and arpeggio catalogs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final, Iterable, Sequence

logger = logging.getLogger(__name__)

# Chromatic pitch class names (index 0 = C)
NOTE_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

SEMITONES_PER_OCTAVE = 12

#: Semitones above the root for each natural degree of the major scale.
MAJOR_DEGREE_SEMITONES: Final[dict[int, int]] = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11}

_DESCRIPTOR_PATTERN = re.compile(r"^(?P<accidentals>b*|#*)(?P<degree>[1-9]\d*)$")


class ArpeggioNotFoundError(LookupError):
    """Raised when an arpeggio name has no entry in the arpeggio catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No arpeggio named '{name}'.")
        self.name = name


def note_index(note: str) -> int:
    """
    Return the pitch class (0-11) of a sharp-spelled note name.

    Lower-case names are accepted, so the high ``"e"`` string resolves like ``"E"``.

    Raises:
        ValueError: If the name is not one of NOTE_NAMES.
    """
    return NOTE_NAMES.index(note.upper())


@dataclass(frozen=True)
class Interval:
    """
    A scale-interval descriptor relative to a root note.

    Attributes:
        degree:    Functional degree number (1, 3, 5, 7, 9, ...).
        semitones: Distance above the root in semitones.
    """

    degree: int
    semitones: int

    @classmethod
    def parse(cls, descriptor: str) -> Interval:
        """
        Parse a descriptor such as ``"1"``, ``"b3"``, ``"#4"`` or ``"bb7"``.

        Degrees above 7 wrap into the next octave, so ``"9"`` is 14 semitones.

        Raises:
            ValueError: If the descriptor is not an optional run of ``b`` or
                ``#`` followed by a positive degree number.
        """
        match = _DESCRIPTOR_PATTERN.match(descriptor.strip())
        if not match:
            raise ValueError(f"Invalid interval descriptor '{descriptor}'.")

        degree = int(match.group("degree"))
        octave, natural = divmod(degree - 1, 7)
        semitones = MAJOR_DEGREE_SEMITONES[natural + 1] + octave * SEMITONES_PER_OCTAVE

        accidentals = match.group("accidentals")
        semitones += accidentals.count("#") - accidentals.count("b")
        return cls(degree=degree, semitones=semitones)

    @property
    def label(self) -> str:
        """Descriptor text, e.g. ``'b3'`` for a minor third."""
        natural = Interval.parse(str(self.degree)).semitones
        offset = self.semitones - natural
        accidentals = "#" * offset if offset > 0 else "b" * -offset
        return f"{accidentals}{self.degree}"


def parse_intervals(descriptors: Iterable[str]) -> tuple[Interval, ...]:
    """Parse a sequence of descriptors into Interval objects, preserving order."""
    return tuple(Interval.parse(descriptor) for descriptor in descriptors)


@dataclass(frozen=True)
class SequenceNote:
    """
    One note of a scale or arpeggio resolved against a root.

    Attributes:
        degree: Degree of the note within the pattern (1 = root).
        note:   Sharp-spelled pitch class name.
    """

    degree: int
    note: str


@dataclass(frozen=True)
class Arpeggio:
    """A named chord outline."""

    name: str
    intervals: tuple[Interval, ...]


# ── Catalogs ────────────────────────────────────────────────────────────────

SCALES: Final[dict[str, tuple[Interval, ...]]] = {
    "major": parse_intervals(["1", "2", "3", "4", "5", "6", "7"]),
    "natural_minor": parse_intervals(["1", "2", "b3", "4", "5", "b6", "b7"]),
    "harmonic_minor": parse_intervals(["1", "2", "b3", "4", "5", "b6", "7"]),
    "melodic_minor": parse_intervals(["1", "2", "b3", "4", "5", "6", "7"]),
    "dorian": parse_intervals(["1", "2", "b3", "4", "5", "6", "b7"]),
    "phrygian": parse_intervals(["1", "b2", "b3", "4", "5", "b6", "b7"]),
    "lydian": parse_intervals(["1", "2", "3", "#4", "5", "6", "7"]),
    "mixolydian": parse_intervals(["1", "2", "3", "4", "5", "6", "b7"]),
    "locrian": parse_intervals(["1", "b2", "b3", "4", "b5", "b6", "b7"]),
    "major_pentatonic": parse_intervals(["1", "2", "3", "5", "6"]),
    "minor_pentatonic": parse_intervals(["1", "b3", "4", "5", "b7"]),
    "blues": parse_intervals(["1", "b3", "4", "b5", "5", "b7"]),
}

ARPEGGIOS: Final[tuple[Arpeggio, ...]] = (
    Arpeggio("Major", parse_intervals(["1", "3", "5"])),
    Arpeggio("Minor", parse_intervals(["1", "b3", "5"])),
    Arpeggio("Diminished", parse_intervals(["1", "b3", "b5"])),
    Arpeggio("Augmented", parse_intervals(["1", "3", "#5"])),
    Arpeggio("Major 7th", parse_intervals(["1", "3", "5", "7"])),
    Arpeggio("Dominant 7th", parse_intervals(["1", "3", "5", "b7"])),
    Arpeggio("Minor 7th", parse_intervals(["1", "b3", "5", "b7"])),
    Arpeggio("Minor 7th Flat 5", parse_intervals(["1", "b3", "b5", "b7"])),
    Arpeggio("Diminished 7th", parse_intervals(["1", "b3", "b5", "bb7"])),
    Arpeggio("Dominant 9th", parse_intervals(["1", "3", "5", "b7", "9"])),
)


def find_arpeggio(name: str, catalog: Sequence[Arpeggio] = ARPEGGIOS) -> Arpeggio:
    """
    Look up an arpeggio by exact name.

    Raises:
        ArpeggioNotFoundError: If no catalog entry has this name.
    """
    for arpeggio in catalog:
        if arpeggio.name == name:
            return arpeggio
    logger.debug("Arpeggio lookup failed for %r", name)
    raise ArpeggioNotFoundError(name)


# ── Resolution ──────────────────────────────────────────────────────────────

def get_sequence_notes(root: str, intervals: Sequence[Interval]) -> list[SequenceNote]:
    """
    Resolve an interval pattern against a root note.

    Args:
        root:      Root pitch class name, e.g. ``"E"``.
        intervals: Ordered interval descriptors of a scale or arpeggio.

    Returns:
        One SequenceNote per interval, in pattern order.
    """
    root_index = note_index(root)
    return [
        SequenceNote(
            degree=interval.degree,
            note=NOTE_NAMES[(root_index + interval.semitones) % SEMITONES_PER_OCTAVE],
        )
        for interval in intervals
    ]


def get_note_position(note: str, open_string_note: str) -> int:
    """
    Return the lowest fret (0-11) at which *note* sounds on a string.

    Fret 0 is the open string itself.
    """
    return (note_index(note) - note_index(open_string_note)) % SEMITONES_PER_OCTAVE
