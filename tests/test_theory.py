"""Unit tests for the note, interval and catalog helpers."""

import pytest

from fretview.theory import (
    ARPEGGIOS,
    SCALES,
    Arpeggio,
    ArpeggioNotFoundError,
    Interval,
    SequenceNote,
    find_arpeggio,
    get_note_position,
    get_sequence_notes,
    note_index,
    parse_intervals,
)


def test_note_index_accepts_lower_case() -> None:
    assert note_index("e") == note_index("E") == 4


def test_note_index_rejects_unknown_name() -> None:
    with pytest.raises(ValueError):
        note_index("H")


def test_interval_parse_natural_degree() -> None:
    assert Interval.parse("5") == Interval(degree=5, semitones=7)


def test_interval_parse_flat_and_sharp() -> None:
    assert Interval.parse("b3") == Interval(degree=3, semitones=3)
    assert Interval.parse("#4") == Interval(degree=4, semitones=6)
    assert Interval.parse("bb7") == Interval(degree=7, semitones=9)


def test_interval_parse_compound_degree_wraps_octave() -> None:
    assert Interval.parse("9") == Interval(degree=9, semitones=14)


@pytest.mark.parametrize("descriptor", ["", "b", "3b", "#b3", "0", "x5"])
def test_interval_parse_rejects_malformed_descriptor(descriptor: str) -> None:
    with pytest.raises(ValueError):
        Interval.parse(descriptor)


def test_interval_label_restores_descriptor() -> None:
    descriptors = ["1", "b2", "#4", "b5", "bb7", "9"]
    assert [interval.label for interval in parse_intervals(descriptors)] == descriptors


def test_get_sequence_notes_e_major() -> None:
    notes = get_sequence_notes("E", SCALES["major"])
    assert [n.note for n in notes] == ["E", "F#", "G#", "A", "B", "C#", "D#"]
    assert [n.degree for n in notes] == [1, 2, 3, 4, 5, 6, 7]


def test_get_sequence_notes_wraps_past_b() -> None:
    notes = get_sequence_notes("A", parse_intervals(["1", "b3", "5"]))
    assert notes == [
        SequenceNote(degree=1, note="A"),
        SequenceNote(degree=3, note="C"),
        SequenceNote(degree=5, note="E"),
    ]


def test_get_note_position_open_string_is_fret_zero() -> None:
    assert get_note_position("A", "A") == 0


def test_get_note_position_counts_up_the_neck() -> None:
    assert get_note_position("G", "E") == 3
    assert get_note_position("D#", "E") == 11


def test_get_note_position_accepts_lower_case_high_e() -> None:
    assert get_note_position("F#", "e") == 2


def test_find_arpeggio_exact_match() -> None:
    arpeggio = find_arpeggio("Minor 7th")
    assert [i.label for i in arpeggio.intervals] == ["1", "b3", "5", "b7"]


def test_find_arpeggio_is_case_sensitive() -> None:
    with pytest.raises(ArpeggioNotFoundError):
        find_arpeggio("minor 7th")


def test_find_arpeggio_unknown_name_raises_lookup_error() -> None:
    with pytest.raises(LookupError, match="Nonexistent"):
        find_arpeggio("Nonexistent")


def test_find_arpeggio_uses_given_catalog() -> None:
    catalog = (Arpeggio("Power", parse_intervals(["1", "5"])),)
    assert find_arpeggio("Power", catalog).name == "Power"
    with pytest.raises(ArpeggioNotFoundError):
        find_arpeggio("Major", catalog)


def test_arpeggio_names_are_unique() -> None:
    names = [arpeggio.name for arpeggio in ARPEGGIOS]
    assert len(names) == len(set(names))
