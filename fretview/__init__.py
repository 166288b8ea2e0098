"""fretview: SVG guitar fretboard diagrams for scales and arpeggios."""

__version__ = "0.1.0"
