"""fretview CLI entry point."""

import re
import sys

import click

from fretview import __version__
from fretview.diagram_exporter import SUPPORTED_FORMATS, DiagramExporter
from fretview.fretboard_models import DiagramConfig
from fretview.theory import ARPEGGIOS, NOTE_NAMES, SCALES, ArpeggioNotFoundError


def _default_filename(root: str, pattern: str, extension: str) -> str:
    """Build a safe output filename such as ``fretboard_F#_major.svg``."""
    stem = re.sub(r"[^\w\s#-]", "", f"fretboard {root} {pattern}")
    stem = re.sub(r"\s+", "_", stem.strip())
    return f"{stem}{extension}"


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="fretview")
def main() -> None:
    """fretview — guitar fretboard diagrams for scales and arpeggios."""


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--root",
    type=click.Choice(NOTE_NAMES, case_sensitive=False),
    default="E",
    show_default=True,
    help="Root note of the scale or arpeggio.",
)
@click.option(
    "--scale",
    "scale_name",
    type=click.Choice(sorted(SCALES), case_sensitive=False),
    default="major",
    show_default=True,
    help="Scale to display. Ignored when --arpeggio is given.",
)
@click.option(
    "--arpeggio",
    default=None,
    metavar="NAME",
    help="Arpeggio to display instead of the scale, e.g. \"Minor 7th\".",
)
@click.option(
    "--labels",
    type=click.Choice(["notes", "degrees"], case_sensitive=False),
    default="notes",
    show_default=True,
    help="Label markers with note names or scale degrees.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
    default="svg",
    show_default=True,
    help="Output format: bare SVG or a self-contained HTML page.",
)
@click.option(
    "--title",
    default="",
    metavar="TEXT",
    help="Page heading for HTML output.",
)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to fretboard_<root>_<pattern>.<format>.",
)
def render(
    root: str,
    scale_name: str,
    arpeggio: str | None,
    labels: str,
    output_format: str,
    title: str,
    output: str | None,
) -> None:
    """
    Render a fretboard diagram for a scale or an arpeggio.

    \b
    Examples:
      fretview render --root E --scale major
      fretview render --root A --arpeggio "Minor 7th" --labels degrees
      fretview render --root G --scale blues --format html -o blues.html
    """
    config = DiagramConfig(
        root_note=root,
        scale=SCALES[scale_name],
        show_note_names=labels.lower() == "notes",
        show_scale_mode=arpeggio is None,
    )
    if arpeggio is not None:
        config.arpeggio = arpeggio

    exporter = DiagramExporter(title=title, output_format=output_format)
    pattern = arpeggio if arpeggio is not None else scale_name
    resolved_output = output or _default_filename(root, pattern, exporter.default_extension)

    click.echo(f"fretview v{__version__}")
    click.echo(f"  Root    : {root}")
    click.echo(f"  {'Arpeggio' if arpeggio is not None else 'Scale':<8}: {pattern}")
    click.echo(f"  Labels  : {labels.lower()}")
    click.echo(f"  Output  : {resolved_output}")
    click.echo()

    try:
        exporter.export(config, resolved_output)
    except ArpeggioNotFoundError as exc:
        click.echo(f"  ERROR: {exc.args[0]} Run 'fretview arpeggios' to list them.", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)

    click.echo(f"Done!  Open '{resolved_output}' in any browser.")


# ── catalog subcommands ────────────────────────────────────────────────────────

@main.command()
def scales() -> None:
    """List the available scales."""
    for name, intervals in SCALES.items():
        click.echo(f"{name:<18} {' '.join(interval.label for interval in intervals)}")


@main.command()
def arpeggios() -> None:
    """List the available arpeggios."""
    for arpeggio in ARPEGGIOS:
        click.echo(f"{arpeggio.name:<18} {' '.join(i.label for i in arpeggio.intervals)}")
