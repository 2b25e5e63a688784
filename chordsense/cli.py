"""Command-line interface for chordsense.

Provides commands for:
- detect: Identify the chord and scale of a set of notes
- patterns: List the reference chord and scale tables
- info: Show registry sizes and the default configuration
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

app = typer.Typer(
    name="chordsense",
    help="Chord and Scale Recognition for Pressed Notes",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def detect(
    notes: List[str] = typer.Argument(..., help="Note identifiers, e.g. C4 E4 G4 or Bb3"),
    first: Optional[str] = typer.Option(
        None, "-f", "--first", help="First note pressed (temporal context for the tonic)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Detect the most plausible chord and scale for a set of notes.

    **Examples:**

        chordsense detect C4 E4 G4

        chordsense detect C4 E4 G4 A4 --first A4

        chordsense detect E3 G4 C5

        chordsense detect C3 D4 E5 F4 G5 A4 B4 --json
    """
    from .inference import PatternDetector, summarize
    from .output import detection_info, format_notes, result_to_dict

    _setup_logging(verbose)

    detector = PatternDetector()
    result = detector.detect(notes, first_note=first)

    if not result.pitch_classes:
        console.print(f"[red]Error: No valid notes in: {' '.join(notes)}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data=result_to_dict(result))
        return

    info = detection_info(result)
    summary = summarize(result)

    console.print(f"\n[bold blue]Notes:[/bold blue] {format_notes(result.pitch_classes)}")

    table = Table(title="Detection")
    table.add_column("Category", style="cyan")
    table.add_column("Result", style="green")
    table.add_column("Notes", style="yellow")
    table.add_column("Confidence", style="magenta")
    table.add_column("Certainty", style="blue")

    for label, match, certainty in (
        ("Chord", result.chord, summary.chord_certainty),
        ("Scale", result.scale, summary.scale_certainty),
    ):
        table.add_row(
            label,
            info[label.lower()],
            info[f"{label.lower()}_notes"],
            f"{match.confidence:.2f}" if match else "-",
            certainty or "-",
        )

    console.print(table)
    if info["bass"]:
        console.print(f"  Bass: {info['bass']}")
    if result.chord and result.scale:
        console.print(f"  Fit: {info['fit']} ({summary.fit.score:.0%})")
    console.print(f"  Filter: {info['filter']}")
    console.print(f"  Reasoning: {info['reasoning']}")

    if verbose:
        console.print(f"  Probable tonic: {result.probable_tonic}")
        console.print(f"  Modality: {summary.modality}")
        console.print(f"  Chromaticism: {summary.chromaticism:.2f}")
        if summary.suggested_key:
            console.print(f"  Suggested key: {summary.suggested_key}")
        for match in (result.chord, result.scale):
            if match is not None and not match.is_exact_match:
                console.print(
                    f"  [dim]{match.name}: missing {format_notes(match.missing_notes) or '-'}, "
                    f"extra {format_notes(match.extra_notes) or '-'}[/dim]"
                )


@app.command()
def patterns(
    category: str = typer.Option(
        "chord", "-c", "--category", help="Pattern category: chord/scale"
    ),
    tonic: Optional[str] = typer.Option(
        None, "-t", "--tonic", help="Only list patterns rooted at this tonic"
    ),
):
    """List the reference chord or scale tables."""
    from .core import InvalidNoteIdentifier, spelling_to_pitch_class
    from .reference import Category, default_registry

    try:
        cat = Category(category.lower())
    except ValueError:
        console.print(f"[red]Error: Unknown category '{category}' (use chord or scale)[/red]")
        raise typer.Exit(1)

    tonic_pc = None
    if tonic:
        try:
            tonic_pc = spelling_to_pitch_class(tonic)
        except InvalidNoteIdentifier as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    table = Table(title=f"{cat.value.title()} Patterns")
    table.add_column("Name", style="cyan")
    table.add_column("Notes", style="green")
    table.add_column("Size", style="yellow")

    for pattern in default_registry().patterns(cat):
        if tonic_pc is not None and pattern.tonic_pc != tonic_pc:
            continue
        table.add_row(pattern.name, " - ".join(pattern.notes), str(pattern.specificity))

    console.print(table)


@app.command()
def info():
    """Show registry sizes and the default detection configuration."""
    from . import __version__
    from .core import DetectionConfig
    from .reference import Category, default_registry

    registry = default_registry()

    console.print(f"[bold]chordsense[/bold] {__version__}")
    console.print(f"  Tonics: {len(registry.tonics(Category.CHORD))}")
    console.print(f"  Chord types: {registry.type_count(Category.CHORD)}")
    console.print(f"  Scale types: {registry.type_count(Category.SCALE)}")
    console.print(f"  Patterns: {len(registry)}")

    table = Table(title="Default Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    for key, value in DetectionConfig().to_dict().items():
        table.add_row(key, str(value))

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
