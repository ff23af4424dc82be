# src/colorprobe/cli.py
"""CLI interface for colorprobe."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from .models import ProbeResult
from .settings import NO_COLOR, VERBOSE
from .support import Support

app = typer.Typer(
    name="colorprobe",
    help="Detect whether the terminal supports ANSI colors",
    add_completion=False
)
console = Console(no_color=NO_COLOR)

RESULT_STYLES = {
    ProbeResult.AFFIRMATIVE: "green",
    ProbeResult.NEGATIVE: "red",
    ProbeResult.UNKNOWN: "dim",
}


@app.command()
def check(
    verbose: bool = typer.Option(VERBOSE, "--verbose", "-v", help="Report probe failures on stderr"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Print nothing, answer with the exit status"),
) -> None:
    """Report whether standard output supports colors."""
    try:
        supported = Support(verbose=verbose).support()
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise typer.Exit(1)

    if quiet:
        raise typer.Exit(0 if supported else 1)

    console.print("yes" if supported else "no")


@app.command()
def explain(
    verbose: bool = typer.Option(VERBOSE, "--verbose", "-v", help="Report probe failures on stderr"),
) -> None:
    """Show the result of every probe and the final decision."""
    try:
        report = Support(verbose=verbose).explain()
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"Interactive terminal: {'yes' if report.tty else 'no'}")
    console.print(f"NO_COLOR set: {'yes' if report.disabled else 'no'}")

    if report.outcomes:
        table = Table(title="Color Probes")
        table.add_column("Probe", style="cyan")
        table.add_column("Result")

        for outcome in report.outcomes:
            style = RESULT_STYLES[outcome.result]
            table.add_row(outcome.name, f"[{style}]{outcome.result.value}[/{style}]")

        console.print(table)
    else:
        console.print("Probes skipped")

    console.print(f"Color supported: {'yes' if report.supported else 'no'}")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
