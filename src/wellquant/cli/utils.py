"""Shared CLI utilities — Rich console, error handling, point parsing."""

from __future__ import annotations

import functools
import traceback
from typing import Any, Callable

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from wellquant.core.models import Point

console = Console()

# Set by the --verbose flag on the top-level CLI group.
verbose: bool = False


class PointType(click.ParamType):
    """Click parameter accepting ``X,Y`` image coordinates."""

    name = "X,Y"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Point:
        if isinstance(value, Point):
            return value
        parts = str(value).split(",")
        if len(parts) != 2:
            self.fail(f"{value!r} is not an X,Y coordinate pair", param, ctx)
        try:
            return Point(float(parts[0]), float(parts[1]))
        except ValueError:
            self.fail(f"{value!r} is not a finite X,Y coordinate pair", param, ctx)


POINT = PointType()

# Which calibration input to redo, keyed by CalibrationError.reference.
_REDO_HINTS = {
    "min": "Re-pick the minimum-density reference well (--min-ref).",
    "max": "Re-pick the maximum-density reference well (--max-ref).",
    "grid": "Re-pick the A1 and H6 landmarks (--a1, --h6) on opposite corner wells.",
}


def error_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator wrapping CLI commands with standard error handling.

    Catches WellQuantError (exit 1) and unexpected exceptions (exit 2).
    With --verbose, unexpected errors include the full traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from wellquant.core.exceptions import WellQuantError

        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except WellQuantError as e:
            console.print(f"[red]Error:[/red] {e}")
            hint = _REDO_HINTS.get(getattr(e, "reference", None))
            if hint:
                console.print(f"[dim]{hint}[/dim]")
            raise SystemExit(1)
        except Exception as e:
            if verbose:
                console.print(f"[red]Internal error:[/red] {e}")
                console.print(traceback.format_exc())
            else:
                console.print(
                    f"[red]Internal error:[/red] {type(e).__name__}: {e}\n"
                    "[dim]Use --verbose for the full traceback.[/dim]"
                )
            raise SystemExit(2)

    return wrapper


def make_progress() -> Progress:
    """Create a Rich progress bar for CLI operations."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    )
