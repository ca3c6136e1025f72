"""wellquant analyze — score every well of a plate photograph."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.table import Table

from wellquant.cli.utils import POINT, console, error_handler, make_progress

if TYPE_CHECKING:
    import pandas as pd

    from wellquant.core.models import Point


def _check_output(out_path: Path, overwrite: bool) -> None:
    if out_path.is_dir():
        console.print(
            f"[red]Error:[/red] Output path is a directory: {out_path}\n"
            f"Provide a file path, e.g. {out_path / 'well_plate_analysis.csv'}"
        )
        raise SystemExit(1)
    if not out_path.parent.exists():
        console.print(
            f"[red]Error:[/red] Parent directory does not exist: {out_path.parent}"
        )
        raise SystemExit(1)
    if out_path.exists() and not overwrite:
        console.print(
            f"[red]Error:[/red] Output file already exists: {out_path}\n"
            "Use --overwrite to replace it."
        )
        raise SystemExit(1)


def _grid_table(grid: pd.DataFrame, title: str) -> Table:
    table = Table(title=title)
    table.add_column("", style="bold")
    for col in grid.columns:
        table.add_column(str(col), justify="right")
    for row_label, values in grid.iterrows():
        table.add_row(str(row_label), *(f"{v:.0f}" for v in values))
    return table


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False))
@click.option("--a1", "a1", required=True, type=POINT, help="Centre of well A1 (X,Y pixels).")
@click.option("--h6", "h6", required=True, type=POINT, help="Centre of well H6 (X,Y pixels).")
@click.option(
    "--min-ref", required=True, type=POINT,
    help="Centre of the zero-density reference well (X,Y pixels).",
)
@click.option(
    "--max-ref", required=True, type=POINT,
    help="Centre of the full-density reference well (X,Y pixels).",
)
@click.option(
    "-o", "--output", default=None, type=click.Path(),
    help="Write the result grids to this CSV file.",
)
@click.option("--overwrite", is_flag=True, help="Overwrite output file if it exists.")
@click.option(
    "--workers", default=1, show_default=True, type=click.IntRange(min=1),
    help="Threads used to score wells.",
)
@error_handler
def analyze(
    image: str,
    a1: Point,
    h6: Point,
    min_ref: Point,
    max_ref: Point,
    output: str | None,
    overwrite: bool,
    workers: int,
) -> None:
    """Analyze a plate photograph and report per-well cell counts."""
    from wellquant.io import export_csv, load_image, results_to_grid
    from wellquant.measure import PlateAnalyzer

    out_path = Path(output).expanduser() if output else None
    if out_path is not None:
        _check_output(out_path, overwrite)

    with console.status("[bold blue]Decoding image..."):
        raster = load_image(image)

    analyzer = PlateAnalyzer(raster, max_workers=workers)
    with make_progress() as progress:
        task = progress.add_task("Scoring wells...", total=None)

        def on_progress(current: int, total: int, well: str) -> None:
            progress.update(
                task, total=total, completed=current, description=f"Scoring {well}",
            )

        result = analyzer.run(a1, h6, min_ref, max_ref, progress_callback=on_progress)

    cal = result.calibration
    console.print(
        f"Reference colours: min [bold]{cal.min_color.to_hex()}[/bold], "
        f"max [bold]{cal.max_color.to_hex()}[/bold]"
    )
    if cal.axis.is_degenerate:
        console.print(
            "[yellow]Warning:[/yellow] reference colours are indistinguishable; "
            "every well scores 0. Select clearer reference wells."
        )

    console.print(_grid_table(
        results_to_grid(result.wells, "cell_count"), "Estimated Cell Count (0-10,000)",
    ))

    if out_path is not None:
        export_csv(result.wells, out_path)
        console.print(f"[green]Exported results to {out_path}[/green]")
