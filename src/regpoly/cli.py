from __future__ import annotations

import pathlib

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from regpoly._config import RenderSettings, get_render_settings
from regpoly.io.svg import Paint, SvgCanvas
from regpoly.modeling.drawing2d import Arc2D, Path2D
from regpoly.modeling.polygon import PolygonSpec, draw_polygon, polygon_path
from regpoly.modeling.vertices import compute_regular_vertices, compute_weighted_vertices
from regpoly.preview import PreviewBackendError, show_path

console = Console()
app = typer.Typer(help="Build regular polygon outlines and vertex sets.")


def _log_active_settings(settings: RenderSettings) -> None:
    console.print(
        f"[magenta]y-axis {settings.y_axis}; {settings.segments_per_circle} segments per circle.[/magenta]"
    )


def _build_path(sides: int, cx: float, cy: float, radius: float, corner_radius: float) -> Path2D:
    try:
        return polygon_path(sides, cx, cy, radius, corner_radius)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_dims(raw: str) -> list[float]:
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise typer.BadParameter(f"--dims must be comma-separated numbers: {exc}") from exc


def _vertex_table(title: str, points: np.ndarray) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for idx, (x, y) in enumerate(points):
        table.add_row(str(idx), f"{x:.4f}", f"{y:.4f}")
    return table


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


@app.command()
def path(
    sides: int = typer.Argument(..., help="Number of polygon sides (>= 3)."),
    radius: float = typer.Option(1.0, "--radius", "-r", help="Distance from the center to each vertex."),
    corner_radius: float = typer.Option(0.0, "--corner-radius", "-c", help="Rounding radius at each corner."),
    cx: float = typer.Option(0.0, "--cx", help="Center x."),
    cy: float = typer.Option(0.0, "--cy", help="Center y."),
) -> None:
    """
    Print the line and arc primitives that make up the polygon outline.
    """

    outline = _build_path(sides, cx, cy, radius, corner_radius)
    spec = PolygonSpec(sides, cx, cy, radius, corner_radius)
    if spec.falls_back_to_circle:
        console.print(f"[yellow]Corner radius exceeds the in-radius {spec.in_radius:.4f}; drawing a circle.[/yellow]")

    table = Table(title=f"{sides}-gon outline")
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("from")
    table.add_column("to")
    table.add_column("detail")
    for idx, segment in enumerate(outline.segments):
        start = segment.start_point
        end = segment.end_point
        if isinstance(segment, Arc2D):
            kind = "arc"
            detail = (
                f"r={segment.radius:.4f} start={segment.start_angle_deg:.2f} sweep={segment.sweep_angle_deg:.2f}"
            )
        else:
            kind = "line"
            detail = ""
        table.add_row(
            str(idx),
            kind,
            f"({start[0]:.4f}, {start[1]:.4f})",
            f"({end[0]:.4f}, {end[1]:.4f})",
            detail,
        )
    console.print(table)


@app.command()
def vertices(
    sides: int = typer.Argument(..., help="Number of polygon sides (>= 3)."),
    radius: float = typer.Option(1.0, "--radius", "-r", help="Nominal vertex radius."),
    corner_radius: float = typer.Option(0.0, "--corner-radius", "-c", help="Rounding radius at each corner."),
    truncate: bool = typer.Option(True, "--truncate/--no-truncate", help="Truncate the effective radius to an integer."),
) -> None:
    """
    Print regular polygon vertices, pulled in by the corner rounding.
    """

    try:
        points = compute_regular_vertices(sides, radius, corner_radius, truncate_radius=truncate)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(_vertex_table(f"{sides}-gon vertices", points))


@app.command()
def radar(
    sides: int = typer.Argument(..., help="Number of chart dimensions (>= 3)."),
    dims: str = typer.Option(..., "--dims", "-d", help="Comma-separated fractions, one per dimension."),
    max_radius: float = typer.Option(1.0, "--max-radius", "-m", help="Radius of a full (1.0) dimension."),
) -> None:
    """
    Print radar-chart vertices, each dimension at its own fraction of the radius.
    """

    fractions = _parse_dims(dims)
    try:
        points = compute_weighted_vertices(fractions, max_radius, sides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(_vertex_table(f"{sides}-dimension radar", points))


@app.command()
def svg(
    sides: int = typer.Argument(..., help="Number of polygon sides (>= 3)."),
    radius: float = typer.Option(50.0, "--radius", "-r", help="Distance from the center to each vertex."),
    corner_radius: float = typer.Option(0.0, "--corner-radius", "-c", help="Rounding radius at each corner."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("polygon.svg"),
        "--output",
        "-o",
        help="Path to the SVG file that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing SVG."),
    fill: str | None = typer.Option(None, "--fill", help="Fill colour (defaults to the config value)."),
    stroke: str | None = typer.Option(None, "--stroke", help="Stroke colour (defaults to the config value)."),
) -> None:
    """
    Draw the polygon outline onto an SVG canvas and save it.
    """

    settings = get_render_settings()
    _log_active_settings(settings)

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    try:
        paint = Paint(
            fill=fill if fill is not None else settings.fill,
            stroke=stroke if stroke is not None else settings.stroke,
            stroke_width=settings.stroke_width,
        )
        canvas = SvgCanvas(y_axis=settings.y_axis)
        draw_polygon(canvas, sides, 0.0, 0.0, radius, corner_radius, paint)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        canvas.save(final_output)
    except OSError as exc:
        raise typer.BadParameter(f"Failed to write SVG: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {sides}-gon outline to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


@app.command()
def preview(
    sides: int = typer.Argument(..., help="Number of polygon sides (>= 3)."),
    radius: float = typer.Option(1.0, "--radius", "-r", help="Distance from the center to each vertex."),
    corner_radius: float = typer.Option(0.0, "--corner-radius", "-c", help="Rounding radius at each corner."),
    screenshot: pathlib.Path | None = typer.Option(
        None, "--screenshot", help="Optional path to save a screenshot instead of opening a window."
    ),
) -> None:
    """
    Open a PyVista window showing the outline.
    """

    settings = get_render_settings()
    outline = _build_path(sides, 0.0, 0.0, radius, corner_radius)
    console.rule("regpoly preview")
    _log_active_settings(settings)
    try:
        show_path(
            outline,
            color=settings.stroke,
            segments_per_circle=settings.segments_per_circle,
            screenshot_path=screenshot,
        )
    except PreviewBackendError as exc:
        raise typer.BadParameter(str(exc)) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
