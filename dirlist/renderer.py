"""Turn a Grid into output text."""

from dirlist.models import ColumnSpec, DisplayField, Grid


def pad(field: DisplayField, spec: ColumnSpec) -> str:
    """Pad a field to its column width according to the column alignment."""
    if spec.align == "right":
        return field.text.rjust(spec.width)
    if spec.align == "left":
        return field.text.ljust(spec.width)
    return field.text


def render_detailed(grid: Grid) -> str:
    """One aligned line per row, fields separated by a single space."""
    specs = grid.column_specs()
    lines = [" ".join(pad(field, spec) for field, spec in zip(row, specs)) for row in grid.rows]
    return "".join(line + "\n" for line in lines)


def render_compact(grid: Grid) -> str:
    """All rows on one line with no alignment.

    Each field is followed by a space and each row by one more, e.g.
    ``a.txt  b.txt  ``.
    """
    if not grid.rows:
        return ""
    parts = []
    for row in grid.rows:
        parts.extend(field.text + " " for field in row)
        parts.append(" ")
    return "".join(parts) + "\n"


def render(grid: Grid, detailed: bool) -> str:
    """Render a grid in detailed or compact mode."""
    if detailed:
        return render_detailed(grid)
    return render_compact(grid)
