"""Format containers into a text table for print.

The `tabulate` function takes a :class:`Series`, a :class:`Block`
or a :class:`DataFrame` and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places,
and limit the number of rows to display.
The function is used when containers are converted to strings.

Example:

    >>> from labelgrid import DataFrame
    >>> df = DataFrame.from_dict({
    ...     "Product": ["Videogame", "Laptop", "Laptop"],
    ...     "Quantity": [8, 8, 7],
    ...     "Price": [66.5, 38.72, 77.46],
    ... }, index=["a", "b", "c"])
    >>> print(tabulate(df))
      | Product   | Quantity | Price
    - | --------- | -------- | -----
    a | Videogame | 8        | 66.50
    b | Laptop    | 8        | 38.72
    c | Laptop    | 7        | 77.46

Series have no column labels, so only the rows are printed:

    >>> from labelgrid import Series
    >>> print(tabulate(Series([1, 2, 3], index=["x", "y", "z"]), max_rows=2))
    x | 1
    y | 2
    ... and 1 more rows
"""

from typing import Any


def tabulate(container: Any, max_rows: int = 20) -> str:
    """Format a container into a text table.

    Will produce a string like::

          | Product   | Quantity | Price
        - | --------- | -------- | -----
        a | Videogame | 8        | 66.50
        b | Laptop    | 8        | 38.72

    The container is only read, never modified.
    """
    columns = getattr(container, "columns", None)
    if columns is None:
        header = None
        data = [container.values.to_pylist()]
    else:
        header = [""] + [format_value(label) for label in columns]
        data = [column.to_pylist() for column in container.values]

    labels = container.index.values
    rows = [
        [format_value(labels[position])]
        + [format_value(column[position]) for column in data]
        for position in range(min(len(labels), max_rows))
    ]

    colsizes = compute_max_colsize(header or [""] * (len(data) + 1), rows)
    lines = []
    if header is not None:
        lines.append(maketablerow(header, colsizes=colsizes))
        lines.append(maketablerow(["-"] * len(header), colsizes=colsizes, fillvalue="-"))
    lines.extend(maketablerow(row, colsizes=colsizes) for row in rows)

    table = "\n".join(lines)
    if len(labels) > max_rows:
        table += f"\n... and {len(labels) - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes.

    Trailing padding of the last column is dropped.
    """
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    ).rstrip()


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.
    """
    if isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
