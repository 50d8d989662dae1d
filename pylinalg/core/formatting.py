"""
Text rendering shared by Vector and Matrix.

Elements are rendered with str() and separated by a single space. A Vector
renders as one such row; a Matrix renders one row per line, top to bottom.
"""

from typing import Any, Iterable


SEPARATOR = ' '


def render_row(values: Iterable[Any]) -> str:
    """Space-separated text of the values, in order."""
    return SEPARATOR.join(str(v) for v in values)


def render_grid(rows: Iterable[Iterable[Any]]) -> str:
    """One rendered row per line."""
    return '\n'.join(render_row(row) for row in rows)
