"""Text patterns: triangles, pyramids, diamonds and number triangles.

Every function returns the pattern as a list of lines without newlines.
"""

from __future__ import annotations


def _centered_rows(rows: int, order, fill) -> list[str]:
    """Build pyramid lines for row numbers in ``order``.

    ``fill(i, j, width)`` decides whether column ``j`` (1-based) of a row of
    ``width = 2*i - 1`` cells is filled with a star.
    """
    lines = []
    for i in order:
        width = 2 * i - 1
        cells = "".join("*" if fill(i, j, width) else " " for j in range(1, width + 1))
        lines.append(" " * (rows - i) + cells)
    return lines


def right_triangle(rows: int, cell: str = "*") -> list[str]:
    """Return a left-aligned triangle whose row ``i`` repeats ``cell`` ``i`` times."""
    return [cell * i for i in range(1, rows + 1)]


def digit_pyramid(rows: int, digit: int) -> list[str]:
    """Return a centred pyramid drawn with the given number."""
    return [" " * (rows - i) + str(digit) * (2 * i - 1) for i in range(1, rows + 1)]


def right_aligned_inverted_triangle(rows: int) -> list[str]:
    """Return a right-aligned triangle of stars, widest row first."""
    return [" " * (rows - i) + "*" * i for i in range(rows, 0, -1)]


def inverted_pyramid(rows: int) -> list[str]:
    """Return a centred pyramid of stars standing on its tip."""
    return _centered_rows(rows, range(rows, 0, -1), lambda i, j, width: True)


def number_triangle(rows: int) -> list[str]:
    """Return a triangle whose row ``i`` lists 1 to ``i``, each followed by a space."""
    return ["".join(f"{j} " for j in range(1, i + 1)) for i in range(1, rows + 1)]


def letter_triangle(rows: int) -> list[str]:
    """Return a triangle whose every row starts again from ``A``."""
    return [
        "".join(f"{chr(ord('A') + j)} " for j in range(i)) for i in range(1, rows + 1)
    ]


def continuous_letter_triangle(rows: int) -> list[str]:
    """Return a triangle of letters that keep counting on from row to row."""
    lines = []
    code = ord("A")
    for i in range(1, rows + 1):
        lines.append("".join(f"{chr(code + j)} " for j in range(i)))
        code += i
    return lines


def hollow_pyramid(rows: int) -> list[str]:
    """Return a centred pyramid outline with a solid base."""
    return _centered_rows(
        rows,
        range(1, rows + 1),
        lambda i, j, width: j == 1 or j == width or i == rows,
    )


def inverted_hollow_pyramid(rows: int) -> list[str]:
    """Return an upside-down pyramid outline with a solid top."""
    return _centered_rows(
        rows,
        range(rows, 0, -1),
        lambda i, j, width: i == rows or j == 1 or j == width,
    )


def hollow_diamond(rows: int) -> list[str]:
    """Return the outline of a diamond whose upper half has ``rows`` rows."""
    edge = lambda i, j, width: j == 1 or j == width  # noqa: E731
    order = [*range(1, rows + 1), *range(rows - 1, 0, -1)]
    return _centered_rows(rows, order, edge)


def diamond(rows: int) -> list[str]:
    """Return a solid diamond whose upper half has ``rows`` rows."""
    order = [*range(1, rows + 1), *range(rows - 1, 0, -1)]
    return _centered_rows(rows, order, lambda i, j, width: True)


def pascal_triangle(rows: int) -> list[str]:
    """Return Pascal's triangle, each value followed by a space."""
    lines = []
    for i in range(rows):
        values = []
        value = 1
        for j in range(i + 1):
            values.append(f"{value} ")
            value = value * (i - j) // (j + 1)
        lines.append(" " * (rows - i - 1) + "".join(values))
    return lines


def floyd_triangle(rows: int) -> list[str]:
    """Return Floyd's triangle: consecutive numbers from 1, row ``i`` holding ``i``."""
    lines = []
    start = 1
    for i in range(1, rows + 1):
        lines.append("".join(f"{k} " for k in range(start, start + i)))
        start += i
    return lines


def reverse_floyd_triangle(rows: int) -> list[str]:
    """Return Floyd's triangle counted down, widest row first."""
    lines = []
    current = rows * (rows + 1) // 2
    for i in range(rows, 0, -1):
        lines.append("".join(f"{k} " for k in range(current, current - i, -1)))
        current -= i
    return lines