"""Matrix drills: comparison, arithmetic, transposition and rearrangement.

A matrix is a sequence of equally long rows. Every function leaves its
arguments untouched and returns new lists.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = Sequence[Sequence]


def _shape(matrix: Matrix) -> tuple[int, int]:
    """Return ``(rows, columns)``, rejecting ragged matrices."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("all rows of a matrix must have the same length")
    return rows, cols


def _copy(matrix: Matrix) -> list[list]:
    return [list(row) for row in matrix]


def _require_square(matrix: Matrix) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError(f"expected a square matrix, got {rows}x{cols}")
    return rows


def _require_non_empty(matrix: Matrix) -> tuple[int, int]:
    rows, cols = _shape(matrix)
    if rows == 0 or cols == 0:
        raise ValueError("the matrix must not be empty")
    return rows, cols


def sort_rows(matrix: Matrix) -> list[list]:
    """Return the matrix with each row sorted ascending."""
    _shape(matrix)
    return [sorted(row) for row in matrix]


def are_equal(first: Matrix, second: Matrix) -> bool:
    """Return True if both matrices have the same shape and elements."""
    if _shape(first) != _shape(second):
        return False
    return _copy(first) == _copy(second)


def transpose(matrix: Matrix) -> list[list]:
    """Return the transpose of the matrix."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def determinant_2x2(matrix: Matrix):
    """Return the determinant of a 2x2 matrix."""
    if _shape(matrix) != (2, 2):
        raise ValueError("expected a 2x2 matrix")
    (a, b), (c, d) = matrix
    return a * d - b * c


def trace_and_norm(matrix: Matrix) -> tuple:
    """Return ``(trace, frobenius_norm)`` of a square matrix."""
    size = _require_square(matrix)
    trace = sum(matrix[i][i] for i in range(size))
    norm = math.sqrt(sum(value * value for row in matrix for value in row))
    return trace, norm


def add_matrices(first: Matrix, second: Matrix) -> list[list]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape to be added")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply_matrices(first: Matrix, second: Matrix) -> list[list]:
    """Return the matrix product ``first x second``."""
    _, inner = _shape(first)
    rows_second, _ = _shape(second)
    if inner != rows_second:
        raise ValueError("matrix multiplication not possible")
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in first]


def boundary_lines(matrix: Matrix) -> list[str]:
    """Return the matrix as lines showing only its boundary elements.

    Each boundary element is followed by a space; each inner element is
    replaced by two spaces.
    """
    rows, cols = _shape(matrix)
    lines = []
    for i, row in enumerate(matrix):
        on_edge_row = i in (0, rows - 1)
        lines.append(
            "".join(
                f"{value} " if on_edge_row or j in (0, cols - 1) else "  "
                for j, value in enumerate(row)
            )
        )
    return lines


def _ring(rows: int, cols: int) -> list[tuple[int, int]]:
    """Return the outer ring's coordinates in clockwise order from the top-left."""
    top = [(0, j) for j in range(cols)]
    right = [(i, cols - 1) for i in range(1, rows)]
    bottom = [(rows - 1, j) for j in range(cols - 2, -1, -1)]
    left = [(i, 0) for i in range(rows - 2, 0, -1)]
    return top + right + bottom + left


def rotate_ring_clockwise(matrix: Matrix) -> list[list]:
    """Return the matrix with its outer ring shifted one place clockwise."""
    rows, cols = _shape(matrix)
    if rows < 2 or cols < 2:
        raise ValueError("rotation is not possible for a matrix this small")
    result = _copy(matrix)
    ring = _ring(rows, cols)
    values = [matrix[i][j] for i, j in ring]
    for (i, j), value in zip(ring, values[-1:] + values[:-1]):
        result[i][j] = value
    return result


def diagonal_sums(matrix: Matrix) -> tuple:
    """Return ``(primary, secondary)`` diagonal sums of a square matrix."""
    size = _require_square(matrix)
    primary = sum(matrix[i][i] for i in range(size))
    secondary = sum(matrix[i][size - i - 1] for i in range(size))
    return primary, secondary


def swap_first_last_columns(matrix: Matrix) -> list[list]:
    """Return the matrix with its first and last columns interchanged."""
    _require_non_empty(matrix)
    result = _copy(matrix)
    for row in result:
        row[0], row[-1] = row[-1], row[0]
    return result


def swap_first_last_rows(matrix: Matrix) -> list[list]:
    """Return the matrix with its first and last rows interchanged."""
    _require_non_empty(matrix)
    result = _copy(matrix)
    result[0], result[-1] = result[-1], result[0]
    return result