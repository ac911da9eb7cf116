"""Checking and solving 9x9 sudoku boards of '1'-'9' and '.' cells."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

_DIGITS = frozenset("123456789")
_EMPTY = "."


def _box(row: int, col: int) -> int:
    return 3 * (row // 3) + col // 3


def _check_shape(board: Sequence[Sequence[str]]) -> None:
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 by 9")
    for row in board:
        for cell in row:
            if cell != _EMPTY and cell not in _DIGITS:
                raise ValueError(f"invalid sudoku cell {cell!r}")


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no row, column or 3x3 box repeats a digit."""
    _check_shape(board)
    seen: set[tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                continue
            keys = (("row", r, cell), ("col", c, cell), ("box", _box(r, c), cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def solve_sudoku(board: Sequence[MutableSequence[str]]) -> None:
    """Fill the empty cells of ``board`` in place.

    Raises ``ValueError`` when the board cannot be completed; it is then
    left as it was.
    """
    if not is_valid_sudoku(board):
        raise ValueError("the board already breaks the sudoku rules")
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                empties.append((r, c))
            else:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)

    def options(r: int, c: int) -> set[str]:
        return _DIGITS - rows[r] - cols[c] - boxes[_box(r, c)]

    def search() -> bool:
        best: tuple[int, int] | None = None
        best_options: set[str] = set()
        for r, c in empties:
            if board[r][c] != _EMPTY:
                continue
            choices = options(r, c)
            if best is None or len(choices) < len(best_options):
                best, best_options = (r, c), choices
                if not choices:
                    break
        if best is None:
            return True
        r, c = best
        for digit in sorted(best_options):
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[_box(r, c)].add(digit)
            if search():
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[_box(r, c)].discard(digit)
            board[r][c] = _EMPTY
        return False

    if not search():
        raise ValueError("the board has no solution")