"""
Pascal's Triangle
=================
Binomial coefficient table for orders 0..N.

Row ``k`` holds the ``k+1`` coefficients ``C(k, 0), ..., C(k, k)``. Besides
row access the table can be walked along its diagonals: diagonal ``d``
visits ``row(d)[0], row(d+1)[1], ..., row(N)[N-d]``, i.e. it starts next to
the apex and descends towards the bottom-right edge. Diagonal 0 is the
right-hand edge of ones, diagonal 1 the natural numbers, and so on.

Polynomial shifts use the diagonals directly: the coefficient of ``x^j``
after substituting ``x + s`` collects ``C(j+i, j) * s^i`` for ``i = 0..N-j``,
which is diagonal ``j``.
"""
from __future__ import annotations

from functools import lru_cache
from numbers import Integral
from typing import Iterator, TextIO
import logging

from fixedpoly import config
from fixedpoly.errors import OutOfRangeError

logger = logging.getLogger(__name__)


# Literal tables for the orders the polynomial classes use most (cubic and
# quintic shifts). Must match the recurrence exactly.
_LITERAL_TABLES: dict[int, tuple[tuple[int, ...], ...]] = {
    3: (
        (1,),
        (1, 1),
        (1, 2, 1),
        (1, 3, 3, 1),
    ),
    5: (
        (1,),
        (1, 1),
        (1, 2, 1),
        (1, 3, 3, 1),
        (1, 4, 6, 4, 1),
        (1, 5, 10, 10, 5, 1),
    ),
}


def compute_rows(order: int) -> tuple[tuple[int, ...], ...]:
    """
    Build rows 0..order with the recurrence C(k, i) = C(k-1, i-1) + C(k-1, i).

    Args:
        order: Highest row index.

    Returns:
        Tuple of rows, row ``k`` having ``k+1`` entries.
    """
    rows: list[tuple[int, ...]] = [(1,)]
    for _ in range(order):
        previous = rows[-1]
        inner = [previous[i - 1] + previous[i] for i in range(1, len(previous))]
        rows.append((1, *inner, 1))
    return tuple(rows)


class DiagonalView:
    """
    Read-only traversal of one diagonal of a Pascal's triangle.

    Iterating the view always restarts from the apex end, so it can be
    walked any number of times. It does not copy the table.
    """

    def __init__(self, rows: tuple[tuple[int, ...], ...], index: int) -> None:
        self._rows = rows
        self.index = index

    def __len__(self) -> int:
        return len(self._rows) - self.index

    def __iter__(self) -> Iterator[int]:
        d = self.index
        for i in range(len(self)):
            yield self._rows[d + i][i]

    def __getitem__(self, i: int) -> int:
        if not 0 <= i < len(self):
            raise OutOfRangeError(
                f"Position {i} is outside diagonal {self.index} of length {len(self)}."
            )
        return self._rows[self.index + i][i]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(index={self.index}, values={list(self)})"


class PascalsTriangle:
    """
    Triangle of binomial coefficients of a fixed order.

    Usage:
        triangle = PascalsTriangle(4)
        triangle.row(4)             # (1, 4, 6, 4, 1)
        list(triangle.diagonal(1))  # [1, 2, 3, 4]
        print(triangle)
    """

    def __init__(self, order: int) -> None:
        """
        Args:
            order: Highest row index N (the table has N+1 rows).

        Raises:
            ValueError: If `order` is not a non-negative integer.
        """
        if isinstance(order, bool) or not isinstance(order, int) or order < 0:
            raise ValueError(f"Order must be a non-negative integer, got {order!r}.")
        self._order = order

        if order in config.PRECOMPUTED_TRIANGLE_ORDERS and order in _LITERAL_TABLES:
            logger.debug(f"Pascal's triangle of order {order} taken from literal table.")
            self._rows = _LITERAL_TABLES[order]
        else:
            logger.debug(f"Pascal's triangle of order {order} computed from recurrence.")
            self._rows = compute_rows(order)

    @staticmethod
    @lru_cache(maxsize=None)
    def of_order(order: int) -> PascalsTriangle:
        """Shared instance for `order`. Tables are immutable, so sharing is safe."""
        return PascalsTriangle(order)

    @property
    def order(self) -> int:
        return self._order

    def __len__(self) -> int:
        return self._order + 1

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self._rows)

    def __getitem__(self, k: int) -> tuple[int, ...]:
        return self.row(k)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(order={self._order})"

    def _check_index(self, index: int, what: str) -> None:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise TypeError(f"{what.capitalize()} index must be an integer, got {index!r}.")
        if not 0 <= index <= self._order:
            raise OutOfRangeError(
                f"{what.capitalize()} index {index} is out of range for a triangle of order {self._order}."
            )

    def row(self, k: int) -> tuple[int, ...]:
        """
        Binomial coefficients of order `k`.

        Raises:
            TypeError: If `k` is not an integer.
            OutOfRangeError: If `k` is not in 0..order.
        """
        self._check_index(k, "row")
        return self._rows[k]

    def binomial(self, n: int, k: int) -> int:
        """C(n, k) read from the table."""
        row = self.row(n)
        if not 0 <= k <= n:
            raise OutOfRangeError(f"Column {k} is out of range for row {n}.")
        return row[k]

    def diagonal(self, index: int) -> DiagonalView:
        """
        View of diagonal `index`; element ``i`` equals ``row(index + i)[i]``.

        Raises:
            OutOfRangeError: If `index` is not in 0..order.
        """
        self._check_index(index, "diagonal")
        return DiagonalView(self._rows, index)

    def begin(self, index: int) -> Iterator[int]:
        """Fresh iterator positioned at the apex end of diagonal `index`."""
        return iter(self.diagonal(index))

    def end(self, index: int) -> int:
        """Past-the-end position of diagonal `index` (its number of elements)."""
        return len(self.diagonal(index))

    def __str__(self) -> str:
        width = len(str(max(self._rows[-1])))
        lines = [
            " ".join(f"{value:>{width}d}" for value in row)
            for row in self._rows
        ]
        return "\n".join(lines)

    def write(self, stream: TextIO) -> None:
        """Write the rendered triangle, followed by a newline, to `stream`."""
        stream.write(str(self))
        stream.write("\n")
