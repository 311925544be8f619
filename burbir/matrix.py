"""Integer matrices with arithmetic, tests and determinant."""

from __future__ import annotations

from typing import Iterable, Sequence, Union

ROW_CAP = 100
COL_CAP = 100
SPARSE_LIMIT = 0.05


def is_index_valid(i: int, j: int) -> bool:
    """True if (i, j) is an index any matrix could hold."""
    return 0 <= i < ROW_CAP and 0 <= j < COL_CAP


def _c_mod(value: int, mod: int) -> int:
    """Remainder whose sign follows ``value``, as integer division truncating to zero gives."""
    remainder = abs(value) % abs(mod)
    return -remainder if value < 0 else remainder


def _det(rows: Sequence[Sequence[int]]) -> int:
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    return sum(
        (-1) ** col
        * rows[0][col]
        * _det([row[:col] + row[col + 1:] for row in rows[1:]])
        for col in range(size)
    )


class Matrix:
    """A rectangular matrix of integers, at most ROW_CAP x COL_CAP."""

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        data = tuple(tuple(int(value) for value in row) for row in rows)
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        if len(data) > ROW_CAP or width > COL_CAP:
            raise ValueError(f"a matrix holds at most {ROW_CAP} x {COL_CAP} elements")
        self._rows = data

    @classmethod
    def read(
        cls, tokens: Iterable[Union[int, str]], n_rows: int, n_cols: int
    ) -> "Matrix":
        """Read ``n_rows`` x ``n_cols`` values row by row."""
        if not (1 <= n_rows <= ROW_CAP and 1 <= n_cols <= COL_CAP):
            raise ValueError(f"size {n_rows} x {n_cols} is not allowed")
        numbers = (int(token) for token in tokens)
        try:
            return cls(
                [[next(numbers) for _ in range(n_cols)] for _ in range(n_rows)]
            )
        except StopIteration:
            raise ValueError("input ended before the matrix was complete") from None

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        """Number of columns."""
        return len(self._rows[0])

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        """The rows as tuples."""
        return self._rows

    def __getitem__(self, position: tuple[int, int]) -> int:
        i, j = position
        if not self.is_index_effective(i, j):
            raise IndexError(f"index ({i}, {j}) outside the matrix")
        return self._rows[i][j]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def _check_same_size(self, other: "Matrix") -> None:
        if not self.same_size(other):
            raise ValueError("matrices must have the same size")

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix(
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._rows, other._rows)
        )

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix(
            [a - b for a, b in zip(left, right)]
            for left, right in zip(self._rows, other._rows)
        )

    def _product(self, other: "Matrix") -> list[list[int]]:
        if self.n_cols != other.n_rows:
            raise ValueError("columns of the left matrix must match rows of the right")
        columns = list(zip(*other._rows))
        return [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        ]

    def __mul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(self._product(other))

    def __neg__(self) -> "Matrix":
        return self.scale(-1)

    def multiply_mod(self, other: "Matrix", mod: int) -> "Matrix":
        """Matrix product with every element taken modulo ``mod`` (sign follows the element)."""
        if mod == 0:
            raise ZeroDivisionError("modulo by zero")
        return Matrix(
            [_c_mod(value, mod) for value in row] for row in self._product(other)
        )

    def scale(self, factor: int) -> "Matrix":
        """Every element multiplied by ``factor``."""
        return Matrix([value * factor for value in row] for row in self._rows)

    def is_index_effective(self, i: int, j: int) -> bool:
        """True if (i, j) points at an element of this matrix."""
        return 0 <= i < self.n_rows and 0 <= j < self.n_cols

    def diagonal(self, i: int) -> int:
        """The element at (i, i)."""
        return self[i, i]

    def same_size(self, other: "Matrix") -> bool:
        """True if both matrices have the same number of rows and columns."""
        return self.n_rows == other.n_rows and self.n_cols == other.n_cols

    def count(self) -> int:
        """Number of elements."""
        return self.n_rows * self.n_cols

    def is_square(self) -> bool:
        """True if rows and columns are equal in number."""
        return self.n_rows == self.n_cols

    def is_symmetric(self) -> bool:
        """True if square and equal to its transpose."""
        return self.is_square() and self._rows == self.transpose()._rows

    def is_identity(self) -> bool:
        """True if square with ones on the diagonal and zeros elsewhere."""
        return self.is_square() and all(
            value == (1 if i == j else 0)
            for i, row in enumerate(self._rows)
            for j, value in enumerate(row)
        )

    def is_sparse(self) -> bool:
        """True if at most 5% of the elements are not zero."""
        zeros = sum(row.count(0) for row in self._rows)
        return 1 - zeros / self.count() <= SPARSE_LIMIT

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        if not self.is_square():
            raise ValueError("determinant needs a square matrix")
        return float(_det(self._rows))

    def transpose(self) -> "Matrix":
        """The matrix with rows and columns swapped."""
        return Matrix(zip(*self._rows))

    def render(self) -> str:
        """Rows of blank-separated values, each ending in a newline."""
        return "".join(
            " ".join(str(value) for value in row) + "\n" for row in self._rows
        )