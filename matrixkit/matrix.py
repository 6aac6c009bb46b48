"""Dense real matrices with tolerance-based comparison and basic arithmetic."""

from __future__ import annotations

from numbers import Real

EPS = 1e-7


class MatrixError(Exception):
    """Base class for matrix errors."""


class IncorrectMatrixError(MatrixError, ValueError):
    """The matrix is missing, removed, or has invalid dimensions."""


class CalculationError(MatrixError, ArithmeticError):
    """The operands have dimensions that the operation cannot combine."""


class Matrix:
    """A rows x columns matrix of floats, initialised to zeros."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows, columns):
        if rows <= 0 or columns <= 0:
            raise IncorrectMatrixError(f"invalid dimensions {rows}x{columns}")
        self._rows, self._cols = rows, columns
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows):
        """Build a matrix from a non-empty rectangular sequence of rows."""
        values = [[float(x) for x in row] for row in rows]
        if not values or any(len(row) != len(values[0]) for row in values):
            raise IncorrectMatrixError("rows must be non-empty and of equal length")
        matrix = cls(len(values), len(values[0]))
        matrix._data = values
        return matrix

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def is_removed(self):
        return self._data is None

    def _checked(self, other=None):
        if self._data is None or (other is not None and other._data is None):
            raise IncorrectMatrixError("matrix has been removed")
        return self._data

    def __getitem__(self, index):
        data = self._checked()
        if isinstance(index, tuple):
            i, j = index
            return data[i][j]
        return list(data[index])

    def __setitem__(self, index, value):
        i, j = index
        self._checked()[i][j] = float(value)

    def to_list(self):
        """Return a copy of the elements as a list of rows."""
        return [list(row) for row in self._checked()]

    def remove(self):
        """Release the elements; the matrix becomes 0x0 and unusable."""
        self._data, self._rows, self._cols = None, 0, 0

    def eq_matrix(self, other):
        """True when both are live, same-shaped and element-wise within EPS."""
        if not isinstance(other, Matrix) or self._data is None or other._data is None:
            return False
        if (self._rows, self._cols) != (other._rows, other._cols):
            return False
        return all(
            abs(a - b) <= EPS
            for ra, rb in zip(self._data, other._data)
            for a, b in zip(ra, rb)
        )

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.eq_matrix(other)

    def _elementwise(self, other, op):
        if not isinstance(other, Matrix):
            raise IncorrectMatrixError("operand must be a matrix")
        self._checked(other)
        if (self._rows, self._cols) != (other._rows, other._cols):
            raise CalculationError("matrices differ in shape")
        return Matrix.from_rows(
            [op(a, b) for a, b in zip(ra, rb)]
            for ra, rb in zip(self._data, other._data)
        )

    def sum_matrix(self, other):
        """Element-wise sum of two same-shaped matrices."""
        return self._elementwise(other, lambda a, b: a + b)

    def __add__(self, other):
        return self.sum_matrix(other) if isinstance(other, Matrix) else NotImplemented

    def sub_matrix(self, other):
        """Element-wise difference of two same-shaped matrices."""
        return self._elementwise(other, lambda a, b: a - b)

    def __sub__(self, other):
        return self.sub_matrix(other) if isinstance(other, Matrix) else NotImplemented

    def mult_number(self, number):
        """Multiply every element by a scalar."""
        return Matrix.from_rows([x * number for x in row] for row in self._checked())

    def __mul__(self, number):
        if not isinstance(number, Real):
            return NotImplemented
        return self.mult_number(float(number))

    def __rmul__(self, number):
        return self.__mul__(number)

    def mult_matrix(self, other):
        """Matrix product; self.cols must equal other.rows."""
        if not isinstance(other, Matrix):
            raise IncorrectMatrixError("operand must be a matrix")
        data = self._checked(other)
        if self._cols != other._rows:
            raise CalculationError("inner dimensions differ")
        columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, col)) for col in columns] for row in data
        )

    def __matmul__(self, other):
        return self.mult_matrix(other) if isinstance(other, Matrix) else NotImplemented

    def __repr__(self):
        if self._data is None:
            return "Matrix(<removed>)"
        return f"Matrix.from_rows({self._data!r})"