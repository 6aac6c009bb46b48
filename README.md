# matrixkit

matrixkit is a small dense matrix type for Python. It has no dependencies.
Matrices hold floats, and two matrices are equal when every pair of elements
differs by at most `1e-7` (`matrixkit.matrix.EPS`). An arithmetic operation
that cannot be carried out raises an exception.

## Installation

```
pip install matrixkit
```

## Usage

```python
from matrixkit.matrix import Matrix, CalculationError, IncorrectMatrixError

a = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
b = Matrix(3, 3)          # a 3x3 matrix of zeros
b[0, 0] = 1.0             # values are stored as float

a[1, 2]                   # 6.0
a[1]                      # [4.0, 5.0, 6.0]  (a copy of the row)

a + b                     # same as a.sum_matrix(b)
a - b                     # same as a.sub_matrix(b)
2 * a                     # same as a.mult_number(2); a * 2 also works
a @ a                     # same as a.mult_matrix(a)

(a @ a).to_list()
# [[30.0, 36.0, 42.0], [66.0, 81.0, 96.0], [102.0, 126.0, 150.0]]

a == a.mult_number(1)     # element-wise comparison within 1e-7
a.rows, a.cols            # (3, 3)
```

Each operation returns a new `Matrix` and leaves its operands unchanged.
`Matrix.from_rows` takes any non-empty sequence of rows that all have the
same length. The operators `+`, `-` and `@` only accept another `Matrix`, and
`*` only accepts a real number. Any other operand gives a `TypeError`.
Matrices are mutable, so they cannot be hashed.

### Errors

All errors derive from `MatrixError`.

- `IncorrectMatrixError` (also a `ValueError`) is raised in these cases:
  - a matrix is created with a row or column count of zero or less;
  - `from_rows` gets an empty or ragged list of rows;
  - `sum_matrix`, `sub_matrix` or `mult_matrix` gets something that is not a
    `Matrix`;
  - an operation, indexing or `to_list()` touches a matrix that has been
    removed.
- `CalculationError` (also an `ArithmeticError`) is raised when the sizes do
  not fit. Addition and subtraction need matrices of the same shape. For
  `a @ b`, the number of columns of `a` must equal the number of rows of `b`.

`eq_matrix` never raises. It returns `False` when the other object is not a
matrix, when either matrix has been removed, or when the shapes differ.

### Releasing a matrix

`remove()` drops a matrix's contents. After that the matrix has 0 rows and 0
columns, and `is_removed` is `True`. Calling `remove()` again does nothing. A
removed matrix never compares equal to any matrix, not even to itself.

## Scope

The package covers creation, comparison, addition, subtraction, scalar
multiplication and matrix multiplication. It does not provide transpose,
determinant, minors or inverse.

## Running the tests

```
pip install "matrixkit[test]"
pytest
```