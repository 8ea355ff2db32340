"""Dense linear solver used for the normal equations."""

from polyfinder.errors import SingularMatrixError

# absolute threshold for a usable pivot
PIVOT_TOLERANCE = 1e-10


def solve_linear_system(
    matrix: list[list[float]],
    vector: list[float],
    tolerance: float = PIVOT_TOLERANCE,
) -> list[float]:
    """Solve `A x = b` by Gauss-Jordan elimination with partial pivoting.

    ## parameters
    - matrix (list[list[float]]): square matrix A, shape (n, n)
    - vector (list[float]): right hand side b, length n
    - tolerance (float): smallest accepted absolute pivot

    ## returns
    - x (list[float]): solution, length n

    Raises `SingularMatrixError` when a pivot falls below `tolerance`.
    Inputs are copied, never modified.
    """
    n = len(matrix)
    if len(vector) != n:
        raise ValueError(f"Inconsistent sizes: {n}x? matrix, vector of {len(vector)}")
    if any(len(row) != n for row in matrix):
        raise ValueError("Matrix must be square")

    # augmented matrix [A | b]
    m = [[float(a) for a in row] + [float(b)] for row, b in zip(matrix, vector)]

    for i in range(n):
        pivot_row = max(range(i, n), key=lambda k: abs(m[k][i]))
        m[i], m[pivot_row] = m[pivot_row], m[i]

        pivot = m[i][i]
        if abs(pivot) < tolerance:
            raise SingularMatrixError(pivot_column=i, pivot=abs(pivot))

        # make pivot 1
        for j in range(i + 1, n + 1):
            m[i][j] /= pivot
        m[i][i] = 1.0

        # eliminate column i from all other rows
        for k in range(n):
            if k == i:
                continue
            factor = m[k][i]
            if factor == 0.0:
                continue
            for j in range(i, n + 1):
                m[k][j] -= factor * m[i][j]

    return [row[n] for row in m]
