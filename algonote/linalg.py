"""Dense linear algebra: Gauss-Jordan solving, modular matrix powers, and
determinant, inverse, rank and trace in one elimination."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-10


class SingularMatrixError(ValueError):
    """Raised when a matrix that must be invertible is singular."""


def _is_zero(value: float) -> bool:
    return abs(value) < EPS


def _float_copy(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    return [[float(v) for v in row] for row in matrix]


def _check_square(matrix: Sequence[Sequence[float]], name: str) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError(f"{name} must be square")
    return n


def gauss_jordan(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> tuple[list[list[float]], list[list[float]]]:
    """Solve ``A X = B`` by Gauss-Jordan elimination with full pivoting.

    ``a`` is n x n and ``b`` is n x m. Returns ``(X, A^-1)``; raises
    :class:`SingularMatrixError` if ``a`` is singular.
    """
    n = _check_square(a, "a")
    if n == 0:
        raise ValueError("matrix must not be empty")
    if len(b) != n or not b[0]:
        raise ValueError("b must have as many rows as a and at least one column")
    m = len(b[0])
    if any(len(row) != m for row in b):
        raise ValueError("rows of b differ in length")
    a = _float_copy(a)
    b = _float_copy(b)
    irow = [0] * n
    icol = [0] * n
    pivoted = [False] * n

    for i in range(n):
        pj = pk = -1
        for j in range(n):
            if pivoted[j]:
                continue
            for k in range(n):
                if pivoted[k]:
                    continue
                if pj == -1 or abs(a[j][k]) > abs(a[pj][pk]):
                    pj, pk = j, k
        if _is_zero(a[pj][pk]):
            raise SingularMatrixError("matrix is singular")
        pivoted[pk] = True
        a[pj], a[pk] = a[pk], a[pj]
        b[pj], b[pk] = b[pk], b[pj]
        irow[i], icol[i] = pj, pk

        c = 1.0 / a[pk][pk]
        a[pk][pk] = 1.0
        a[pk] = [v * c for v in a[pk]]
        b[pk] = [v * c for v in b[pk]]
        for p in range(n):
            if p == pk:
                continue
            c = a[p][pk]
            a[p][pk] = 0.0
            a[p] = [x - y * c for x, y in zip(a[p], a[pk])]
            b[p] = [x - y * c for x, y in zip(b[p], b[pk])]

    for r, c in reversed(list(zip(irow, icol))):
        if r != c:
            for row in a:
                row[r], row[c] = row[c], row[r]
    return b, a


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int) -> list[list[int]]:
    """Return ``a @ b`` with every entry reduced modulo ``mod``."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    if not a or not b:
        raise ValueError("matrices must not be empty")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("rows of b differ in length")
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def mat_pow(a: Sequence[Sequence[int]], n: int, mod: int) -> list[list[int]]:
    """Return ``a ** n`` modulo ``mod`` by repeated squaring."""
    size = _check_square(a, "a")
    if size == 0:
        raise ValueError("matrix must not be empty")
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if mod < 1:
        raise ValueError("modulus must be positive")
    result = [[(1 if i == j else 0) % mod for j in range(size)] for i in range(size)]
    base = [list(row) for row in a]
    while n:
        if n & 1:
            result = mat_mul(result, base, mod)
        base = mat_mul(base, base, mod)
        n >>= 1
    return result


def inverse_det_rank(
    a: Sequence[Sequence[float]],
) -> tuple[float, list[list[float]] | None, int, float]:
    """Return ``(det, inverse, rank, trace)`` of a square matrix in O(n^3).

    For a singular matrix the determinant is 0, the inverse is ``None`` and
    the rank is the index of the first column that has no pivot.
    """
    n = _check_square(a, "a")
    work = _float_copy(a)
    out = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    trace = sum(work[i][i] for i in range(n))
    det = 1.0
    for i in range(n):
        if _is_zero(work[i][i]):
            best, best_row = 0.0, -1
            for j in range(i + 1, n):
                cur = abs(work[j][i])
                if best < cur:
                    best, best_row = cur, j
            if best_row == -1 or _is_zero(work[best_row][i]):
                return 0.0, None, i, trace
            work[i] = [x + y for x, y in zip(work[i], work[best_row])]
            out[i] = [x + y for x, y in zip(out[i], out[best_row])]
        pivot = work[i][i]
        det *= pivot
        coeff = 1.0 / pivot
        work[i] = [v * coeff for v in work[i]]
        out[i] = [v * coeff for v in out[i]]
        for j in range(n):
            if j == i:
                continue
            factor = work[j][i]
            work[j] = [x - y * factor for x, y in zip(work[j], work[i])]
            out[j] = [x - y * factor for x, y in zip(out[j], out[i])]
    return det, out, n, trace