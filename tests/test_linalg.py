import pytest

from numethods.linalg import (
    back_substitute,
    forward_eliminate,
    format_matrix,
    gauss_jordan,
    gauss_seidel,
    matmul,
    solve_gauss,
    solve_gauss_jordan,
)

A = [
    [10.0, 2.0, -1.0, 1.0],
    [3.0, -8.0, 2.0, 0.5],
    [1.0, 1.0, 9.0, -2.0],
    [2.0, -1.0, 1.0, 7.0],
]
X_TRUE = [1.5, -2.0, 0.25, 3.0]


def _augmented_system():
    b = matmul(A, [[v] for v in X_TRUE])
    return [row + [rhs[0]] for row, rhs in zip(A, b)]


def test_solve_gauss_round_trip():
    assert solve_gauss(_augmented_system()) == pytest.approx(X_TRUE)


def test_solve_gauss_jordan_round_trip():
    assert solve_gauss_jordan(_augmented_system()) == pytest.approx(X_TRUE)


def test_forward_eliminate_is_upper_triangular():
    reduced = forward_eliminate(_augmented_system())
    for i, row in enumerate(reduced):
        assert all(abs(v) < 1e-12 for v in row[:i])


def test_gauss_jordan_is_diagonal():
    reduced = gauss_jordan(_augmented_system())
    for i, row in enumerate(reduced):
        assert all(abs(v) < 1e-12 for j, v in enumerate(row[:-1]) if j != i)
        assert row[-1] / row[i] == pytest.approx(X_TRUE[i])


def test_elimination_does_not_mutate_input():
    system = _augmented_system()
    snapshot = [row.copy() for row in system]
    forward_eliminate(system)
    gauss_jordan(system)
    assert system == snapshot


def test_zero_pivot_raises():
    with pytest.raises(ZeroDivisionError):
        forward_eliminate([[0, 1, 1], [1, 0, 1]])
    with pytest.raises(ZeroDivisionError):
        gauss_jordan([[1, 1, 2], [1, 1, 2]])


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        solve_gauss([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        back_substitute([])


def test_gauss_seidel_matches_direct_solution():
    system = [
        [4, -1, 0, 0, 15],
        [-1, 4, -1, 0, 10],
        [0, -1, 4, -1, 10],
        [0, 0, -1, 3, 10],
    ]
    assert gauss_seidel(system, 1000, 1e-10) == pytest.approx(solve_gauss(system), abs=1e-8)


def test_gauss_seidel_round_trip():
    assert gauss_seidel(_augmented_system(), 1000, 1e-12) == pytest.approx(X_TRUE, abs=1e-9)


def test_gauss_seidel_without_iterations_returns_start():
    assert gauss_seidel(_augmented_system(), 0, 1e-6) == [0.0, 0.0, 0.0, 0.0]


def test_matmul_sample():
    result = matmul([[1, 2, 3], [4, 5, 6]], [[7, 8], [9, 10], [11, 12]])
    assert result == [[58, 64], [139, 154]]


def test_matmul_identity():
    identity = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
    assert matmul(A, identity) == A
    assert matmul(identity, A) == A


def test_matmul_dimension_mismatch():
    with pytest.raises(ValueError):
        matmul([[1, 2]], [[1, 2]])


def test_format_matrix():
    assert format_matrix([[1, 2.5]]) == "         1        2.5 \n"


def test_format_matrix_row_count():
    text = format_matrix(_augmented_system())
    lines = text.splitlines()
    assert len(lines) == 4
    assert all(len(line) == 5 * 11 for line in lines)