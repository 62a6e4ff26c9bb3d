"""Tests for linalgtools.elimination module."""
import random
from fractions import Fraction as F

import pytest

from linalgtools.elimination.window import RowWindow, first_nonzero_column, ref_pass
from linalgtools.elimination.echelon import ref_, rref_, ref, rref, row_reduce, exact_rank
from linalgtools.elimination.checks import (
    leading_columns,
    is_row_echelon,
    is_reduced_row_echelon,
)


def _sample():
    return [[F(i + j, j) for j in range(1, 5)] for i in range(1, 4)]


SAMPLE_REF = [[2, F(3, 2), F(4, 3), F(5, 4)], [0, F(-1, 4), F(-1, 3), F(-3, 8)], [0, 0, 0, 0]]
SAMPLE_RREF = [[1, 0, F(-1, 3), F(-1, 2)], [0, 1, F(4, 3), F(3, 2)], [0, 0, 0, 0]]


def _random_matrix(rng, n_rows, n_cols):
    # Small entries with plenty of zeros so rank deficiency shows up
    return [[F(rng.choice([0, 0, 1, -1, 2, 3, -5])) for _ in range(n_cols)] for _ in range(n_rows)]


# --- row windows / pivot pass ---

def test_window_indices_are_offset():
    A = _sample()
    w = RowWindow(A, 1)
    assert w.n_rows == 2
    assert w.n_cols == 4
    assert w.get(0, 0) == 3
    w.swap(0, 1)
    assert A[1][0] == 4
    assert A[2][0] == 3
    assert A[0] == _sample()[0]


def test_first_nonzero_column_skips_zero_columns():
    A = [[0, 0, 5], [0, 1, 0]]
    assert first_nonzero_column(RowWindow(A)) == 1
    assert first_nonzero_column(RowWindow(A, 1)) == 1
    assert first_nonzero_column(RowWindow([[0, 0], [0, 0]])) is None


def test_ref_pass_swaps_and_clears():
    A = [[F(0), F(0), F(1)], [F(0), F(2), F(1)], [F(0), F(4), F(3)]]
    col = ref_pass(RowWindow(A))
    assert col == 1
    assert A == [[0, 2, 1], [0, 0, 1], [0, 0, 1]]


def test_ref_pass_only_touches_window_rows():
    A = [[F(7), F(7)], [F(1), F(2)], [F(3), F(4)]]
    col = ref_pass(RowWindow(A, 1))
    assert col == 0
    assert A == [[7, 7], [1, 2], [0, -2]]


def test_ref_pass_all_zero_returns_none_and_keeps_matrix():
    A = [[F(0)] * 3 for _ in range(2)]
    assert ref_pass(RowWindow(A)) is None
    assert A == [[0, 0, 0], [0, 0, 0]]


# --- ref / rref in place ---

def test_ref_rational_example():
    A = _sample()
    pivots = ref_(A)
    assert pivots == [(0, 0), (1, 1)]
    assert A == SAMPLE_REF


def test_rref_rational_example():
    A = _sample()
    pivots = rref_(A)
    assert pivots == [(0, 0), (1, 1)]
    assert A == SAMPLE_RREF


def test_ref_float_example():
    A = [[float((i + j) % 3) for j in range(1, 7)] for i in range(1, 5)]
    pivots = ref_(A)
    assert pivots == [(0, 0), (1, 1), (2, 2)]
    assert A[2] == [0.0, 0.0, -4.5, 0.0, 0.0, -4.5]
    assert A[3] == [0.0] * 6


def test_rref_float_example():
    A = [[float((i + j) % 3) for j in range(1, 7)] for i in range(1, 5)]
    pivots = rref_(A)
    assert pivots == [(0, 0), (1, 1), (2, 2)]
    expected = [
        [1, 0, 0, 1, 0, 0],
        [0, 1, 0, 0, 1, 0],
        [0, 0, 1, 0, 0, 1],
        [0, 0, 0, 0, 0, 0],
    ]
    for row, exp in zip(A, expected):
        assert row == pytest.approx(exp)


def test_pivot_not_in_first_row_is_swapped_up():
    A = [[F(0), F(1)], [F(2), F(3)]]
    assert rref_(A) == [(0, 0), (1, 1)]
    assert A == [[1, 0], [0, 1]]


def test_pivot_columns_skip_dependent_columns():
    A = [[F(1), F(2), F(0), F(1)], [F(2), F(4), F(1), F(3)], [F(3), F(6), F(1), F(4)]]
    pivots = rref_(A)
    assert pivots == [(0, 0), (1, 2)]
    assert A == [[1, 2, 0, 1], [0, 0, 1, 1], [0, 0, 0, 0]]


@pytest.mark.parametrize("shape", [(1, 1), (2, 3), (3, 1), (4, 4), (3, 5)])
def test_all_zero_matrix(shape):
    n_rows, n_cols = shape
    A = [[F(0)] * n_cols for _ in range(n_rows)]
    assert ref_(A) == []
    assert rref_(A) == []
    assert A == [[0] * n_cols for _ in range(n_rows)]


@pytest.mark.parametrize("A", [[], [[], []], [[]]])
def test_degenerate_matrix(A):
    before = [list(row) for row in A]
    assert ref_(A) == []
    assert rref_(A) == []
    assert A == before


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        ref_([[1, 2], [3]])


def test_integer_input_divides_to_floats():
    A = [[2, 1], [4, 3]]
    rref_(A)
    assert A == [[1, 0], [0, 1]]


# --- copying variants ---

def test_ref_and_rref_leave_input_alone():
    A = _sample()
    assert ref(A) == SAMPLE_REF
    assert rref(A) == SAMPLE_RREF
    assert A == _sample()


def test_copy_variants_do_not_alias():
    A = _sample()
    R = rref(A)
    R[0][0] = F(42)
    R[2].append(F(1))
    assert A == _sample()


def test_copy_of_degenerate_matrix_is_new_object():
    A = []
    R = rref(A)
    assert R == [] and R is not A
    B = [[], []]
    R = ref(B)
    assert R == [[], []]
    assert R is not B and R[0] is not B[0]


def test_row_reduce_returns_matrix_and_pivots():
    A = _sample()
    R, pivots = row_reduce(A)
    assert R == SAMPLE_RREF
    assert pivots == [(0, 0), (1, 1)]
    assert A == _sample()


def test_exact_rank():
    assert exact_rank(_sample()) == 2
    assert exact_rank([[F(1), F(0)], [F(0), F(1)]]) == 2
    assert exact_rank([[F(0), F(0)]]) == 0
    assert exact_rank([]) == 0


# --- properties ---

def test_rref_idempotent():
    rng = random.Random(11)
    for _ in range(40):
        A = _random_matrix(rng, rng.randint(1, 5), rng.randint(1, 5))
        R, pivots = row_reduce(A)
        R2, pivots2 = row_reduce(R)
        assert R2 == R
        assert pivots2 == pivots


def test_pivots_strictly_increasing_and_in_bounds():
    rng = random.Random(3)
    for _ in range(40):
        n_rows, n_cols = rng.randint(1, 6), rng.randint(1, 6)
        A = _random_matrix(rng, n_rows, n_cols)
        pivots = ref_(A)
        assert len(pivots) <= min(n_rows, n_cols)
        for (r0, c0), (r1, c1) in zip(pivots, pivots[1:]):
            assert r0 < r1
            assert c0 < c1
        for r, c in pivots:
            assert 0 <= r < n_rows and 0 <= c < n_cols


def test_ref_and_rref_satisfy_their_forms():
    rng = random.Random(5)
    for _ in range(40):
        A = _random_matrix(rng, rng.randint(1, 5), rng.randint(1, 6))
        E = ref(A)
        assert is_row_echelon(E)
        R, pivots = row_reduce(A)
        assert is_reduced_row_echelon(R)
        assert [(r, c) for r, c in enumerate(leading_columns(R)) if c is not None] == pivots


def test_ref_and_rref_pivots_agree():
    rng = random.Random(8)
    for _ in range(20):
        A = _random_matrix(rng, 4, 4)
        assert ref_([list(r) for r in A]) == rref_([list(r) for r in A])


# --- checks ---

def test_is_row_echelon():
    assert is_row_echelon(SAMPLE_REF)
    assert is_row_echelon([])
    assert not is_row_echelon([[0, 1], [1, 0]])
    assert not is_row_echelon([[0, 0], [0, 1]])
    assert not is_row_echelon([[1, 1], [0, 0], [0, 1]])


def test_is_reduced_row_echelon():
    assert is_reduced_row_echelon(SAMPLE_RREF)
    assert not is_reduced_row_echelon(SAMPLE_REF)
    assert not is_reduced_row_echelon([[1, 1], [0, 1]])
    assert is_reduced_row_echelon([[0, 0]])
