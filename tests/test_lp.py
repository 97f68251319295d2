from __future__ import annotations

import numpy as np
import pytest

from LP import LP, Constraint, LPStatus


def test_maximize_textbook() -> None:
    # max 3x + 2y  s.t. x + y <= 4, x + 3y <= 6, x, y >= 0  -> (4, 0), 12
    lp = LP(2)
    lp.set_objective([3.0, 2.0], maximize=True)
    lp.push_row([1.0, 1.0], Constraint.LESS_EQUAL, 4.0)
    lp.push_row([1.0, 3.0], Constraint.LESS_EQUAL, 6.0)
    res = lp.solve()
    assert res.success
    assert res.status is LPStatus.OPTIMAL
    assert res.value == pytest.approx(12.0)
    assert res.x == pytest.approx([4.0, 0.0])
    assert lp.n_rows == 2


def test_minimize_with_equality_and_greater_equal() -> None:
    # min x + y  s.t. x + y = 2, x >= 0.5
    lp = LP(2)
    lp.set_objective([1.0, 1.0], maximize=False)
    lp.push_row([1.0, 1.0], Constraint.EQUAL, 2.0)
    lp.push_row([1.0, 0.0], Constraint.GREATER_EQUAL, 0.5)
    res = lp.solve()
    assert res.success
    assert res.value == pytest.approx(2.0)
    assert res.x[0] >= 0.5 - 1e-9


def test_unbounded_variable_goes_negative() -> None:
    # min x  s.t. x >= -3, only reachable once x is freed
    lp = LP(1)
    lp.set_objective([1.0], maximize=False)
    lp.push_row([1.0], Constraint.GREATER_EQUAL, -3.0)
    assert lp.solve().value == pytest.approx(0.0)

    lp.set_unbounded(0)
    assert lp.solve().value == pytest.approx(-3.0)


def test_infeasible_is_reported() -> None:
    lp = LP(1)
    lp.set_objective([1.0])
    lp.push_row([1.0], Constraint.EQUAL, -1.0)  # x >= 0 by default
    res = lp.solve()
    assert not res.success
    assert res.status is not LPStatus.OPTIMAL
    assert res.x is None and res.value is None


def test_bad_rows_and_indices() -> None:
    lp = LP(2)
    with pytest.raises(ValueError):
        lp.push_row([1.0, 2.0, 3.0], Constraint.LESS_EQUAL, 1.0)
    with pytest.raises(IndexError):
        lp.set_unbounded(2)
    with pytest.raises(ValueError):
        LP(0)
    lp.set_bounds(1, -1.0, 1.0)
    assert lp.bounds[1] == (-1.0, 1.0)
    assert np.all(lp.objective == 0.0)
