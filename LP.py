from collections import namedtuple
from enum import Enum

import numpy as np
from scipy.optimize import linprog


class Constraint(Enum):
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="
    EQUAL = "="


class LPStatus(Enum):
    OPTIMAL = 0
    INFEASIBLE = 2
    UNBOUNDED = 3
    FAILED = -1


class LPResult(namedtuple('LPResult', ['status', 'x', 'value'])):
    """Outcome of LP.solve(). x and value are None unless status is OPTIMAL."""
    __slots__ = ()

    @property
    def success(self):
        return self.status is LPStatus.OPTIMAL


class LPError(RuntimeError):
    def __init__(self, message, result: LPResult):
        super().__init__(message)
        self.result = result


# linprog status codes -> LPStatus (1 = iteration limit, 4 = numerical trouble)
_STATUS = {
    0: LPStatus.OPTIMAL,
    2: LPStatus.INFEASIBLE,
    3: LPStatus.UNBOUNDED,
}


class LP:
    """
    Small LP builder on top of scipy's linprog (HiGHS).

    Variables default to the bounds [0, +inf), as in most LP libraries; use
    set_unbounded() to free them. Rows are accumulated with push_row() and the
    whole program is handed to linprog by solve().
    """
    def __init__(self, n_vars: int):
        if n_vars < 1:
            raise ValueError(f"An LP needs at least one variable, got {n_vars}")
        self.n_vars = n_vars
        self.objective = np.zeros(n_vars, dtype=float)
        self.maximize = False
        self.bounds = [(0.0, None)] * n_vars
        self.A_ub, self.b_ub = [], []
        self.A_eq, self.b_eq = [], []

    @property
    def n_rows(self):
        return len(self.b_ub) + len(self.b_eq)

    def _row(self, row):
        row = np.asarray(row, dtype=float)
        if row.shape != (self.n_vars,):
            raise ValueError(f"Expected a row of {self.n_vars} coefficients, got shape {row.shape}")
        return row

    def set_objective(self, row, maximize: bool = True):
        self.objective = self._row(row)
        self.maximize = maximize

    def set_bounds(self, i: int, lo=0.0, hi=None):
        if not 0 <= i < self.n_vars:
            raise IndexError(f"Variable {i} out of range for {self.n_vars} variables")
        self.bounds[i] = (lo, hi)

    def set_unbounded(self, i: int):
        self.set_bounds(i, None, None)

    def push_row(self, row, constraint: Constraint, rhs: float):
        row = self._row(row)
        if constraint is Constraint.LESS_EQUAL:
            self.A_ub.append(row)
            self.b_ub.append(float(rhs))
        elif constraint is Constraint.GREATER_EQUAL:
            # linprog only takes <= rows
            self.A_ub.append(-row)
            self.b_ub.append(-float(rhs))
        elif constraint is Constraint.EQUAL:
            self.A_eq.append(row)
            self.b_eq.append(float(rhs))
        else:
            raise ValueError(f"Unknown constraint type {constraint}")

    def solve(self) -> LPResult:
        c = -self.objective if self.maximize else self.objective
        A_ub = np.vstack(self.A_ub) if self.A_ub else None
        b_ub = np.array(self.b_ub, dtype=float) if self.b_ub else None
        A_eq = np.vstack(self.A_eq) if self.A_eq else None
        b_eq = np.array(self.b_eq, dtype=float) if self.b_eq else None

        res = linprog(c, A_ub=A_ub, b_ub=b_ub, A_eq=A_eq, b_eq=b_eq,
                      bounds=self.bounds, method="highs")

        status = _STATUS.get(res.status, LPStatus.FAILED)
        if status is not LPStatus.OPTIMAL:
            return LPResult(status, None, None)

        value = float(-res.fun) if self.maximize else float(res.fun)
        return LPResult(status, np.asarray(res.x, dtype=float), value)
