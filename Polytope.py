import numpy as np

from LP import LP, Constraint, LPError
from SubsetEnumerator import SubsetEnumerator

# Slack allowed when checking that a solved point lies in [0, 1]^S
VERTEX_TOL = 1e-9


# ---------- Helpers ----------
def as_planes(planes, S=None):
    """Stack a sequence of hyperplanes into an (n, S) float array, checking dimensions."""
    planes = [np.asarray(p, dtype=float) for p in planes]
    if not planes:
        return np.zeros((0, S if S is not None else 0))
    if S is None:
        S = planes[0].shape[0]
    for p in planes:
        if p.shape != (S,):
            raise ValueError(f"Hyperplane of shape {p.shape} does not match dimension {S}")
    return np.vstack(planes)


def solve_linear_system(A, b):
    """
    Least-squares solve of A x = b. Singular or near-singular systems do not
    raise; the caller is expected to filter the result.
    """
    x, *_ = np.linalg.lstsq(A, b, rcond=None)
    return x


# ---------- Vertex enumeration ----------
def find_vertices_naive(new, old, include_corners=True, tol=VERTEX_TOL):
    """
    Naive vertex enumeration for the upper envelope of a set of hyperplanes
    over the probability simplex.

    Each hyperplane of `new` is intersected with every combination of S-1
    elements taken from `old` plus the S simplex boundaries (coordinate i = 0).
    Every combination gives a square system

        h . b - v = 0                      (the new hyperplane)
        a_j . b - v = 0  or  b_i = 0       (one row per chosen element)
        sum(b) = 1

    whose solution (b, v) is kept if b lies inside the simplex. No LP is
    needed, only a dense solve per combination.

    Vertices are not deduplicated: a point where more than S planes meet is
    returned once per combination producing it. The value of a vertex is only
    valid for the planes it was computed from, and may not be the envelope
    value once every plane is taken into account.

    Args:
        new: hyperplanes to find vertices for.
        old: the other hyperplanes. If empty, nothing is returned.
        include_corners: also solve the combinations made only of simplex
            boundaries, giving the S simplex corners evaluated on each new
            hyperplane. When False the search stops for a hyperplane as soon
            as only such combinations remain, since callers usually know the
            corners already.
        tol: slack on the [0, 1] check; accepted points are clipped into it.

    Returns:
        list of (point, value) pairs.
    """
    vertices = []
    old = list(old)
    new = list(new)
    if len(old) == 0 or len(new) == 0:
        return vertices

    old = as_planes(old)
    S = old.shape[1]
    new = as_planes(new, S)
    n_old = old.shape[0]

    # Combinations of S-1 elements among the old planes and the S boundaries.
    enumerator = SubsetEnumerator(S - 1, n_old + S)

    # Rows: 0 is the new plane, 1..S-1 the chosen elements, S the simplex sum.
    A = np.zeros((S + 1, S + 1))
    A[0, S] = -1.0
    A[S, :S] = 1.0
    b = np.zeros(S + 1)
    b[S] = 1.0

    for h in new:
        A[0, :S] = h
        enumerator.reset()

        last = 0
        while enumerator.is_valid():
            # Rows before `last` still hold the same elements as in the
            # previous combination, so only the tail is rewritten.
            for i in range(last, len(enumerator)):
                index = enumerator[i]
                row = A[i + 1]
                if index < n_old:
                    row[:S] = old[index]
                    row[S] = -1.0
                else:
                    # boundary: fix coordinate (index - n_old) to zero
                    row[:] = 0.0
                    row[index - n_old] = 1.0

            result = solve_linear_system(A, b)
            point = result[:S]

            if np.all(point >= -tol) and np.all(point <= 1.0 + tol):
                vertices.append((np.clip(point, 0.0, 1.0), float(result[S])))

            last = enumerator.advance()

            # Lexicographic order: once the first element is a boundary, all
            # remaining combinations only contain boundaries (simplex corners).
            if not include_corners and enumerator.is_valid() and len(enumerator) > 0 \
                    and enumerator[0] >= n_old:
                break

    return vertices


# ---------- Optimistic value ----------
def optimistic_value_lp(point, vertices):
    """
    Builds and solves the optimistic value LP at `point`:

        maximize    point . h
        subject to  v . h <= value      for every known (v, value)
                    h free

    i.e. the highest hyperplane that stays below every known vertex value.

    Returns the LPResult, whatever its status. With no known vertices there
    is no LP to solve and None is returned.
    """
    p = np.asarray(point, dtype=float)
    vertices = list(vertices)
    if len(vertices) == 0:
        return None
    S = p.shape[0]

    lp = LP(S)
    lp.set_objective(p, maximize=True)
    # The optimistic hyperplane may need to go negative at some states.
    for s in range(S):
        lp.set_unbounded(s)
    for v, value in vertices:
        lp.push_row(v, Constraint.LESS_EQUAL, value)

    return lp.solve()


def compute_optimistic_value(point, vertices):
    """
    Best value `point` can have given the known (vertex, value) pairs around it.

    Used to rank candidate points when the exact value of a point is expensive
    to obtain. With no known vertices this returns 0.0, which is not a
    meaningful bound.

    Raises:
        LPError: the LP was infeasible, unbounded or could not be solved.
    """
    result = optimistic_value_lp(point, vertices)
    if result is None:
        return 0.0
    if not result.success:
        raise LPError(f"Optimistic value LP failed: {result.status.name}", result)
    return result.value


# ---------- Caller-side pruning ----------
def envelope_value(point, hyperplanes):
    """Value of the upper envelope of `hyperplanes` at `point`."""
    H = as_planes(hyperplanes)
    if H.shape[0] == 0:
        raise ValueError("Envelope of an empty set of hyperplanes")
    return float(np.max(H @ np.asarray(point, dtype=float)))


def unique_vertices(vertices, decimals=9):
    """Drops vertices whose (rounded) point was already seen, keeping order."""
    seen = set()
    out = []
    for point, value in vertices:
        key = tuple(np.round(point, decimals) + 0.0)  # + 0.0 folds -0.0 into 0.0
        if key in seen:
            continue
        seen.add(key)
        out.append((point, value))
    return out


def envelope_vertices(vertices, hyperplanes, tol=1e-7):
    """Keeps the vertices whose value is the envelope value at their point."""
    H = as_planes(hyperplanes)
    return [(point, value) for point, value in vertices
            if value >= np.max(H @ point) - tol]
