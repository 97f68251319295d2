import numpy as np
from cdd import polyhedron_from_matrix, RepType, matrix_from_array, copy_generators

from Polytope import as_planes

ZERO_TOL = 1e-12


def envelope_hrep(hyperplanes):
    """
    H-representation of the epigraph of the upper envelope over the simplex,
    in cdd's format: each row [c, a] stands for c + a . x >= 0 with x = (b, v).

      - v - h . b >= 0     for every hyperplane h
      - b_i >= 0
      - sum(b) = 1         (as two inequalities)
    """
    H = as_planes(hyperplanes)
    n, S = H.shape
    rows = []

    for h in H:
        rows.append(np.hstack([0.0, -h, 1.0]))

    for i in range(S):
        row = np.zeros(S + 2)
        row[i + 1] = 1.0
        rows.append(row)

    ones = np.ones(S)
    rows.append(np.hstack([1.0, -ones, 0.0]))   # 1 - sum(b) >= 0
    rows.append(np.hstack([-1.0, ones, 0.0]))   # sum(b) - 1 >= 0

    return np.array(rows, dtype=float)


def find_vertices_exact(hyperplanes):
    """
    Exact vertices of the upper envelope of all `hyperplanes` over the simplex,
    through the double description method (pycddlib).

    Unlike find_vertices_naive, every returned value is the true envelope value
    at its point and each vertex appears once. The cost grows quickly with the
    number of planes, so this is meant for small sets and for checking.

    Returns:
        list of (point, value) pairs.
    """
    hyperplanes = list(hyperplanes)
    if len(hyperplanes) == 0:
        return []
    S = np.asarray(hyperplanes[0], dtype=float).shape[0]

    mat = matrix_from_array(envelope_hrep(hyperplanes))
    mat.rep_type = RepType.INEQUALITY
    poly = polyhedron_from_matrix(mat)
    gens = copy_generators(poly)

    vertices = []
    for g in gens.array:
        if g[0] == 1:  # 1 for a vertex, 0 for a ray
            x = np.array(g[1:], dtype=float)
            x[np.abs(x) < ZERO_TOL] = 0.0  # numerical cleanup
            vertices.append((x[:S], float(x[S])))
    return vertices
