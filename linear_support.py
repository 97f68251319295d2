from collections import namedtuple

import numpy as np

from Polytope import (find_vertices_naive, compute_optimistic_value, envelope_value,
                      unique_vertices, envelope_vertices)

LinearSupportResult = namedtuple('LinearSupportResult',
                                 ['hyperplanes', 'vertices', 'known', 'iterations'])


def _improves(h, point, hyperplanes, eps):
    if not hyperplanes:
        return True
    return float(np.dot(h, point)) > envelope_value(point, hyperplanes) + eps


def linear_support(oracle, n_states, eps=1e-6, max_iter=100, verbose=False):
    """
    Optimistic linear support: builds the upper envelope of an unknown set of
    hyperplanes by querying `oracle` at envelope vertices.

    `oracle(point)` must return the best hyperplane (array of length
    n_states) at a simplex point; its value there is taken as the exact
    envelope value. Each query is expensive, so the next point is the current
    vertex with the largest gap between its optimistic value (LP over the
    points already queried) and its current value.

    Args:
        oracle: callable point -> hyperplane.
        n_states: dimension S of the simplex.
        eps: stop once no vertex can improve by more than eps.
        max_iter: maximum number of oracle queries after the simplex corners.
        verbose: print progress.

    Returns:
        LinearSupportResult with the hyperplanes found, the current envelope
        vertices, the (point, value) pairs queried and the number of
        iterations run.
    """
    if n_states < 1:
        raise ValueError(f"Need at least one state, got {n_states}")

    hyperplanes = []
    known = []
    candidates = []

    def evaluate(point):
        h = np.asarray(oracle(point), dtype=float)
        if h.shape != (n_states,):
            raise ValueError(f"Oracle returned a hyperplane of shape {h.shape}, expected ({n_states},)")
        known.append((point, float(np.dot(h, point))))
        if _improves(h, point, hyperplanes, eps):
            # corners are queried first, so they never need to be found again
            candidates.extend(find_vertices_naive([h], hyperplanes, include_corners=False))
            hyperplanes.append(h)
            return True
        return False

    # 1) corners of the simplex
    for corner in np.eye(n_states):
        evaluate(corner)

    # 2) refine at the vertex with the largest optimistic gap
    it = 0
    while it < max_iter:
        candidates = unique_vertices(envelope_vertices(candidates, hyperplanes))
        if not candidates:
            break

        gaps = [compute_optimistic_value(p, known) - envelope_value(p, hyperplanes)
                for p, _ in candidates]
        best = int(np.argmax(gaps))
        if gaps[best] <= eps:
            break

        it += 1
        point = candidates[best][0]
        added = evaluate(point)
        if verbose:
            print(f"[OLS] Iteration {it}: point={np.round(point, 4)}, gap={gaps[best]:.3e}, "
                  f"{'new hyperplane' if added else 'no improvement'}, |H|={len(hyperplanes)}")

    if verbose:
        print(f"[OLS] Done after {it} iterations: {len(hyperplanes)} hyperplanes, "
              f"{len(candidates)} vertices")

    return LinearSupportResult(hyperplanes, candidates, known, it)
