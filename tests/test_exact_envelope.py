from __future__ import annotations

import numpy as np
import pytest

pytest.importorskip("cdd")

from exact_envelope import find_vertices_exact, envelope_hrep
from Polytope import find_vertices_naive, envelope_value

H3 = np.array([
    [3.0, 0.0, 1.0],
    [0.0, 2.0, 1.0],
    [1.0, 1.0, 2.5],
    [1.5, 1.5, 0.5],
])


def test_hrep_layout() -> None:
    rows = envelope_hrep([(3.0, 1.0), (1.0, 2.0)])
    # 2 planes + 2 nonnegativity rows + 2 rows for the simplex sum
    assert rows.shape == (6, 4)
    assert rows[0] == pytest.approx([0.0, -3.0, -1.0, 1.0])


def test_two_state_exact_vertices() -> None:
    vertices = sorted(find_vertices_exact([(3.0, 1.0), (1.0, 2.0)]), key=lambda pv: pv[0][0])
    assert len(vertices) == 3
    assert vertices[0][0] == pytest.approx([0.0, 1.0])
    assert vertices[0][1] == pytest.approx(2.0)
    assert vertices[1][0] == pytest.approx([1.0 / 3.0, 2.0 / 3.0])
    assert vertices[1][1] == pytest.approx(5.0 / 3.0)
    assert vertices[2][0] == pytest.approx([1.0, 0.0])
    assert vertices[2][1] == pytest.approx(3.0)


def test_exact_values_are_envelope_values() -> None:
    for p, v in find_vertices_exact(H3):
        assert p.sum() == pytest.approx(1.0)
        assert v == pytest.approx(envelope_value(p, H3))


def test_naive_finds_every_exact_vertex() -> None:
    naive = []
    for i in range(len(H3)):
        others = np.delete(H3, i, axis=0)
        naive += find_vertices_naive([H3[i]], others)

    exact = find_vertices_exact(H3)
    assert exact
    for p, v in exact:
        matches = [nv for np_, nv in naive if np.allclose(np_, p, atol=1e-7)]
        assert matches, f"vertex {p} not found"
        assert max(matches) == pytest.approx(v)


def test_empty_input() -> None:
    assert find_vertices_exact([]) == []
