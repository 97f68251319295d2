from __future__ import annotations

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from matplotlib import pyplot as plt

from plotting import plot_envelope
from Polytope import find_vertices_naive


def test_plot_two_state_envelope() -> None:
    H = [(3.0, 1.0), (1.0, 2.0)]
    vertices = find_vertices_naive([H[0]], [H[1]])
    ax = plot_envelope(H, vertices, title="test")
    # one dashed line per plane plus the envelope
    assert len(ax.get_lines()) == 3
    assert ax.get_title() == "test"
    envelope = ax.get_lines()[-1].get_ydata()
    assert envelope.min() == pytest.approx(5.0 / 3.0, abs=1e-2)
    plt.close(ax.figure)


def test_plot_on_given_axes() -> None:
    fig, ax = plt.subplots()
    out = plot_envelope(np.array([[1.0, 0.0], [0.0, 1.0]]), ax=ax)
    assert out is ax
    plt.close(fig)


def test_plot_rejects_other_dimensions() -> None:
    with pytest.raises(ValueError):
        plot_envelope([(1.0, 2.0, 3.0)])
    with pytest.raises(ValueError):
        plot_envelope([])
