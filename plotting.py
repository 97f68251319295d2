import numpy as np
import matplotlib.pyplot as plt

from Polytope import as_planes


def plot_envelope(hyperplanes, vertices=None, ax=None, title="Upper envelope", show=False):
    """
    Plot a two-state envelope against the belief b(s0), with b(s1) = 1 - b(s0).

    Args:
        hyperplanes: sequence of hyperplanes of length 2.
        vertices: optional (point, value) pairs to mark on the plot.
        ax: axes to draw on; a new figure is created if None.
        title: plot title.
        show: call plt.show() when done.

    Returns:
        the matplotlib axes.
    """
    H = as_planes(hyperplanes)
    if H.shape[0] == 0 or H.shape[1] != 2:
        raise ValueError(f"Can only plot a non-empty two-state envelope, got shape {H.shape}")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4.5))

    x = np.linspace(0.0, 1.0, 201)
    beliefs = np.column_stack([x, 1.0 - x])
    values = beliefs @ H.T  # shape (201, n)

    for i in range(H.shape[0]):
        ax.plot(x, values[:, i], '--', lw=1, alpha=0.6, label=f"h{i} = ({H[i, 0]:.2f}, {H[i, 1]:.2f})")
    ax.plot(x, values.max(axis=1), '-', color='k', lw=2.5, label='envelope')

    if vertices:
        pts = np.array([[p[0], v] for p, v in vertices], dtype=float)
        ax.scatter(pts[:, 0], pts[:, 1], c='r', marker='o', zorder=3, label='vertices')

    ax.set_xlabel('b(s0)')
    ax.set_ylabel('Value')
    ax.set_xlim(0.0, 1.0)
    ax.set_title(title)
    ax.grid(True)
    ax.legend()

    if show:
        plt.show()
    return ax
