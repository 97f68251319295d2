import numpy as np
from matplotlib import pyplot as plt

from linear_support import linear_support
from plotting import plot_envelope
from Polytope import find_vertices_naive, compute_optimistic_value


# define a toy problem: the hidden alpha-vectors of a two-state value function
def hidden_hyperplanes():
    return np.array([
        [3.0, 1.0],
        [1.0, 2.0],
        [2.0, 2.0],
        [2.6, 1.7],
        [0.0, 0.0],
    ])


def make_oracle(H):
    # returns the best hyperplane at a belief, as an exact solver would
    def oracle(point):
        return H[int(np.argmax(H @ point))]
    return oracle


def main():
    H = hidden_hyperplanes()
    result = linear_support(make_oracle(H), n_states=2, eps=1e-9, verbose=True)

    print("Hyperplanes found:")
    for h in result.hyperplanes:
        print(f"  {h}")
    print("Envelope vertices:")
    for p, v in sorted(result.vertices, key=lambda pv: pv[0][0]):
        print(f"  b={np.round(p, 4)}  V={v:.4f}")

    # vertices of one plane against the rest, and the optimistic bound from the queries
    print("Vertices of", H[0], "against", H[1], ":", find_vertices_naive([H[0]], [H[1]]))
    print("Optimistic value at (0.5, 0.5):",
          compute_optimistic_value([0.5, 0.5], result.known))

    plot_envelope(result.hyperplanes, result.vertices, title="Envelope via linear support")
    plt.show()


if __name__ == "__main__":
    main()
