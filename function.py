"""The plotted function y = cos²(x) / (x² + 1).

Works element-wise on numpy arrays as well as on plain floats.
"""

import numpy as np


def f(x):
    """Evaluate cos²(x) / (x² + 1).

    Total on the reals: the denominator is always >= 1. Returns a float
    for a scalar argument and an array of the same shape for an array.
    """
    y = np.cos(x) ** 2 / (x * x + 1)
    if np.ndim(y) == 0:
        return float(y)
    return y
