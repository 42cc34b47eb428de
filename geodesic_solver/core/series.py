"""
Clenshaw summation of truncated sine series.

Every series in the solver has the form

    S(x) = sum(c[i-1] * sin(2*i*x), i = 1..n)

and is evaluated from sin(x) and cos(x) alone, with no further calls to
trigonometric functions.
"""
from typing import Sequence


def sin_series(sinx: float, cosx: float, c: Sequence[float]) -> float:
    """
    Evaluate a sine series in the even harmonics of x.

    Args:
        sinx: sin(x)
        cosx: cos(x)
        c: Coefficients c[0..n-1] of sin(2x), sin(4x), ..., sin(2nx); n >= 1

    Returns:
        sum(c[i-1] * sin(2*i*x), i = 1..n)

    Example:
        >>> import math
        >>> x = 0.3
        >>> round(sin_series(math.sin(x), math.cos(x), [1.0]), 12)  # sin(0.6)
        0.564642473395
    """
    n = len(c)
    ar = 2 * (cosx - sinx) * (cosx + sinx)  # 2 * cos(2x)
    y0, y1 = c[n - 1], 0.0
    for j in range(n - 2, -1, -1):
        y0, y1 = ar * y0 - y1 + c[j], y0
    return 2 * sinx * cosx * y0  # sin(2x) * y0
