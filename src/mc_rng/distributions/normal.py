"""
Closed-form approximations of the standard normal CDF and its inverse.

Both functions accept scalars or numpy arrays; scalar input gives a float.
"""

import numpy as np

# Abramowitz & Stegun 26.2.17
AS_P = 0.2316419
AS_B = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)
INV_SQRT_2PI = 0.3989422804014327

# Beasley & Springer (1977) central region
BS_A = (2.50662823884, -18.61500062529, 41.39119773534, -25.44106049637)
BS_B = (-8.47351093090, 23.08336743743, -21.06224101826, 3.13082909833)
# Moro (1995) tail refinement
MORO_C = (
    0.3374754822726147,
    0.9761690190917186,
    0.1607979714918209,
    0.0276438810333863,
    0.0038405729373609,
    0.0003951896511919,
    0.0000321767881768,
    0.0000002888167364,
    0.0000003960315187,
)
CENTRAL_REGION = 0.42


def _result(x: np.ndarray, like) -> float | np.ndarray:
    return float(x) if np.ndim(like) == 0 else x


def normal_cdf(x: float | np.ndarray) -> float | np.ndarray:
    """
    Standard normal cumulative distribution function.

    Uses the polynomial approximation 26.2.17 of Abramowitz & Stegun, with
    absolute error below 7.5e-8.

    Parameters
    ----------
    x : float or np.ndarray
        Evaluation point(s)

    Returns
    -------
    float or np.ndarray
        P(Z <= x)
    """
    z = np.asarray(x, dtype=np.float64)
    t = 1.0 / (1.0 + AS_P * np.abs(z))
    b1, b2, b3, b4, b5 = AS_B
    poly = ((((b5 * t + b4) * t + b3) * t + b2) * t + b1) * t
    tail = INV_SQRT_2PI * np.exp(-0.5 * z * z) * poly
    return _result(np.where(z > 0.0, 1.0 - tail, tail), x)


def inverse_normal_cdf(p: float | np.ndarray) -> float | np.ndarray:
    """
    Inverse of the standard normal CDF (Beasley-Springer-Moro).

    A rational approximation is used for ``|p - 0.5| < 0.42`` and Moro's
    Chebyshev polynomial in ``log(-log(p))`` in the tails. No iteration.

    Parameters
    ----------
    p : float or np.ndarray
        Probabilities strictly inside (0, 1)

    Returns
    -------
    float or np.ndarray
        Quantiles of N(0, 1)

    Raises
    ------
    ValueError
        If any probability lies outside (0, 1)
    """
    u = np.asarray(p, dtype=np.float64)
    if np.any(u <= 0.0) or np.any(u >= 1.0):
        raise ValueError("probabilities must be in (0, 1)")

    y = u - 0.5
    z = np.zeros_like(u)

    central = np.abs(y) < CENTRAL_REGION
    if np.any(central):
        yc = y[central]
        r = yc * yc
        a1, a2, a3, a4 = BS_A
        b1, b2, b3, b4 = BS_B
        num = yc * (((a4 * r + a3) * r + a2) * r + a1)
        den = (((b4 * r + b3) * r + b2) * r + b1) * r + 1.0
        z[central] = num / den

    tails = ~central
    if np.any(tails):
        yt = y[tails]
        r = np.where(yt > 0.0, 1.0 - u[tails], u[tails])
        w = np.log(-np.log(r))
        q = np.zeros_like(w)
        for c in reversed(MORO_C):
            q = q * w + c
        z[tails] = np.where(yt >= 0.0, q, -q)

    return _result(z, p)
