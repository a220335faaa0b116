"""
Transforms from uniform variates to other distributions.

Samplers take a ``source``: any zero-argument callable returning a uniform
variate on (0, 1), such as a :class:`mc_rng.driver.RandomStream`. They never
care which generator sits behind it.

Rejection-based samplers loop until they accept a candidate. Each one takes
a ``max_retries`` ceiling (number of candidates drawn) and raises
:class:`RetryLimitExceededError` once it is reached; ``None`` restores the
unbounded loop.
"""

import logging
import math
from collections.abc import Callable, Iterable

import numpy as np

from mc_rng.distributions.normal import inverse_normal_cdf
from mc_rng.errors import ParameterValidationError, RetryLimitExceededError

logger = logging.getLogger(__name__)

Source = Callable[[], float]

DEFAULT_MAX_RETRIES = 10_000
CENTRAL_LIMIT_TERMS = 12
NORMAL_METHODS = ("box_muller", "polar", "inverse_cdf", "central_limit")


def affine_transform(x: float, stretch: float, shift: float) -> float:
    """Stretch then shift a sampled value: ``x * stretch + shift``."""
    return x * stretch + shift


def uniform_to_integer(x: float, low: int, high: int) -> int:
    """Map a uniform variate onto an integer in ``[low, high]``."""
    if high < low:
        raise ParameterValidationError(f"empty integer range [{low}, {high}]")
    return int(math.floor(x * (1 + high - low) + low))


def _check_retries(max_retries: int | None) -> None:
    if max_retries is not None and max_retries < 1:
        raise ParameterValidationError(f"max_retries must be positive, got {max_retries}")


def _give_up(sampler: str, attempts: int) -> RetryLimitExceededError:
    logger.debug("%s gave up after %d rejected candidates", sampler, attempts)
    return RetryLimitExceededError(sampler, attempts)


def box_muller_transform(x1: float, x2: float) -> tuple[float, float]:
    """
    Box-Muller transform of two independent uniforms into two independent normals.

    Parameters
    ----------
    x1, x2 : float
        Uniform variates on (0, 1)

    Returns
    -------
    tuple[float, float]
        ``(r cos(theta), r sin(theta))`` with ``r = sqrt(-2 ln x1)`` and
        ``theta = 2 pi x2``
    """
    r = math.sqrt(-2.0 * math.log(x1))
    theta = 2.0 * math.pi * x2
    return r * math.cos(theta), r * math.sin(theta)


def marsaglia_polar_filter(
    source: Source, max_retries: int | None = DEFAULT_MAX_RETRIES
) -> tuple[float, float, float]:
    """
    Draw points uniformly on (-1, 1)^2 until one falls strictly inside the unit circle.

    Returns
    -------
    tuple[float, float, float]
        ``(s, u, v)`` with ``s = u^2 + v^2`` and ``0 < s < 1``
    """
    _check_retries(max_retries)
    attempts = 0
    while True:
        attempts += 1
        u = affine_transform(source(), 2.0, -1.0)
        v = affine_transform(source(), 2.0, -1.0)
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return s, u, v
        if max_retries is not None and attempts >= max_retries:
            raise _give_up("marsaglia_polar_filter", attempts)


def marsaglia_polar_transform(
    source: Source, max_retries: int | None = DEFAULT_MAX_RETRIES
) -> tuple[float, float]:
    """Marsaglia's polar method: two standard normals without trigonometry."""
    s, u, v = marsaglia_polar_filter(source, max_retries)
    q = math.sqrt(-2.0 * math.log(s) / s)
    return u * q, v * q


def central_limit_normal_transform(uniforms: Iterable[float]) -> float:
    """
    Approximate a standard normal by summing rescaled uniforms.

    Each uniform is mapped to ``(2x - 1) * sqrt(3)`` (zero mean, unit
    variance) and the sum is divided by ``sqrt(n)``.
    """
    values = np.fromiter(uniforms, dtype=np.float64)
    if values.size == 0:
        raise ParameterValidationError("central limit transform needs at least one uniform")
    return float(np.sum((2.0 * values - 1.0) * math.sqrt(3.0)) / math.sqrt(values.size))


def generalized_rejection_sample(
    source: Source,
    pdf: Callable[[float], float],
    xmin: float,
    xmax: float,
    pdfmax: float,
    max_retries: int | None = DEFAULT_MAX_RETRIES,
) -> float:
    """
    Sample from an arbitrary density on ``[xmin, xmax]`` by rejection.

    A candidate ``x`` is drawn uniformly on the interval and accepted when a
    second uniform ``y`` on ``[0, pdfmax]`` satisfies ``y <= pdf(x)``.

    Parameters
    ----------
    source : callable
        Uniform source
    pdf : callable
        Density (need not be normalised)
    xmin, xmax : float
        Support of the density
    pdfmax : float
        Upper bound of ``pdf`` on the support. An underestimate distorts the
        sample, a large overestimate makes acceptance rare.
    max_retries : int or None, optional
        Maximum number of candidates to draw

    Returns
    -------
    float
        Accepted sample
    """
    if xmax <= xmin:
        raise ParameterValidationError(f"empty sampling interval [{xmin}, {xmax}]")
    if pdfmax <= 0.0:
        raise ParameterValidationError(f"pdfmax must be positive, got {pdfmax}")
    _check_retries(max_retries)

    attempts = 0
    while True:
        attempts += 1
        x = affine_transform(source(), xmax - xmin, xmin)
        y = affine_transform(source(), pdfmax, 0.0)
        if y <= pdf(x):
            return x
        if max_retries is not None and attempts >= max_retries:
            raise _give_up("generalized_rejection_sample", attempts)


def normal_variates(
    source: Source,
    count: int,
    method: str = "box_muller",
    max_retries: int | None = DEFAULT_MAX_RETRIES,
) -> np.ndarray:
    """
    Draw ``count`` standard normal variates from a uniform source.

    Parameters
    ----------
    source : callable
        Uniform source
    count : int
        Number of variates
    method : str, optional
        One of ``box_muller``, ``polar``, ``inverse_cdf`` or
        ``central_limit`` (sum of 12 uniforms)
    max_retries : int or None, optional
        Retry ceiling for the polar method

    Returns
    -------
    np.ndarray
        Array of shape ``(count,)``
    """
    if count < 0:
        raise ParameterValidationError(f"count must be non-negative, got {count}")
    if method not in NORMAL_METHODS:
        raise ParameterValidationError(
            f"unknown normal method '{method}' (known: {', '.join(NORMAL_METHODS)})"
        )

    out = np.empty(count, dtype=np.float64)
    if method in ("box_muller", "polar"):
        for i in range(0, count, 2):
            if method == "box_muller":
                z1, z2 = box_muller_transform(source(), source())
            else:
                z1, z2 = marsaglia_polar_transform(source, max_retries)
            out[i] = z1
            if i + 1 < count:
                out[i + 1] = z2
    elif method == "inverse_cdf":
        for i in range(count):
            out[i] = inverse_normal_cdf(source())
    else:
        for i in range(count):
            out[i] = central_limit_normal_transform(
                source() for _ in range(CENTRAL_LIMIT_TERMS)
            )
    return out
