"""
Distribution transform layer: uniforms in, normals (or arbitrary densities) out.
"""

from mc_rng.distributions.normal import inverse_normal_cdf, normal_cdf
from mc_rng.distributions.transforms import (
    DEFAULT_MAX_RETRIES,
    NORMAL_METHODS,
    affine_transform,
    box_muller_transform,
    central_limit_normal_transform,
    generalized_rejection_sample,
    marsaglia_polar_filter,
    marsaglia_polar_transform,
    normal_variates,
    uniform_to_integer,
)

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "NORMAL_METHODS",
    "affine_transform",
    "box_muller_transform",
    "central_limit_normal_transform",
    "generalized_rejection_sample",
    "inverse_normal_cdf",
    "marsaglia_polar_filter",
    "marsaglia_polar_transform",
    "normal_cdf",
    "normal_variates",
    "uniform_to_integer",
]
