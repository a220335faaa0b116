"""
Exception types raised by the random number engine.

All errors are local to the stream or sample being generated and are
recoverable by the caller.
"""


class RngError(Exception):
    """Base class for every error raised by mc_rng."""


class ParameterValidationError(RngError, ValueError):
    """Invalid seeding or sampling parameters (bad prime pair, empty window, ...)."""


class RetryLimitExceededError(RngError, RuntimeError):
    """A rejection sampler did not accept a candidate within its retry limit."""

    def __init__(self, sampler: str, attempts: int):
        self.sampler = sampler
        self.attempts = attempts
        super().__init__(f"{sampler} rejected {attempts} consecutive candidates")


class DomainGapError(RngError, ValueError):
    """More dimensions were requested than the tabulated data supports."""

    def __init__(self, what: str, requested: int, available: int):
        self.what = what
        self.requested = requested
        self.available = available
        super().__init__(
            f"{what} supports at most {available} dimensions, got {requested}"
        )
