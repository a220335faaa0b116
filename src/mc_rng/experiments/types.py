"""
Types and dataclasses for reproducible generator experiments.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class ExperimentConfig:
    """
    Configuration for a reproducible uniformity experiment.

    Attributes
    ----------
    name : str
        Experiment identifier
    generator : str
        Registry name of the generator (see ``mc-rng list``)
    counts : list[int]
        Stream lengths to test
    seeds : list[int]
        Seeds to test; every (count, seed) pair is one run
    n_buckets : int
        Number of equal-width buckets for the chi-square statistic
    normal_method : str | None
        If set, also transform the stream to normals with this method and
        record their mean and standard deviation
    """

    name: str
    generator: str
    counts: list[int] = field(default_factory=lambda: [10000])
    seeds: list[int] = field(default_factory=lambda: [42])
    n_buckets: int = 10
    normal_method: str | None = None


@dataclass
class ExperimentMetadata:
    """
    Metadata for reproducible experiments.

    Captures environment and configuration for full reproducibility.
    """

    timestamp: str
    python_version: str
    numpy_version: str
    os_platform: str
    git_commit: str | None
    generator: str
    seed: int
    count: int


@dataclass
class ExperimentResult:
    """
    Summary statistics of one generated stream.

    Attributes
    ----------
    config_name : str
        Name of the experiment configuration
    mean : float
        Sample mean (1/2 expected)
    variance : float
        Sample variance (1/12 expected)
    minimum, maximum : float
        Extremes of the stream; both must lie strictly inside (0, 1)
    chi_square : float
        Pearson statistic of the bucket counts against a flat histogram
    n_buckets : int
        Degrees of freedom plus one
    runtime_seconds : float
        Wall-clock time for drawing the stream
    normal_mean, normal_std : float | None
        Moments of the normal transform (if requested)
    metadata : ExperimentMetadata
        Full metadata for reproducibility
    notes : str
        Method description used to group runs in summaries
    """

    config_name: str
    mean: float
    variance: float
    minimum: float
    maximum: float
    chi_square: float
    n_buckets: int
    runtime_seconds: float
    normal_mean: float | None
    normal_std: float | None
    metadata: ExperimentMetadata
    notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return asdict(self)
