"""Descriptive statistics over wells, sets, plates and stacks.

Modules:
    descriptive:
        The container fan-out shared by every statistic (per well,
        aggregated, windowed, weighted).

    measures:
        Concrete statistics computed in Decimal arithmetic under a caller
        supplied ``decimal.Context``.
"""

from .descriptive import DescriptiveStatistic, WeightedDescriptiveStatistic
from .measures import (
    GeometricMean,
    Kurtosis,
    Max,
    Mean,
    Median,
    Min,
    Mode,
    Percentile,
    PopulationStandardDeviation,
    PopulationVariance,
    Range,
    SampleStandardDeviation,
    SampleVariance,
    Skewness,
    Sum,
)

STATISTICS = {
    cls.name: cls
    for cls in (
        GeometricMean,
        Kurtosis,
        Max,
        Mean,
        Median,
        Min,
        Mode,
        Percentile,
        PopulationStandardDeviation,
        PopulationVariance,
        Range,
        SampleStandardDeviation,
        SampleVariance,
        Skewness,
        Sum,
    )
}

__all__ = [
    "DescriptiveStatistic",
    "WeightedDescriptiveStatistic",
    "STATISTICS",
    "GeometricMean",
    "Kurtosis",
    "Max",
    "Mean",
    "Median",
    "Min",
    "Mode",
    "Percentile",
    "PopulationStandardDeviation",
    "PopulationVariance",
    "Range",
    "SampleStandardDeviation",
    "SampleVariance",
    "Skewness",
    "Sum",
]
