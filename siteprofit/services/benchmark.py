# siteprofit/services/benchmark.py

from __future__ import annotations

from typing import Dict, Optional, Union

from loguru import logger

from siteprofit.schemas.benchmark import (
    BenchmarkDefinition,
    BenchmarkStatus,
    MetricKind,
    Severity,
)
from siteprofit.schemas.metrics import DerivedMetrics

NOT_APPLICABLE = BenchmarkStatus(label="N/A", severity=Severity.UNKNOWN)
NEUTRAL = BenchmarkStatus(label="", severity=Severity.UNKNOWN)

MEETS_TARGET = BenchmarkStatus(label="Meets Target", severity=Severity.GOOD)
BELOW_TARGET = BenchmarkStatus(label="Below Target", severity=Severity.BAD)
EXCELLENT = BenchmarkStatus(label="Excellent", severity=Severity.GOOD)
GOOD = BenchmarkStatus(label="Good", severity=Severity.WARNING)
HIGH_RISK = BenchmarkStatus(label="High Risk", severity=Severity.BAD)
HIGH = BenchmarkStatus(label="High", severity=Severity.BAD)


def classify(
    kind: Union[MetricKind, str],
    value: Optional[float],
    benchmarks: BenchmarkDefinition,
) -> BenchmarkStatus:
    """
    Qualitative status of one metric against its benchmark.

    Absent value -> "N/A". Unknown metric kind -> neutral empty status.
    """
    if value is None:
        return NOT_APPLICABLE

    try:
        kind = MetricKind(kind)
    except ValueError:
        logger.warning(f"[benchmark] unknown metric kind: {kind!r}")
        return NEUTRAL

    if kind is MetricKind.SALES_TO_INVESTMENT_RATIO:
        return MEETS_TARGET if value > benchmarks.sales_to_investment_ratio else BELOW_TARGET

    if kind is MetricKind.PAYBACK_PERIOD:
        band = benchmarks.payback_period
        if value <= band.ideal:
            return EXCELLENT
        if value < band.max:
            return GOOD
        return HIGH_RISK

    if kind is MetricKind.ROI:
        return MEETS_TARGET if value > benchmarks.roi else BELOW_TARGET

    # rent factor: lower is better
    return MEETS_TARGET if value < benchmarks.rent_factor else HIGH


def classify_all(
    metrics: DerivedMetrics, benchmarks: BenchmarkDefinition
) -> Dict[MetricKind, BenchmarkStatus]:
    return {
        kind: classify(kind, getattr(metrics, kind.value), benchmarks)
        for kind in MetricKind
    }
