# siteprofit/services/calculator.py

from __future__ import annotations

from loguru import logger

from siteprofit.schemas.benchmark import BenchmarkDefinition, MetricKind
from siteprofit.schemas.calculator import (
    CalculatorResult,
    FieldCatalogue,
    InputField,
    MetricResult,
    ResultField,
)
from siteprofit.schemas.metrics import RawInputs
from siteprofit.services.benchmark import classify_all
from siteprofit.services.formatting import format_metric, strip_commas
from siteprofit.services.metrics import compute_metrics

INPUT_FIELDS = [
    InputField(
        name="investment_cost",
        label="Total Investment Cost",
        unit="$",
        placeholder="e.g., 500,000",
    ),
    InputField(
        name="annual_net_sales",
        label="Projected Annual Net Sales",
        unit="$",
        placeholder="e.g., 1,500,000",
    ),
    InputField(
        name="ebitda_percentage",
        label="Projected Annual EBITDA (%)",
        unit="%",
        placeholder="e.g., 12.5",
    ),
    InputField(
        name="annual_rent_cam",
        label="Annual Rent + CAM",
        unit="$",
        placeholder="e.g., 120,000",
    ),
]

RESULT_FIELDS = [
    ResultField(kind=MetricKind.SALES_TO_INVESTMENT_RATIO, label="Sales-to-Investment Ratio", unit=":1"),
    ResultField(kind=MetricKind.PAYBACK_PERIOD, label="Payback Period", unit=" Years"),
    ResultField(kind=MetricKind.RENT_FACTOR, label="Rent Factor", unit="%"),
    ResultField(kind=MetricKind.ROI, label="ROI", unit="%"),
]


def field_catalogue(*, show_roi: bool = False) -> FieldCatalogue:
    results = [
        r.model_copy(update={"display": show_roi}) if r.kind is MetricKind.ROI else r
        for r in RESULT_FIELDS
    ]
    return FieldCatalogue(inputs=list(INPUT_FIELDS), results=results)


def _normalize(raw: RawInputs) -> RawInputs:
    """Money and percent fields may arrive with display commas."""
    return RawInputs(
        **{f.name: strip_commas(getattr(raw, f.name)) for f in INPUT_FIELDS}
    )


def evaluate(
    raw: RawInputs, benchmarks: BenchmarkDefinition, *, show_roi: bool = False
) -> CalculatorResult:
    """
    One recomputation over a single input snapshot:
    normalize -> compute -> classify -> format.
    """
    metrics = compute_metrics(_normalize(raw))
    statuses = classify_all(metrics, benchmarks)

    results = []
    for field in field_catalogue(show_roi=show_roi).results:
        value = getattr(metrics, field.kind.value)
        results.append(
            MetricResult(
                kind=field.kind,
                label=field.label,
                value=value,
                display_value=format_metric(value, field.unit),
                status=statuses[field.kind],
                display=field.display,
            )
        )

    logger.debug(
        "evaluated: " + ", ".join(f"{r.kind.value}={r.display_value}" for r in results)
    )
    return CalculatorResult(metrics=metrics, results=results)
