# siteprofit/schemas/benchmark.py
# -----------------------------------------------------------------------------
# Benchmark thresholds and classification result schemas
# -----------------------------------------------------------------------------
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MetricKind(str, Enum):
    SALES_TO_INVESTMENT_RATIO = "sales_to_investment_ratio"
    PAYBACK_PERIOD = "payback_period"
    ROI = "roi"
    RENT_FACTOR = "rent_factor"


class Severity(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"
    UNKNOWN = "unknown"


class PaybackBenchmark(BaseModel):
    """Payback bands in years: <= ideal is excellent, >= max is high risk."""

    model_config = ConfigDict(frozen=True)

    ideal: float = Field(5, allow_inf_nan=False)
    max: float = Field(7, allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_order(self):
        if self.ideal > self.max:
            raise ValueError("payback_period.ideal must not exceed payback_period.max")
        return self


class BenchmarkDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    sales_to_investment_ratio: float = Field(1.5, allow_inf_nan=False)  # lower bound, exclusive
    payback_period: PaybackBenchmark = PaybackBenchmark()
    roi: float = Field(20, allow_inf_nan=False)  # percent, lower bound
    rent_factor: float = Field(10, allow_inf_nan=False)  # percent, upper bound


class BenchmarkStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    severity: Severity
