# siteprofit/schemas/calculator.py
# -----------------------------------------------------------------------------
# Request/response schemas for the calculator API
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel, Field

from siteprofit.schemas.benchmark import BenchmarkDefinition, BenchmarkStatus, MetricKind
from siteprofit.schemas.metrics import DerivedMetrics, RawInputs


class InputField(BaseModel):
    name: str
    label: str
    unit: str  # "$" | "%"
    placeholder: str


class ResultField(BaseModel):
    kind: MetricKind
    label: str
    unit: str
    display: bool = True


class FieldCatalogue(BaseModel):
    inputs: List[InputField]
    results: List[ResultField]


class MetricResult(BaseModel):
    kind: MetricKind
    label: str
    value: Optional[float] = None
    display_value: str  # formatted, "N/A" when absent
    status: BenchmarkStatus
    display: bool = True


class CalculatorResult(BaseModel):
    metrics: DerivedMetrics
    results: List[MetricResult]


class EvaluateRequest(BaseModel):
    inputs: RawInputs = RawInputs()
    benchmarks: Optional[BenchmarkDefinition] = None  # None -> configured defaults


class ClassifyRequest(BaseModel):
    # plain str so an unknown kind reaches the classifier instead of failing validation
    kind: str
    value: Optional[float] = Field(None, allow_inf_nan=False)
    benchmarks: Optional[BenchmarkDefinition] = None
