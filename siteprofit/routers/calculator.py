# siteprofit/routers/calculator.py
# -----------------------------------------------------------------------------
# /calculator/fields      : form input/result catalogue
# /calculator/benchmarks  : active benchmark thresholds
# /calculator/evaluate    : metrics + benchmark status for one input snapshot
# /calculator/classify    : status of a single metric value
# -----------------------------------------------------------------------------

from fastapi import APIRouter, HTTPException
from loguru import logger

from siteprofit.core.config import settings
from siteprofit.schemas.benchmark import BenchmarkDefinition, BenchmarkStatus
from siteprofit.schemas.calculator import (
    CalculatorResult,
    ClassifyRequest,
    EvaluateRequest,
    FieldCatalogue,
)
from siteprofit.services.benchmark import classify
from siteprofit.services.calculator import evaluate, field_catalogue

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.get("/fields", response_model=FieldCatalogue)
async def fields():
    return field_catalogue(show_roi=settings.SHOW_ROI)


@router.get("/benchmarks", response_model=BenchmarkDefinition)
async def benchmarks():
    return settings.benchmarks()


@router.post("/evaluate", response_model=CalculatorResult)
async def evaluate_location(req: EvaluateRequest):
    try:
        return evaluate(
            req.inputs,
            req.benchmarks or settings.benchmarks(),
            show_roi=settings.SHOW_ROI,
        )
    except Exception as e:
        logger.exception(f"[calculator] evaluate failed: {e}")
        raise HTTPException(status_code=500, detail="evaluation failed")


@router.post("/classify", response_model=BenchmarkStatus)
async def classify_metric(req: ClassifyRequest):
    return classify(req.kind, req.value, req.benchmarks or settings.benchmarks())
