# siteprofit/services/metrics.py

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from siteprofit.schemas.metrics import DerivedMetrics, RawInputs

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


# ── parsed form values ───────────────────────────────────────────────────────
@dataclass(slots=True, frozen=True)
class ParsedInputs:
    investment_cost: Optional[float]
    annual_net_sales: Optional[float]
    ebitda_fraction: Optional[float]  # 12.5 % -> 0.125
    annual_rent_cam: Optional[float]

    @property
    def complete(self) -> bool:
        return None not in (
            self.investment_cost,
            self.annual_net_sales,
            self.ebitda_fraction,
            self.annual_rent_cam,
        )


def parse_input(raw: str | None) -> Optional[float]:
    """
    Decimal string -> float. Empty, malformed or non-finite gives None.
    """
    text = (raw or "").strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def parse_inputs(raw: RawInputs) -> ParsedInputs:
    ebitda_pct = parse_input(raw.ebitda_percentage)
    return ParsedInputs(
        investment_cost=parse_input(raw.investment_cost),
        annual_net_sales=parse_input(raw.annual_net_sales),
        ebitda_fraction=ebitda_pct / 100 if ebitda_pct is not None else None,
        annual_rent_cam=parse_input(raw.annual_rent_cam),
    )


# ── metrics ──────────────────────────────────────────────────────────────────
def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def compute_metrics(raw: RawInputs) -> DerivedMetrics:
    """
    Four unit-economics metrics from the raw form strings.

    Any invalid input -> every metric absent. Otherwise each metric has its
    own positive-denominator guard and is absent only when that guard fails
    or the result overflows.
    """
    p = parse_inputs(raw)
    if not p.complete:
        logger.debug("incomplete inputs, metrics not applicable")
        return DerivedMetrics()

    tic = p.investment_cost
    pans = p.annual_net_sales
    arc = p.annual_rent_cam
    pae = _finite(pans * p.ebitda_fraction)  # projected annual EBITDA in $

    return DerivedMetrics(
        sales_to_investment_ratio=_finite(pans / tic) if tic > 0 else None,
        payback_period=_finite(tic / pae) if pae is not None and pae > 0 else None,
        roi=_finite((pae / tic) * 100) if pae is not None and tic > 0 else None,
        rent_factor=_finite((arc / pans) * 100) if pans > 0 else None,
        projected_annual_ebitda=pae,
    )
