# siteprofit/schemas/metrics.py
# -----------------------------------------------------------------------------
# Calculator input/output value types
# - RawInputs: the four form strings (may be empty)
# - DerivedMetrics: None means "not applicable"
# -----------------------------------------------------------------------------
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RawInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    investment_cost: str = ""
    annual_net_sales: str = ""
    ebitda_percentage: str = ""  # e.g. "12.5" for 12.5 %
    annual_rent_cam: str = ""


class DerivedMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    sales_to_investment_ratio: Optional[float] = None
    payback_period: Optional[float] = None  # years
    roi: Optional[float] = None  # percent
    rent_factor: Optional[float] = None  # percent
    projected_annual_ebitda: Optional[float] = None
