"""
API routes for price table management and cost calculation.
"""
from typing import Dict, Any, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
import logging

from costcalc.domain.workload_models import WorkloadParameters
from costcalc.pricing.baseline import RESOURCE_PRICES
from costcalc.pricing.price_table import PriceTable, UnknownPriceKeyError, get_price_table
from costcalc.pricing.region_map import get_all_regions, get_region_multiplier, get_region_name
from costcalc.services.formatting import format_breakdown, format_price_table
from costcalc.services.sizing_engine import SizingEngine


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/calculator", tags=["calculator"])


class WorkloadRequest(BaseModel):
    """Raw workload parameters; numbers may arrive as strings."""
    daily_users: Any = Field(None, description="Daily active users")
    peak_tps: Any = Field(None, description="Peak transactions per second")
    data_volume_gb: Any = Field(None, description="Stored data volume in GB")
    environment: Any = Field(None, description="dev, test, staging or production")

    def to_parameters(self) -> WorkloadParameters:
        return WorkloadParameters.from_raw(
            daily_users=self.daily_users,
            peak_tps=self.peak_tps,
            data_volume_gb=self.data_volume_gb,
            environment=self.environment,
        )


class RegionRequest(BaseModel):
    """Request model for switching the pricing region."""
    region: str = Field(..., description="AWS region code, e.g. eu-west-1")


class PriceOverrideRequest(BaseModel):
    """Request model for a manual price override."""
    value: Any = Field(..., description="New unit price, number or string")


class CompareRequest(BaseModel):
    """Request model for what-if comparison."""
    base: WorkloadRequest = Field(..., description="Current workload parameters")
    scenario: WorkloadRequest = Field(..., description="What-if workload parameters")
    scenario_region: Optional[str] = Field(None, description="Optional region to price the scenario in")


def _price_table_response(table: PriceTable) -> Dict[str, Any]:
    snapshot = table.snapshot()
    return {
        "status": "ok",
        "prices": snapshot.to_dict(),
        "display": format_price_table(snapshot),
        "catalog": [price.to_dict() for price in RESOURCE_PRICES],
        "validation_failures": [failure.to_dict() for failure in table.validation_failures],
    }


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@router.get("/regions")
async def list_regions(table: PriceTable = Depends(get_price_table)) -> Dict[str, Any]:
    """
    List the selectable regions and the active one.
    """
    return {
        "status": "ok",
        "active_region": table.region,
        "regions": [
            {
                "code": code,
                "name": get_region_name(code),
                "multiplier": get_region_multiplier(code),
            }
            for code in get_all_regions()
        ],
    }


@router.get("/prices")
async def get_prices(table: PriceTable = Depends(get_price_table)) -> Dict[str, Any]:
    """Current unit prices with display strings and overrides."""
    return _price_table_response(table)


@router.post("/prices/region")
async def apply_region(
    region_request: RegionRequest,
    table: PriceTable = Depends(get_price_table)
) -> Dict[str, Any]:
    """
    Switch the pricing region.

    AWS-billed prices are regenerated from baseline, discarding their manual
    overrides. Unknown regions price at the baseline multiplier.
    """
    table.apply_region(region_request.region)
    return _price_table_response(table)


@router.post("/prices/reset")
async def reset_prices(table: PriceTable = Depends(get_price_table)) -> Dict[str, Any]:
    """Restore baseline prices and drop all overrides."""
    table.reset()
    return _price_table_response(table)


@router.put("/prices/{key}")
async def set_price(
    key: str,
    override: PriceOverrideRequest,
    table: PriceTable = Depends(get_price_table)
) -> Dict[str, Any]:
    """
    Manually override one unit price.

    Invalid values are stored as 0 and reported in the response rather than
    rejected.

    Raises:
        HTTPException: 404 if the price key does not exist
    """
    try:
        failure = table.set_price(key, override.value)
    except UnknownPriceKeyError as error:
        raise HTTPException(status_code=404, detail=str(error))

    response = _price_table_response(table)
    response["validation_failure"] = failure.to_dict() if failure else None
    return response


@router.post("/calculate")
async def calculate(
    workload: WorkloadRequest,
    table: PriceTable = Depends(get_price_table)
) -> Dict[str, Any]:
    """
    Calculate the monthly cost breakdown for a workload.

    Unparseable or negative inputs are treated as 0.
    """
    breakdown = SizingEngine().calculate(workload.to_parameters(), table.snapshot())
    return {
        "status": "ok",
        "breakdown": breakdown.to_dict(),
        "text": format_breakdown(breakdown),
    }


@router.post("/calculate/compare")
async def compare(
    compare_request: CompareRequest,
    table: PriceTable = Depends(get_price_table)
) -> Dict[str, Any]:
    """
    Compare the current workload with a what-if scenario.

    The live price table is not modified, even when a scenario region is given.
    """
    result = SizingEngine().compare(
        base_params=compare_request.base.to_parameters(),
        scenario_params=compare_request.scenario.to_parameters(),
        table=table,
        scenario_region=compare_request.scenario_region,
    )
    return {
        "status": "ok",
        "comparison": result.to_dict(),
    }
