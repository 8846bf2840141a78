# backend/swasth_khet/api/marketplace/pricing.py

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from typing import List, Literal

from swasth_khet.services.marketplace.pricing_service import (
    BASE_MARKET_PRICES,
    get_market_price,
    calculate_dynamic_price,
    get_suggested_price_range,
    get_price_comparison,
    get_price_trend,
    generate_price_alert,
)

router = APIRouter(prefix="/pricing")

Quality = Literal["premium", "grade_a", "grade_b", "standard"]


# ---------- Payloads ----------
class ListingPrice(BaseModel):
    crop: str
    price: float = Field(..., ge=0)


class ComparePayload(BaseModel):
    listings: List[ListingPrice]


class TrendPayload(BaseModel):
    crop: str
    historical_prices: List[float] = []


def _market_price_or_404(crop: str) -> float:
    price = get_market_price(crop)
    if price is None:
        raise HTTPException(status_code=404, detail=f"No market price for crop '{crop}'")
    return price


@router.get("/crops")
def api_list_crops():
    return {"crops": sorted(BASE_MARKET_PRICES)}


@router.get("/{crop}")
def api_price_suggestion(
    crop: str,
    quantity: float = Query(0, ge=0),
    quality: Quality = "standard",
    organic: bool = False,
    days_to_harvest: int = 0,
):
    _market_price_or_404(crop)
    return {
        "dynamic_price": calculate_dynamic_price(crop, quantity, quality, organic, days_to_harvest),
        "range": get_suggested_price_range(crop, quantity, quality, organic),
    }


@router.get("/{crop}/alert")
def api_price_alert(crop: str, price: float = Query(..., ge=0)):
    market = _market_price_or_404(crop)
    return {"crop": crop, "price": price, "market_price": market, **generate_price_alert(price, market)}


@router.post("/compare")
def api_compare(req: ComparePayload):
    return get_price_comparison([listing.model_dump() for listing in req.listings])


@router.post("/trend")
def api_trend(req: TrendPayload):
    return get_price_trend(req.crop, req.historical_prices)
