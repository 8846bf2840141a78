# backend/swasth_khet/services/marketplace/pricing_service.py
"""
Marketplace Dynamic Pricing

- Reference market prices per crop (INR, same unit the mandi quotes: per
  quintal for grains/pulses, per kg for produce)
- Suggests a listing price from:
    * quality grade
    * organic premium
    * bulk quantity discount
    * harvest timing
- Compares listings per crop, reads a price trend from history and flags
  listings priced away from market.

All functions are pure; unknown crops return None and the API turns that into 404.
"""

from typing import Any, Dict, Iterable, List, Optional

from swasth_khet.core.rounding import round_to_int

BASE_MARKET_PRICES: Dict[str, float] = {
    "wheat": 2000,
    "rice": 3000,
    "corn": 1500,
    "tomato": 30,
    "potato": 15,
    "onion": 20,
    "cabbage": 15,
    "cauliflower": 25,
    "brinjal": 35,
    "chilli": 80,
    "garlic": 100,
    "turmeric": 60,
    "sugarcane": 3500,
    "cotton": 50,
    "soybean": 4000,
    "chickpea": 6000,
    "lentil": 7000,
    "groundnut": 8000,
    "apple": 80,
    "mango": 40,
    "banana": 15,
    "grape": 100,
}

QUALITY_MULTIPLIERS: Dict[str, float] = {
    "premium": 1.3,
    "grade_a": 1.15,
    "grade_b": 1.0,
    "standard": 0.85,
}

ORGANIC_PREMIUM = 1.25

# (quantity strictly above, multiplier), checked top-down
BULK_DISCOUNTS = [
    (1000, 0.95),
    (500, 0.97),
    (100, 0.98),
]

RANGE_FLOOR = 0.85
RANGE_CEILING = 1.25

TREND_THRESHOLD_PCT = 10


def _normalize(crop: str) -> str:
    return (crop or "").strip().lower()


def get_market_price(crop: str) -> Optional[float]:
    return BASE_MARKET_PRICES.get(_normalize(crop))


def _bulk_multiplier(quantity: float) -> float:
    for above, multiplier in BULK_DISCOUNTS:
        if quantity > above:
            return multiplier
    return 1.0


def _harvest_multiplier(days_to_harvest: int) -> float:
    if days_to_harvest < 0:
        return 1.0
    if days_to_harvest <= 7:
        return 1.05   # ready now
    if days_to_harvest > 30:
        return 0.95   # forward sale
    return 1.0


def calculate_dynamic_price(
    crop: str,
    quantity: float,
    quality: str = "standard",
    organic: bool = False,
    days_to_harvest: int = 0,
) -> Optional[int]:
    base = get_market_price(crop)
    if base is None:
        return None

    price = base * QUALITY_MULTIPLIERS.get(quality, 1.0)
    if organic:
        price *= ORGANIC_PREMIUM
    price *= _bulk_multiplier(quantity)
    price *= _harvest_multiplier(days_to_harvest)

    return round_to_int(price)


def get_suggested_price_range(
    crop: str,
    quantity: float,
    quality: str = "standard",
    organic: bool = False,
) -> Optional[Dict[str, Any]]:
    base = get_market_price(crop)
    if base is None:
        return None

    return {
        "crop": _normalize(crop),
        "min_price": round_to_int(base * RANGE_FLOOR),
        "suggested_price": calculate_dynamic_price(crop, quantity, quality, organic),
        "max_price": round_to_int(base * RANGE_CEILING),
        "base_market_price": base,
    }


def get_price_comparison(listings: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    listings: [{"crop": "Wheat", "price": 2100}, ...]
    Returns per-crop min/max/average/median/listing_count.
    """
    grouped: Dict[str, List[float]] = {}
    for listing in listings:
        grouped.setdefault(_normalize(listing["crop"]), []).append(float(listing["price"]))

    comparison = {}
    for crop, prices in grouped.items():
        ordered = sorted(prices)
        comparison[crop] = {
            "min": ordered[0],
            "max": ordered[-1],
            "average": round_to_int(sum(ordered) / len(ordered)),
            # upper median for even counts
            "median": ordered[len(ordered) // 2],
            "listing_count": len(ordered),
        }
    return comparison


def get_price_trend(crop: str, historical_prices: Optional[List[float]]) -> Dict[str, Any]:
    if not historical_prices:
        return {
            "crop": _normalize(crop),
            "trend": "stable",
            "percent_change": 0,
            "recommendation": "Market stable - fair pricing",
        }

    avg_historical = sum(historical_prices) / len(historical_prices)
    current = get_market_price(crop) or avg_historical
    if avg_historical == 0:
        percent_change = 0.0
    else:
        percent_change = (current - avg_historical) / avg_historical * 100

    trend = "stable"
    recommendation = "Market stable - fair pricing"
    if percent_change > TREND_THRESHOLD_PCT:
        trend = "rising"
        recommendation = "Prices rising - good time to sell"
    elif percent_change < -TREND_THRESHOLD_PCT:
        trend = "falling"
        recommendation = "Prices falling - consider storing for later"

    return {
        "crop": _normalize(crop),
        "trend": trend,
        "percent_change": round_to_int(percent_change),
        "recommendation": recommendation,
    }


def generate_price_alert(current_price: float, market_price: float) -> Dict[str, Any]:
    diff = (current_price - market_price) / market_price * 100

    if abs(diff) < 5:
        return {"type": "neutral", "message": "Price is at market rate"}
    if diff > 15:
        return {
            "type": "overpriced",
            "message": f"Your price is {round_to_int(diff)}% above market average",
            "suggestion": "Consider lowering price to attract more buyers",
        }
    if diff < -15:
        return {
            "type": "underpriced",
            "message": f"Your price is {round_to_int(abs(diff))}% below market average",
            "suggestion": "You could increase price and still be competitive",
        }
    # |diff| is in [5, 15] from here on
    if diff > 0:
        return {"type": "slightly_high", "message": "Price is slightly above market average"}
    return {"type": "slightly_low", "message": "Price is slightly below market average"}
