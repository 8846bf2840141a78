# backend/swasth_khet/services/farmer/farm_service.py

"""
Farm and crop summaries (pure).

A crop holds its share of the farm area while it is planned or in the ground;
harvested and failed crops free it again. Deleting a farm is refused while any
crop still holds area.

Functions accept ORM rows or any object exposing the same attributes.
"""

from datetime import date
from typing import Iterable, Optional

from swasth_khet.core.rounding import round_half_up
from swasth_khet.schemas.farmer.farm import CropAnalytics, FarmStats

ACTIVE_CROP_STATUSES = ("sown", "growing", "ready_to_harvest")
OPEN_CROP_STATUSES = ("planned",) + ACTIVE_CROP_STATUSES

HEALTH_SCORES = {
    "excellent": 100,
    "good": 75,
    "fair": 50,
    "poor": 25,
    "critical": 0,
}


# -------------------------------------------------------------
# AREA
# -------------------------------------------------------------
def used_area(crops: Iterable, exclude_id: Optional[str] = None) -> float:
    total = sum(
        c.area_hectares for c in crops
        if c.status in OPEN_CROP_STATUSES and c.id != exclude_id
    )
    return round_half_up(total)


def available_area(farm_area: float, crops: Iterable, exclude_id: Optional[str] = None) -> float:
    return round_half_up(farm_area - used_area(crops, exclude_id))


def has_open_crops(crops: Iterable) -> bool:
    return any(c.status in OPEN_CROP_STATUSES for c in crops)


# -------------------------------------------------------------
# FARM STATS
# -------------------------------------------------------------
def compute_farm_stats(farm, crops) -> FarmStats:
    crops = list(crops)
    used = used_area(crops)
    return FarmStats(
        total_area=farm.area_hectares,
        used_area=used,
        available_area=round_half_up(farm.area_hectares - used),
        total_crops=len(crops),
        active_crops=sum(1 for c in crops if c.status in ACTIVE_CROP_STATUSES),
        harvested_crops=sum(1 for c in crops if c.status == "harvested"),
        health_score=farm.health_score,
    )


# -------------------------------------------------------------
# CROP ANALYTICS
# -------------------------------------------------------------
def growth_progress(sowing: date, expected_harvest: date, today: date) -> float:
    span = (expected_harvest - sowing).days
    if span <= 0:
        return 100.0 if today >= expected_harvest else 0.0
    elapsed = (today - sowing).days
    return round_half_up(min(100.0, max(0.0, elapsed / span * 100)))


def compute_crop_analytics(crop, today: Optional[date] = None) -> CropAnalytics:
    today = today or date.today()
    costs = (crop.seed_cost or 0.0) + (crop.fertilizer_cost or 0.0) + (crop.pesticide_cost or 0.0)
    return CropAnalytics(
        age_in_days=(today - crop.sowing_date).days,
        days_until_harvest=(crop.expected_harvest_date - today).days,
        growth_progress=growth_progress(crop.sowing_date, crop.expected_harvest_date, today),
        health_score=HEALTH_SCORES.get(crop.health_status, 0),
        disease_incidents=crop.disease_incidents or 0,
        input_costs=round_half_up(costs),
    )
