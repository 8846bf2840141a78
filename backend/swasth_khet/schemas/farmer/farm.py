# backend/swasth_khet/schemas/farmer/farm.py

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from swasth_khet.schemas.farmer.carbon import CamelModel

SoilType = Literal["clay", "sandy", "loamy", "silt", "peat", "chalky"]
FarmIrrigationType = Literal["drip", "sprinkler", "flood", "rainfed", "manual"]
FarmStatus = Literal["active", "inactive", "abandoned"]

CropStatus = Literal["planned", "sown", "growing", "ready_to_harvest", "harvested", "failed"]
HealthStatus = Literal["excellent", "good", "fair", "poor", "critical"]
YieldUnit = Literal["kg", "quintal", "ton"]


# ============================================================
# FARM SCHEMAS
# ============================================================

class FarmBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1)
    area_hectares: float = Field(..., ge=0.1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    soil_type: SoilType = "loamy"
    irrigation_type: FarmIrrigationType = "rainfed"
    notes: Optional[str] = Field(None, max_length=500)


class FarmCreate(FarmBase):
    pass


class FarmUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1)
    area_hectares: Optional[float] = Field(None, ge=0.1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    soil_type: Optional[SoilType] = None
    irrigation_type: Optional[FarmIrrigationType] = None
    status: Optional[FarmStatus] = None
    health_score: Optional[int] = Field(None, ge=0, le=100)
    notes: Optional[str] = Field(None, max_length=500)


class FarmOut(FarmBase):
    id: str
    user_id: str
    status: str
    health_score: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FarmStats(CamelModel):
    total_area: float
    used_area: float
    available_area: float
    total_crops: int
    active_crops: int
    harvested_crops: int
    health_score: int


# ============================================================
# CROP SCHEMAS
# ============================================================

class CropBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    variety: Optional[str] = Field(None, max_length=50)
    sowing_date: date
    expected_harvest_date: date
    actual_harvest_date: Optional[date] = None
    area_hectares: float = Field(..., ge=0.01)
    status: CropStatus = "planned"
    health_status: HealthStatus = "good"
    estimated_yield: Optional[float] = Field(None, ge=0)
    actual_yield: Optional[float] = Field(None, ge=0)
    yield_unit: YieldUnit = "kg"
    seed_cost: float = Field(0.0, ge=0)
    fertilizer_cost: float = Field(0.0, ge=0)
    pesticide_cost: float = Field(0.0, ge=0)
    disease_incidents: int = Field(0, ge=0)
    notes: Optional[str] = Field(None, max_length=500)


class CropCreate(CropBase):
    farm_id: str

    @model_validator(mode="after")
    def harvest_after_sowing(self):
        if self.expected_harvest_date <= self.sowing_date:
            raise ValueError("expectedHarvestDate must be after sowingDate")
        return self


class CropUpdate(CamelModel):
    """Partial update; the farm a crop belongs to cannot be changed."""

    name: Optional[str] = Field(None, min_length=1, max_length=50)
    variety: Optional[str] = Field(None, max_length=50)
    sowing_date: Optional[date] = None
    expected_harvest_date: Optional[date] = None
    actual_harvest_date: Optional[date] = None
    area_hectares: Optional[float] = Field(None, ge=0.01)
    status: Optional[CropStatus] = None
    health_status: Optional[HealthStatus] = None
    estimated_yield: Optional[float] = Field(None, ge=0)
    actual_yield: Optional[float] = Field(None, ge=0)
    yield_unit: Optional[YieldUnit] = None
    seed_cost: Optional[float] = Field(None, ge=0)
    fertilizer_cost: Optional[float] = Field(None, ge=0)
    pesticide_cost: Optional[float] = Field(None, ge=0)
    disease_incidents: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=500)


class CropOut(CropBase):
    id: str
    farm_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FarmDetail(FarmOut):
    crops: List[CropOut] = []


class CropAnalytics(CamelModel):
    age_in_days: int
    days_until_harvest: int
    growth_progress: float  # 0–100 %
    health_score: int
    disease_incidents: int
    input_costs: float
