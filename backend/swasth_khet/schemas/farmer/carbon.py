# backend/swasth_khet/schemas/farmer/carbon.py

from datetime import datetime
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON keys are camelCase (areaHectares), python attributes snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class UsageModel(FrozenCamelModel):
    # JSON bodies may carry Infinity/NaN literals; usage quantities must be finite
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False)


# ============================================================
# INPUT: resource usage of one farm
# ============================================================

class FertilizerUsage(UsageModel):
    synthetic: float = Field(0.0, ge=0)   # kg
    organic: float = Field(0.0, ge=0)     # kg


class PesticideUsage(UsageModel):
    chemical: float = Field(0.0, ge=0)    # litres
    organic: float = Field(0.0, ge=0)     # litres


class FuelUsage(UsageModel):
    diesel: float = Field(0.0, ge=0)       # litres
    petrol: float = Field(0.0, ge=0)       # litres
    electricity: float = Field(0.0, ge=0)  # kWh


class UsageRecord(UsageModel):
    """
    Resource usage of a farm for one assessment.

    Every optional field carries an explicit default so the engine never has
    to guess. irrigation_type / transport_method are plain strings here: the
    engine falls back to table defaults for values it does not know.
    """

    area_hectares: float = Field(..., gt=0)
    fertilizer_usage: FertilizerUsage = Field(default_factory=FertilizerUsage)
    pesticide_usage: PesticideUsage = Field(default_factory=PesticideUsage)
    fuel_usage: FuelUsage = Field(default_factory=FuelUsage)
    irrigation_hours: float = Field(0.0, ge=0)
    irrigation_type: Optional[str] = None
    transport_method: Optional[str] = None
    conservation_agriculture: bool = False
    mulching: bool = False
    crop_diversity: int = Field(1, ge=1)


IrrigationType = Literal["flood", "drip", "sprinkler", "rainfed"]
TransportMethod = Literal["manual", "bullock_cart", "tractor", "truck"]


class UsageRecordRequest(UsageRecord):
    """Strict request body: enum fields must be one of the known values."""

    farm_id: Optional[str] = None
    irrigation_type: Optional[IrrigationType] = None
    transport_method: Optional[TransportMethod] = None


# ============================================================
# OUTPUT
# ============================================================

class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK: Dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


def priority_rank(priority: Priority) -> int:
    return priority.rank


class Recommendation(FrozenCamelModel):
    practice: str
    impact: str
    priority: Priority
    implementation: str
    savings: Optional[float] = None   # kg CO2e avoided, when it can be computed


class CreditPotential(FrozenCamelModel):
    reduction_tons: float
    value_estimate: float
    currency: str = "INR"


class FootprintBreakdown(FrozenCamelModel):
    fertilizer: float = 0.0
    pesticide: float = 0.0
    fuel: float = 0.0
    irrigation: float = 0.0


class ScoreResult(FrozenCamelModel):
    baseline_footprint: float
    ecofriendly_footprint: float
    reduction_percent: int
    sustainability_score: int = Field(..., ge=0, le=100)
    recommendations: List[Recommendation] = []
    credit_potential: CreditPotential
    breakdown: FootprintBreakdown = Field(default_factory=FootprintBreakdown)


# ============================================================
# STORED ASSESSMENTS
# ============================================================

class CarbonAssessmentOut(CamelModel):
    id: str
    user_id: str
    farm_id: Optional[str] = None
    area_hectares: float
    baseline_footprint: float
    ecofriendly_footprint: float
    reduction_percent: int
    sustainability_score: int
    credit_tons: float
    credit_value: float
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CarbonAssessmentCreated(CamelModel):
    assessment: CarbonAssessmentOut
    result: ScoreResult


class GeneralRecommendation(CamelModel):
    category: str
    title: str
    impact: str
    reduction: str
    description: str
    actionable: bool = True
