# backend/swasth_khet/api/farmer/carbon.py

from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from swasth_khet.core.auth import require_user
from swasth_khet.core.config import settings
from swasth_khet.core.database import get_db
from swasth_khet.crud.farmer import carbon as crud_carbon
from swasth_khet.crud.farmer import farm as crud_farm
from swasth_khet.schemas.farmer.carbon import (
    CarbonAssessmentCreated,
    CarbonAssessmentOut,
    GeneralRecommendation,
    ScoreResult,
    UsageRecordRequest,
)
from swasth_khet.services.farmer.carbon_service import assess_footprint
from swasth_khet.services.farmer.emission_factors import DEFAULT_EMISSION_FACTORS, EmissionFactorTable

router = APIRouter(prefix="/carbon", dependencies=[Depends(require_user)])


@lru_cache
def get_emission_factors() -> EmissionFactorTable:
    """Factor table for request handlers; override in tests via app.dependency_overrides."""
    return DEFAULT_EMISSION_FACTORS.with_overrides(
        {},
        credit_price_per_ton=settings.CARBON_CREDIT_PRICE_PER_TON,
        credit_currency=settings.CARBON_CREDIT_CURRENCY,
    )


GENERAL_RECOMMENDATIONS = [
    GeneralRecommendation(
        category="Fertilizer Management",
        title="Switch to Organic Fertilizers",
        impact="High",
        reduction="Reduce emissions by 30%",
        description="Using organic compost and bio-fertilizers can significantly reduce your carbon footprint.",
    ),
    GeneralRecommendation(
        category="Irrigation",
        title="Implement Drip Irrigation",
        impact="Medium",
        reduction="Reduce emissions by 15%",
        description="Water-efficient irrigation reduces energy consumption and wastage.",
    ),
    GeneralRecommendation(
        category="Energy",
        title="Solar-Powered Equipment",
        impact="High",
        reduction="Reduce emissions by 25%",
        description="Invest in solar panels for pumps and other farm equipment.",
    ),
    GeneralRecommendation(
        category="Transportation",
        title="Local Distribution Network",
        impact="Medium",
        reduction="Reduce emissions by 10%",
        description="Selling to local buyers reduces transportation emissions.",
    ),
    GeneralRecommendation(
        category="Pesticides",
        title="Use Integrated Pest Management",
        impact="Medium",
        reduction="Reduce emissions by 20%",
        description="Combine biological, cultural, and chemical methods for pest control.",
    ),
]


@router.post("/calculate", response_model=ScoreResult)
def api_calculate(
    payload: UsageRecordRequest,
    factors: EmissionFactorTable = Depends(get_emission_factors),
):
    return assess_footprint(payload, factors)


@router.post(
    "/assessments",
    response_model=CarbonAssessmentCreated,
    status_code=status.HTTP_201_CREATED,
)
async def api_create_assessment(
    payload: UsageRecordRequest,
    user: dict = Depends(require_user),
    factors: EmissionFactorTable = Depends(get_emission_factors),
    db: AsyncSession = Depends(get_db),
):
    if payload.farm_id is not None and not await crud_farm.get_farm(user["user_id"], payload.farm_id, db):
        raise HTTPException(status_code=404, detail="Farm not found")

    result = assess_footprint(payload, factors)
    assessment = await crud_carbon.create_assessment(
        user["user_id"], payload, result, db, farm_id=payload.farm_id
    )
    return CarbonAssessmentCreated(
        assessment=CarbonAssessmentOut.model_validate(assessment),
        result=result,
    )


@router.get("/history", response_model=List[CarbonAssessmentOut])
async def api_history(
    farm_id: Optional[str] = None,
    limit: int = Query(50, ge=1, le=500),
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return await crud_carbon.list_assessments(user["user_id"], db, farm_id=farm_id, limit=limit)


@router.get("/assessments/{assessment_id}", response_model=CarbonAssessmentOut)
async def api_get_assessment(
    assessment_id: str,
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    assessment = await crud_carbon.get_assessment(user["user_id"], assessment_id, db)
    if not assessment:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return assessment


@router.get("/recommendations", response_model=List[GeneralRecommendation])
def api_general_recommendations():
    return GENERAL_RECOMMENDATIONS


@router.get("/emission-factors")
def api_emission_factors(
    factors: EmissionFactorTable = Depends(get_emission_factors),
) -> Dict[str, object]:
    return {
        "factors": factors.as_dict(),
        "defaultIrrigationFactor": factors.default_irrigation_factor,
        "creditPricePerTon": factors.credit_price_per_ton,
        "creditCurrency": factors.credit_currency,
    }
