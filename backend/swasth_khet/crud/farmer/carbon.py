import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from swasth_khet.core.logger import logger
from swasth_khet.models.farmer.carbon import CarbonAssessment
from swasth_khet.schemas.farmer.carbon import ScoreResult, UsageRecord


# ============================================================
# CREATE
# ============================================================

async def create_assessment(
    user_id: str,
    record: UsageRecord,
    result: ScoreResult,
    db: AsyncSession,
    farm_id: Optional[str] = None,
) -> CarbonAssessment:
    assessment = CarbonAssessment(
        user_id=user_id,
        farm_id=farm_id,
        area_hectares=record.area_hectares,
        usage=record.model_dump_json(by_alias=True, exclude={"farm_id"}),
        baseline_footprint=result.baseline_footprint,
        ecofriendly_footprint=result.ecofriendly_footprint,
        reduction_percent=result.reduction_percent,
        sustainability_score=result.sustainability_score,
        credit_tons=result.credit_potential.reduction_tons,
        credit_value=result.credit_potential.value_estimate,
        created_at=datetime.datetime.utcnow(),
    )

    db.add(assessment)
    await db.commit()
    await db.refresh(assessment)

    logger.info(
        "Carbon assessment stored",
        extra={"user_id": user_id, "farm_id": farm_id, "assessment_id": assessment.id},
    )
    return assessment


# ============================================================
# READ (always scoped to the owner)
# ============================================================

async def list_assessments(
    user_id: str,
    db: AsyncSession,
    farm_id: Optional[str] = None,
    limit: int = 50,
) -> List[CarbonAssessment]:
    stmt = select(CarbonAssessment).where(CarbonAssessment.user_id == user_id)
    if farm_id is not None:
        stmt = stmt.where(CarbonAssessment.farm_id == farm_id)
    stmt = stmt.order_by(CarbonAssessment.created_at.desc()).limit(limit)

    rows = await db.scalars(stmt)
    return list(rows.all())


async def get_assessment(user_id: str, assessment_id: str, db: AsyncSession) -> Optional[CarbonAssessment]:
    assessment = await db.get(CarbonAssessment, assessment_id)
    if not assessment or assessment.user_id != user_id:
        return None
    return assessment
