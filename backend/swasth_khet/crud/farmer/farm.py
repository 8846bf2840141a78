import datetime
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from swasth_khet.core.logger import logger
from swasth_khet.models.farmer.farm import Crop, Farm
from swasth_khet.schemas.farmer.farm import CropCreate, CropUpdate, FarmCreate, FarmUpdate


# ============================================================
# FARMS
# ============================================================

async def create_farm(user_id: str, payload: FarmCreate, db: AsyncSession) -> Farm:
    now = datetime.datetime.utcnow()
    farm = Farm(user_id=user_id, created_at=now, updated_at=now, **payload.model_dump())

    db.add(farm)
    await db.commit()
    await db.refresh(farm)

    logger.info("Farm created", extra={"user_id": user_id, "farm_id": farm.id})
    return farm


async def list_farms(user_id: str, db: AsyncSession) -> List[Farm]:
    rows = await db.scalars(
        select(Farm).where(Farm.user_id == user_id).order_by(Farm.created_at.desc())
    )
    return list(rows.all())


async def get_farm(user_id: str, farm_id: str, db: AsyncSession) -> Optional[Farm]:
    farm = await db.get(Farm, farm_id)
    if not farm or farm.user_id != user_id:
        return None
    return farm


async def update_farm(db: AsyncSession, farm: Farm, payload: FarmUpdate) -> Farm:
    # null means "leave unchanged"
    for field, val in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(farm, field, val)
    db.add(farm)
    await db.commit()
    await db.refresh(farm)
    return farm


async def delete_farm(db: AsyncSession, farm: Farm) -> None:
    # callers refuse the delete while crops still occupy the farm
    log_extra = {"user_id": farm.user_id, "farm_id": farm.id}
    await db.execute(delete(Crop).where(Crop.farm_id == farm.id))
    await db.delete(farm)
    await db.commit()

    logger.info("Farm deleted", extra=log_extra)


# ============================================================
# CROPS
# ============================================================

async def list_farm_crops(farm_id: str, db: AsyncSession) -> List[Crop]:
    rows = await db.scalars(
        select(Crop).where(Crop.farm_id == farm_id).order_by(Crop.created_at.desc())
    )
    return list(rows.all())


async def list_crops(user_id: str, db: AsyncSession, farm_id: Optional[str] = None) -> List[Crop]:
    stmt = select(Crop).where(Crop.user_id == user_id)
    if farm_id is not None:
        stmt = stmt.where(Crop.farm_id == farm_id)
    rows = await db.scalars(stmt.order_by(Crop.created_at.desc()))
    return list(rows.all())


async def get_crop(user_id: str, crop_id: str, db: AsyncSession) -> Optional[Crop]:
    crop = await db.get(Crop, crop_id)
    if not crop or crop.user_id != user_id:
        return None
    return crop


async def create_crop(user_id: str, payload: CropCreate, db: AsyncSession) -> Crop:
    now = datetime.datetime.utcnow()
    crop = Crop(user_id=user_id, created_at=now, updated_at=now, **payload.model_dump())

    db.add(crop)
    await db.commit()
    await db.refresh(crop)

    logger.info(
        "Crop created",
        extra={"user_id": user_id, "farm_id": crop.farm_id, "crop_id": crop.id},
    )
    return crop


async def update_crop(db: AsyncSession, crop: Crop, payload: CropUpdate) -> Crop:
    for field, val in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(crop, field, val)
    db.add(crop)
    await db.commit()
    await db.refresh(crop)
    return crop


async def delete_crop(db: AsyncSession, crop: Crop) -> None:
    await db.delete(crop)
    await db.commit()
