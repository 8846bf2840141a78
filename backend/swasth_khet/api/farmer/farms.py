# backend/swasth_khet/api/farmer/farms.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from swasth_khet.core.auth import require_user
from swasth_khet.core.database import get_db
from swasth_khet.crud.farmer import farm as crud_farm
from swasth_khet.models.farmer.farm import Farm
from swasth_khet.schemas.farmer.farm import (
    CropOut,
    FarmCreate,
    FarmDetail,
    FarmOut,
    FarmStats,
    FarmUpdate,
)
from swasth_khet.services.farmer import farm_service

router = APIRouter(prefix="/farms", dependencies=[Depends(require_user)])


async def get_owned_farm(
    farm_id: str,
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> Farm:
    farm = await crud_farm.get_farm(user["user_id"], farm_id, db)
    if not farm:
        raise HTTPException(status_code=404, detail="Farm not found")
    return farm


@router.post("/", response_model=FarmOut, status_code=status.HTTP_201_CREATED)
async def api_create_farm(
    payload: FarmCreate,
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return await crud_farm.create_farm(user["user_id"], payload, db)


@router.get("/", response_model=List[FarmOut])
async def api_list_farms(
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return await crud_farm.list_farms(user["user_id"], db)


@router.get("/{farm_id}", response_model=FarmDetail)
async def api_get_farm(
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    crops = await crud_farm.list_farm_crops(farm.id, db)
    return FarmDetail(
        **FarmOut.model_validate(farm).model_dump(),
        crops=[CropOut.model_validate(c) for c in crops],
    )


@router.put("/{farm_id}", response_model=FarmOut)
async def api_update_farm(
    payload: FarmUpdate,
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    if payload.area_hectares is not None:
        crops = await crud_farm.list_farm_crops(farm.id, db)
        used = farm_service.used_area(crops)
        if payload.area_hectares < used:
            raise HTTPException(
                status_code=400,
                detail=f"Farm area cannot be less than the {used} hectares held by crops",
            )
    return await crud_farm.update_farm(db, farm, payload)


@router.delete("/{farm_id}")
async def api_delete_farm(
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    crops = await crud_farm.list_farm_crops(farm.id, db)
    if farm_service.has_open_crops(crops):
        raise HTTPException(
            status_code=400,
            detail="Cannot delete farm with active crops. Harvest or remove them first.",
        )
    farm_id = farm.id
    await crud_farm.delete_farm(db, farm)
    return {"ok": True, "deleted": farm_id}


@router.get("/{farm_id}/stats", response_model=FarmStats)
async def api_farm_stats(
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    crops = await crud_farm.list_farm_crops(farm.id, db)
    return farm_service.compute_farm_stats(farm, crops)
