# backend/swasth_khet/api/farmer/crops.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from swasth_khet.core.auth import require_user
from swasth_khet.core.database import get_db
from swasth_khet.crud.farmer import farm as crud_farm
from swasth_khet.models.farmer.farm import Crop, Farm
from swasth_khet.schemas.farmer.farm import CropAnalytics, CropCreate, CropOut, CropUpdate
from swasth_khet.services.farmer import farm_service

router = APIRouter(prefix="/crops", dependencies=[Depends(require_user)])


async def get_owned_crop(
    crop_id: str,
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> Crop:
    crop = await crud_farm.get_crop(user["user_id"], crop_id, db)
    if not crop:
        raise HTTPException(status_code=404, detail="Crop not found")
    return crop


def _insufficient_area(available: float) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail=f"Insufficient farm area. Available: {available} hectares",
    )


@router.get("/", response_model=List[CropOut])
async def api_list_crops(
    farm_id: Optional[str] = None,
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return await crud_farm.list_crops(user["user_id"], db, farm_id=farm_id)


@router.post("/", response_model=CropOut, status_code=status.HTTP_201_CREATED)
async def api_create_crop(
    payload: CropCreate,
    user: dict = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    farm = await crud_farm.get_farm(user["user_id"], payload.farm_id, db)
    if not farm:
        raise HTTPException(status_code=404, detail="Farm not found")

    if payload.status in farm_service.OPEN_CROP_STATUSES:
        crops = await crud_farm.list_farm_crops(farm.id, db)
        available = farm_service.available_area(farm.area_hectares, crops)
        if payload.area_hectares > available:
            raise _insufficient_area(available)

    return await crud_farm.create_crop(user["user_id"], payload, db)


@router.get("/{crop_id}", response_model=CropOut)
async def api_get_crop(crop: Crop = Depends(get_owned_crop)):
    return crop


@router.put("/{crop_id}", response_model=CropOut)
async def api_update_crop(
    payload: CropUpdate,
    crop: Crop = Depends(get_owned_crop),
    db: AsyncSession = Depends(get_db),
):
    sowing = payload.sowing_date or crop.sowing_date
    harvest = payload.expected_harvest_date or crop.expected_harvest_date
    if harvest <= sowing:
        raise HTTPException(status_code=400, detail="expectedHarvestDate must be after sowingDate")

    area = payload.area_hectares or crop.area_hectares
    crop_status = payload.status or crop.status
    if crop_status in farm_service.OPEN_CROP_STATUSES:
        farm = await db.get(Farm, crop.farm_id)
        crops = await crud_farm.list_farm_crops(crop.farm_id, db)
        available = farm_service.available_area(farm.area_hectares, crops, exclude_id=crop.id)
        if area > available:
            raise _insufficient_area(available)

    return await crud_farm.update_crop(db, crop, payload)


@router.delete("/{crop_id}")
async def api_delete_crop(
    crop: Crop = Depends(get_owned_crop),
    db: AsyncSession = Depends(get_db),
):
    crop_id = crop.id
    await crud_farm.delete_crop(db, crop)
    return {"ok": True, "deleted": crop_id}


@router.get("/{crop_id}/analytics", response_model=CropAnalytics)
async def api_crop_analytics(crop: Crop = Depends(get_owned_crop)):
    return farm_service.compute_crop_analytics(crop)
