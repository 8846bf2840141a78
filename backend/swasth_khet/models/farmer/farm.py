# backend/swasth_khet/models/farmer/farm.py

from sqlalchemy import Column, String, Integer, Float, Date, DateTime, ForeignKey, Text
from datetime import datetime

from swasth_khet.core.database import Base
from swasth_khet.models.farmer.carbon import gen_uuid


# ============================================================
# FARM (owned by one farmer)
# ============================================================
class Farm(Base):
    __tablename__ = "farms"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    location = Column(String, nullable=False, index=True)
    area_hectares = Column(Float, nullable=False)

    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    soil_type = Column(String, default="loamy")          # clay, sandy, loamy, silt, peat, chalky
    irrigation_type = Column(String, default="rainfed")  # drip, sprinkler, flood, rainfed, manual
    status = Column(String, default="active", index=True)  # active, inactive, abandoned
    health_score = Column(Integer, default=75)           # 0–100
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ============================================================
# CROP (one planting on a farm)
# ============================================================
class Crop(Base):
    __tablename__ = "crops"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    farm_id = Column(String(36), ForeignKey("farms.id"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String(50), nullable=False)
    variety = Column(String(50), nullable=True)

    sowing_date = Column(Date, nullable=False)
    expected_harvest_date = Column(Date, nullable=False)
    actual_harvest_date = Column(Date, nullable=True)
    area_hectares = Column(Float, nullable=False)

    status = Column(String, default="planned", index=True)  # planned → sown → growing → ready_to_harvest → harvested / failed
    health_status = Column(String, default="good")          # excellent, good, fair, poor, critical

    estimated_yield = Column(Float, nullable=True)  # per hectare
    actual_yield = Column(Float, nullable=True)
    yield_unit = Column(String, default="kg")       # kg, quintal, ton

    seed_cost = Column(Float, default=0.0)
    fertilizer_cost = Column(Float, default=0.0)
    pesticide_cost = Column(Float, default=0.0)
    disease_incidents = Column(Integer, default=0)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
