# backend/swasth_khet/models/farmer/carbon.py

from sqlalchemy import Column, String, Integer, Float, DateTime, Text
import uuid
from datetime import datetime

from swasth_khet.core.database import Base


def gen_uuid():
    return str(uuid.uuid4())


# ============================================================
# CARBON ASSESSMENT (one scored UsageRecord, kept for history)
# ============================================================
class CarbonAssessment(Base):
    __tablename__ = "carbon_assessments"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    user_id = Column(String, nullable=False, index=True)
    farm_id = Column(String, nullable=True, index=True)

    area_hectares = Column(Float, nullable=False)
    usage = Column(Text, nullable=False)  # JSON string of the submitted record

    baseline_footprint = Column(Float, nullable=False)      # kg CO2e
    ecofriendly_footprint = Column(Float, nullable=False)   # kg CO2e
    reduction_percent = Column(Integer, nullable=False)
    sustainability_score = Column(Integer, nullable=False)  # 0–100
    credit_tons = Column(Float, nullable=False, default=0.0)
    credit_value = Column(Float, nullable=False, default=0.0)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
