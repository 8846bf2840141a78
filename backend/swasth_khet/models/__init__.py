from .farmer.carbon import CarbonAssessment
from .farmer.farm import Crop, Farm
from ..core.database import Base

__all__ = [
    "CarbonAssessment",
    "Crop",
    "Farm",
    "Base",
]
