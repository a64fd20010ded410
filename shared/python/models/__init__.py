"""Database models module."""

from .base import Base, build_engine, build_session_factory, metadata
from .equipment import Equipment, EquipmentAvailability
from .manpower_profile import ManpowerAvailability, ManpowerProfile

__all__ = [
    # Base
    "Base",
    "metadata",
    "build_engine",
    "build_session_factory",
    # Models
    "Equipment",
    "EquipmentAvailability",
    "ManpowerProfile",
    "ManpowerAvailability",
]
