"""
Equipment Model - listings published by equipment owners

Each row is one piece of hireable equipment. The location is free text as
typed by the owner; searches match it by substring against the aliases
produced by the location matcher.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class EquipmentAvailability(str, enum.Enum):
    """Hire state of a piece of equipment."""

    AVAILABLE = "available"
    ON_HIRE = "on-hire"


class Equipment(Base):
    """Hireable equipment listing."""

    __tablename__ = "equipment"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    equipment_name: Mapped[str] = mapped_column(String(255), nullable=False)
    equipment_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    availability: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EquipmentAvailability.AVAILABLE.value, index=True
    )  # 'available', 'on-hire'
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)

    # Contact details shown to inquirers
    contact_person: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_number: Mapped[str] = mapped_column(String(20), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # JSON-serialized list of image URLs, parsed defensively on read
    equipment_images: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Equipment {self.id} {self.equipment_name!r} ({self.location})>"
