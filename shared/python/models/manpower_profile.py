"""
Manpower Profile Model - freelance professionals offering their services
"""

import enum
from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ManpowerAvailability(str, enum.Enum):
    """Whether a professional is currently taking work."""

    AVAILABLE = "available"
    BUSY = "busy"


class ManpowerProfile(Base):
    """Professional profile searchable by job title and location."""

    __tablename__ = "manpower_profiles"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    mobile_number: Mapped[str] = mapped_column(String(20), nullable=False)
    whatsapp_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    location: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    availability_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ManpowerAvailability.AVAILABLE.value, index=True
    )  # 'available', 'busy'
    available_from: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rate: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    profile_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Uploaded file references
    profile_photo: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    cv_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    certificates: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # JSON list of URLs

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<ManpowerProfile {self.id} {self.job_title!r} ({self.location})>"
