"""
API Schemas (Pydantic Models)

Defines request/response schemas for FastAPI endpoints.
Responses are serialized with camelCase keys; requests accept either
camelCase or snake_case field names.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.manpower_profile import ManpowerAvailability


class CamelModel(BaseModel):
    """Base model emitting camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# EQUIPMENT SCHEMAS
# =============================================================================


class EquipmentListing(CamelModel):
    """Active equipment listing as shown to inquirers."""

    id: int
    user_id: int
    equipment_name: str
    equipment_type: str
    location: Optional[str] = None
    contact_person: str
    contact_number: str
    contact_email: str
    availability: str
    description: Optional[str] = None
    equipment_images: list[str] = Field(default_factory=list, description="Image URLs")
    created_at: datetime
    updated_at: Optional[datetime] = None


class EquipmentSearchFilters(CamelModel):
    """Echo of the filters applied to an equipment search."""

    search: Optional[str] = None
    location: Optional[str] = None
    availability: str = "all"


class EquipmentSearchResponse(CamelModel):
    success: bool = True
    msg: str
    data: list[EquipmentListing]
    count: int
    filters: EquipmentSearchFilters
    timestamp: datetime
    processing_time: str = Field(..., description="Server-side handling time, e.g. '12ms'")


class EquipmentLocationsResponse(CamelModel):
    success: bool = True
    msg: str
    data: list[str]
    count: int
    timestamp: datetime


class EquipmentStats(CamelModel):
    """Counts over active listings."""

    total: int = 0
    available: int = 0
    on_hire: int = 0
    locations: int = 0
    types: int = 0


class EquipmentStatsResponse(CamelModel):
    success: bool = True
    msg: str
    data: EquipmentStats
    timestamp: datetime


class EquipmentDetailResponse(CamelModel):
    success: bool = True
    msg: str
    data: EquipmentListing
    timestamp: datetime


# =============================================================================
# MANPOWER SCHEMAS
# =============================================================================


class ManpowerSearchRequest(CamelModel):
    """Manpower search criteria. Every field is optional."""

    job_title: Optional[str] = Field(None, max_length=255, description="Keyword matched against title and description")
    location: Optional[str] = Field(None, max_length=255, description="Country, state, region or city")
    availability_status: Optional[ManpowerAvailability] = Field(None, description="available or busy")

    @field_validator("availability_status", mode="before")
    @classmethod
    def blank_status_means_any(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value


class ManpowerProfileOut(CamelModel):
    """Manpower profile with its certificate URLs decoded."""

    id: int
    user_id: int
    first_name: str
    last_name: str
    email: str
    mobile_number: str
    whatsapp_number: Optional[str] = None
    location: str
    job_title: str
    availability_status: str
    available_from: Optional[date] = None
    rate: Optional[str] = None
    profile_description: Optional[str] = None
    profile_photo: Optional[str] = None
    cv_path: Optional[str] = None
    certificates: list[str] = Field(default_factory=list)
    created_at: datetime


class ManpowerSearchResult(ManpowerProfileOut):
    relevance_score: int = 0


class ManpowerSearchResponse(CamelModel):
    success: bool = True
    manpower: list[ManpowerSearchResult]
    total: int
    search_criteria: ManpowerSearchRequest


class ManpowerDetailResponse(CamelModel):
    success: bool = True
    profile: ManpowerProfileOut


class ManpowerStats(CamelModel):
    total_manpower: int = 0
    manpower_with_cv: int = Field(0, alias="manpowerWithCV")
    available_manpower: int = 0


class ManpowerStatsResponse(CamelModel):
    success: bool = True
    statistics: ManpowerStats


class CategoryCount(CamelModel):
    name: str
    count: int
    icon: str


class CategoriesResponse(CamelModel):
    success: bool = True
    categories: list[CategoryCount]
    total_professionals: int


class FeaturedManpowerResponse(CamelModel):
    success: bool = True
    manpower: list[ManpowerProfileOut]
    count: int
