"""
Equipment Search Router

Public search over active equipment listings: keyword, hierarchical
location and availability filters, plus the location list, summary
statistics and a detail view used by the listing pages.
"""

import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from locations import LocationMatcher
from models.equipment import Equipment, EquipmentAvailability
from observability import get_logger, record_location_expansion, record_search_operation

from ..database import get_db
from ..dependencies import get_location_matcher
from ..errors import store_error
from ..schemas import (
    EquipmentDetailResponse,
    EquipmentListing,
    EquipmentLocationsResponse,
    EquipmentSearchFilters,
    EquipmentSearchResponse,
    EquipmentStats,
    EquipmentStatsResponse,
)
from ..search import SearchQueryBuilder
from ..utils.stored_lists import load_url_list

logger = get_logger(__name__)

router = APIRouter(prefix="/api/equipment-search", tags=["equipment-search"])

EQUIPMENT_COLUMNS = tuple(column.name for column in Equipment.__table__.columns)
KEYWORD_FIELDS = ("equipment_name", "equipment_type", "description")


def parse_availability(value: Optional[str]) -> Optional[EquipmentAvailability]:
    """
    Parse the availability query parameter.

    Blank and "all" mean no filter. Anything else must be a known
    availability value. Older clients that relied on unknown values being
    ignored (and getting every listing back) now receive a 422.

    Raises:
        HTTPException: 422 for unknown values
    """
    normalized = (value or "").strip().lower()
    if not normalized or normalized == "all":
        return None
    try:
        return EquipmentAvailability(normalized)
    except ValueError:
        allowed = ", ".join(a.value for a in EquipmentAvailability)
        raise HTTPException(
            status_code=422,
            detail=f"Invalid availability '{value}'. Expected one of: {allowed}, all",
        ) from None


def to_listing(item: Equipment) -> EquipmentListing:
    fields = {name: getattr(item, name) for name in EquipmentListing.model_fields}
    fields["equipment_images"] = load_url_list(
        item.equipment_images, record_id=item.id, field="equipment_images"
    )
    return EquipmentListing.model_validate(fields)


@router.get("/search", response_model=EquipmentSearchResponse)
async def search_equipment(
    search: Optional[str] = Query(
        None, max_length=255, description="Keyword matched against name, type and description"
    ),
    location: Optional[str] = Query(
        None, max_length=255, description="Country, state, region or city (aliases are expanded)"
    ),
    availability: Optional[str] = Query(None, description="available, on-hire or all"),
    db: AsyncSession = Depends(get_db),
    matcher: LocationMatcher = Depends(get_location_matcher),
):
    """
    Search active equipment listings.

    All filters are optional and combined with AND. A location is expanded
    through the location hierarchy (e.g. "tamil nadu" also matches listings
    in "chennai" or "madras") and compared by case-insensitive substring.
    Results are newest first.

    Args:
        search: Free-text keyword
        location: Free-text location
        availability: Availability filter

    Returns:
        Matching listings with decoded image URL lists and an echo of the
        applied filters

    Raises:
        HTTPException: 422 for an unknown availability, 500 if the query fails
    """
    start_time = time.perf_counter()
    availability_filter = parse_availability(availability)

    expansion = matcher.resolve(location)
    record_location_expansion(expansion.source.value, len(expansion.aliases))

    query = (
        SearchQueryBuilder("equipment", EQUIPMENT_COLUMNS)
        .where("is_active = TRUE")
        .keyword(search, KEYWORD_FIELDS)
        .location(*expansion.as_pair())
        .equals("availability", availability_filter.value if availability_filter else None)
        .build()
    )

    try:
        result = await db.execute(select(Equipment).from_statement(query.statement()))
        items = result.scalars().all()
    except SQLAlchemyError as e:
        raise store_error("equipment", "Internal server error during equipment search", e) from e

    listings = [to_listing(item) for item in items]
    record_search_operation("equipment", len(listings))

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    logger.info(
        f"Found {len(listings)} equipment items",
        extra={
            "location_source": expansion.source.value,
            "alias_count": len(expansion.aliases),
            "duration_ms": elapsed_ms,
        },
    )

    return EquipmentSearchResponse(
        msg=f"Found {len(listings)} equipment items",
        data=listings,
        count=len(listings),
        filters=EquipmentSearchFilters(
            search=search or None,
            location=location or None,
            availability=availability_filter.value if availability_filter else "all",
        ),
        timestamp=datetime.now(timezone.utc),
        processing_time=f"{elapsed_ms}ms",
    )


@router.get("/locations", response_model=EquipmentLocationsResponse)
async def get_locations(db: AsyncSession = Depends(get_db)):
    """Distinct non-empty locations of active listings, alphabetically."""
    query = (
        select(Equipment.location)
        .where(Equipment.is_active == True)
        .where(Equipment.location.is_not(None))
        .where(func.trim(Equipment.location) != "")
        .distinct()
        .order_by(Equipment.location)
    )

    try:
        result = await db.execute(query)
        locations = list(result.scalars().all())
    except SQLAlchemyError as e:
        raise store_error("equipment", "Internal server error", e) from e

    return EquipmentLocationsResponse(
        msg="Locations retrieved successfully",
        data=locations,
        count=len(locations),
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/stats", response_model=EquipmentStatsResponse)
async def get_equipment_stats(db: AsyncSession = Depends(get_db)):
    """
    Summary counts over active listings.

    Returns total, available and on-hire counts plus the number of
    distinct locations and equipment types.
    """
    query = select(
        func.count(Equipment.id),
        func.sum(case((Equipment.availability == EquipmentAvailability.AVAILABLE.value, 1), else_=0)),
        func.sum(case((Equipment.availability == EquipmentAvailability.ON_HIRE.value, 1), else_=0)),
        func.count(func.distinct(Equipment.location)),
        func.count(func.distinct(Equipment.equipment_type)),
    ).where(Equipment.is_active == True)

    try:
        result = await db.execute(query)
        total, available, on_hire, locations, types = result.one()
    except SQLAlchemyError as e:
        raise store_error("equipment", "Internal server error", e) from e

    return EquipmentStatsResponse(
        msg="Equipment statistics retrieved successfully",
        data=EquipmentStats(
            total=total or 0,
            available=available or 0,
            on_hire=on_hire or 0,
            locations=locations or 0,
            types=types or 0,
        ),
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/{equipment_id}", response_model=EquipmentDetailResponse)
async def get_equipment(equipment_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a single active listing.

    Raises:
        HTTPException: 404 if the listing does not exist or is inactive
    """
    query = select(Equipment).where(Equipment.id == equipment_id, Equipment.is_active == True)

    try:
        result = await db.execute(query)
        item = result.scalar_one_or_none()
    except SQLAlchemyError as e:
        raise store_error("equipment", "Internal server error", e) from e

    if item is None:
        raise HTTPException(status_code=404, detail="Equipment not found")

    return EquipmentDetailResponse(
        msg="Equipment retrieved successfully",
        data=to_listing(item),
        timestamp=datetime.now(timezone.utc),
    )
