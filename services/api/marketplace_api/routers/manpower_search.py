"""
Manpower Search Router

Search over manpower profiles with relevance ranking, plus the detail,
statistics, category and featured views of the manpower browse pages.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from locations import LocationMatcher
from models.manpower_profile import ManpowerAvailability, ManpowerProfile
from observability import get_logger, record_location_expansion, record_search_operation

from ..database import get_db
from ..dependencies import get_location_matcher
from ..errors import store_error
from ..schemas import (
    CategoriesResponse,
    CategoryCount,
    FeaturedManpowerResponse,
    ManpowerDetailResponse,
    ManpowerProfileOut,
    ManpowerSearchRequest,
    ManpowerSearchResponse,
    ManpowerSearchResult,
    ManpowerStats,
    ManpowerStatsResponse,
)
from ..search import SearchQueryBuilder, count_categories, rank_by_relevance, score_profile
from ..utils.stored_lists import load_url_list

logger = get_logger(__name__)

router = APIRouter(prefix="/api/manpower-search", tags=["manpower-search"])

MANPOWER_COLUMNS = tuple(column.name for column in ManpowerProfile.__table__.columns)
KEYWORD_FIELDS = ("job_title", "profile_description")


def _profile_fields(profile: ManpowerProfile) -> dict:
    fields = {name: getattr(profile, name) for name in ManpowerProfileOut.model_fields}
    fields["certificates"] = load_url_list(profile.certificates, record_id=profile.id, field="certificates")
    return fields


def to_profile(profile: ManpowerProfile) -> ManpowerProfileOut:
    return ManpowerProfileOut.model_validate(_profile_fields(profile))


def _has_job_title():
    return (ManpowerProfile.job_title.is_not(None), ManpowerProfile.job_title != "")


@router.post("/search", response_model=ManpowerSearchResponse)
async def search_manpower(
    criteria: ManpowerSearchRequest,
    db: AsyncSession = Depends(get_db),
    matcher: LocationMatcher = Depends(get_location_matcher),
):
    """
    Search manpower profiles.

    The job title keyword is matched against the job title and profile
    description; the location is expanded through the location hierarchy.
    With a keyword, results are re-ranked by relevance (title hits before
    description-only hits), newest first within equal scores. Without
    one, results are simply newest first.

    Returns:
        At most MANPOWER_SEARCH_LIMIT profiles with decoded certificate
        lists and relevance scores

    Raises:
        HTTPException: 422 for an unknown availability status, 500 if the query fails
    """
    expansion = matcher.resolve(criteria.location)
    record_location_expansion(expansion.source.value, len(expansion.aliases))

    status = criteria.availability_status
    query = (
        SearchQueryBuilder("manpower_profiles", MANPOWER_COLUMNS)
        .keyword(criteria.job_title, KEYWORD_FIELDS)
        .location(*expansion.as_pair())
        .equals("availability_status", status.value if status else None)
        .limit(settings.MANPOWER_SEARCH_LIMIT)
        .build()
    )

    try:
        result = await db.execute(select(ManpowerProfile).from_statement(query.statement()))
        profiles = result.scalars().all()
    except SQLAlchemyError as e:
        raise store_error("manpower", "Error searching manpower profiles", e) from e

    results = [
        ManpowerSearchResult.model_validate(
            {
                **_profile_fields(profile),
                "relevance_score": score_profile(
                    criteria.job_title, profile.job_title, profile.profile_description
                ),
            }
        )
        for profile in profiles
    ]

    if criteria.job_title and criteria.job_title.strip():
        results = rank_by_relevance(results, lambda r: r.relevance_score)

    record_search_operation("manpower", len(results))
    logger.info(
        f"Found {len(results)} manpower profiles",
        extra={"location_source": expansion.source.value, "alias_count": len(expansion.aliases)},
    )

    return ManpowerSearchResponse(
        manpower=results,
        total=len(results),
        search_criteria=criteria,
    )


@router.get("/details/{manpower_id}", response_model=ManpowerDetailResponse)
async def get_manpower_details(manpower_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a single manpower profile.

    Raises:
        HTTPException: 404 if the profile does not exist
    """
    try:
        profile = await db.get(ManpowerProfile, manpower_id)
    except SQLAlchemyError as e:
        raise store_error("manpower", "Error fetching manpower details", e) from e

    if profile is None:
        raise HTTPException(status_code=404, detail="Manpower profile not found")

    return ManpowerDetailResponse(profile=to_profile(profile))


@router.get("/stats", response_model=ManpowerStatsResponse)
async def get_search_stats(db: AsyncSession = Depends(get_db)):
    """Total profiles, profiles with a CV and currently available profiles."""
    query = select(
        func.count(ManpowerProfile.id),
        func.count(ManpowerProfile.cv_path),
        func.sum(
            case(
                (ManpowerProfile.availability_status == ManpowerAvailability.AVAILABLE.value, 1),
                else_=0,
            )
        ),
    )

    try:
        result = await db.execute(query)
        total, with_cv, available = result.one()
    except SQLAlchemyError as e:
        raise store_error("manpower", "Error fetching search statistics", e) from e

    return ManpowerStatsResponse(
        statistics=ManpowerStats(
            total_manpower=total or 0,
            manpower_with_cv=with_cv or 0,
            available_manpower=available or 0,
        )
    )


@router.get("/categories", response_model=CategoriesResponse)
async def get_professional_categories(db: AsyncSession = Depends(get_db)):
    """
    Professional categories with profile counts.

    Each profile with a job title is counted once, under the first
    category whose keywords appear in its title or description.
    Categories without profiles are omitted; "Others" is always last.
    """
    query = (
        select(ManpowerProfile.job_title, ManpowerProfile.profile_description)
        .where(*_has_job_title())
        .order_by(ManpowerProfile.created_at.desc())
    )

    try:
        result = await db.execute(query)
        rows = result.all()
    except SQLAlchemyError as e:
        raise store_error("manpower", "Error fetching professional categories", e) from e

    categories = [
        CategoryCount(name=category.name, count=count, icon=category.icon)
        for category, count in count_categories((row.job_title, row.profile_description) for row in rows)
    ]

    return CategoriesResponse(categories=categories, total_professionals=len(rows))


@router.get("/featured", response_model=FeaturedManpowerResponse)
async def get_featured_manpower(db: AsyncSession = Depends(get_db)):
    """Newest available profiles that have a job title."""
    query = (
        select(ManpowerProfile)
        .where(*_has_job_title())
        .where(ManpowerProfile.availability_status == ManpowerAvailability.AVAILABLE.value)
        .order_by(ManpowerProfile.created_at.desc())
        .limit(settings.FEATURED_MANPOWER_LIMIT)
    )

    try:
        result = await db.execute(query)
        profiles = result.scalars().all()
    except SQLAlchemyError as e:
        raise store_error("manpower", "Error fetching featured manpower", e) from e

    manpower = [to_profile(profile) for profile in profiles]
    logger.info(f"Found {len(manpower)} featured manpower")

    return FeaturedManpowerResponse(manpower=manpower, count=len(manpower))
