"""Search query construction and ranking."""

from .categories import OTHERS, PROFESSIONAL_CATEGORIES, ProfessionalCategory, categorize, count_categories
from .query_builder import SearchQuery, SearchQueryBuilder
from .relevance import rank_by_relevance, score_profile

__all__ = [
    "OTHERS",
    "PROFESSIONAL_CATEGORIES",
    "ProfessionalCategory",
    "SearchQuery",
    "SearchQueryBuilder",
    "categorize",
    "count_categories",
    "rank_by_relevance",
    "score_profile",
]
