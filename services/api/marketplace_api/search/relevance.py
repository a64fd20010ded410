"""
Relevance scoring for manpower search.

A keyword hit in the job title outweighs a hit in the free-text profile
description. Scores only reorder rows already filtered and ordered by SQL.
"""

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

TITLE_WEIGHT = 3
DESCRIPTION_WEIGHT = 2


def score_profile(keyword: Optional[str], job_title: Optional[str], description: Optional[str]) -> int:
    """Integer relevance of one profile for a keyword (0 when no keyword)."""
    term = (keyword or "").strip().lower()
    if not term:
        return 0

    score = 0
    if job_title and term in job_title.lower():
        score += TITLE_WEIGHT
    if description and term in description.lower():
        score += DESCRIPTION_WEIGHT
    return score


def rank_by_relevance(rows: Sequence[T], score: Callable[[T], int]) -> list[T]:
    """Stable sort by descending score; rows with equal scores keep their order."""
    return sorted(rows, key=score, reverse=True)
