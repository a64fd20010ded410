"""Tests for manpower relevance scoring."""
import pytest

from marketplace_api.search import rank_by_relevance, score_profile


@pytest.mark.parametrize("title,description,expected", [
    ("Senior Electrician", "Industrial electrician", 5),
    ("Senior Electrician", None, 3),
    ("Site Supervisor", "Former electrician", 2),
    ("Welder", "TIG and MIG", 0),
    (None, None, 0),
])
def test_score_profile(title, description, expected):
    assert score_profile("electrician", title, description) == expected


def test_score_is_case_insensitive_and_trims_keyword():
    assert score_profile("  ELECTRICIAN ", "electrician", "") == 3


@pytest.mark.parametrize("keyword", [None, "", "   "])
def test_no_keyword_scores_zero(keyword):
    assert score_profile(keyword, "Electrician", "electrician") == 0


def test_rank_is_stable_within_equal_scores():
    rows = [("a", 0), ("b", 3), ("c", 2), ("d", 3), ("e", 0)]
    ranked = rank_by_relevance(rows, lambda r: r[1])
    assert [r[0] for r in ranked] == ["b", "d", "c", "a", "e"]
