"""
Professional categories for the manpower browse page.

Each profile lands in the first category whose keywords occur in its job
title or description; profiles matching nothing are counted as "Others".
"""

from collections import Counter
from typing import Iterable, NamedTuple, Optional


class ProfessionalCategory(NamedTuple):
    name: str
    keywords: tuple[str, ...]
    icon: str


OTHERS = ProfessionalCategory("Others", (), "User")

# Order matters: a profile is counted under the first category it matches
PROFESSIONAL_CATEGORIES: tuple[ProfessionalCategory, ...] = (
    ProfessionalCategory(
        "Heavy Equipment Operator",
        ("operator", "crane", "forklift", "excavator", "loader", "bulldozer",
         "backhoe", "heavy equipment", "machinery"),
        "Truck",
    ),
    ProfessionalCategory(
        "Electrician",
        ("electrician", "electrical", "wiring", "electronics", "power", "voltage"),
        "Zap",
    ),
    ProfessionalCategory(
        "Welder",
        ("welder", "welding", "fabrication", "metal work", "tig", "mig", "arc welding"),
        "Flame",
    ),
    ProfessionalCategory("Plumber", ("plumber", "plumbing", "pipefitter", "pipe", "hvac"), "Wrench"),
    ProfessionalCategory("Carpenter", ("carpenter", "carpentry", "woodwork", "joiner", "wood"), "Hammer"),
    ProfessionalCategory(
        "Mechanic",
        ("mechanic", "mechanical", "maintenance", "repair", "technician"),
        "Settings",
    ),
    ProfessionalCategory(
        "Construction Worker",
        ("construction", "builder", "mason", "concrete", "laborer", "site worker"),
        "HardHat",
    ),
    ProfessionalCategory("Supervisor", ("supervisor", "foreman", "manager", "lead", "coordinator"), "Users"),
    ProfessionalCategory("Driver", ("driver", "driving", "truck driver", "delivery"), "Car"),
    ProfessionalCategory("Safety Officer", ("safety", "hse", "health and safety", "safety officer"), "Shield"),
)


def categorize(job_title: Optional[str], description: Optional[str]) -> ProfessionalCategory:
    text = f"{(job_title or '').lower()} {(description or '').lower()}"
    for category in PROFESSIONAL_CATEGORIES:
        if any(keyword in text for keyword in category.keywords):
            return category
    return OTHERS


def count_categories(profiles: Iterable[tuple[Optional[str], Optional[str]]]) -> list[tuple[ProfessionalCategory, int]]:
    """
    Count (job_title, description) pairs per category.

    Returns non-empty categories sorted by count descending, with
    "Others" always last. Ties keep the category table order.
    """
    counts: Counter = Counter(categorize(title, description).name for title, description in profiles)

    ranked = sorted(
        (c for c in PROFESSIONAL_CATEGORIES if counts[c.name] > 0),
        key=lambda c: counts[c.name],
        reverse=True,
    )
    result = [(c, counts[c.name]) for c in ranked]
    if counts[OTHERS.name]:
        result.append((OTHERS, counts[OTHERS.name]))
    return result
