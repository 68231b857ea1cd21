"""
Filter predicates for activity queries. Each one admits everything when its parameter is absent.
"""
from enum import Enum
from typing import NamedTuple

from trailmix.data.activities_repo import Activity


class BudgetMode(str, Enum):
    CEILING = "ceiling"  # budget_level <= filter ("up to" slider)
    EXACT = "exact"


class FilterSet(NamedTuple):
    budget_level: int | None = None
    category: str | None = None
    query: str | None = None
    budget_mode: BudgetMode = BudgetMode.CEILING


def matches_budget(activity: Activity, budget_level: int | None, mode: BudgetMode = BudgetMode.CEILING) -> bool:
    if budget_level is None:
        return True
    if mode == BudgetMode.EXACT:
        return activity.budget_level == budget_level
    return activity.budget_level <= budget_level


def matches_category(activity: Activity, category: str | None) -> bool:
    wanted = (category or "").strip().lower()
    if not wanted:
        return True
    return activity.category.lower() == wanted


def matches_query(activity: Activity, query: str | None) -> bool:
    """Case-insensitive substring match on title, description, location label or any tag."""
    q = (query or "").strip().lower()
    if not q:
        return True
    fields = [activity.title, activity.description, activity.location, *activity.tags]
    return any(q in (f or "").lower() for f in fields)


def matches_filters(activity: Activity, filters: FilterSet) -> bool:
    return (
        matches_budget(activity, filters.budget_level, filters.budget_mode)
        and matches_category(activity, filters.category)
        and matches_query(activity, filters.query)
    )
