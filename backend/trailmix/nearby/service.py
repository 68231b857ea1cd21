"""
Nearby activity search: annotate each candidate with its distance from a reference point,
keep those inside the radius that pass the filters, and order by ascending distance.
"""
import math
from collections.abc import Iterable
from typing import NamedTuple

from trailmix.data.activities_repo import Activity
from trailmix.data.geo import GeoPoint, distance
from trailmix.nearby.filters import FilterSet, matches_filters


class NearbyActivity(NamedTuple):
    """Query-scoped view of an activity. distance_miles is None when the activity has no point."""

    activity: Activity
    distance_miles: float | None

    @property
    def sort_distance(self) -> float:
        return math.inf if self.distance_miles is None else self.distance_miles


def annotate(activity: Activity, reference: GeoPoint) -> NearbyActivity:
    if activity.point is None:
        return NearbyActivity(activity=activity, distance_miles=None)
    return NearbyActivity(activity=activity, distance_miles=distance(reference, activity.point))


def find_nearby(
    candidates: Iterable[Activity],
    reference: GeoPoint,
    max_distance_miles: float,
    filters: FilterSet | None = None,
) -> list[NearbyActivity]:
    """
    Return activities within max_distance_miles (inclusive) of reference that pass filters,
    sorted by distance. Equal distances keep their input order.
    Candidates are not modified; callers pass a stable snapshot.
    """
    if filters is None:
        filters = FilterSet()
    annotated = [annotate(a, reference) for a in candidates]
    in_radius = [n for n in annotated if n.sort_distance <= max_distance_miles]
    kept = [n for n in in_radius if matches_filters(n.activity, filters)]
    return sorted(kept, key=lambda n: n.sort_distance)


def paginate(results: list[NearbyActivity], offset: int = 0, limit: int | None = None) -> list[NearbyActivity]:
    start = max(0, offset)
    if limit is None:
        return results[start:]
    return results[start : start + max(0, limit)]
