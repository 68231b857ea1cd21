"""Tests for the nearby activity pipeline: radius, filters, ordering, pagination."""
import math

from conftest import SEATTLE, make_activity
from trailmix.data.geo import GeoPoint
from trailmix.nearby.filters import BudgetMode, FilterSet
from trailmix.nearby.service import NearbyActivity, annotate, find_nearby, paginate


def _titles(results):
    return [n.activity.location.split(",")[0] for n in results]


# --- Seattle sample catalog ---


def test_radius_10_keeps_city_activities_nearest_first(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 10)
    assert _titles(results) == ["Alki Beach", "Vertical World", "Discovery Park", "Carkeek Park"]
    assert [n.distance_miles for n in results] == [3.9, 4.4, 5.1, 7.7]


def test_default_radius_excludes_only_rainier(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 25)
    assert len(results) == 5
    assert _titles(results) == ["Alki Beach", "Vertical World", "Discovery Park", "Carkeek Park", "Tiger Mountain"]
    assert all(n.distance_miles <= 25 for n in results)


def test_small_radius(sample_activities):
    assert _titles(find_nearby(sample_activities, SEATTLE, 4)) == ["Alki Beach"]
    assert find_nearby(sample_activities, SEATTLE, 3) == []


def test_budget_ceiling_1_keeps_low_tier_within_radius(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 25, FilterSet(budget_level=1))
    assert _titles(results) == ["Discovery Park", "Carkeek Park"]
    assert _titles(find_nearby(sample_activities, SEATTLE, 6, FilterSet(budget_level=1))) == ["Discovery Park"]


def test_budget_ceiling_2_excludes_high_tier(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 100, FilterSet(budget_level=2))
    assert "Vertical World" not in _titles(results)
    assert {n.activity.budget_level for n in results} == {1, 2}
    assert len(results) == 5


def test_budget_exact_mode(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 100, FilterSet(budget_level=2, budget_mode=BudgetMode.EXACT))
    assert _titles(results) == ["Alki Beach", "Tiger Mountain", "Mount Rainier National Park"]


def test_category_filter_case_insensitive(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 25, FilterSet(category="hiking"))
    assert _titles(results) == ["Discovery Park", "Carkeek Park"]


def test_text_query_matches_tags(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 25, FilterSet(query="equipment provided"))
    assert _titles(results) == ["Alki Beach", "Vertical World"]


def test_every_result_within_radius_and_nothing_missed(sample_activities):
    radius = 6.0
    results = find_nearby(sample_activities, SEATTLE, radius)
    returned = {n.activity.activity_id for n in results}
    for a in sample_activities:
        inside = annotate(a, SEATTLE).sort_distance <= radius
        assert (a.activity_id in returned) is inside


# --- Edge cases ---


def test_missing_coordinates_never_returned():
    candidates = [
        make_activity(1, point=None, title="Online meetup"),
        make_activity(2, point=SEATTLE),
    ]
    for radius in (0, 25, 1_000_000):
        results = find_nearby(candidates, SEATTLE, radius)
        assert [n.activity.activity_id for n in results] == [2]
    assert find_nearby(candidates, SEATTLE, 1_000_000, FilterSet(query="online")) == []


def test_missing_coordinates_annotated_as_unbounded():
    n = annotate(make_activity(1, point=None), SEATTLE)
    assert n.distance_miles is None
    assert n.sort_distance == math.inf


def test_radius_boundary_is_inclusive(sample_activities):
    alki = sample_activities[1]
    assert _titles(find_nearby([alki], SEATTLE, 3.9)) == ["Alki Beach"]
    assert find_nearby([alki], SEATTLE, 3.8) == []


def test_zero_radius_admits_only_reference_point():
    candidates = [
        make_activity(1, point=GeoPoint(47.62, -122.35)),
        make_activity(2, point=SEATTLE),
    ]
    results = find_nearby(candidates, SEATTLE, 0)
    assert [n.activity.activity_id for n in results] == [2]
    assert results[0].distance_miles == 0.0


def test_negative_radius_returns_empty(sample_activities):
    assert find_nearby(sample_activities, SEATTLE, -1) == []


def test_equal_distances_keep_input_order():
    here = GeoPoint(47.65, -122.35)
    farther = GeoPoint(47.70, -122.35)
    candidates = [
        make_activity(1, point=farther),
        make_activity(2, point=here),
        make_activity(3, point=here),
        make_activity(4, point=farther),
        make_activity(5, point=here),
    ]
    results = find_nearby(candidates, SEATTLE, 25)
    assert [n.activity.activity_id for n in results] == [2, 3, 5, 1, 4]
    reversed_results = find_nearby(list(reversed(candidates)), SEATTLE, 25)
    assert [n.activity.activity_id for n in reversed_results] == [5, 3, 2, 4, 1]


def test_output_sorted_non_decreasing(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 500)
    distances = [n.distance_miles for n in results]
    assert distances == sorted(distances)
    assert len(results) == 6


def test_candidates_not_modified(sample_activities):
    before = list(sample_activities)
    results = find_nearby(sample_activities, SEATTLE, 25)
    assert sample_activities == before
    assert all(isinstance(n, NearbyActivity) for n in results)
    assert results[0].activity is sample_activities[1]


def test_candidate_near_antipode_is_annotated():
    far = make_activity(1, GeoPoint(-2.5, 10.0))
    near = make_activity(2, GeoPoint(2.5, -170.0))
    results = find_nearby([far, near], GeoPoint(2.5, -170.0), 20000)
    assert [n.activity for n in results] == [near, far]
    assert results[1].distance_miles <= 12450.0


def test_no_candidates():
    assert find_nearby([], SEATTLE, 25) == []


# --- Pagination ---


def test_paginate_prefix_and_offset(sample_activities):
    results = find_nearby(sample_activities, SEATTLE, 25)
    assert paginate(results, limit=2) == results[:2]
    assert paginate(results, offset=2, limit=2) == results[2:4]
    assert paginate(results, offset=4) == results[4:]
    assert paginate(results, offset=10, limit=3) == []
    assert paginate(results) == results
