"""Pytest configuration and fixtures."""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure backend root is on path when running pytest from repo root or backend
backend = Path(__file__).resolve().parent.parent
if str(backend) not in sys.path:
    sys.path.insert(0, str(backend))

from trailmix.data.activities_repo import Activity, init_app_db  # noqa: E402
from trailmix.data.geo import GeoPoint  # noqa: E402
from trailmix.data.sample_catalog import SAMPLE_ACTIVITIES  # noqa: E402

SEATTLE = GeoPoint(lat=47.6062, lng=-122.3321)
SEED_NOW = datetime(2025, 6, 1, 9, 0, 0)


def make_activity(activity_id: int, point: GeoPoint | None = None, **overrides) -> Activity:
    fields = dict(
        activity_id=activity_id,
        title=f"Activity {activity_id}",
        description="",
        location="",
        point=point,
        start_date=datetime(2025, 6, 8, 10, 0),
        end_date=datetime(2025, 6, 8, 12, 0),
        budget_level=1,
        category="Hiking",
    )
    fields.update(overrides)
    return Activity(**fields)


@pytest.fixture
def sample_activities() -> list[Activity]:
    """The six Seattle-area sample activities, ids 1..6 in catalog order."""
    return [
        make_activity(
            i,
            point=GeoPoint(lat=item["lat"], lng=item["lng"]),
            title=item["title"],
            description=item["description"],
            location=item["location"],
            budget_level=item["budget_level"],
            category=item["category"],
            tags=tuple(item["tags"]),
        )
        for i, item in enumerate(SAMPLE_ACTIVITIES, start=1)
    ]


@pytest.fixture
def app_db(tmp_path):
    """Temporary app DB holding the sample catalog."""
    db = tmp_path / "app.db"
    init_app_db(db, seed=True, now=SEED_NOW)
    return db


@pytest.fixture
def client(app_db):
    """TestClient with app DB overridden to temp DB and rate limiting off."""
    from fastapi.testclient import TestClient

    import main
    from trailmix.monitoring import reset_metrics

    main.APP_DB = app_db
    main.limiter.enabled = False
    reset_metrics()
    return TestClient(main.app)
