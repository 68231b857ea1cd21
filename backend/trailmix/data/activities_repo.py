"""
Activities and categories tables in app SQLite DB.
"""
import json
import sqlite3
from datetime import datetime, timedelta
from pathlib import Path
from typing import NamedTuple

from trailmix.data.geo import GeoPoint
from trailmix.data.sample_catalog import SAMPLE_ACTIVITIES, SAMPLE_CATEGORIES

BUDGET_LOW = 1
BUDGET_MEDIUM = 2
BUDGET_HIGH = 3
VALID_BUDGET_LEVELS = frozenset({BUDGET_LOW, BUDGET_MEDIUM, BUDGET_HIGH})

_ACTIVITY_COLUMNS = """
    activity_id, title, description, image_url, location, lat, lng,
    start_date, end_date, budget_level, price, category, tags,
    host_name, host_title, host_image_url, requirements, is_featured
"""


class CategoryRecord(NamedTuple):
    category_id: int
    name: str
    icon: str


class Activity(NamedTuple):
    activity_id: int
    title: str
    description: str
    location: str
    point: GeoPoint | None
    start_date: datetime
    end_date: datetime
    budget_level: int
    category: str
    tags: tuple[str, ...] = ()
    image_url: str | None = None
    price: str | None = None
    host_name: str | None = None
    host_title: str | None = None
    host_image_url: str | None = None
    requirements: tuple[str, ...] = ()
    is_featured: bool = False


def init_app_db(db_path: str | Path, seed: bool = False, now: datetime | None = None) -> None:
    """Create tables if missing. With seed=True, load the sample catalog into empty tables."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS categories (
                category_id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                icon TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS activities (
                activity_id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                description TEXT NOT NULL,
                image_url TEXT,
                location TEXT NOT NULL,
                lat REAL,
                lng REAL,
                start_date TEXT NOT NULL,
                end_date TEXT NOT NULL,
                budget_level INTEGER NOT NULL CHECK (budget_level IN (1, 2, 3)),
                price TEXT,
                category TEXT NOT NULL,
                tags TEXT NOT NULL DEFAULT '[]',
                host_name TEXT,
                host_title TEXT,
                host_image_url TEXT,
                requirements TEXT NOT NULL DEFAULT '[]',
                is_featured INTEGER NOT NULL DEFAULT 0
            )
            """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS idx_activities_category ON activities(category)")
        conn.commit()
    if seed:
        seed_sample_catalog(db_path, now=now)


def seed_sample_catalog(db_path: str | Path, now: datetime | None = None) -> int:
    """
    Insert sample categories and activities into empty tables.
    Returns the number of activities inserted (0 if the catalog already has rows).
    """
    db_path = Path(db_path)
    if now is None:
        now = datetime.now()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    with sqlite3.connect(db_path) as conn:
        conn.executemany(
            "INSERT OR IGNORE INTO categories (name, icon) VALUES (?, ?)",
            SAMPLE_CATEGORIES,
        )
        conn.commit()
        (existing,) = conn.execute("SELECT COUNT(*) FROM activities").fetchone()
    if existing:
        return 0
    for item in SAMPLE_ACTIVITIES:
        start_days, start_hour, start_minute = item["start"]
        end_days, end_hour, end_minute = item["end"]
        create_activity(
            db_path,
            title=item["title"],
            description=item["description"],
            location=item["location"],
            lat=item["lat"],
            lng=item["lng"],
            start_date=today + timedelta(days=start_days, hours=start_hour, minutes=start_minute),
            end_date=today + timedelta(days=end_days, hours=end_hour, minutes=end_minute),
            budget_level=item["budget_level"],
            category=item["category"],
            tags=item["tags"],
            image_url=item["image_url"],
            price=item["price"],
            host_name=item["host_name"],
            host_title=item["host_title"],
            host_image_url=item["host_image_url"],
            requirements=item["requirements"],
            is_featured=item["is_featured"],
        )
    return len(SAMPLE_ACTIVITIES)


def _json_list(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    value = json.loads(raw)
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value)


def _row_to_activity(r: sqlite3.Row) -> Activity:
    point = None
    if r["lat"] is not None and r["lng"] is not None:
        point = GeoPoint(lat=float(r["lat"]), lng=float(r["lng"]))
    return Activity(
        activity_id=r["activity_id"],
        title=r["title"],
        description=r["description"],
        location=r["location"],
        point=point,
        start_date=datetime.fromisoformat(r["start_date"]),
        end_date=datetime.fromisoformat(r["end_date"]),
        budget_level=r["budget_level"],
        category=r["category"],
        tags=_json_list(r["tags"]),
        image_url=r["image_url"],
        price=r["price"],
        host_name=r["host_name"],
        host_title=r["host_title"],
        host_image_url=r["host_image_url"],
        requirements=_json_list(r["requirements"]),
        is_featured=bool(r["is_featured"]),
    )


def list_activities(db_path: str | Path) -> list[Activity]:
    """Snapshot of the whole catalog in id order, read in a single statement."""
    db_path = Path(db_path)
    if not db_path.exists():
        return []
    with sqlite3.connect(db_path) as conn:
        conn.row_factory = sqlite3.Row
        cur = conn.execute(f"SELECT {_ACTIVITY_COLUMNS} FROM activities ORDER BY activity_id")
        return [_row_to_activity(r) for r in cur.fetchall()]


def get_activity(db_path: str | Path, activity_id: int) -> Activity | None:
    db_path = Path(db_path)
    if not db_path.exists():
        return None
    with sqlite3.connect(db_path) as conn:
        conn.row_factory = sqlite3.Row
        cur = conn.execute(
            f"SELECT {_ACTIVITY_COLUMNS} FROM activities WHERE activity_id = ?",
            (activity_id,),
        )
        r = cur.fetchone()
        if r is None:
            return None
        return _row_to_activity(r)


def create_activity(
    db_path: str | Path,
    *,
    title: str,
    description: str,
    location: str,
    start_date: datetime,
    end_date: datetime,
    budget_level: int,
    category: str,
    lat: float | None = None,
    lng: float | None = None,
    tags: list[str] | None = None,
    image_url: str | None = None,
    price: str | None = None,
    host_name: str | None = None,
    host_title: str | None = None,
    host_image_url: str | None = None,
    requirements: list[str] | None = None,
    is_featured: bool = False,
) -> Activity:
    db_path = Path(db_path)
    if not db_path.exists():
        raise ValueError("Database not initialized. Run seed_activities.py first.")
    title = (title or "").strip()
    if not title:
        raise ValueError("Title must not be empty.")
    category = (category or "").strip()
    if not category:
        raise ValueError("Category must not be empty.")
    if budget_level not in VALID_BUDGET_LEVELS:
        raise ValueError("Invalid budget level. Must be 1, 2, or 3.")
    if (lat is None) != (lng is None):
        raise ValueError("Provide both lat and lng, or neither.")
    if end_date < start_date:
        raise ValueError("end_date must not be before start_date.")
    tags = tuple(tags or ())
    requirements = tuple(requirements or ())
    with sqlite3.connect(db_path) as conn:
        cur = conn.execute(
            """
            INSERT INTO activities
                (title, description, image_url, location, lat, lng, start_date, end_date,
                 budget_level, price, category, tags, host_name, host_title, host_image_url,
                 requirements, is_featured)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                title, description, image_url, location, lat, lng,
                start_date.isoformat(), end_date.isoformat(),
                budget_level, price, category, json.dumps(tags),
                host_name, host_title, host_image_url,
                json.dumps(requirements), int(is_featured),
            ),
        )
        conn.commit()
        activity_id = cur.lastrowid
    return Activity(
        activity_id=activity_id,
        title=title,
        description=description,
        location=location,
        point=GeoPoint(lat=lat, lng=lng) if lat is not None and lng is not None else None,
        start_date=start_date,
        end_date=end_date,
        budget_level=budget_level,
        category=category,
        tags=tags,
        image_url=image_url,
        price=price,
        host_name=host_name,
        host_title=host_title,
        host_image_url=host_image_url,
        requirements=requirements,
        is_featured=is_featured,
    )


def list_categories(db_path: str | Path) -> list[CategoryRecord]:
    db_path = Path(db_path)
    if not db_path.exists():
        return []
    with sqlite3.connect(db_path) as conn:
        conn.row_factory = sqlite3.Row
        cur = conn.execute("SELECT category_id, name, icon FROM categories ORDER BY category_id")
        return [
            CategoryRecord(category_id=r["category_id"], name=r["name"], icon=r["icon"])
            for r in cur.fetchall()
        ]
