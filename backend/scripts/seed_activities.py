#!/usr/bin/env python3
"""
Seed the app DB with categories and activities.

Usage:
  python scripts/seed_activities.py
  python scripts/seed_activities.py --json data/my_activities.json --db data/app.db

Without --json the built-in Seattle sample catalog is loaded (only into an empty
activities table). With --json, each object in the file is added as a new activity;
keys: title, description, location, lat, lng, start_date, end_date (ISO 8601),
budget_level (1-3), category, and optionally tags, price, image_url, host_name,
host_title, host_image_url, requirements, is_featured.
"""
import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

backend = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(backend))

from trailmix.data.activities_repo import create_activity, init_app_db, seed_sample_catalog

OPTIONAL_KEYS = (
    "tags",
    "price",
    "image_url",
    "host_name",
    "host_title",
    "host_image_url",
    "requirements",
    "is_featured",
)


def load_json_activities(db_path: Path, json_path: Path) -> tuple[int, int]:
    """Insert activities from a JSON array. Returns (inserted, skipped)."""
    with open(json_path, encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise ValueError("JSON file must contain an array of activity objects.")
    inserted = skipped = 0
    for i, row in enumerate(rows):
        try:
            create_activity(
                db_path,
                title=row.get("title", ""),
                description=row.get("description", ""),
                location=row.get("location", ""),
                lat=row.get("lat"),
                lng=row.get("lng"),
                start_date=datetime.fromisoformat(row["start_date"]),
                end_date=datetime.fromisoformat(row["end_date"]),
                budget_level=int(row.get("budget_level", 0)),
                category=row.get("category", ""),
                **{k: row[k] for k in OPTIONAL_KEYS if k in row},
            )
            inserted += 1
        except (KeyError, TypeError, ValueError) as e:
            print(f"Skipping row {i}: {e}", file=sys.stderr)
            skipped += 1
    return inserted, skipped


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed activities (and init app DB)")
    parser.add_argument(
        "--json",
        default=None,
        type=Path,
        help="JSON array of activities; omit to load the sample catalog",
    )
    parser.add_argument(
        "--db",
        default=backend / "data" / "app.db",
        type=Path,
        help="Path to app SQLite DB",
    )
    args = parser.parse_args()

    if args.json is not None and not args.json.exists():
        print(f"Error: JSON not found: {args.json}", file=sys.stderr)
        return 1

    init_app_db(args.db)

    if args.json is None:
        count = seed_sample_catalog(args.db)
        print(f"Seeded {count} sample activities into {args.db}")
        return 0

    try:
        inserted, skipped = load_json_activities(args.db, args.json)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Seeded {inserted} activities into {args.db} ({skipped} skipped)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
