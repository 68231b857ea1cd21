"""Pydantic models for activities and categories (camelCase JSON)."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from trailmix.data.activities_repo import Activity, CategoryRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivityResponse(_CamelModel):
    id: int
    title: str
    description: str
    image_url: str | None = None
    location: str
    latitude: float | None = None
    longitude: float | None = None
    distance_in_miles: float | None = None  # set only by nearby queries
    start_date: datetime
    end_date: datetime
    budget_level: int
    price: str | None = None
    category: str
    tags: list[str] = []
    host_name: str | None = None
    host_title: str | None = None
    host_image_url: str | None = None
    requirements: list[str] = []
    is_featured: bool = False


class CategoryResponse(_CamelModel):
    id: int
    name: str
    icon: str


class CreateActivityRequest(_CamelModel):
    title: str
    description: str = ""
    location: str
    latitude: float | None = None
    longitude: float | None = None
    start_date: datetime
    end_date: datetime
    budget_level: int = Field(ge=1, le=3)
    category: str
    tags: list[str] = []
    image_url: str | None = None
    price: str | None = None
    host_name: str | None = None
    host_title: str | None = None
    host_image_url: str | None = None
    requirements: list[str] = []
    is_featured: bool = False

    @field_validator("title", "location", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("must not be empty.")
        return v

    @field_validator("tags", "requirements")
    @classmethod
    def strip_items(cls, v: list[str]) -> list[str]:
        return [s.strip() for s in v if s and s.strip()]

    @model_validator(mode="after")
    def check_coordinates_and_dates(self):
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Provide both latitude and longitude, or neither.")
        if self.latitude is not None and not (-90 <= self.latitude <= 90):
            raise ValueError("latitude must be between -90 and 90")
        if self.longitude is not None and not (-180 <= self.longitude <= 180):
            raise ValueError("longitude must be between -180 and 180")
        if (self.start_date.tzinfo is None) != (self.end_date.tzinfo is None):
            raise ValueError("startDate and endDate must both carry a UTC offset, or neither.")
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate.")
        return self


def activity_to_response(activity: Activity, distance_miles: float | None = None) -> ActivityResponse:
    point = activity.point
    return ActivityResponse(
        id=activity.activity_id,
        title=activity.title,
        description=activity.description,
        image_url=activity.image_url,
        location=activity.location,
        latitude=point.lat if point else None,
        longitude=point.lng if point else None,
        distance_in_miles=distance_miles,
        start_date=activity.start_date,
        end_date=activity.end_date,
        budget_level=activity.budget_level,
        price=activity.price,
        category=activity.category,
        tags=list(activity.tags),
        host_name=activity.host_name,
        host_title=activity.host_title,
        host_image_url=activity.host_image_url,
        requirements=list(activity.requirements),
        is_featured=activity.is_featured,
    )


def category_to_response(category: CategoryRecord) -> CategoryResponse:
    return CategoryResponse(id=category.category_id, name=category.name, icon=category.icon)
