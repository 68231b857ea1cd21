from pydantic_settings import BaseSettings, SettingsConfigDict

from trailmix.nearby.filters import BudgetMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Trailmix API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    # CORS: "*" for dev; in production set to comma-separated origins, e.g. "https://app.example.com"
    cors_origins: str = "*"
    app_db_path: str = "data/app.db"  # Activities + categories; path relative to backend root, or absolute
    seed_on_startup: bool = True  # Load the sample Seattle catalog into an empty DB

    # Optional API key auth for catalog writes. Example: API_KEYS=key1,key2
    api_key_required: bool = False
    api_keys: str = ""

    rate_limit: str = "100/minute"

    # Nearby search
    default_nearby_radius_miles: float = 25.0
    # Optional cap on radius_miles; None accepts any non-negative radius
    max_nearby_radius_miles: float | None = None
    # "ceiling" keeps budget_level <= filter; "exact" keeps budget_level == filter
    budget_filter_mode: BudgetMode = BudgetMode.CEILING


def get_settings() -> Settings:
    return Settings()
