from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_TIMEZONE: str = "Asia/Jakarta"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    DATA_DIR: str = "./data/store"

    # Enforced per-day limit; a date with this many bookings is Full.
    DAILY_CAPACITY: int = 6
    # Limit quoted to clients in page copy. Not enforced.
    ADVERTISED_DAILY_LIMIT: int = 4

    DEFAULT_SERVICE_LABEL: str = "Makeup Service"
    DEFAULT_LANGUAGE: str = "id"

    ADMIN_API_TOKEN: str | None = None

    NOTIFY_ENABLED: bool = False
    NOTIFY_WEBHOOK_URL: str | None = None
    NOTIFY_WEBHOOK_TOKEN: str | None = None
    NOTIFY_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
