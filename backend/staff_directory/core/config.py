import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    DIRECTORY_API_BASE_URL: str = "https://api.findofficers.com/hiring_test"
    DIRECTORY_API_TIMEOUT_SECONDS: float = 30.0

    TABLE_DEFAULT_PAGE_SIZE: int = 10
    TABLE_PAGE_SIZE_OPTIONS: list[int] = [10, 25, 50]

    NOTIFICATION_AUTO_HIDE_MS: int = 6000
    NOTIFICATION_HISTORY_SIZE: int = 50

    MAP_DEFAULT_LATITUDE: float = 51.505
    MAP_DEFAULT_LONGITUDE: float = -0.09
    MAP_DEFAULT_ZOOM: int = 5
    MAP_TILE_URL: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    MAP_TILE_ATTRIBUTION: str = (
        '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
    )

    LOCATION_PROVIDER: str = "none"
    DEVICE_LATITUDE: float | None = None
    DEVICE_LONGITUDE: float | None = None
    LOCATION_LOOKUP_URL: str = "https://ipapi.co/json/"
    LOCATION_TIMEOUT_SECONDS: float = 10.0

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
