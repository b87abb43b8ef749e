from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR.parent / ".env"


class Settings(BaseSettings):
    MONGO_URI: Optional[str] = None
    MONGO_DB_NAME: str = "easymap"
    MONGO_COLLECTION: str = "routes"
    osrm_base_url: str = "https://router.project-osrm.org/route/v1/driving"
    geocode_url: str = "https://nominatim.openstreetmap.org/search"
    geocode_user_agent: str = "easymap-backend/1.0"
    http_timeout: float = 10.0
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    routes_list_limit: int = 50

    class Config:
        env_file = ENV_PATH
        extra = "ignore"

settings = Settings()
