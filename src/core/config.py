from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

# Sample dataset bundled with the core package
DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "Clinic Finder API"
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Dataset
    CLINICS_DATA_PATH: Path = DATA_DIR / "clinics.json"

    # Query defaults
    DEFAULT_PAGE_SIZE: int = Field(default=10, ge=1)
    DEFAULT_NEARBY_RADIUS_KM: float = Field(default=1.0, ge=0)

    # Security
    CORS_ORIGINS: list = [
        "http://localhost:3005",
        "http://localhost:5173",
        "http://localhost:3000",
    ]

settings = Settings()
