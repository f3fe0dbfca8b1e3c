from pathlib import Path

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_FILE)

DEFAULT_APP_URL = "http://localhost:4478"


class Settings(BaseSettings):
    # Public base URL (used to build webhook endpoints)
    APP_URL: str = ""

    # Prefix for uploaded files (logo, favicon)
    UPLOADS_BASE_PATH: str = ""

    LOG_LEVEL: str = "INFO"

    @property
    def app_base_url(self) -> str:
        raw_url = (self.APP_URL or "").strip()
        if not raw_url:
            return DEFAULT_APP_URL
        return raw_url[:-1] if raw_url.endswith("/") else raw_url

    def resolve_upload_url(self, relative_path: str) -> str:
        normalized = relative_path.lstrip("/")
        base_path = (self.UPLOADS_BASE_PATH or "").strip()
        prefix = ""
        if base_path and base_path != "/":
            prefix = base_path if base_path.startswith("/") else f"/{base_path}"
        return f"{prefix}/{normalized}".replace("\\", "/")

    class Config:
        env_file = str(ENV_FILE)
        extra = "ignore"


settings = Settings()
