from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "GTM Blueprint Studio"
    outputs_dir: str = "outputs"
    strict_enums: bool = False
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    render_width: int = 860
    max_height_per_image: int = 2000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()


def ensure_directories() -> None:
    Path(settings.outputs_dir).mkdir(parents=True, exist_ok=True)
