# groupsplit/config/settings.py

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    # set to make every generated split reproducible (demos, debugging)
    RANDOM_SEED: Optional[int] = None
    GROUP_SIZE_DEFAULT: int = 4
    service_name: str = "group-splitter"

settings = Settings()
