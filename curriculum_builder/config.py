import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

CURRICULUM_ROOT = Path(__file__).resolve().parent.parent / "curriculum"


class Settings(BaseSettings):
    show_upcoming_changes: bool = Field(False, alias="SHOW_UPCOMING_CHANGES")
    challenges_dir: Path = Field(CURRICULUM_ROOT / "challenges", alias="CURRICULUM_CHALLENGES_DIR")
    dictionaries_dir: Path = Field(CURRICULUM_ROOT / "dictionaries", alias="CURRICULUM_DICTIONARIES_DIR")
    curriculum_locale: str = Field("english", alias="CURRICULUM_LOCALE")
    log_level: str = Field("INFO", alias="CURRICULUM_LOG_LEVEL")
    debug_parser: bool = Field(False, alias="CURRICULUM_DEBUG_PARSER")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
        populate_by_name = True

    @property
    def meta_dir(self) -> Path:
        return self.challenges_dir / "_meta"

    def challenges_dir_for_lang(self, lang: str) -> Path:
        return self.challenges_dir / lang


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid curriculum configuration: {exc}") from exc
