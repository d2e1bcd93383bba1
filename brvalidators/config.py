from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Fake generation
    FAKE_SEED: Optional[int] = None
    FAKE_YEAR_SPAN: int = Field(default=10, ge=1)

    model_config = {"env_prefix": "BRVALIDATORS_", "env_file": ".env", "extra": "ignore"}


@lru_cache()
def get_settings() -> Settings:
    return Settings()
