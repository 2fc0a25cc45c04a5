from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MAXPROFIT_", env_file=".env", extra="ignore")

    app_name: str = "MaxProfit"
    debug: bool = False
    max_horizon: int = Field(1_000_000, gt=0)
    exhaustive_max_horizon: int = Field(40, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
