from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="AgriSmart", validation_alias="APP_NAME")
    fastapi_port: int = Field(default=8000, validation_alias="FASTAPI_PORT")
    log_path: Optional[str] = Field(default=None, validation_alias="LOG_PATH")
    cors_allow_origins: str = Field(default="*", validation_alias="CORS_ALLOW_ORIGINS")
    disease_predictor: str = Field(
        default="simulated", validation_alias="DISEASE_PREDICTOR"
    )
    disease_predictor_url: Optional[str] = Field(
        default=None, validation_alias="DISEASE_PREDICTOR_URL"
    )
    disease_predictor_api_key: Optional[str] = Field(
        default=None, validation_alias="DISEASE_PREDICTOR_API_KEY"
    )
    disease_predictor_timeout: float = Field(
        default=10.0, validation_alias="DISEASE_PREDICTOR_TIMEOUT"
    )
    recommendation_seed: Optional[int] = Field(
        default=None, validation_alias="RECOMMENDATION_SEED"
    )
    crop_recommendation_limit: int = Field(
        default=10, ge=1, validation_alias="CROP_RECOMMENDATION_LIMIT"
    )
    crop_min_suitability: int = Field(
        default=30, ge=0, le=100, validation_alias="CROP_MIN_SUITABILITY"
    )

    @field_validator("disease_predictor", mode="after")
    @classmethod
    def normalize_provider(cls, value: str) -> str:
        return value.lower() if value else value

    @property
    def cors_origins(self) -> List[str]:
        return [item.strip() for item in self.cors_allow_origins.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig()
