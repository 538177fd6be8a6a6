from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field


class DecoderConfig(BaseSettings):
    verify_checksum: bool = False
    stats_interval: int = Field(default=1000, ge=1)

    class Config:
        env_prefix = "N2K_DECODER_"


class LoggingConfig(BaseSettings):
    level: str = "INFO"
    format: str = "structured"

    class Config:
        env_prefix = "N2K_LOGGING_"


class MetricsConfig(BaseSettings):
    enabled: bool = False
    port: int = 9091

    class Config:
        env_prefix = "N2K_METRICS_"


class Settings(BaseSettings):
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    class Config:
        env_prefix = "N2K_"
        env_nested_delimiter = "__"


def get_settings() -> Settings:
    return Settings()
