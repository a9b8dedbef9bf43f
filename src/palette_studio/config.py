"""
Runtime settings (env / .env). Extraction defaults mirror the engine constants.
"""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class ExtractorSettings:
    max_size: int = 100  # longest side after downscale
    quant_step: int = 32
    oversample: int = 3
    hue_threshold: float = 30.0
    neutral_saturation: int = 10
    fetch_timeout: float = 10.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PALETTE_STUDIO_", env_file=".env", extra="ignore"
    )

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000

    extract_max_size: int = Field(100, ge=1)
    extract_quant_step: int = Field(32, ge=1, le=255)
    extract_oversample: int = Field(3, ge=1)
    extract_hue_threshold: float = Field(30.0, ge=0, le=180)
    extract_neutral_saturation: int = Field(10, ge=0, le=100)
    fetch_timeout: float = Field(10.0, gt=0)
    max_upload_bytes: int = Field(10 * 1024 * 1024, ge=1)

    def extractor(self) -> ExtractorSettings:
        return ExtractorSettings(
            max_size=self.extract_max_size,
            quant_step=self.extract_quant_step,
            oversample=self.extract_oversample,
            hue_threshold=self.extract_hue_threshold,
            neutral_saturation=self.extract_neutral_saturation,
            fetch_timeout=self.fetch_timeout,
        )


__all__ = ["ExtractorSettings", "Settings"]
