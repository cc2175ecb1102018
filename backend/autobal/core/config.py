"""Application and engine configuration settings."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic_settings import BaseSettings

from autobal.core.constants import (
    ABSORPTION_THRESHOLD,
    C_IV_WAVELENGTH,
    LIGHT_SPEED,
    MIN_TROUGH_WIDTH,
)


@dataclass(frozen=True)
class EngineConfig:
    """Immutable parameters shared by every epoch in a run."""

    absorption_threshold: float = ABSORPTION_THRESHOLD
    min_trough_width: float = MIN_TROUGH_WIDTH  # Angstroms
    reference_line: float = C_IV_WAVELENGTH  # Angstroms
    light_speed: float = LIGHT_SPEED  # km/s

    def __post_init__(self):
        if not 0.0 < self.absorption_threshold <= 1.0:
            raise ValueError(
                f"absorption_threshold must be in (0, 1], got {self.absorption_threshold}"
            )
        if self.min_trough_width <= 0:
            raise ValueError(f"min_trough_width must be positive, got {self.min_trough_width}")
        if self.reference_line <= 0:
            raise ValueError(f"reference_line must be positive, got {self.reference_line}")
        if self.light_speed <= 0:
            raise ValueError(f"light_speed must be positive, got {self.light_speed}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    APP_NAME: str = "autobal"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # Engine
    ABSORPTION_THRESHOLD: float = ABSORPTION_THRESHOLD
    MIN_TROUGH_WIDTH: float = MIN_TROUGH_WIDTH
    REFERENCE_LINE: float = C_IV_WAVELENGTH

    # Batch processing (None lets the executor pick)
    BATCH_MAX_WORKERS: Optional[int] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    def engine_config(self) -> EngineConfig:
        """Build the engine parameters from these settings."""
        return EngineConfig(
            absorption_threshold=self.ABSORPTION_THRESHOLD,
            min_trough_width=self.MIN_TROUGH_WIDTH,
            reference_line=self.REFERENCE_LINE,
        )


# Create settings instance
settings = Settings()
