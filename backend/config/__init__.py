import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.retry import RetryPolicy

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .constants import (
    ENDPOINTS,
    RETRY_DEFAULTS,
    MOCK_CONFIG,
    CHART_CONFIG,
)


class Settings(BaseSettings):
    """Process-wide dashboard configuration, read once at startup."""
    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    BASE_URL: str = "http://localhost:3000/api"
    TIMEOUT: float = Field(default=30.0, gt=0)

    RETRY_MAX_ATTEMPTS: int = Field(default=RETRY_DEFAULTS.MAX_ATTEMPTS, ge=1)
    RETRY_BASE_DELAY: float = Field(default=RETRY_DEFAULTS.BASE_DELAY, ge=0)

    USE_MOCK_DATA: bool = False
    MOCK_CHART_DELAY: float = Field(default=MOCK_CONFIG.CHART_DELAY, ge=0)
    MOCK_KPI_DELAY: float = Field(default=MOCK_CONFIG.KPI_DELAY, ge=0)

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.RETRY_MAX_ATTEMPTS,
            base_delay=self.RETRY_BASE_DELAY,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def check_config_on_startup(settings: Settings) -> None:
    """Log the effective data source configuration."""
    if settings.USE_MOCK_DATA:
        logger.warning("Mock data mode is enabled; the statistics backend will not be called for charts or KPIs.")
    else:
        logger.info("Statistics backend: %s (timeout %.1fs)", settings.BASE_URL, settings.TIMEOUT)
    logger.info(
        "Retry policy: %d attempts, %.2fs base delay",
        settings.RETRY_MAX_ATTEMPTS,
        settings.RETRY_BASE_DELAY,
    )


__all__ = [
    "logger",
    "Settings",
    "get_settings",
    "check_config_on_startup",
    "ENDPOINTS",
    "RETRY_DEFAULTS",
    "MOCK_CONFIG",
    "CHART_CONFIG",
]
