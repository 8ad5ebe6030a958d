"""Configuration and environment settings"""

import logging
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """encodingkit configuration, read from ENCODINGKIT_* variables or .env"""

    # Directories searched, in order, for names that are not absolute paths
    resource_dirs: List[str] = ["resources"]

    # Detection stops reading once this many bytes have been sampled
    detection_sample_limit: int = Field(512 * 1024, gt=0)

    # Characters per read when streaming a conversion
    stream_buffer_size: int = Field(64 * 1024, gt=0)

    log_level: str = "INFO"

    class Config:
        env_prefix = "ENCODINGKIT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Fresh settings read from the current environment"""
    return Settings()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
