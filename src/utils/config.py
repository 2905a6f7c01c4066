"""Configuration management for the batch-document driver.

Loads and validates YAML configuration with defaults matching a stock
Umi-OCR installation: the control endpoint, the BatchDOC tab conventions,
settle and retry delays, and the output-file naming rule.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("configs/config.yaml")


class ControlConfig(BaseModel):
    """Configuration for the Umi-OCR command endpoint."""

    url: str = "http://127.0.0.1:1224/argv"
    timeout: float = Field(default=30.0, gt=0)


class WorkspaceConfig(BaseModel):
    """Configuration for the BatchDOC tab lifecycle."""

    tab_name: str = "BatchDOC"
    page_type: int = Field(default=3, ge=0)
    max_attempts: int = Field(default=3, ge=1)
    retry_delay: float = Field(default=1.0, ge=0)
    settle_delay: float = Field(default=1.0, ge=0)


class WatchConfig(BaseModel):
    """Configuration for output-file completion watching."""

    poll_interval: float = Field(default=1.0, gt=0)
    output_suffix: str = ".layered"
    output_extension: str = ".pdf"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    control: ControlConfig = Field(default_factory=ControlConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file. When omitted,
            configs/config.yaml is used if present, else the defaults.

    Returns:
        Validated application configuration.

    Raises:
        FileNotFoundError: If an explicitly given path does not exist.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
