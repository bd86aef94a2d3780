"""Configuration loading and validation using Pydantic models."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    block_size: int = Field(
        8,
        ge=1,
        description="Edge length in pixels of the square drawn for each hash bit.",
    )
    output_dir: Path = Field(
        Path("./hash-images"),
        description="Directory for rendered debug images when no path is given.",
    )


class MatchConfig(BaseModel):
    max_normalized_distance: float = Field(
        0.1,
        ge=0.0,
        le=1.0,
        description="Normalized Hamming distance up to which two hashes count as a match.",
    )
    check_algorithm: bool = Field(
        True,
        description="Reject comparisons across algorithm ids; disable to use the unchecked variants.",
    )


class LoggingConfig(BaseModel):
    level: str = Field("INFO")
    log_dir: Optional[Path] = None


class AppConfig(BaseModel):
    render: RenderConfig = RenderConfig()
    match: MatchConfig = MatchConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str) -> AppConfig:
    """Load YAML configuration from disk."""

    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return AppConfig.model_validate(data or {})
