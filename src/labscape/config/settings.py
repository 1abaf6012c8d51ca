"""
System Configuration Settings Module
Uses Pydantic for configuration validation and management
"""
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..core.unified_logger import LogFormat
from ..output.indentation_builder import IndentationType


class LabscapeSettings(BaseSettings):
    """labscape configuration"""

    # Output formatting
    indentation_type: IndentationType = Field(
        default=IndentationType.SPACES,
        description="Indentation unit of the generated Vagrantfile"
    )

    tab_size: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Spaces per indentation level (ignored for tabs)"
    )

    output_file: Path = Field(
        default=Path("Vagrantfile"),
        description="Default path the build command writes to"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Console log level"
    )

    log_format: LogFormat = Field(
        default=LogFormat.SIMPLE,
        description="Console log format: simple, structured, legacy, json"
    )

    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file receiving DEBUG-level structured logs"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level name"""
        level = str(v).upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError("log_level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator('log_file')
    @classmethod
    def ensure_log_dir_exists(cls, v):
        """Ensure the log file's directory exists"""
        if v is not None:
            v = v.expanduser()
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    model_config = {
        "env_prefix": "LABSCAPE_",
        "case_sensitive": False
    }
