
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import yaml, pathlib
from .logging import to_level

class FilterConfig(BaseModel):
    level: str = Field("NOTICE", description="Records above this level always pass")
    pattern: str = Field(r"^Results", description="Regex letting records at exactly `level` through")

    @field_validator("level")
    @classmethod
    def check_level(cls, v: str) -> str:
        to_level(v)
        return v.upper()

class FileConfig(BaseModel):
    path: str = Field(..., description="Log file path")
    rotate: bool = Field(True, description="Rotate daily at midnight")
    backup_count: int = Field(7, ge=0)

class AppConfig(BaseModel):
    channel: str = Field("suitelog", description="Logger name")
    level: str = Field("NOTICE")
    timezone: str = Field("UTC", description="IANA zone used for log timestamps")
    console: bool = Field(True)
    console_filter: Optional[FilterConfig] = None
    file: Optional[FileConfig] = None

    @field_validator("level")
    @classmethod
    def check_level(cls, v: str) -> str:
        to_level(v)
        return v.upper()

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v!r}") from e
        return v

def load_config(path: Optional[str] = None) -> AppConfig:
    if path is None:
        return AppConfig()
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return AppConfig.model_validate(data)
