import datetime
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal
from pydantic import BaseModel, ValidationError, field_validator


class SettingsSchema(BaseModel):
    db_path: str = "homestrength.db"
    timezone: str = "local"
    week_start: Literal["monday", "sunday"] = "monday"
    weight_unit: Literal["lb", "kg"] = "lb"
    log_level: str = "INFO"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if value == "local":
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    def tzinfo(self) -> datetime.tzinfo:
        """Timezone used to truncate timestamps to calendar days."""
        if self.timezone == "local":
            return ZoneInfo(tzlocal.get_localzone_name())
        return ZoneInfo(self.timezone)


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))
