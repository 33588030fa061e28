from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, field_validator

UNKNOWN_VENDOR = "Unknown vendor"


class OuiRecord(BaseModel):
    oui: str
    vendor: Optional[str] = None

    @property
    def display_vendor(self) -> str:
        return self.vendor or UNKNOWN_VENDOR


class Settings(BaseModel):
    table: Optional[str] = None
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value
