# src/weatherfeel/models/schemas.py
from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class TemperatureFeel(str, Enum):
    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"


# ===== Response =====
class Alert(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender_name: str = Field("", description="issuing agency")
    event: str = Field("", description="alert name, e.g. Heat Advisory")
    description: str = Field("", description="free-text body")


class SimplifiedWeatherReport(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: str = Field(..., alias="Timestamp", description="RFC 3339, UTC")
    current_temperature_feel: TemperatureFeel
    current_conditions: List[str] = Field(default_factory=list)
    alerts: List[Alert] = Field(default_factory=list)
