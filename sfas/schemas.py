"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from sfas.models import Bonus, Investment, Settings


class InvestmentIn(BaseModel):
    """Create/update body for an investment."""

    name: str = Field(..., min_length=1, max_length=120, description="Investment name")
    principal: float = Field(..., description="Amount invested")
    annual_rate: float = Field(..., description="Annual rate in percent")
    monthly_addition_enabled: bool = Field(
        True, description="Whether the monthly addition applies to this investment"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Index fund",
                "principal": 10000.0,
                "annual_rate": 7.5,
                "monthly_addition_enabled": True,
            }
        }
    }

    def to_entity(self, investment_id: int | None = None) -> Investment:
        return Investment(id=investment_id, **self.model_dump())


class InvestmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    principal: float
    annual_rate: float
    monthly_addition_enabled: bool
    created_at: datetime | None = None


class BonusIn(BaseModel):
    """Create/update body for a bonus."""

    name: str = Field(..., min_length=1, max_length=120, description="Bonus name")
    amount: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Bonus amount"
    )
    month: int = Field(..., ge=1, le=12, description="Calendar month (1-12)")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Year-end bonus", "amount": 5000.0, "month": 12}
        }
    }

    def to_entity(self, bonus_id: int | None = None) -> Bonus:
        return Bonus(id=bonus_id, **self.model_dump())


class BonusOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    amount: float
    month: int
    created_at: datetime | None = None


class SettingsIn(BaseModel):
    """Update body for the settings singleton. Any ``id`` sent is ignored."""

    monthly_addition: float = Field(..., description="Amount added every month")
    id: int | None = Field(None, description="Ignored; the singleton is always id 1")

    def to_entity(self) -> Settings:
        return Settings(monthly_addition=self.monthly_addition)


class SettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    monthly_addition: float


class MessageOut(BaseModel):
    message: str
    id: int | None = None
